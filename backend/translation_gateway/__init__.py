"""Translation Gateway - relays translation requests to LLM providers."""

__version__ = "0.1.0"
