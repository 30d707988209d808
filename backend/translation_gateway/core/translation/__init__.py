"""Translation package.

Request validation for the gateway routes. Prompt building and provider
calls live in ``translation_gateway.core.llm``.
"""

from .validation import validate_request

__all__ = ["validate_request"]
