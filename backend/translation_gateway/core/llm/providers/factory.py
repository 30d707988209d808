"""LLM Provider Factory."""

import logging
from typing import Type

from translation_gateway.config import Settings
from translation_gateway.core.llm.adapter import TranslationAdapter
from translation_gateway.core.llm.providers.anthropic import ClaudeAdapter
from translation_gateway.core.llm.providers.deepseek import DeepSeekAdapter
from translation_gateway.core.llm.providers.gemini import GeminiAdapter
from translation_gateway.core.llm.providers.openai import OpenAIAdapter

logger = logging.getLogger(__name__)


class LLMProviderFactory:
    """Factory for creating LLM provider instances."""

    _providers: dict[str, Type[TranslationAdapter]] = {
        "gemini": GeminiAdapter,
        "claude": ClaudeAdapter,
        "openai": OpenAIAdapter,
        "deepseek": DeepSeekAdapter,
    }

    @classmethod
    def create(cls, provider: str, model: str, api_key: str, **kwargs) -> TranslationAdapter:
        """Create a provider instance."""
        if provider not in cls._providers:
            raise ValueError(f"Unknown provider: {provider}. Available: {list(cls._providers.keys())}")
        return cls._providers[provider](model=model, api_key=api_key, **kwargs)

    @classmethod
    def create_all(cls, settings: Settings) -> dict[str, TranslationAdapter]:
        """Create one adapter per provider from process settings.

        A missing API key is only logged: the provider's route stays up and
        fails at call time, like any other vendor auth error.
        """
        adapters: dict[str, TranslationAdapter] = {}
        for provider in cls._providers:
            api_key = settings.get_api_key(provider)
            if not api_key:
                logger.warning("No API key configured for provider '%s'", provider)

            adapters[provider] = cls.create(
                provider,
                model=settings.get_model(provider),
                api_key=api_key,
                base_url=settings.deepseek_base_url if provider == "deepseek" else None,
                max_tokens=settings.claude_max_tokens if provider == "claude" else None,
                timeout=settings.request_timeout,
            )
        return adapters

    @classmethod
    def available_providers(cls) -> list[str]:
        """List available providers."""
        return list(cls._providers.keys())
