"""LLM integration package.

This package provides:
- The provider adapter interface (TranslationAdapter)
- One adapter per vendor, created by LLMProviderFactory
- The shared translation prompt builder
"""

from .adapter import TranslationAdapter, extract_message_content
from .prompts import build_translation_prompt
from .providers.factory import LLMProviderFactory

__all__ = [
    "TranslationAdapter",
    "extract_message_content",
    "build_translation_prompt",
    "LLMProviderFactory",
]
