"""Shared Pydantic schemas for API requests and responses."""

from .translation import (
    TranslationRequestBody,
    TranslationResponse,
    ErrorResponse,
)

__all__ = [
    "TranslationRequestBody",
    "TranslationResponse",
    "ErrorResponse",
]
