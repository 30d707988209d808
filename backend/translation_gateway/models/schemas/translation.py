"""Request and response schemas for the translate routes.

Every request field is optional here: presence is checked by the gateway's
own validator so that a missing field gets the fixed 400 message instead
of the framework's 422.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslationRequestBody(BaseModel):
    """Incoming translation request."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")
    instructions: Optional[str] = None  # Style instructions, empty means absent


class TranslationResponse(BaseModel):
    """Translation result, identical for every provider."""
    translation: str


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx statuses."""
    error: str
