"""Request validation for the translate routes."""

from typing import Optional

from translation_gateway.core.errors import RequestValidationFailed
from translation_gateway.models.schemas import TranslationRequestBody


def validate_request(body: Optional[TranslationRequestBody]) -> tuple[str, str, Optional[str]]:
    """Check that text and targetLanguage are present.

    Empty strings and null count as absent. Instructions are never
    validated; an empty value is normalized to None.

    Returns:
        (text, target_language, instructions)

    Raises:
        RequestValidationFailed: If text or targetLanguage is missing
    """
    if body is None or not body.text or not body.target_language:
        raise RequestValidationFailed()
    return body.text, body.target_language, body.instructions or None
