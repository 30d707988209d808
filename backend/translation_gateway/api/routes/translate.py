"""Translation API routes - one POST route per provider."""

import logging
from typing import Optional

from fastapi import APIRouter

from translation_gateway.api.dependencies import Adapters
from translation_gateway.core.errors import ProviderError
from translation_gateway.core.llm import LLMProviderFactory, build_translation_prompt
from translation_gateway.core.translation import validate_request
from translation_gateway.models.schemas import (
    ErrorResponse,
    TranslationRequestBody,
    TranslationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _make_translate_endpoint(provider: str):
    """Build the route handler bound to one provider."""

    async def translate(
        adapters: Adapters,
        body: Optional[TranslationRequestBody] = None,
    ) -> TranslationResponse:
        text, target_language, instructions = validate_request(body)
        prompt = build_translation_prompt(text, target_language, instructions)

        adapter = adapters[provider]
        try:
            translation = await adapter.translate(prompt)
        except Exception as e:
            # Message only; vendor detail never reaches the client
            logger.error("Erreur %s: %s", adapter.display_name, e)
            raise ProviderError(adapter.display_name) from e

        return TranslationResponse(translation=translation)

    translate.__name__ = f"translate_{provider}"
    translate.__doc__ = f"Translate text via the {provider} provider."
    return translate


for _provider in LLMProviderFactory.available_providers():
    router.add_api_route(
        f"/translate/{_provider}",
        _make_translate_endpoint(_provider),
        methods=["POST"],
        response_model=TranslationResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        name=f"translate_{_provider}",
    )
