"""Google Gemini LLM Adapter - Uses LiteLLM for unified model access."""

from typing import Any

from litellm import acompletion

from translation_gateway.core.llm.adapter import TranslationAdapter


class GeminiAdapter(TranslationAdapter):
    """Gemini implementation using generate-content through LiteLLM.

    Gemini has no placeholder text: an empty answer raises
    EmptyProviderResponse and the route reports a provider error.
    """

    empty_placeholder = None

    @property
    def provider_name(self) -> str:
        return "gemini"

    @property
    def display_name(self) -> str:
        return "Gemini"

    @property
    def litellm_model(self) -> str:
        if self.model.startswith("gemini/"):
            return self.model
        return f"gemini/{self.model}"

    async def complete(self, **kwargs: Any) -> Any:
        return await acompletion(**kwargs)
