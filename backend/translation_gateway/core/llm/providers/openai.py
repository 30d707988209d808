"""OpenAI LLM Adapter - Uses LiteLLM for unified model access."""

from typing import Any

from litellm import acompletion

from translation_gateway.core.llm.adapter import TranslationAdapter


class OpenAIAdapter(TranslationAdapter):
    """OpenAI GPT implementation using LiteLLM chat completions."""

    empty_placeholder = "(Aucune réponse GPT)"

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def display_name(self) -> str:
        return "OpenAI"

    @property
    def litellm_model(self) -> str:
        # No prefix for OpenAI, strip one if the config carries it
        if self.model.startswith("openai/"):
            return self.model.replace("openai/", "", 1)
        return self.model

    async def complete(self, **kwargs: Any) -> Any:
        return await acompletion(**kwargs)
