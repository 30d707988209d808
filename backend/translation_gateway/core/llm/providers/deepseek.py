"""DeepSeek LLM Adapter - OpenAI-compatible API, via LiteLLM."""

from typing import Any, Optional

from litellm import acompletion

from translation_gateway.core.llm.adapter import TranslationAdapter


class DeepSeekAdapter(TranslationAdapter):
    """DeepSeek implementation using LiteLLM with its own base URL.

    The model id selects the variant: ``deepseek-chat`` for chat,
    ``deepseek-reasoner`` for the reasoning model.
    """

    DEEPSEEK_BASE_URL = "https://api.deepseek.com"

    empty_placeholder = "(Aucune réponse DeepSeek)"

    def __init__(self, model: str, api_key: Optional[str], **kwargs):
        kwargs["base_url"] = kwargs.get("base_url") or self.DEEPSEEK_BASE_URL
        super().__init__(model, api_key, **kwargs)

    @property
    def provider_name(self) -> str:
        return "deepseek"

    @property
    def display_name(self) -> str:
        return "DeepSeek"

    @property
    def litellm_model(self) -> str:
        if self.model.startswith("deepseek/"):
            return self.model
        return f"deepseek/{self.model}"

    async def complete(self, **kwargs: Any) -> Any:
        return await acompletion(**kwargs)
