"""Anthropic Claude LLM Adapter - Uses LiteLLM for unified model access."""

from typing import Any, Optional

from litellm import acompletion

from translation_gateway.core.llm.adapter import TranslationAdapter


class ClaudeAdapter(TranslationAdapter):
    """Claude implementation using the Anthropic Messages API through LiteLLM."""

    DEFAULT_MAX_TOKENS = 1000

    empty_placeholder = "(Aucune réponse Claude)"

    def __init__(self, model: str, api_key: Optional[str], **kwargs):
        # Messages API rejects calls without a max_tokens cap
        if kwargs.get("max_tokens") is None:
            kwargs["max_tokens"] = self.DEFAULT_MAX_TOKENS
        super().__init__(model, api_key, **kwargs)

    @property
    def provider_name(self) -> str:
        return "claude"

    @property
    def display_name(self) -> str:
        return "Claude"

    @property
    def litellm_model(self) -> str:
        if self.model.startswith("anthropic/"):
            return self.model
        return f"anthropic/{self.model}"

    async def complete(self, **kwargs: Any) -> Any:
        return await acompletion(**kwargs)
