"""Abstract LLM Adapter interface."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

from translation_gateway.core.errors import EmptyProviderResponse

logger = logging.getLogger(__name__)


def extract_message_content(response: Any) -> Optional[str]:
    """Pull the text of the first choice out of a chat-completion response.

    LiteLLM normalizes every vendor to the OpenAI response shape, so Claude's
    ``content[0].text`` and Gemini's candidate text both land in
    ``choices[0].message.content``. Any missing link yields None.
    """
    choices = getattr(response, "choices", None)
    if not choices:
        return None

    message = getattr(choices[0], "message", None)
    if message is None:
        return None

    content = getattr(message, "content", None)
    if not isinstance(content, str) or not content:
        return None
    return content


class TranslationAdapter(ABC):
    """Abstract base class for LLM providers.

    An adapter turns a finished prompt into translated text. It only holds
    read-only connection settings, so one instance serves every request.
    """

    # Returned when the provider answers without any text. None means an
    # empty answer is an error for this provider.
    empty_placeholder: Optional[str] = None

    def __init__(
        self,
        model: str,
        api_key: Optional[str],
        *,
        base_url: Optional[str] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.model = model
        self.api_key = api_key
        self.base_url = base_url
        self.max_tokens = max_tokens
        self.timeout = timeout

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name used in routes."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return the human-readable provider name used in messages."""
        pass

    @property
    def litellm_model(self) -> str:
        """Model string in LiteLLM format (provider/model)."""
        return self.model

    def build_completion_kwargs(self, prompt: str, timeout: Optional[float]) -> dict[str, Any]:
        """Build kwargs for ``litellm.acompletion`` with a single user message."""
        kwargs: dict[str, Any] = {
            "model": self.litellm_model,
            "messages": [{"role": "user", "content": prompt}],
            "api_key": self.api_key,
        }
        if self.base_url:
            kwargs["api_base"] = self.base_url
        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens

        effective_timeout = timeout if timeout is not None else self.timeout
        if effective_timeout is not None:
            kwargs["timeout"] = effective_timeout
        return kwargs

    @abstractmethod
    async def complete(self, **kwargs: Any) -> Any:
        """Perform the outbound vendor call and return the raw response."""
        pass

    async def translate(self, prompt: str, *, timeout: Optional[float] = None) -> str:
        """Send the prompt to the provider and return the translated text.

        Args:
            prompt: Finished prompt, sent verbatim as the user message
            timeout: Optional per-call timeout in seconds, overriding the
                adapter default

        Raises:
            EmptyProviderResponse: If the provider returned no text and this
                adapter has no placeholder
            Exception: Whatever the vendor call raises
        """
        start_time = time.time()
        logger.info(
            "LLM call: provider=%s, model=%s",
            self.provider_name,
            self.litellm_model,
        )

        response = await self.complete(**self.build_completion_kwargs(prompt, timeout))

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info("LLM response: provider=%s, latency=%dms", self.provider_name, latency_ms)

        translation = extract_message_content(response)
        if translation is None:
            if self.empty_placeholder is None:
                raise EmptyProviderResponse(self.display_name)
            logger.warning("Empty response from %s, using placeholder", self.display_name)
            return self.empty_placeholder
        return translation
