"""Pytest configuration and shared fixtures for Translation Gateway tests."""

from types import SimpleNamespace
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from translation_gateway.config import Settings
from translation_gateway.core.llm import TranslationAdapter
from translation_gateway.main import create_app

pytest_plugins = ["pytest_asyncio"]

DISPLAY_NAMES = {
    "gemini": "Gemini",
    "claude": "Claude",
    "openai": "OpenAI",
    "deepseek": "DeepSeek",
}


class StubAdapter(TranslationAdapter):
    """Adapter that never leaves the process.

    ``respond`` maps the prompt to a translation; it may raise to simulate
    a vendor failure. Every prompt received is recorded in ``prompts``.
    """

    def __init__(self, provider: str, respond: Optional[Callable[[str], str]] = None):
        super().__init__(model="stub-model", api_key="stub-key")
        self._provider = provider
        self._respond = respond or (lambda prompt: prompt)
        self.prompts: list[str] = []

    @property
    def provider_name(self) -> str:
        return self._provider

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self._provider]

    async def complete(self, **kwargs: Any) -> Any:
        raise AssertionError("StubAdapter overrides translate()")

    async def translate(self, prompt: str, *, timeout: Optional[float] = None) -> str:
        self.prompts.append(prompt)
        return self._respond(prompt)


def make_completion(content: Optional[str]) -> SimpleNamespace:
    """Chat-completion shaped object, as returned by litellm.acompletion."""
    message = SimpleNamespace(content=content, role="assistant")
    return SimpleNamespace(choices=[SimpleNamespace(message=message, index=0)])


@pytest.fixture
def test_settings() -> Settings:
    """Settings with fake keys, independent of the local environment."""
    return Settings(
        _env_file=None,
        gemini_api_key="gemini-test",
        claude_api_key="claude-test",
        openai_api_key="openai-test",
        deepseek_api_key="deepseek-test",
    )


@pytest.fixture
def stub_adapters() -> dict[str, StubAdapter]:
    """Echo adapters for every provider."""
    return {name: StubAdapter(name) for name in DISPLAY_NAMES}


@pytest.fixture
def client(test_settings, stub_adapters) -> TestClient:
    """Test client wired to the echo adapters."""
    app = create_app(settings=test_settings, adapters=stub_adapters)
    return TestClient(app)
