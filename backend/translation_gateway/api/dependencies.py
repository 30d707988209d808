"""API dependencies for provider adapter lookup.

Adapters are created once at startup and kept on ``app.state``; routes
reach them through this dependency so tests can substitute their own.
"""

from typing import Annotated

from fastapi import Depends, Request

from translation_gateway.core.llm import TranslationAdapter


def get_adapters(request: Request) -> dict[str, TranslationAdapter]:
    """Return the provider adapters built at application startup."""
    return request.app.state.adapters


# Type alias for cleaner dependency injection
Adapters = Annotated[dict[str, TranslationAdapter], Depends(get_adapters)]
