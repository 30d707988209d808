"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import litellm
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from translation_gateway import __version__
from translation_gateway.config import Settings, settings as default_settings
from translation_gateway.core.errors import GatewayError, RequestValidationFailed
from translation_gateway.core.llm import LLMProviderFactory, TranslationAdapter
from translation_gateway.api.routes import translate

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or wrongly typed bodies get the same 400 as missing fields."""
    error = RequestValidationFailed()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def create_app(
    settings: Optional[Settings] = None,
    adapters: Optional[dict[str, TranslationAdapter]] = None,
) -> FastAPI:
    """Build the gateway application.

    Args:
        settings: Process settings, defaults to the environment-loaded ones
        adapters: Provider adapters keyed by provider name; built from
            settings when omitted
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        configure_logging(settings.log_level)
        logger.info("Serveur backend démarré sur http://localhost:%d", settings.port)
        yield

    # Auto-drop unsupported parameters for cross-provider compatibility
    litellm.drop_params = True

    app = FastAPI(
        title=settings.app_name,
        description="Multi-provider LLM translation gateway",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.adapters = adapters if adapters is not None else LLMProviderFactory.create_all(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include routers
    app.include_router(translate.router, prefix="/api", tags=["translate"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint."""
        return "Backend de traduction opérationnel !"

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "providers": list(app.state.adapters.keys())}

    return app


app = create_app()
