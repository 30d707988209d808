"""Run the gateway with uvicorn: ``python -m translation_gateway``."""

import uvicorn

from translation_gateway.config import settings
from translation_gateway.main import configure_logging


def main() -> None:
    configure_logging(settings.log_level)
    uvicorn.run(
        "translation_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
