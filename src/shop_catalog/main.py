"""Command-line entry point that serves the shop over HTTP."""

import logging

import uvicorn

from shop_catalog.app_logging import configure_logging
from shop_catalog.config import Settings


def main() -> None:
    """Start the ASGI server on the configured port."""
    settings = Settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("app listening on: %s", settings.port)
    uvicorn.run(
        "shop_catalog.api.asgi:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
    )


if __name__ == "__main__":
    main()
