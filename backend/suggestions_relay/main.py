"""CLI entrypoint for running the relay with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from .app import configure_logging, create_app
from .config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the ASGI server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
