"""Application factory for the suggestions relay."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api import router as suggestions_router
from .config import Settings, get_settings
from .service import SuggestionService

access_logger = logging.getLogger("suggestions_relay.access")


def configure_logging(level: str = "INFO") -> None:
    """Configure console logging at ``level`` (falls back to INFO)."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,  # Override any existing configuration
    )

    logging.getLogger("suggestions_relay").setLevel(log_level)
    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.error").setLevel(log_level)
    # Requests are logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if log_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(
    settings: Settings | None = None,
    *,
    service: SuggestionService | None = None,
) -> FastAPI:
    resolved = settings or get_settings()

    app = FastAPI(title="Suggestions Relay", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %d %.3f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # One client for the whole process, shared read-only by every request
    app.state.suggestion_service = service or SuggestionService(resolved)
    app.include_router(suggestions_router)
    return app
