"""Cardlist API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Card and list stores are built once per app in create_app() and live on app.state
    - Middleware order, outermost first: access log → security headers → CORS → bearer gate → fault catcher
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory: tests build isolated apps; `app` is the process instance
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardlist.api.error_handlers import FaultMiddleware, register_error_handlers
from cardlist.api.middleware import (
    ACCESS_FORMAT_COMMON, ACCESS_FORMAT_TINY,
    BearerTokenMiddleware, RequestLoggingMiddleware, SecurityHeadersMiddleware,
)
from cardlist.api.routes import cards, lists
from cardlist.config import Settings, get_settings
from cardlist.core.store import build_card_store, build_list_store
from cardlist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(
        settings.log_level,
        log_file=settings.log_file,
        console=not settings.is_production,
    )
    logger.info(f"Cardlist API started ({settings.node_env.value})")
    yield
    logger.info("Cardlist API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with fresh seeded stores."""
    settings = settings or get_settings()
    app = FastAPI(title="Cardlist API", version="1.0.0", lifespan=lifespan)

    app.state.settings = settings
    app.state.card_store = build_card_store()
    app.state.list_store = build_list_store()

    # add_middleware wraps: last added runs first
    app.add_middleware(FaultMiddleware, settings=settings)
    app.add_middleware(BearerTokenMiddleware, api_token=settings.api_token)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RequestLoggingMiddleware,
        log_format=ACCESS_FORMAT_TINY if settings.is_production else ACCESS_FORMAT_COMMON,
    )

    app.include_router(cards.router)
    app.include_router(lists.router)

    register_error_handlers(app, settings)
    return app


app = create_app()


def run() -> None:
    """Serve the process app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
