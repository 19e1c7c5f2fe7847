from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.alert_logger.config import AppConfig, load_config
from src.alert_logger.routers import alerts, health, pages
from src.alert_logger.state import get_state, init_state

openapi_tags = [
    {"name": "Health", "description": "Service health and store connectivity."},
    {"name": "Alerts", "description": "Write alerts and read them back by service and time range."},
    {"name": "Pages", "description": "Static informational pages."},
]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Shutdown hook: dispose the store engine."""
    yield
    logger.info("Closing alert store")
    get_state(app).store.close()


# PUBLIC_INTERFACE
def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the alert logger FastAPI app.

    The SQLite schema is created here rather than in a startup hook, so a store that cannot be
    opened aborts process start (StoreUnavailableError propagates to the caller).
    """
    config = config or load_config()

    app = FastAPI(
        title="Alert Logger API",
        description=(
            "Accepts alert events over HTTP, persists them to a single-file SQLite store "
            "and serves them back by service_id and timestamp range."
        ),
        version="1.0.0",
        openapi_tags=openapi_tags,
        lifespan=_lifespan,
    )

    state = init_state(app, config)
    state.store.init_schema()

    if config.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.cors_allow_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router)
    app.include_router(alerts.router)
    app.include_router(pages.router)
    return app
