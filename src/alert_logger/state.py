from __future__ import annotations

from dataclasses import dataclass

from fastapi import FastAPI

from src.alert_logger.config import AppConfig
from src.alert_logger.db.store import AlertStore


@dataclass
class AppState:
    """Typed app.state container for shared singletons."""

    config: AppConfig
    store: AlertStore


# PUBLIC_INTERFACE
def init_state(app: FastAPI, config: AppConfig) -> AppState:
    """Initialize app.state with the alert store and config."""
    state = AppState(config=config, store=AlertStore(config.database_url))
    app.state.state = state
    return state


# PUBLIC_INTERFACE
def get_state(app: FastAPI) -> AppState:
    """Fetch typed AppState from a FastAPI app."""
    return app.state.state  # type: ignore[attr-defined]
