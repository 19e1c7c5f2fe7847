from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Callable, Dict

import httpx
import pytest
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from src.alert_logger.config import AppConfig
from src.alert_logger.main import create_app
from src.alert_logger.state import get_state


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Per-test SQLite file so tests never share rows."""
    return str(tmp_path / "alerts.db")


@pytest.fixture
def app(db_path: str) -> FastAPI:
    """
    FastAPI app bound to an isolated SQLite store.

    create_app() initializes the schema itself, so the app is usable without running lifespan events.
    """
    return create_app(AppConfig(db_path=db_path))


@pytest.fixture
def store_engine(app: FastAPI) -> Engine:
    """SQLAlchemy engine used by tests for direct row inspection."""
    return get_state(app).store.engine()


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI ASGI app."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_alert() -> Callable[..., Dict[str, str]]:
    """Factory for complete alert payloads; keyword args override individual fields."""

    def _make(**overrides: str) -> Dict[str, str]:
        alert = {
            "alert_id": "test_alert_id",
            "service_id": "test_service_id",
            "service_name": "test_service_name",
            "model": "test_model",
            "alert_type": "test_type",
            "alert_ts": "123456",
            "severity": "test_severity",
            "team_slack": "test_slack",
        }
        alert.update(overrides)
        return alert

    return _make
