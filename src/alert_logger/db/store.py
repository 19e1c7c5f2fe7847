from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Column, MetaData, Table, Text, create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.alert_logger.errors import AlertQueryError, AlertWriteError, StoreUnavailableError

logger = logging.getLogger(__name__)


metadata = MetaData()

alerts_table = Table(
    "alerts",
    metadata,
    Column("alert_id", Text, primary_key=True),
    Column("service_id", Text, nullable=False),
    Column("service_name", Text),
    Column("model", Text),
    Column("alert_type", Text),
    Column("alert_ts", Text),
    Column("severity", Text),
    Column("team_slack", Text),
)

ALERT_COLUMNS = (
    "alert_id",
    "service_id",
    "service_name",
    "model",
    "alert_type",
    "alert_ts",
    "severity",
    "team_slack",
)


def _driver_message(exc: SQLAlchemyError) -> str:
    """Return the underlying sqlite3 message (e.g. 'UNIQUE constraint failed: alerts.alert_id')."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class AlertStore:
    """
    SQLite-backed alert store.

    - Owns one SQLAlchemy Engine for the app's single-file database.
    - Every operation is a single statement; SQLite serializes concurrent writers itself.
    """

    def __init__(self, database_url: str):
        self._database_url = database_url
        self._engine: Optional[Engine] = None
        self._lock = RLock()

    @property
    def database_url(self) -> str:
        return self._database_url

    def engine(self) -> Engine:
        """Create the engine if needed."""
        with self._lock:
            if self._engine is None:
                # Handlers run on the framework threadpool, so pooled connections cross threads.
                self._engine = create_engine(
                    self._database_url,
                    connect_args={"check_same_thread": False},
                )
            return self._engine

    # PUBLIC_INTERFACE
    def init_schema(self) -> None:
        """
        Create the alerts table if it does not exist (idempotent).

        Raises StoreUnavailableError when the database file cannot be opened.
        """
        try:
            metadata.create_all(self.engine(), checkfirst=True)
        except SQLAlchemyError as exc:
            logger.exception("Failed initializing alert store at %s", self._database_url)
            raise StoreUnavailableError(_driver_message(exc)) from exc
        logger.info("Alert store ready at %s", self._database_url)

    # PUBLIC_INTERFACE
    def ping(self) -> bool:
        """Run a trivial query to validate the store is usable."""
        try:
            with self.engine().connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.exception("Alert store ping failed")
            return False

    # PUBLIC_INTERFACE
    def insert_alert(self, values: Mapping[str, Any]) -> None:
        """Insert one alert row keyed by alert_id. Raises AlertWriteError on failure."""
        row = {name: values.get(name, "") for name in ALERT_COLUMNS}
        try:
            with self.engine().begin() as conn:
                conn.execute(alerts_table.insert().values(**row))
        except SQLAlchemyError as exc:
            raise AlertWriteError(row["alert_id"], _driver_message(exc)) from exc

    # PUBLIC_INTERFACE
    def find_alerts(self, service_id: str, start_ts: str, end_ts: str) -> List[Dict[str, Any]]:
        """
        Return rows for service_id with start_ts <= alert_ts <= end_ts.

        Comparison is plain string comparison in SQLite; rows come back in scan order.
        """
        c = alerts_table.c
        stmt = select(
            c.alert_id,
            c.model,
            c.alert_type,
            c.alert_ts,
            c.severity,
            c.team_slack,
            c.service_name,
        ).where(
            c.service_id == service_id,
            c.alert_ts >= start_ts,
            c.alert_ts <= end_ts,
        )
        try:
            with self.engine().connect() as conn:
                return [dict(r) for r in conn.execute(stmt).mappings()]
        except SQLAlchemyError as exc:
            raise AlertQueryError(_driver_message(exc)) from exc

    def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
