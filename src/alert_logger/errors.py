from __future__ import annotations


class AlertLoggerError(Exception):
    """Base class for alert logger failures."""


class StoreUnavailableError(AlertLoggerError):
    """The SQLite store could not be opened or its schema created."""


class AlertWriteError(AlertLoggerError):
    """Inserting an alert failed (duplicate alert_id, store unavailable, ...)."""

    def __init__(self, alert_id: str, message: str):
        super().__init__(message)
        self.alert_id = alert_id
        self.message = message


class AlertQueryError(AlertLoggerError):
    """The service/time-range query failed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
