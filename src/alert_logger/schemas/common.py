from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health endpoints."""

    status: str = Field(..., description="High-level health status string (e.g., 'ok').")
    message: str = Field(..., description="Human-readable status message.")
    timestamp: datetime = Field(..., description="UTC timestamp at time of response.")


class StoreConnectivityResponse(BaseModel):
    """Response model for backend↔SQLite connectivity diagnostics."""

    ok: bool = Field(..., description="Whether the backend can successfully query the alert store.")
    db_path: str = Field(..., description="Path of the SQLite file backing the alert store.")
    timestamp: str = Field(..., description="UTC timestamp when the check was performed (ISO string).")


# PUBLIC_INTERFACE
def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
