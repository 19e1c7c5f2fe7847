from __future__ import annotations

from fastapi import APIRouter, Request

from src.alert_logger.schemas.common import HealthResponse, StoreConnectivityResponse, utc_now
from src.alert_logger.state import get_state

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health check",
    description="Basic service liveness check used by deployment.",
    operation_id="health_check",
)
def health_check() -> HealthResponse:
    """Return service liveness status."""
    return HealthResponse(status="ok", message="Healthy", timestamp=utc_now())


@router.get(
    "/api/health/store",
    response_model=StoreConnectivityResponse,
    summary="Store connectivity check",
    description="Runs a trivial query against the SQLite alert store and reports which file is in use.",
    operation_id="store_connectivity_check",
)
def store_connectivity_check(request: Request) -> StoreConnectivityResponse:
    """Connectivity check endpoint to validate backend↔SQLite."""
    state = get_state(request.app)
    return StoreConnectivityResponse(
        ok=state.store.ping(),
        db_path=state.config.db_path,
        timestamp=utc_now().isoformat(),
    )
