from __future__ import annotations

from fastapi import APIRouter, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from src.alert_logger.errors import AlertQueryError, AlertWriteError
from src.alert_logger.schemas.alerts import (
    MISSING_PARAMS_MESSAGE,
    NO_ALERTS_MESSAGE,
    AlertErrorResponse,
    AlertIn,
    AlertListResponse,
    AlertWriteResponse,
)
from src.alert_logger.services import alerts_service

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.post(
    "",
    response_model=AlertWriteResponse,
    responses={
        400: {"description": "Body is not a decodable alert (plain-text error)."},
        500: {"model": AlertWriteResponse},
    },
    summary="Write alert",
    description="Persist one alert keyed by alert_id. Missing fields are stored as empty strings.",
    operation_id="write_alert",
)
async def write_alert(request: Request):
    """Write one alert to the store."""
    body = await request.body()
    try:
        payload = AlertIn.model_validate_json(body)
    except ValidationError as exc:
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    try:
        return await run_in_threadpool(alerts_service.write_alert, request, payload)
    except AlertWriteError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=AlertWriteResponse(alert_id=exc.alert_id, error=exc.message).model_dump(),
        )


@router.get(
    "",
    response_model=AlertListResponse,
    responses={
        400: {"model": AlertErrorResponse},
        404: {"model": AlertErrorResponse},
        500: {"description": "Store query failed (plain-text error)."},
    },
    summary="Read alerts",
    description="Alerts for one service whose alert_ts lies in [start_ts, end_ts] (string comparison).",
    operation_id="read_alerts",
)
def read_alerts(
    request: Request,
    service_id: str = Query(default="", description="Service identifier."),
    start_ts: str = Query(default="", description="Inclusive lower timestamp bound."),
    end_ts: str = Query(default="", description="Inclusive upper timestamp bound."),
):
    """Read alerts by service_id and time range."""
    # The query runs before parameter validation; missing parameters still hit the store.
    try:
        alerts, service_name = alerts_service.find_alerts(request, service_id, start_ts, end_ts)
    except AlertQueryError as exc:
        return PlainTextResponse(exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not service_id or not start_ts or not end_ts:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=AlertErrorResponse(error=MISSING_PARAMS_MESSAGE).model_dump(),
        )

    if not alerts:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=AlertErrorResponse(error=NO_ALERTS_MESSAGE).model_dump(),
        )

    return AlertListResponse(service_id=service_id, service_name=service_name, alerts=alerts)
