from __future__ import annotations

import logging
from typing import List, Tuple

from fastapi import Request

from src.alert_logger.errors import AlertQueryError, AlertWriteError
from src.alert_logger.schemas.alerts import AlertIn, AlertRecord, AlertWriteResponse
from src.alert_logger.state import get_state

logger = logging.getLogger(__name__)


def _row_to_record(row: dict) -> AlertRecord:
    return AlertRecord(
        alert_id=row["alert_id"],
        model=row.get("model") or "",
        alert_type=row.get("alert_type") or "",
        alert_ts=row.get("alert_ts") or "",
        severity=row.get("severity") or "",
        team_slack=row.get("team_slack") or "",
    )


# PUBLIC_INTERFACE
def write_alert(request: Request, payload: AlertIn) -> AlertWriteResponse:
    """Persist one alert. Raises AlertWriteError if the insert fails."""
    store = get_state(request.app).store
    try:
        store.insert_alert(payload.model_dump())
    except AlertWriteError:
        logger.exception("Failed storing alert alert_id=%s service_id=%s", payload.alert_id, payload.service_id)
        raise
    logger.debug("Stored alert alert_id=%s service_id=%s", payload.alert_id, payload.service_id)
    return AlertWriteResponse(alert_id=payload.alert_id, error="")


# PUBLIC_INTERFACE
def find_alerts(request: Request, service_id: str, start_ts: str, end_ts: str) -> Tuple[List[AlertRecord], str]:
    """
    Return (alerts, service_name) for service_id with alert_ts in [start_ts, end_ts].

    service_name is taken from the last row scanned, so it is "" when nothing matched.
    Raises AlertQueryError if the query fails.
    """
    store = get_state(request.app).store
    try:
        rows = store.find_alerts(service_id, start_ts, end_ts)
    except AlertQueryError:
        logger.exception("Failed querying alerts service_id=%s start_ts=%s end_ts=%s", service_id, start_ts, end_ts)
        raise

    service_name = ""
    records: List[AlertRecord] = []
    for row in rows:
        records.append(_row_to_record(row))
        service_name = row.get("service_name") or ""
    return records, service_name
