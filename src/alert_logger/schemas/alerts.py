from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


MISSING_PARAMS_MESSAGE = "Please provide service ID, starting and ending Timestamp properly"
NO_ALERTS_MESSAGE = "No alerts found for the provided parameters"


class AlertIn(BaseModel):
    """Request body for writing one alert. Missing fields default to empty strings."""

    model_config = ConfigDict(extra="ignore")

    alert_id: str = Field(default="", description="Unique alert identifier (primary key).")
    service_id: str = Field(default="", description="Identifier of the service that raised the alert.")
    service_name: str = Field(default="", description="Optional human-readable service label.")
    model: str = Field(default="", description="Free-form model name.")
    alert_type: str = Field(default="", description="Free-form alert classification.")
    alert_ts: str = Field(default="", description="Lexically sortable timestamp string.")
    severity: str = Field(default="", description="Free-form severity.")
    team_slack: str = Field(default="", description="Team contact / routing hint.")

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        """Accept case variants of field names ("ALERT_ID"); an exact-case key wins."""
        if not isinstance(data, dict):
            return data
        matched: Dict[str, Any] = {k: v for k, v in data.items() if k in cls.model_fields}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            name = key.lower()
            if name in cls.model_fields and name not in matched:
                matched[name] = value
        return matched


class AlertRecord(BaseModel):
    """One alert in a read response; service fields are lifted to the envelope."""

    alert_id: str
    model: str = ""
    alert_type: str = ""
    alert_ts: str = ""
    severity: str = ""
    team_slack: str = ""


class AlertWriteResponse(BaseModel):
    """Result of a write. error is empty on success."""

    alert_id: str = Field(..., description="alert_id from the request body.")
    error: str = Field(default="", description="Store error message, empty on success.")


class AlertListResponse(BaseModel):
    """Envelope for alerts of one service within a time range."""

    service_id: str = Field(..., description="Queried service identifier.")
    service_name: str = Field(..., description="service_name of the last matching row.")
    alerts: List[AlertRecord] = Field(..., description="Matching alerts.")


class AlertErrorResponse(BaseModel):
    """Error envelope used by the read endpoint (alert_id is always 'error')."""

    alert_id: str = "error"
    error: str
