from typing import Literal

from pydantic import BaseModel

ServiceState = Literal["operational", "warning", "down", "degraded"]
OverallState = Literal["operational", "issues", "down"]


class Incident(BaseModel):
    id: str
    title: str
    description: str
    severity: Literal["high", "medium"]
    started_at: str
    status: Literal["investigating"] = "investigating"


class ServiceStatus(BaseModel):
    id: str
    name: str
    description: str
    status: ServiceState
    response_time: float | None = None  # Wormly getHostStatus does not report it
    uptime_percentage: float
    last_checked: str
    incident: Incident | None = None


class StatusResponse(BaseModel):
    timestamp: str
    overall_status: OverallState
    services: list[ServiceStatus]


class WormlyRawResponse(BaseModel):
    url_used: str
    wormly_response: dict
    mapped_services: int
    available_hostids: list[str]
