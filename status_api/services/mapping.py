"""Pure mapping from Wormly host records to the public status schema.

Nothing here is measured: uptime percentages are tiered placeholders and
incidents are synthesized on every request for any service that is not
operational. Host records are plain mappings as decoded from the Wormly JSON
response; absent fields are treated as falsy.
"""

import uuid
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone

from status_api.core.exceptions import utc_now_iso
from status_api.schemas.status import Incident, ServiceStatus
from status_api.services.directory import ServiceEntry

UPTIME_UNMONITORED = 0.0
UPTIME_WITH_ERRORS = 95.0
UPTIME_HEALTHY = 99.9

INCIDENT_LOOKBACK = timedelta(minutes=30)

SEVERITY_BY_STATUS = {
    "down": "high",
    "warning": "medium",
    "degraded": "medium",
}


def classify_status(host: Mapping) -> str:
    """Classify a host as 'operational', 'warning' or 'down'."""
    if not host.get("uptimemonitored"):
        return "warning"
    if host.get("uptimeerrors"):
        return "down"
    if host.get("healthmonitored") and host.get("healtherrors"):
        return "warning"
    return "operational"


def estimate_uptime(host: Mapping) -> float:
    if not host.get("uptimemonitored"):
        return UPTIME_UNMONITORED
    if host.get("uptimeerrors"):
        return UPTIME_WITH_ERRORS
    return UPTIME_HEALTHY


def last_checked(host: Mapping, now: datetime | None = None) -> str:
    """ISO timestamp of the last uptime check, falling back to now."""
    raw = host.get("lastuptimecheck")
    if raw:
        try:
            return utc_now_iso(datetime.fromtimestamp(float(raw), tz=timezone.utc))
        except (TypeError, ValueError, OverflowError, OSError):
            pass
    return utc_now_iso(now)


def incident_severity(status: str) -> str:
    return SEVERITY_BY_STATUS.get(status, "medium")


def _describe_incident(status: str, host: Mapping) -> tuple[str, str]:
    if status == "down":
        if not host.get("uptimemonitored"):
            return "Service Down", "Uptime monitoring is disabled for this service"
        return "Service Down", "Service is currently experiencing uptime errors and is not responding"

    if status == "warning":
        if host.get("healtherrors"):
            return "Service Warning", "Service has health monitoring alerts active"
        if not host.get("uptimemonitored"):
            return "Service Warning", "Uptime monitoring is disabled - unable to verify service status"
        return "Service Warning", "Service is experiencing intermittent issues"

    return "Service Issue", "Service is experiencing issues"


def build_incident(host_id: str, status: str, host: Mapping, now: datetime | None = None) -> Incident:
    """Synthesize an incident for a non-operational service.

    Incidents are not persisted; every call yields a fresh id and a start time
    fixed at 30 minutes before ``now``.
    """
    now = now or datetime.now(timezone.utc)
    title, description = _describe_incident(status, host)
    return Incident(
        id=f"inc-{host_id}-{uuid.uuid4().hex[:12]}",
        title=title,
        description=description,
        severity=incident_severity(status),
        started_at=utc_now_iso(now - INCIDENT_LOOKBACK),
    )


def build_service_status(host_id: str, entry: ServiceEntry, host: Mapping) -> ServiceStatus:
    """Assemble a service record; identity fields come only from the directory entry."""
    status = classify_status(host)
    return ServiceStatus(
        id=entry.id,
        name=entry.name,
        description=entry.description,
        status=status,
        response_time=None,
        uptime_percentage=estimate_uptime(host),
        last_checked=last_checked(host),
        incident=build_incident(host_id, status, host) if status != "operational" else None,
    )


def overall_status(services: Iterable[ServiceStatus]) -> str:
    """Reduce service records to 'down' > 'issues' > 'operational'."""
    statuses = {s.status for s in services}
    if "down" in statuses:
        return "down"
    if statuses & {"warning", "degraded"}:
        return "issues"
    return "operational"
