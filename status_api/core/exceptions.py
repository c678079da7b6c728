from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse


def utc_now_iso(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StatusError(Exception):
    """Base exception for status API errors."""

    def __init__(
        self,
        error: str,
        message: str | None = None,
        status: int = 500,
        timestamp: str | None = None,
    ):
        self.error = error
        self.message = message
        self.status = status
        self.timestamp = timestamp
        super().__init__(message or error)

    def to_dict(self) -> dict:
        result = {"error": self.error}
        if self.message:
            result["message"] = self.message
        if self.timestamp:
            result["timestamp"] = self.timestamp
        return result


class UpstreamError(StatusError):
    def __init__(self, message: str = "Wormly API request failed."):
        super().__init__(error="Failed to fetch Wormly data", message=message, status=500)


class ConfigurationError(StatusError):
    def __init__(self, error: str = "WORMLY_API_KEY not configured"):
        super().__init__(error=error, status=500)


class StatusUnavailableError(StatusError):
    def __init__(self, message: str):
        super().__init__(
            error="Failed to fetch status data",
            message=message,
            status=500,
            timestamp=utc_now_iso(),
        )


async def status_error_handler(request: Request, exc: StatusError) -> JSONResponse:
    """Global exception handler for StatusError and subclasses."""
    return JSONResponse(status_code=exc.status, content=exc.to_dict())
