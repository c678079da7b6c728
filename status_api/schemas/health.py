from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: str
    wormly_key_configured: bool
    mapped_services_count: int
