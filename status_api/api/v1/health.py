from fastapi import APIRouter, Depends

from status_api.core.exceptions import utc_now_iso
from status_api.dependencies import get_wormly_client
from status_api.schemas.health import HealthResponse
from status_api.services.directory import SERVICE_DIRECTORY
from status_api.services.wormly import WormlyClient

router = APIRouter()


@router.get("/health")
async def health_check(client: WormlyClient = Depends(get_wormly_client)) -> HealthResponse:
    """Process liveness; does not contact Wormly."""
    return HealthResponse(
        timestamp=utc_now_iso(),
        wormly_key_configured=client.key_configured,
        mapped_services_count=len(SERVICE_DIRECTORY),
    )
