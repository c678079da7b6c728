import structlog
from fastapi import APIRouter, Depends

from status_api.core.exceptions import ConfigurationError, StatusError, StatusUnavailableError
from status_api.dependencies import get_wormly_client
from status_api.schemas.status import StatusResponse, WormlyRawResponse
from status_api.services.directory import SERVICE_DIRECTORY
from status_api.services.status import build_status_report, host_list
from status_api.services.wormly import WormlyClient

logger = structlog.get_logger()

router = APIRouter()


@router.get("/api/status")
async def get_status(client: WormlyClient = Depends(get_wormly_client)) -> StatusResponse:
    """Mapped service statuses and the overall system status."""
    try:
        report = await build_status_report(client)
    except StatusError as exc:
        logger.error("status_fetch_failed", error=str(exc))
        raise StatusUnavailableError(str(exc)) from exc
    except Exception as exc:
        logger.exception("status_fetch_failed")
        raise StatusUnavailableError(str(exc)) from exc

    logger.info("status_returned", services=len(report.services), overall_status=report.overall_status)
    return report


@router.get("/api/wormly-raw")
async def get_wormly_raw(client: WormlyClient = Depends(get_wormly_client)) -> WormlyRawResponse:
    """Diagnostic passthrough of the Wormly response with the API key redacted."""
    if not client.key_configured:
        raise ConfigurationError()

    payload = await client.get_host_status()

    return WormlyRawResponse(
        url_used=client.request_url(),
        wormly_response=payload,
        mapped_services=len(SERVICE_DIRECTORY),
        available_hostids=[
            f"{h.get('hostid')}: {h.get('name')}" for h in host_list(payload) if isinstance(h, dict)
        ],
    )
