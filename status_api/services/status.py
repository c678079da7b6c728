"""Builds the public status report from a single Wormly getHostStatus call."""

from collections.abc import Mapping

import structlog

from status_api.core.exceptions import UpstreamError, utc_now_iso
from status_api.schemas.status import ServiceStatus, StatusResponse
from status_api.services.directory import lookup_service
from status_api.services.mapping import build_service_status, overall_status
from status_api.services.wormly import WormlyClient

logger = structlog.get_logger()


def host_list(payload: Mapping) -> list:
    hosts = payload.get("status") or []
    return hosts if isinstance(hosts, list) else []


def map_hosts(hosts: list) -> list[ServiceStatus]:
    """Keep only directory hosts, in vendor order, and map each to a service record."""
    services = []
    for host in hosts:
        if not isinstance(host, Mapping):
            continue
        host_id = host.get("hostid")
        entry = lookup_service(host_id)
        if entry is None:
            continue
        services.append(build_service_status(str(host_id), entry, host))
    return services


async def fetch_services(client: WormlyClient) -> list[ServiceStatus]:
    logger.info("wormly_fetch_started", command="getHostStatus")
    payload = await client.get_host_status()

    errorcode = payload.get("errorcode")
    # bool is an int subclass; false must not pass as 0
    if type(errorcode) is not int or errorcode != 0:
        raise UpstreamError(f"Wormly API returned error code: {errorcode}")

    hosts = host_list(payload)
    services = map_hosts(hosts)
    logger.info("wormly_services_mapped", mapped=len(services), total_hosts=len(hosts))
    return services


async def build_status_report(client: WormlyClient) -> StatusResponse:
    services = await fetch_services(client)
    return StatusResponse(
        timestamp=utc_now_iso(),
        overall_status=overall_status(services),
        services=services,
    )
