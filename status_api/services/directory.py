"""Fixed directory of the Wormly hosts exposed as public services."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ServiceEntry:
    name: str
    description: str
    id: str


SERVICE_DIRECTORY: Mapping[str, ServiceEntry] = MappingProxyType({
    "107401": ServiceEntry(
        name="API - Coroners",
        description="Coroners API service",
        id="api-coroners",
    ),
    "68843": ServiceEntry(
        name="API - NBC Collection Details",
        description="NBC collection details API",
        id="api-nbc-collection",
    ),
    "89703": ServiceEntry(
        name="Blue Badge Application",
        description="Blue Badge application system",
        id="app-blue-badge",
    ),
    "89705": ServiceEntry(
        name="Firmstep Application",
        description="Firmstep application system",
        id="app-firmstep",
    ),
    "82156": ServiceEntry(
        name="WNC Main Website",
        description="West Northamptonshire Council main website",
        id="wnc-website",
    ),
    "67371": ServiceEntry(
        name="WNC Northampton Website",
        description="WNC Northampton area website",
        id="wnc-northampton",
    ),
    "70744": ServiceEntry(
        name="Bin Details API",
        description="NBC bin collection details API",
        id="api-bin-details",
    ),
    "67417": ServiceEntry(
        name="Veolia Echo Live",
        description="Veolia waste management system",
        id="veolia-echo",
    ),
})


def lookup_service(host_id: str | int | None) -> ServiceEntry | None:
    """Return the directory entry for a Wormly host id, or None if unmapped."""
    if host_id is None:
        return None
    return SERVICE_DIRECTORY.get(str(host_id))
