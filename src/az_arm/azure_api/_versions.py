"""API versions per Resource Manager surface."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

VIRTUAL_MACHINES = "virtualMachines"
LOCATIONS = "locations"
RESOURCE_GROUPS = "resourceGroups"
NETWORK_INTERFACES = "networkInterfaces"
VIRTUAL_NETWORKS = "virtualNetworks"
IMAGES = "images"
RESOURCES = "resources"
SKUS = "skus"

DEFAULT_API_VERSIONS: Mapping[str, str] = MappingProxyType(
    {
        VIRTUAL_MACHINES: "2016-04-30-preview",
        LOCATIONS: "2016-06-01",
        RESOURCE_GROUPS: "2017-05-10",
        # Also used for public IPs and for virtual networks addressed by group.
        NETWORK_INTERFACES: "2017-10-01",
        # Subscription-wide virtual network listing.
        VIRTUAL_NETWORKS: "2018-01-01",
        IMAGES: "2017-12-01",
        RESOURCES: "2017-05-10",
        SKUS: "2017-09-01",
    }
)

# Provider path fragment → table key, for resources addressed by id.
_RESOURCE_ID_SURFACES = (
    ("/providers/microsoft.network/networkinterfaces/", NETWORK_INTERFACES),
    ("/providers/microsoft.network/publicipaddresses/", NETWORK_INTERFACES),
    ("/providers/microsoft.compute/images/", IMAGES),
)


class ApiVersions:
    """Lookup table of API versions, defaults overlaid with *overrides*."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._table = {**DEFAULT_API_VERSIONS, **(overrides or {})}

    def __getitem__(self, surface: str) -> str:
        try:
            return self._table[surface]
        except KeyError:
            raise KeyError(f"No API version configured for {surface!r}") from None

    def for_resource_id(self, resource_id: str) -> str:
        """Pick the API version matching the provider type inside *resource_id*."""
        lowered = resource_id.lower()
        for fragment, surface in _RESOURCE_ID_SURFACES:
            if fragment in lowered:
                return self[surface]
        return self[RESOURCES]
