"""Local validation of locations and resource groups against cached lists."""

from __future__ import annotations

import logging

from az_arm.azure_api._cache import LookupCache
from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import LOCATIONS, RESOURCE_GROUPS, ApiVersions
from az_arm.errors import UnknownLocationError, UnknownResourceGroupError

logger = logging.getLogger(__name__)


class Validator:
    """Check names before any mutating call reaches the network.

    Both lists are fetched once, on first use, and kept until
    :meth:`invalidate` is called.  The check-then-use sequence is not atomic;
    guard a shared client with a lock.
    """

    def __init__(self, gateway: RestGateway, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._versions = versions
        self.locations = LookupCache("locations", self._fetch_locations)
        self.resource_groups = LookupCache("resource groups", self._fetch_resource_groups)

    def _fetch_locations(self) -> list[dict]:
        body = self._gateway.get(f"locations?api-version={self._versions[LOCATIONS]}")
        return _value_list(body)

    def _fetch_resource_groups(self) -> list[dict]:
        body = self._gateway.get(f"resourcegroups?api-version={self._versions[RESOURCE_GROUPS]}")
        return _value_list(body)

    def validate_location(self, name: str) -> dict:
        """Return the location descriptor for *name* or raise :class:`UnknownLocationError`."""
        location = self.locations.get(name)
        if location is None:
            logger.debug("Rejected unknown location %r", name)
            raise UnknownLocationError(f"Unknown location: {name}")
        return location

    def validate_resource_group(self, name: str) -> dict:
        """Return the group descriptor for *name* or raise :class:`UnknownResourceGroupError`."""
        group = self.resource_groups.get(name)
        if group is None:
            logger.debug("Rejected unknown resource group %r", name)
            raise UnknownResourceGroupError(f"Unknown resource group: {name}")
        return group

    def invalidate(self) -> None:
        self.locations.invalidate()
        self.resource_groups.invalidate()
