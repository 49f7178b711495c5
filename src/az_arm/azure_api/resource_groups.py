"""Resource group operations."""

from __future__ import annotations

import logging

from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import RESOURCE_GROUPS, ApiVersions
from az_arm.azure_api.validation import Validator

logger = logging.getLogger(__name__)


class ResourceGroups:
    """List, inspect, create and delete resource groups.

    Creating or deleting a group does not refresh the validator's cached
    list; call ``validator.resource_groups.invalidate()`` when that matters.
    """

    def __init__(self, gateway: RestGateway, validator: Validator, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._validator = validator
        self._versions = versions

    def _path(self, name: str) -> str:
        return f"resourcegroups/{name}?api-version={self._versions[RESOURCE_GROUPS]}"

    def list_all(self) -> list[dict]:
        body = self._gateway.get(f"resourcegroups?api-version={self._versions[RESOURCE_GROUPS]}")
        return _value_list(body)

    def get(self, name: str) -> dict:
        return self._gateway.get(self._path(name))

    def create(self, name: str, location: str, tags: dict[str, str] | None = None) -> dict:
        """Create or update *name* in *location* (validated first)."""
        self._validator.validate_location(location)
        body: dict = {"location": location}
        if tags:
            body["tags"] = tags
        logger.info("Creating resource group %s in %s", name, location)
        return self._gateway.put(self._path(name), body)

    def delete(self, name: str) -> int:
        """Delete *name* and everything in it; returns the status code."""
        logger.info("Deleting resource group %s", name)
        return self._gateway.delete(self._path(name))
