"""Generic resources addressed by id, tag or OData filter."""

from __future__ import annotations

import logging

from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import RESOURCES, ApiVersions

logger = logging.getLogger(__name__)


class Resources:
    def __init__(self, gateway: RestGateway, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._versions = versions

    def _id_path(self, resource_id: str) -> str:
        # Resource ids start with "/subscriptions/{id}/"; the gateway is already scoped to it.
        prefix = f"/subscriptions/{self._gateway.session.subscription_id}/"
        relative = resource_id
        if resource_id.lower().startswith(prefix.lower()):
            relative = resource_id[len(prefix) :]
        elif resource_id.lower().startswith("/subscriptions/"):
            raise ValueError(f"Resource {resource_id} belongs to another subscription")
        return f"{relative.lstrip('/')}?api-version={self._versions.for_resource_id(resource_id)}"

    def get_by_id(self, resource_id: str) -> dict:
        return self._gateway.get(self._id_path(resource_id))

    def delete_by_id(self, resource_id: str) -> int:
        logger.info("Deleting resource %s", resource_id)
        return self._gateway.delete(self._id_path(resource_id))

    def list_all(self, odata_filter: str | None = None) -> list[dict]:
        """List resources, optionally narrowed by an OData ``$filter`` expression."""
        query = f"$filter={odata_filter}&" if odata_filter else ""
        body = self._gateway.get(f"resources?{query}api-version={self._versions[RESOURCES]}")
        return _value_list(body)

    def list_by_tag(self, tag_name: str, tag_value: str | None = None) -> list[dict]:
        """List resources carrying tag *tag_name* (and *tag_value*, if given)."""
        odata_filter = f"tagName eq '{tag_name}'"
        if tag_value is not None:
            odata_filter += f" and tagValue eq '{tag_value}'"
        return self.list_all(odata_filter)
