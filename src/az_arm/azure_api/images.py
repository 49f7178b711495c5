"""Images, marketplace catalogue, VM sizes and SKUs."""

from __future__ import annotations

from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import IMAGES, RESOURCES, SKUS, VIRTUAL_MACHINES, ApiVersions
from az_arm.azure_api.validation import Validator


class Images:
    """Custom images plus the marketplace publisher → offer → SKU tree.

    Location-scoped calls validate the location first.
    """

    def __init__(self, gateway: RestGateway, validator: Validator, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._validator = validator
        self._versions = versions

    def _publishers_path(self, location: str) -> str:
        self._validator.validate_location(location)
        return f"providers/Microsoft.Compute/locations/{location}/publishers"

    def list_images(self) -> list[dict]:
        """Return the custom images of the subscription."""
        body = self._gateway.get(
            "resources?$filter=resourceType eq 'Microsoft.Compute/images'"
            f"&api-version={self._versions[RESOURCES]}"
        )
        return _value_list(body)

    def list_publishers(self, location: str) -> list[dict]:
        return self._gateway.get(
            f"{self._publishers_path(location)}?api-version={self._versions[IMAGES]}"
        )

    def list_offers(self, location: str, publisher: str) -> list[dict]:
        return self._gateway.get(
            f"{self._publishers_path(location)}/{publisher}/artifacttypes/vmimage/offers"
            f"?api-version={self._versions[IMAGES]}"
        )

    def list_skus(self, location: str, publisher: str, offer: str) -> list[dict]:
        return self._gateway.get(
            f"{self._publishers_path(location)}/{publisher}/artifacttypes/vmimage/offers/"
            f"{offer}/skus?api-version={self._versions[IMAGES]}"
        )

    def list_vm_sizes(self, location: str) -> list[dict]:
        self._validator.validate_location(location)
        body = self._gateway.get(
            f"providers/Microsoft.Compute/locations/{location}/vmSizes"
            f"?api-version={self._versions[VIRTUAL_MACHINES]}"
        )
        return _value_list(body)

    def list_subscription_skus(self) -> list[dict]:
        """Return every Compute resource SKU available to the subscription."""
        body = self._gateway.get(
            f"providers/Microsoft.Compute/skus?api-version={self._versions[SKUS]}"
        )
        return _value_list(body)
