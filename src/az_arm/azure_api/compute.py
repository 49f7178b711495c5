"""Virtual machine lifecycle operations."""

from __future__ import annotations

import logging
from typing import Any

from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import RESOURCES, VIRTUAL_MACHINES, ApiVersions
from az_arm.azure_api.validation import Validator
from az_arm.models import VirtualMachine

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_GROUP = "Default"


class VirtualMachines:
    """``Microsoft.Compute/virtualMachines`` operations.

    Every call addressing a VM by name first validates the resource group;
    :meth:`create` also validates the location.
    """

    def __init__(self, gateway: RestGateway, validator: Validator, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._validator = validator
        self._versions = versions

    def _vm_path(self, name: str, resource_group: str, action: str = "") -> str:
        self._validator.validate_resource_group(resource_group)
        suffix = f"/{action.strip('/')}" if action else ""
        return (
            f"resourceGroups/{resource_group}/providers/Microsoft.Compute/"
            f"virtualMachines/{name}{suffix}?api-version={self._versions[VIRTUAL_MACHINES]}"
        )

    def list_all(self) -> list[dict]:
        """Return every VM in the subscription."""
        body = self._gateway.get(
            "providers/Microsoft.Compute/virtualmachines"
            f"?api-version={self._versions[VIRTUAL_MACHINES]}"
        )
        return _value_list(body)

    def get(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> dict:
        return self._gateway.get(self._vm_path(name, resource_group))

    def find_by_name(self, name: str) -> list[dict]:
        """Search the whole subscription for VMs called *name*."""
        body = self._gateway.get(
            "resources?$filter=resourceType eq 'Microsoft.Compute/virtualMachines' "
            f"and name eq '{name}'&api-version={self._versions[RESOURCES]}"
        )
        return _value_list(body)

    def get_status(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> str:
        """Return the VM's power state as displayed by the portal.

        Prefers the ``PowerState/*`` status; falls back to the last status
        reported, or ``"Unknown"`` when the instance view has none.
        """
        body = self._gateway.get(self._vm_path(name, resource_group, "instanceView"))
        status = "Unknown"
        for entry in (body or {}).get("statuses", []):
            status = entry.get("displayStatus", status)
            if entry.get("code", "").lower().startswith("power"):
                return status
        return status

    def create(self, machine: VirtualMachine) -> Any:
        """Create or update *machine* (server-side upsert)."""
        self._validator.validate_location(machine.location)
        path = self._vm_path(machine.name, machine.resourceGroup)
        logger.info("Creating VM %s in %s", machine.name, machine.resourceGroup)
        return self._gateway.put(path, machine)

    update = create

    def delete(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> int:
        logger.info("Deleting VM %s in %s", name, resource_group)
        return self._gateway.delete(self._vm_path(name, resource_group))

    def start(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> Any:
        return self._gateway.post(self._vm_path(name, resource_group, "start"))

    def stop(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> Any:
        """Power off without releasing compute resources (still billed)."""
        return self._gateway.post(self._vm_path(name, resource_group, "poweroff"))

    def restart(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> Any:
        return self._gateway.post(self._vm_path(name, resource_group, "restart"))

    def deallocate(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> Any:
        """Stop the VM and release its compute resources."""
        return self._gateway.post(self._vm_path(name, resource_group, "deallocate"))
