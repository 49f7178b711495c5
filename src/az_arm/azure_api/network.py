"""Network interfaces, virtual networks, subnets and public IP addresses."""

from __future__ import annotations

import logging
from typing import Any

from az_arm.azure_api._gateway import RestGateway
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import (
    NETWORK_INTERFACES,
    RESOURCES,
    VIRTUAL_NETWORKS,
    ApiVersions,
)
from az_arm.models import NetworkInterface, VirtualMachine

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_GROUP = "Default"
DEFAULT_ADDRESS_PREFIX = "10.0.0.0/16"


class Network:
    """``Microsoft.Network`` operations scoped to a resource group."""

    def __init__(self, gateway: RestGateway, versions: ApiVersions) -> None:
        self._gateway = gateway
        self._versions = versions

    # -- paths ---------------------------------------------------------------

    def _network_path(self, resource_group: str, kind: str, name: str, suffix: str = "") -> str:
        return (
            f"resourceGroups/{resource_group}/providers/Microsoft.Network/{kind}/{name}{suffix}"
            f"?api-version={self._versions[NETWORK_INTERFACES]}"
        )

    def network_interface_path(
        self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP
    ) -> str:
        return self._network_path(resource_group, "networkInterfaces", name)

    def virtual_network_path(
        self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP, suffix: str = ""
    ) -> str:
        return self._network_path(resource_group, "virtualNetworks", name, suffix)

    def public_ip_path(self, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP) -> str:
        return self._network_path(resource_group, "publicIPAddresses", name)

    # -- network interfaces --------------------------------------------------

    def create_network_interface(self, machine: VirtualMachine, interface: NetworkInterface) -> Any:
        """Create the NIC named after *machine*, inheriting its location and tags."""
        interface.location = machine.location
        interface.tags = machine.tags
        logger.info("Creating network interface %s in %s", machine.name, machine.resourceGroup)
        return self._gateway.put(
            self.network_interface_path(machine.name, machine.resourceGroup), interface
        )

    def list_network_interfaces(self, resource_group: str | None = None) -> list[dict]:
        """List NICs in *resource_group*, or in the whole subscription."""
        scope = f"resourceGroups/{resource_group}/" if resource_group else ""
        body = self._gateway.get(
            f"{scope}providers/Microsoft.Network/networkInterfaces"
            f"?api-version={self._versions[NETWORK_INTERFACES]}"
        )
        return _value_list(body)

    # -- public IPs ----------------------------------------------------------

    def create_public_ip(
        self,
        name: str,
        resource_group: str,
        location: str,
        tags: dict[str, str] | None = None,
        ipv6: bool = False,
    ) -> Any:
        """Create a public IP: static IPv4, or dynamic IPv6 when *ipv6* is set."""
        body = {
            "tags": tags or {},
            "location": location,
            "properties": {
                "publicIPAllocationMethod": "Dynamic" if ipv6 else "Static",
                "publicIPAddressVersion": "IPv6" if ipv6 else "IPv4",
            },
        }
        return self._gateway.put(self.public_ip_path(name, resource_group), body)

    # -- virtual networks ----------------------------------------------------

    def create_virtual_network(
        self,
        name: str,
        resource_group: str = DEFAULT_RESOURCE_GROUP,
        location: str = "westeurope",
        prefixes: list[str] | None = None,
        tags: dict[str, str] | None = None,
    ) -> Any:
        body = {
            "tags": tags or {},
            "location": location,
            "properties": {
                "addressSpace": {"addressPrefixes": prefixes or [DEFAULT_ADDRESS_PREFIX]},
                "subnets": [],
            },
        }
        return self._gateway.put(self.virtual_network_path(name, resource_group), body)

    def list_virtual_networks(self, location: str | None = None) -> list[dict]:
        """List virtual networks, optionally only those in *location*."""
        if location is None:
            body = self._gateway.get(
                "providers/Microsoft.Network/virtualNetworks"
                f"?api-version={self._versions[VIRTUAL_NETWORKS]}"
            )
        else:
            body = self._gateway.get(
                "resources?$filter=resourceType eq 'Microsoft.Network/virtualNetworks' "
                f"and location eq '{location}'&api-version={self._versions[RESOURCES]}"
            )
        return _value_list(body)

    def get_virtual_network(self, name: str) -> list[dict]:
        """Find virtual networks called *name* anywhere in the subscription."""
        body = self._gateway.get(
            "resources?$filter=resourceType eq 'Microsoft.Network/virtualNetworks' "
            f"and name eq '{name}'&api-version={self._versions[RESOURCES]}"
        )
        return _value_list(body)

    def check_ip_availability(
        self, resource_group: str, network_name: str, ip_address: str = "10.0.0.0"
    ) -> dict:
        """Ask whether *ip_address* is free in the virtual network."""
        path = (
            f"resourceGroups/{resource_group}/providers/Microsoft.Network/virtualNetworks/"
            f"{network_name}/CheckIPAddressAvailability?ipAddress={ip_address}"
            f"&api-version={self._versions[NETWORK_INTERFACES]}"
        )
        return self._gateway.get(path)

    # -- subnets -------------------------------------------------------------

    def list_subnets(self, resource_group: str, network_name: str) -> list[dict]:
        path = self.virtual_network_path(network_name, resource_group, "/subnets")
        body = self._gateway.get(path)
        return _value_list(body)

    def create_subnet(
        self,
        network_name: str,
        name: str,
        resource_group: str = DEFAULT_RESOURCE_GROUP,
        prefix: str = DEFAULT_ADDRESS_PREFIX,
    ) -> Any:
        body = {"properties": {"addressPrefix": prefix}}
        return self._gateway.put(
            self.virtual_network_path(network_name, resource_group, f"/subnets/{name}"), body
        )

    def delete_subnet(
        self, network_name: str, name: str, resource_group: str = DEFAULT_RESOURCE_GROUP
    ) -> int:
        return self._gateway.delete(
            self.virtual_network_path(network_name, resource_group, f"/subnets/{name}")
        )
