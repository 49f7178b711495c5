from typing import Literal

from pydantic import Field

from az_arm.models._base import ArmModel


class ResourceId(ArmModel):
    id: str


class IpConfigurationProperties(ArmModel):
    subnet: ResourceId | None = None
    publicIPAddress: ResourceId | None = None
    privateIPAddressVersion: Literal["IPv4", "IPv6"] | None = None


class IpConfiguration(ArmModel):
    name: str = "default"
    properties: IpConfigurationProperties = Field(default_factory=IpConfigurationProperties)


class NetworkInterfaceProperties(ArmModel):
    ipConfigurations: list[IpConfiguration] = Field(default_factory=list)


class NetworkInterface(ArmModel):
    """Body of a ``Microsoft.Network/networkInterfaces`` create/update.

    The setters act on the first IP configuration, creating it on demand.
    ``location`` and ``tags`` are normally copied from the owning VM by
    :meth:`~az_arm.azure_api.network.Network.create_network_interface`.
    """

    location: str | None = None
    tags: dict[str, str] | None = None
    properties: NetworkInterfaceProperties = Field(default_factory=NetworkInterfaceProperties)

    def _primary(self) -> IpConfiguration:
        if not self.properties.ipConfigurations:
            self.properties.ipConfigurations.append(IpConfiguration())
        return self.properties.ipConfigurations[0]

    def set_subnet(self, subnet_id: str) -> None:
        config = self._primary()
        config.name = "default"
        config.properties.subnet = ResourceId(id=subnet_id)

    def set_public_ip(self, public_ip_id: str) -> None:
        self._primary().properties.publicIPAddress = ResourceId(id=public_ip_id)

    def set_ipv6(self, ipv6: bool) -> None:
        self._primary().properties.privateIPAddressVersion = "IPv6" if ipv6 else "IPv4"
