"""Virtual machine profiles (hardware / storage / OS / network).

Each profile serializes to the nested ``properties.<name>Profile`` object of
a ``Microsoft.Compute/virtualMachines`` PUT body.
"""

from typing import Literal

from pydantic import Field

from az_arm.models._base import ArmModel

# ---------------------------------------------------------------------------
# Hardware
# ---------------------------------------------------------------------------


class HardwareProfile(ArmModel):
    vmSize: str = "Standard_A0"


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class OsDisk(ArmModel):
    name: str = ""
    osType: Literal["Linux", "Windows"] = "Linux"
    createOption: str = "fromImage"


class ImageReference(ArmModel):
    """Either a marketplace image (publisher/offer/sku/version) or a custom image ``id``."""

    id: str | None = None
    publisher: str | None = None
    offer: str | None = None
    sku: str | None = None
    version: str | None = None


class DataDisk(ArmModel):
    diskSizeGB: int
    createOption: str = "Empty"
    lun: int


class StorageProfile(ArmModel):
    osDisk: OsDisk = Field(default_factory=OsDisk)
    imageReference: ImageReference | None = None
    dataDisks: list[DataDisk] = Field(default_factory=list)

    def add_empty_data_disk(self, size_gb: int = 8) -> DataDisk:
        """Attach a new empty data disk of *size_gb* GB on the next LUN."""
        disk = DataDisk(diskSizeGB=size_gb, lun=len(self.dataDisks) + 1)
        self.dataDisks.append(disk)
        return disk


# ---------------------------------------------------------------------------
# OS
# ---------------------------------------------------------------------------


class SshPublicKey(ArmModel):
    path: str
    keyData: str


class SshConfiguration(ArmModel):
    publicKeys: list[SshPublicKey] = Field(default_factory=list)


class LinuxConfiguration(ArmModel):
    disablePasswordAuthentication: bool | None = None
    ssh: SshConfiguration | None = None


class OsProfile(ArmModel):
    computerName: str | None = None
    adminUsername: str | None = None
    adminPassword: str | None = None
    customData: str | None = None
    linuxConfiguration: LinuxConfiguration | None = None

    def add_ssh_key(self, path: str, key_data: str) -> None:
        if self.linuxConfiguration is None:
            self.linuxConfiguration = LinuxConfiguration()
        if self.linuxConfiguration.ssh is None:
            self.linuxConfiguration.ssh = SshConfiguration()
        self.linuxConfiguration.ssh.publicKeys.append(SshPublicKey(path=path, keyData=key_data))


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


class NetworkInterfaceReferenceProperties(ArmModel):
    primary: bool = True


class NetworkInterfaceReference(ArmModel):
    id: str
    properties: NetworkInterfaceReferenceProperties | None = None


class NetworkProfile(ArmModel):
    networkInterfaces: list[NetworkInterfaceReference] = Field(default_factory=list)

    def add_network_interface(self, interface_id: str, primary: bool | None = None) -> None:
        """Reference an existing NIC by id; the first one added is primary by default."""
        if primary is None:
            primary = not self.networkInterfaces
        self.networkInterfaces.append(
            NetworkInterfaceReference(
                id=interface_id,
                properties=NetworkInterfaceReferenceProperties(primary=primary),
            )
        )
