from pydantic import Field, model_validator

from az_arm.models._base import ArmModel
from az_arm.models.profiles import HardwareProfile, NetworkProfile, OsProfile, StorageProfile


class VirtualMachineProperties(ArmModel):
    hardwareProfile: HardwareProfile = Field(default_factory=HardwareProfile)
    storageProfile: StorageProfile = Field(default_factory=StorageProfile)
    osProfile: OsProfile = Field(default_factory=OsProfile)
    networkProfile: NetworkProfile = Field(default_factory=NetworkProfile)


class VirtualMachine(ArmModel):
    """Body of a virtual machine create/update.

    ``resourceGroup`` addresses the VM but is not part of the body.  The OS
    disk is named after the VM unless a name was given.
    """

    name: str
    location: str
    resourceGroup: str = Field(default="Default", exclude=True)
    tags: dict[str, str] | None = None
    properties: VirtualMachineProperties = Field(default_factory=VirtualMachineProperties)

    @model_validator(mode="after")
    def _default_os_disk_name(self) -> "VirtualMachine":
        if not self.properties.storageProfile.osDisk.name:
            self.properties.storageProfile.osDisk.name = self.name
        return self
