"""Request bodies for Resource Manager PUT calls."""

from az_arm.models._base import ArmModel
from az_arm.models.network_interface import (
    IpConfiguration,
    IpConfigurationProperties,
    NetworkInterface,
    NetworkInterfaceProperties,
    ResourceId,
)
from az_arm.models.profiles import (
    DataDisk,
    HardwareProfile,
    ImageReference,
    LinuxConfiguration,
    NetworkInterfaceReference,
    NetworkProfile,
    OsDisk,
    OsProfile,
    SshConfiguration,
    SshPublicKey,
    StorageProfile,
)
from az_arm.models.virtual_machine import VirtualMachine, VirtualMachineProperties

__all__ = [
    "ArmModel",
    "DataDisk",
    "HardwareProfile",
    "ImageReference",
    "IpConfiguration",
    "IpConfigurationProperties",
    "LinuxConfiguration",
    "NetworkInterface",
    "NetworkInterfaceProperties",
    "NetworkInterfaceReference",
    "NetworkProfile",
    "OsDisk",
    "OsProfile",
    "ResourceId",
    "SshConfiguration",
    "SshPublicKey",
    "StorageProfile",
    "VirtualMachine",
    "VirtualMachineProperties",
]
