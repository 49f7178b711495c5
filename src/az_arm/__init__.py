"""Azure Resource Manager client."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("az-arm")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from az_arm.client import ArmClient  # noqa: E402
from az_arm.errors import (  # noqa: E402
    ApiError,
    ArmError,
    AuthenticationError,
    RetryableError,
    UnknownLocationError,
    UnknownResourceGroupError,
)

__all__ = [
    "ApiError",
    "ArmClient",
    "ArmError",
    "AuthenticationError",
    "RetryableError",
    "UnknownLocationError",
    "UnknownResourceGroupError",
    "__version__",
]
