"""Azure Resource Manager REST helpers.

The gateway and authenticator form the transport core; the resource
modules build URL templates on top of an injected :class:`RestGateway`.

This package re-exports all public names so that callers can use
``from az_arm.azure_api import X``.
"""

# -- Auth & session ----------------------------------------------------------
from az_arm.azure_api._auth import (  # noqa: F401
    AZURE_LOGIN_URL,
    AZURE_MGMT_RESOURCE,
    AZURE_MGMT_URL,
    Session,
    get_token,
    get_token_from_credential,
    open_session,
)

# -- Caches ------------------------------------------------------------------
from az_arm.azure_api._cache import LookupCache  # noqa: F401

# -- Gateway -----------------------------------------------------------------
from az_arm.azure_api._gateway import POST_OK, RestGateway  # noqa: F401

# -- API versions ------------------------------------------------------------
from az_arm.azure_api._versions import DEFAULT_API_VERSIONS, ApiVersions  # noqa: F401

# -- Resource operations -----------------------------------------------------
from az_arm.azure_api.compute import VirtualMachines  # noqa: F401
from az_arm.azure_api.images import Images  # noqa: F401
from az_arm.azure_api.network import Network  # noqa: F401
from az_arm.azure_api.resource_groups import ResourceGroups  # noqa: F401
from az_arm.azure_api.resources import Resources  # noqa: F401
from az_arm.azure_api.validation import Validator  # noqa: F401
