"""High-level client wiring one gateway into the resource operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import requests
from azure.core.credentials import TokenCredential

from az_arm.azure_api import (
    ApiVersions,
    Images,
    Network,
    ResourceGroups,
    Resources,
    RestGateway,
    Session,
    Validator,
    VirtualMachines,
    get_token_from_credential,
    open_session,
)
from az_arm.azure_api._auth import AZURE_MGMT_URL
from az_arm.azure_api._responses import _value_list
from az_arm.azure_api._versions import LOCATIONS
from az_arm.settings import ArmSettings

logger = logging.getLogger(__name__)


class ArmClient:
    """Entry point bundling every operation group over a single session.

    >>> with ArmClient.connect(tenant, subscription, app_id, secret) as arm:
    ...     arm.vms.start("web-1", "prod")

    A client is bound to one bearer token for its whole life and is not
    thread-safe.  Build a new client to re-authenticate.
    """

    def __init__(
        self,
        session: Session,
        *,
        api_versions: Mapping[str, str] | None = None,
        timeout: float | None = None,
        http: requests.Session | None = None,
    ) -> None:
        self.session = session
        self.versions = ApiVersions(api_versions)
        self.gateway = RestGateway(session, timeout=timeout, http=http)
        self.validator = Validator(self.gateway, self.versions)
        self.vms = VirtualMachines(self.gateway, self.validator, self.versions)
        self.images = Images(self.gateway, self.validator, self.versions)
        self.resource_groups = ResourceGroups(self.gateway, self.validator, self.versions)
        self.network = Network(self.gateway, self.versions)
        self.resources = Resources(self.gateway, self.versions)

    # -- construction --------------------------------------------------------

    @classmethod
    def connect(
        cls,
        tenant_id: str,
        subscription_id: str,
        client_id: str,
        client_secret: str,
        **kwargs: Any,
    ) -> ArmClient:
        """Authenticate with a client secret and return a ready client.

        *timeout* applies to the token request as well as to later calls.
        """
        session = open_session(
            tenant_id, subscription_id, client_id, client_secret, timeout=kwargs.get("timeout")
        )
        return cls(session, **kwargs)

    @classmethod
    def from_settings(cls, settings: ArmSettings | None = None, **kwargs: Any) -> ArmClient:
        """Authenticate with the credentials and endpoints found in *settings*."""
        settings = settings or ArmSettings()
        settings.require_credentials()
        session = open_session(
            settings.tenant_id,
            settings.subscription_id,
            settings.client_id,
            settings.client_secret,
            login_url=settings.login_url,
            management_url=settings.management_url,
            resource=settings.resource,
            timeout=settings.request_timeout,
        )
        kwargs.setdefault("api_versions", settings.api_versions)
        kwargs.setdefault("timeout", settings.request_timeout)
        return cls(session, **kwargs)

    @classmethod
    def from_credential(
        cls,
        subscription_id: str,
        credential: TokenCredential | None = None,
        *,
        tenant_id: str | None = None,
        management_url: str = AZURE_MGMT_URL,
        **kwargs: Any,
    ) -> ArmClient:
        """Authenticate through ``azure.identity`` (``DefaultAzureCredential`` by default)."""
        if credential is None:
            from azure.identity import DefaultAzureCredential

            credential = DefaultAzureCredential()
        token = get_token_from_credential(credential, tenant_id)
        return cls(Session.for_subscription(subscription_id, token, management_url), **kwargs)

    # -- passthrough ---------------------------------------------------------

    def list_locations(self) -> list[dict]:
        """Fetch the subscription's locations (always a fresh call)."""
        body = self.gateway.get(f"locations?api-version={self.versions[LOCATIONS]}")
        return _value_list(body)

    def close(self) -> None:
        self.gateway.close()

    def __enter__(self) -> ArmClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
