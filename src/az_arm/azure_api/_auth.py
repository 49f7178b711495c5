"""Bearer-token acquisition for Azure Resource Manager calls."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import requests
from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError

from az_arm.azure_api._responses import _error_message, _is_success
from az_arm.errors import AuthenticationError

logger = logging.getLogger(__name__)

AZURE_LOGIN_URL = "https://login.windows.net"
AZURE_MGMT_URL = "https://management.azure.com"
AZURE_MGMT_RESOURCE = "https://management.core.windows.net/"


@dataclass(frozen=True)
class Session:
    """An authenticated view of one subscription.

    The token is kept for the lifetime of the session and never refreshed;
    build a new session once it expires.
    """

    subscription_id: str
    bearer_token: str
    base_url: str

    @classmethod
    def for_subscription(
        cls,
        subscription_id: str,
        bearer_token: str,
        management_url: str = AZURE_MGMT_URL,
    ) -> Session:
        base_url = f"{management_url.rstrip('/')}/subscriptions/{subscription_id}/"
        return cls(subscription_id=subscription_id, bearer_token=bearer_token, base_url=base_url)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.bearer_token}",
        }

    def __repr__(self) -> str:
        return f"Session(subscription_id={self.subscription_id!r}, base_url={self.base_url!r})"


def get_token(
    tenant_id: str,
    client_id: str,
    client_secret: str,
    *,
    login_url: str = AZURE_LOGIN_URL,
    resource: str = AZURE_MGMT_RESOURCE,
    timeout: float | None = None,
) -> str:
    """Exchange application credentials for a bearer token.

    Uses the OAuth2 client-credentials grant against the tenant's token
    endpoint.  Raises :class:`AuthenticationError` unless the response is a
    success carrying ``token_type == "Bearer"`` and an ``access_token``.
    """
    url = f"{login_url.rstrip('/')}/{tenant_id}/oauth2/token"
    form = {
        "resource": resource,
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "client_credentials",
    }
    resp = requests.post(url, data=form, timeout=timeout)

    if not _is_success(resp.status_code):
        detail = _token_error_detail(resp.text)
        logger.warning("Token request for tenant %s failed (%s)", tenant_id, resp.status_code)
        raise AuthenticationError(f"Unable to fetch Access Token for Azure: {detail}")

    try:
        data = resp.json()
    except ValueError:
        data = None
    if (
        isinstance(data, dict)
        and data.get("token_type") == "Bearer"
        and data.get("access_token")
    ):
        logger.info("Acquired bearer token for tenant %s", tenant_id)
        return str(data["access_token"])

    raise AuthenticationError("Unable to fetch Access Token for Azure.")


def _token_error_detail(body: str) -> str:
    """Return the most useful message from an identity endpoint error body."""
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict) and isinstance(data.get("error_description"), str):
        return data["error_description"]
    return _error_message(body)


def get_token_from_credential(credential: TokenCredential, tenant_id: str | None = None) -> str:
    """Return a management-scoped bearer token from an ``azure.identity`` credential.

    Lets callers reuse ``DefaultAzureCredential`` (``az login``, managed
    identity, environment variables) instead of a raw client secret.
    """
    kwargs: dict[str, str] = {}
    if tenant_id:
        kwargs["tenant_id"] = tenant_id
    try:
        token = credential.get_token(f"{AZURE_MGMT_URL}/.default", **kwargs)
    except ClientAuthenticationError as exc:
        logger.warning("Credential %s could not authenticate", type(credential).__name__)
        raise AuthenticationError(str(exc)) from exc
    return token.token


def open_session(
    tenant_id: str,
    subscription_id: str,
    client_id: str,
    client_secret: str,
    *,
    login_url: str = AZURE_LOGIN_URL,
    management_url: str = AZURE_MGMT_URL,
    resource: str = AZURE_MGMT_RESOURCE,
    timeout: float | None = None,
) -> Session:
    """Authenticate and return a :class:`Session` bound to *subscription_id*."""
    token = get_token(
        tenant_id,
        client_id,
        client_secret,
        login_url=login_url,
        resource=resource,
        timeout=timeout,
    )
    return Session.for_subscription(subscription_id, token, management_url)
