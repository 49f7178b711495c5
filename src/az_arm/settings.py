"""Client settings loaded from environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ArmSettings(BaseSettings):
    """Configuration for an :class:`~az_arm.client.ArmClient`.

    Values are read from ``AZURE_*`` environment variables (case-insensitive)
    and optionally from a ``.env`` file in the working directory.
    ``AZURE_API_VERSIONS`` takes a JSON object merged over the default
    API-version table.
    """

    tenant_id: str = ""
    subscription_id: str = ""
    client_id: str = ""
    client_secret: str = ""

    login_url: str = "https://login.windows.net"
    management_url: str = "https://management.azure.com"
    resource: str = "https://management.core.windows.net/"

    request_timeout: float | None = None
    api_versions: dict[str, str] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix="AZURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("login_url", "management_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def require_credentials(self) -> None:
        """Raise ``ValueError`` naming every credential variable left unset."""
        missing: list[str] = []
        if not self.tenant_id:
            missing.append("AZURE_TENANT_ID")
        if not self.subscription_id:
            missing.append("AZURE_SUBSCRIPTION_ID")
        if not self.client_id:
            missing.append("AZURE_CLIENT_ID")
        if not self.client_secret:
            missing.append("AZURE_CLIENT_SECRET")
        if missing:
            raise ValueError(f"Connecting requires {', '.join(missing)} to be set.")
