"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from scc_cli.config.constants import DEFAULT_TIMEOUT


class ConnectorProfile(BaseModel):
    """A named connector connection profile.

    Certificate fields hold PEM contents, not file paths.
    """

    name: str
    url: str = Field(description="Connector base URL, e.g. https://scc:8443")
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    ca_certificate: str | None = Field(
        default=None, description="PEM CA certificate used to verify the connector",
    )
    client_certificate: str | None = Field(
        default=None, description="PEM client certificate for mutual TLS",
    )
    client_key: str | None = Field(
        default=None, description="PEM client private key for mutual TLS",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_mode(self) -> str:
        has_basic = bool(self.username) and bool(self.password)
        has_cert = bool(self.client_certificate) and bool(self.client_key)
        if has_basic and has_cert:
            return "conflict"
        if has_basic:
            return "basic"
        if has_cert:
            return "certificate"
        return "none"


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ConnectorProfile] = Field(default_factory=dict)
