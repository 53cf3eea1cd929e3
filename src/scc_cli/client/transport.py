"""Connection setup: credential validation, TLS, and the liveness probe."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from scc_cli.client.auth import (
    AuthMode,
    BasicAuth,
    build_ssl_context,
    resolve_auth_mode,
    validate_pem_fields,
)
from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import (
    AuthenticationRejected,
    ConfigurationError,
    ConnectionFailed,
    MissingAuthentication,
    RequestError,
)
from scc_cli.config.constants import DEFAULT_TIMEOUT, VERSION_PATH
from scc_cli.models.common import ConnectorVersion

if TYPE_CHECKING:
    from scc_cli.config.models import ConnectorProfile

logger = logging.getLogger(__name__)


def validate_base_url(base_url: str | None) -> str:
    """Return *base_url* without a trailing slash, or raise ConfigurationError."""
    if not base_url:
        raise ConfigurationError(
            "The connector instance URL is empty; cannot create the client."
        )
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid connector instance URL {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Invalid connector instance URL {base_url!r}:"
            " must be an absolute URL starting with http:// or https://"
        )
    return base_url.rstrip("/")


def build_client(
    base_url: str | None,
    username: str | None = None,
    password: str | None = None,
    ca_certificate: str | None = None,
    client_certificate: str | None = None,
    client_key: str | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
    probe: bool = True,
) -> ConnectorClient:
    """Validate the credential set and return a ready client.

    Checks run in a fixed order and the first violation wins: base URL,
    PEM fields, authentication mode. Unless *probe* is false the version
    endpoint is called once so bad credentials fail here rather than on
    the first real operation.
    """
    url = validate_base_url(base_url)
    validate_pem_fields(ca_certificate, client_certificate, client_key)
    mode = resolve_auth_mode(username, password, client_certificate, client_key)

    auth: httpx.Auth | None = None
    if mode is AuthMode.BASIC:
        if not username or not password:
            raise MissingAuthentication()
        if url.startswith("http://"):
            logger.warning(
                "Sending basic credentials to %s over plain HTTP", url,
            )
        auth = BasicAuth(username, password)
        context = build_ssl_context(ca_certificate)
    else:
        context = build_ssl_context(ca_certificate, client_certificate, client_key)

    client = ConnectorClient(
        url,
        auth=auth,
        verify=context if context is not None else True,
        timeout=timeout,
        transport=transport,
    )
    logger.debug("Built %s client for %s", mode.value, url)
    if probe:
        try:
            probe_connection(client)
        except Exception:
            client.close()
            raise
    return client


def build_client_from_profile(
    profile: ConnectorProfile,
    *,
    transport: httpx.BaseTransport | None = None,
    probe: bool = True,
) -> ConnectorClient:
    return build_client(
        profile.url,
        profile.username,
        profile.password,
        profile.ca_certificate,
        profile.client_certificate,
        profile.client_key,
        timeout=profile.timeout,
        transport=transport,
        probe=probe,
    )


def probe_connection(client: ConnectorClient) -> ConnectorVersion:
    """Fetch the connector version, classifying failures for configure time."""
    try:
        response = client.get(VERSION_PATH)
    except RequestError as exc:
        if exc.status_code in (401, 403):
            raise AuthenticationRejected(
                f"Authentication rejected with status {exc.status_code}: {exc.body}"
            ) from exc
        raise ConnectionFailed(f"Connection test failed: {exc}") from exc
    try:
        return ConnectorVersion.model_validate_json(response.content)
    except ValidationError:
        logger.debug("Version endpoint returned no version document")
        return ConnectorVersion()
