"""Credential validation and authentication strategies for the connector."""

from __future__ import annotations

import enum
import os
import ssl
import tempfile

import httpx
from cryptography import x509
from cryptography.hazmat.primitives import serialization

from scc_cli.client.errors import (
    ConfigurationError,
    ConflictingAuthentication,
    InvalidCredentialFormat,
    MissingAuthentication,
)


class AuthMode(str, enum.Enum):
    BASIC = "basic"
    CERTIFICATE = "certificate"


class BasicAuth(httpx.BasicAuth):
    """HTTP Basic auth wrapper."""


def validate_certificate_pem(data: str, field: str) -> None:
    """Raise InvalidCredentialFormat unless *data* holds PEM certificates."""
    try:
        certs = x509.load_pem_x509_certificates(data.encode())
    except ValueError as exc:
        raise InvalidCredentialFormat(field, str(exc)) from exc
    if not certs:
        raise InvalidCredentialFormat(field)


def validate_private_key_pem(data: str, field: str) -> None:
    """Raise InvalidCredentialFormat unless *data* holds an unencrypted PEM key."""
    try:
        serialization.load_pem_private_key(data.encode(), password=None)
    except (ValueError, TypeError) as exc:
        raise InvalidCredentialFormat(field, str(exc)) from exc


def validate_pem_fields(
    ca_certificate: str | None,
    client_certificate: str | None,
    client_key: str | None,
) -> None:
    """Check every non-empty PEM field, first failure wins."""
    if ca_certificate:
        validate_certificate_pem(ca_certificate, "ca_certificate")
    if client_certificate:
        validate_certificate_pem(client_certificate, "client_certificate")
    if client_key:
        validate_private_key_pem(client_key, "client_key")


def resolve_auth_mode(
    username: str | None,
    password: str | None,
    client_certificate: str | None,
    client_key: str | None,
) -> AuthMode:
    """Pick the single authentication mode the credentials describe."""
    basic = bool(username) and bool(password)
    certificate = bool(client_certificate) and bool(client_key)
    if basic and certificate:
        raise ConflictingAuthentication()
    if not basic and not certificate:
        raise MissingAuthentication()
    return AuthMode.BASIC if basic else AuthMode.CERTIFICATE


def build_ssl_context(
    ca_certificate: str | None,
    client_certificate: str | None = None,
    client_key: str | None = None,
) -> ssl.SSLContext | None:
    """Build an SSL context for a custom CA and/or a client key pair.

    Returns ``None`` when neither is given, leaving httpx on the system
    trust store. A supplied CA replaces the system trust store.
    """
    if not ca_certificate and not (client_certificate and client_key):
        return None

    if ca_certificate:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.load_verify_locations(cadata=ca_certificate)
    else:
        context = ssl.create_default_context()

    if client_certificate and client_key:
        _load_client_pair(context, client_certificate, client_key)
    return context


def _load_client_pair(context: ssl.SSLContext, certificate: str, key: str) -> None:
    # ssl only loads key pairs from files
    with tempfile.TemporaryDirectory(prefix="scc-cli-") as tmp:
        cert_file = os.path.join(tmp, "client.crt")
        key_file = os.path.join(tmp, "client.key")
        for path, content in ((cert_file, certificate), (key_file, key)):
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            try:
                os.write(fd, content.encode())
            finally:
                os.close(fd)
        try:
            context.load_cert_chain(certfile=cert_file, keyfile=key_file)
        except ssl.SSLError as exc:
            raise ConfigurationError(
                f"Failed to load client certificate/key: {exc}"
            ) from exc
