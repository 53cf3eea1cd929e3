"""Shared test fixtures."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from scc_cli.client.auth import BasicAuth
from scc_cli.client.connector import ConnectorClient
from scc_cli.config.manager import ConfigManager
from scc_cli.config.models import ConnectorProfile
from scc_cli.resources.provider import ConnectorProvider

BASE_URL = "https://scc.example.com:8443"
SCC_ENV = (
    "SCC_INSTANCE_URL",
    "SCC_USERNAME",
    "SCC_PASSWORD",
    "SCC_CA_CERTIFICATE",
    "SCC_CLIENT_CERTIFICATE",
    "SCC_CLIENT_KEY",
    "SCC_PROFILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's SCC_* variables and config file out of every test."""
    for name in SCC_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("scc_cli.config.manager.CONFIG_FILE", tmp_path / "default-config.toml")


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ConnectorProfile:
    """Return a sample basic-auth connector profile."""
    return ConnectorProfile(
        name="test-scc",
        url=BASE_URL,
        username="Administrator",
        password="manage",
    )


@pytest.fixture(scope="session")
def pem_material() -> dict[str, str]:
    """A self-signed certificate and its RSA key, PEM encoded."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "scc-cli test")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    cert_pem = cert.public_bytes(serialization.Encoding.PEM).decode()
    key_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    return {"certificate": cert_pem, "key": key_pem}


@pytest.fixture
def client():
    """A basic-auth client for the mocked connector; no probe is issued."""
    with ConnectorClient(BASE_URL, auth=BasicAuth("Administrator", "manage")) as c:
        yield c


@pytest.fixture
def provider(client: ConnectorClient) -> ConnectorProvider:
    return ConnectorProvider(client)


@pytest.fixture
def subaccount_payload() -> dict:
    """Sample GET /subaccounts/{region}/{subaccount} body."""
    return {
        "regionHost": "cf.eu10.hana.ondemand.com",
        "subaccount": "0bcb0012-a982-42f9-bda4-0a5cb15f88c8",
        "locationID": "loc-1",
        "displayName": "Dev subaccount",
        "description": "managed by scc-cli",
        "tunnel": {
            "state": "Connected",
            "connectedSinceTimeStamp": 1730000000000,
            "connections": 0,
            "user": "P000001",
            "subaccountCertificate": {
                "notAfterTimeStamp": 1760000000000,
                "notBeforeTimeStamp": 1730000000000,
                "subjectDN": "CN=0bcb0012,L=loc-1",
                "issuer": "CN=SAP Cloud Platform Client CA",
                "serialNumber": "0a:1b",
            },
            "applicationConnections": [],
            "serviceChannels": [],
        },
    }
