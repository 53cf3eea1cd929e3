"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from scc_cli.client.errors import ConfigurationError
from scc_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_CA_CERTIFICATE,
    ENV_CLIENT_CERTIFICATE,
    ENV_CLIENT_KEY,
    ENV_INSTANCE_URL,
    ENV_PASSWORD,
    ENV_PROFILE,
    ENV_USERNAME,
)
from scc_cli.config.models import CLIConfig, ConnectorProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

_CREDENTIAL_ENV = {
    "username": ENV_USERNAME,
    "password": ENV_PASSWORD,
    "ca_certificate": ENV_CA_CERTIFICATE,
    "client_certificate": ENV_CLIENT_CERTIFICATE,
    "client_key": ENV_CLIENT_KEY,
}


class ConfigManager:
    """Manages CLI configuration on disk and resolves connector profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        data = tomllib.loads(raw.decode())
        profiles: dict[str, ConnectorProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ConnectorProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only: profiles hold passwords and private keys
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.rename(self.config_path)

    def add_profile(self, profile: ConnectorProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ConnectorProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_connector(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> ConnectorProfile:
        """Resolve connector connection settings.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        resolved_url = url or os.environ.get(ENV_INSTANCE_URL) or (
            profile.url if profile else None
        )
        if not resolved_url:
            raise ConfigurationError(
                "No connector URL configured. Use 'scc-cli config add' or set "
                f"{ENV_INSTANCE_URL} or pass --url."
            )

        flags = {"username": username, "password": password}
        resolved: dict[str, str | None] = {}
        for field, env_name in _CREDENTIAL_ENV.items():
            resolved[field] = (
                flags.get(field)
                or os.environ.get(env_name)
                or (getattr(profile, field) if profile else None)
            )

        return ConnectorProfile(
            name=profile.name if profile else "cli",
            url=resolved_url.rstrip("/"),
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
            **resolved,
        )
