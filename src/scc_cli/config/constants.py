"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "scc-cli"
APP_AUTHOR = "SCC"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_INSTANCE_URL = "SCC_INSTANCE_URL"
ENV_USERNAME = "SCC_USERNAME"
ENV_PASSWORD = "SCC_PASSWORD"
ENV_CA_CERTIFICATE = "SCC_CA_CERTIFICATE"
ENV_CLIENT_CERTIFICATE = "SCC_CLIENT_CERTIFICATE"
ENV_CLIENT_KEY = "SCC_CLIENT_KEY"
ENV_PROFILE = "SCC_PROFILE"

# API defaults
SUBACCOUNTS_BASE = "/api/v1/configuration/subaccounts"
VERSION_PATH = "/api/v1/connector/version"
DEFAULT_TIMEOUT = 30.0
IMPORT_ID_DELIMITER = ","
