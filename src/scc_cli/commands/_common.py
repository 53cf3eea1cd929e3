"""Shared helpers for CLI commands — client factory, options, document loading."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import NotFoundError, err_console
from scc_cli.client.transport import build_client_from_profile
from scc_cli.config.manager import ConfigManager
from scc_cli.resources.provider import ConnectorProvider, OperationResult

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Connector profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Connector URL override"),
]
UsernameOpt = Annotated[
    str | None,
    typer.Option("--username", help="Basic auth username override"),
]
PasswordOpt = Annotated[
    str | None,
    typer.Option("--password", help="Basic auth password override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]


def make_client(
    profile: str | None,
    url: str | None,
    username: str | None,
    password: str | None,
    *,
    probe: bool = True,
) -> ConnectorClient:
    """Create a ConnectorClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_connector(
        profile_name=profile, url=url, username=username, password=password,
    )
    return build_client_from_profile(resolved, probe=probe)


def make_provider(
    profile: str | None,
    url: str | None,
    username: str | None,
    password: str | None,
) -> ConnectorProvider:
    return ConnectorProvider(make_client(profile, url, username, password))


def load_document(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON state document into a dict."""
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of field names to values")
    return data


def read_pem(path: Path | None) -> str | None:
    """Read PEM contents from *path*, or ``None`` when no path was given."""
    if path is None:
        return None
    return path.read_text()


def check_result(result: OperationResult) -> None:
    """Print diagnostics and exit non-zero when the operation failed."""
    if result.ok:
        return
    for diag in result.diagnostics:
        err_console.print(f"[bold red]Error:[/] {diag.summary}")
        if diag.detail:
            err_console.print(f"  {diag.detail}", markup=False)
    raise typer.Exit(NotFoundError.exit_code if result.not_found else 1)
