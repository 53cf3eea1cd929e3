"""Connector commands — version and connectivity."""

from __future__ import annotations

import typer

from scc_cli.client.errors import error_handler
from scc_cli.client.transport import probe_connection
from scc_cli.commands._common import (
    FormatOpt,
    PasswordOpt,
    ProfileOpt,
    UrlOpt,
    UsernameOpt,
    make_client,
)
from scc_cli.output.formatter import output

app = typer.Typer(name="connector", help="Connector version and connectivity.")


@app.command()
@error_handler
def version(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the connector version."""
    with make_client(profile, url, username, password, probe=False) as client:
        info = probe_connection(client)
        output(
            {"url": client.base_url, "version": info.version or "unknown"},
            fmt,
            title="Cloud Connector",
        )
