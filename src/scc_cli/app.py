"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from scc_cli import __version__
from scc_cli.client.errors import err_console
from scc_cli.commands import config_cmd, connector, resource

app = typer.Typer(
    name="scc-cli",
    help="CLI tool for the SAP Cloud Connector configuration REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"scc-cli {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through Rich; debug level when verbose."""
    root = logging.getLogger("scc_cli")
    root.handlers.clear()
    root.addHandler(RichHandler(console=err_console, show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request and protocol step."),
) -> None:
    """Cloud Connector CLI — manage subaccounts, mappings, and service channels."""
    configure_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(connector.app, name="connector")
app.add_typer(resource.app, name="resource")


def main() -> None:
    app()
