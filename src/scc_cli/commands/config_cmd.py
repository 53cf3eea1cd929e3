"""Config commands — manage connector profiles."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from scc_cli.client.errors import error_handler
from scc_cli.client.transport import build_client_from_profile, probe_connection
from scc_cli.commands._common import read_pem
from scc_cli.config.constants import DEFAULT_TIMEOUT
from scc_cli.config.manager import ConfigManager
from scc_cli.config.models import ConnectorProfile
from scc_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage connector profiles and CLI configuration.")
console = Console()

SECRET_FIELDS = ("password", "client_key")
PEM_FIELDS = ("ca_certificate", "client_certificate", "client_key")

PemFileOpt = Optional[Path]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _ask_pem(label: str, required: bool = False) -> str | None:
    while True:
        raw = Prompt.ask(label, default=None if required else "")
        if not raw:
            if required:
                continue
            return None
        path = Path(raw).expanduser()
        if path.is_file():
            return path.read_text()
        console.print(f"[red]File not found: {path}[/]")


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard — create your first connector profile."""
    mgr = _get_manager()
    console.print("[bold]Cloud Connector CLI Setup Wizard[/]\n")

    name = Prompt.ask("Profile name", default="default")
    url = Prompt.ask("Connector URL (e.g. https://scc.example.com:8443)")
    mode = Prompt.ask("Authentication", choices=["basic", "certificate"], default="basic")

    username = password = client_certificate = client_key = None
    if mode == "basic":
        username = Prompt.ask("Username", default="Administrator")
        password = Prompt.ask("Password", password=True)
    else:
        client_certificate = _ask_pem("Client certificate PEM file", required=True)
        client_key = _ask_pem("Client key PEM file", required=True)
    ca_certificate = _ask_pem("CA certificate PEM file (blank for system trust store)")

    profile = ConnectorProfile(
        name=name,
        url=url,
        username=username,
        password=password,
        ca_certificate=ca_certificate,
        client_certificate=client_certificate,
        client_key=client_key,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Connector URL")],
    username: Annotated[Optional[str], typer.Option("--username", help="Basic auth username")] = None,
    password: Annotated[Optional[str], typer.Option("--password", help="Basic auth password")] = None,
    ca_cert: Annotated[PemFileOpt, typer.Option("--ca-cert", help="CA certificate PEM file", exists=True, dir_okay=False)] = None,
    client_cert: Annotated[PemFileOpt, typer.Option("--client-cert", help="Client certificate PEM file", exists=True, dir_okay=False)] = None,
    client_key: Annotated[PemFileOpt, typer.Option("--client-key", help="Client private key PEM file", exists=True, dir_okay=False)] = None,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = DEFAULT_TIMEOUT,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a connector profile. Certificate files are stored as PEM contents."""
    mgr = _get_manager()
    profile = ConnectorProfile(
        name=name,
        url=url,
        username=username,
        password=password,
        ca_certificate=read_pem(ca_cert),
        client_certificate=read_pem(client_cert),
        client_key=read_pem(client_key),
        timeout=timeout,
    )
    if profile.auth_mode == "conflict":
        console.print(
            "[yellow]Warning: profile has both basic and certificate credentials;"
            " connecting with it will fail.[/]"
        )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'scc-cli config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    records = [
        {
            "name": name,
            "url": p.url,
            "auth": p.auth_mode,
            "ca": "yes" if p.ca_certificate else "",
            "default": "*" if name == default else "",
        }
        for name, p in profiles.items()
    ]
    output(records, fmt, title="Connector Profiles")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details with secrets masked."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    for field in SECRET_FIELDS:
        if field in data:
            data[field] = "***"
    for field in PEM_FIELDS:
        if field in data and data[field] != "***":
            data[field] = "<PEM>"
    data["auth_mode"] = profile.auth_mode

    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default connector profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity and credentials against a connector."""
    mgr = _get_manager()
    profile = mgr.resolve_connector(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with build_client_from_profile(profile, probe=False) as client:
        info = probe_connection(client)
        console.print(f"[green]Connected![/] Cloud Connector v{info.version or '?'}")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a connector profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
