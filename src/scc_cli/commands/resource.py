"""Resource commands — lifecycle operations for every connector resource kind.

Kinds are addressed by name, for example:
  - ``subaccount``
  - ``system_mapping``
  - ``subaccount_k8s_service_channel``

Use ``resource kinds`` to list them with their import identifier format.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
import yaml
from rich.console import Console
from rich.prompt import Confirm

from scc_cli.client.errors import error_handler
from scc_cli.commands._common import (
    FormatOpt,
    PasswordOpt,
    ProfileOpt,
    UrlOpt,
    UsernameOpt,
    check_result,
    load_document,
    make_provider,
)
from scc_cli.config.constants import IMPORT_ID_DELIMITER
from scc_cli.output.formatter import output
from scc_cli.output.tables import MASK
from scc_cli.resources import KINDS
from scc_cli.resources.protocol import ResourceState

app = typer.Typer(
    name="resource",
    help="Create, read, update, delete and import connector resources.",
)
console = Console()

SECRET_STATE_FIELDS = ("cloud_password", "authentication_data")

KindArg = Annotated[str, typer.Argument(help="Resource kind (see 'resource kinds')")]
ImportIdArg = Annotated[
    str,
    typer.Argument(help="Comma-separated identity fields, e.g. region_host,subaccount"),
]


def _validate_kind(kind: str) -> str:
    if kind not in KINDS:
        console.print(
            f"[red]Unknown resource kind '{kind}'. "
            "Run 'scc-cli resource kinds' to list them.[/]"
        )
        raise typer.Exit(1)
    return kind


def _display(state: ResourceState) -> dict[str, Any]:
    data = state.model_dump(mode="json", exclude_none=True)
    for field in SECRET_STATE_FIELDS:
        if data.get(field):
            data[field] = MASK
    return data


def _write_state(state: ResourceState, path: Path) -> None:
    data = state.model_dump(mode="json", exclude_none=True)
    if path.suffix in (".yaml", ".yml"):
        path.write_text(yaml.safe_dump(data, sort_keys=False))
    else:
        path.write_text(json.dumps(data, indent=2) + "\n")


@app.command()
@error_handler
def kinds(
    fmt: FormatOpt = "table",
) -> None:
    """List resource kinds and their import identifier format."""
    records = [
        {
            "kind": name,
            "title": kind.title,
            "import_id": IMPORT_ID_DELIMITER.join(kind.state_model.import_fields),
            "toggle": kind.toggle_field or "",
        }
        for name, kind in sorted(KINDS.items())
    ]
    output(records, fmt, title="Resource Kinds")


@app.command("list")
@error_handler
def list_resources(
    kind: KindArg,
    region_host: Annotated[Optional[str], typer.Option("--region-host", help="Region host")] = None,
    subaccount: Annotated[Optional[str], typer.Option("--subaccount", help="Subaccount ID")] = None,
    virtual_host: Annotated[Optional[str], typer.Option("--virtual-host", help="System mapping virtual host")] = None,
    virtual_port: Annotated[Optional[str], typer.Option("--virtual-port", help="System mapping virtual port")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List every record of KIND under the given parent."""
    _validate_kind(kind)
    given = {
        "region_host": region_host,
        "subaccount": subaccount,
        "virtual_host": virtual_host,
        "virtual_port": virtual_port,
    }
    parent = {
        field: value
        for field, value in given.items()
        if value is not None and field in KINDS[kind].state_model.parent_fields
    }
    with make_provider(profile, url, username, password) as provider:
        result = provider.run(kind, "list", parent=parent)
        check_result(result)
        output([_display(s) for s in result.states], fmt, title=f"Resources: {kind}")


@app.command()
@error_handler
def get(
    kind: KindArg,
    import_id: ImportIdArg,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the state record to a file")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Import one record by its identifier and show its current state."""
    _validate_kind(kind)
    with make_provider(profile, url, username, password) as provider:
        result = provider.run(kind, "import", import_id=import_id)
        check_result(result)
        state = result.states[0]
        if out:
            _write_state(state, out)
        output(_display(state), fmt, title=f"{kind}: {import_id}")


@app.command()
@error_handler
def apply(
    kind: KindArg,
    desired_file: Annotated[
        Path,
        typer.Option("--file", "-f", help="Desired state (YAML or JSON)", exists=True, dir_okay=False),
    ],
    known_file: Annotated[
        Optional[Path],
        typer.Option("--state", help="Last known state; update instead of create", exists=True, dir_okay=False),
    ] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the new state record to a file")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: Annotated[str, typer.Option("--format", help="Output format")] = "table",
) -> None:
    """Create a record from a desired state, or update it when --state is given."""
    _validate_kind(kind)
    with make_provider(profile, url, username, password) as provider:
        desired = provider.parse_state(kind, load_document(desired_file))
        if known_file is None:
            result = provider.run(kind, "create", desired=desired)
        else:
            known = provider.parse_state(kind, load_document(known_file))
            result = provider.run(kind, "update", desired=desired, known=known)
        check_result(result)
        state = result.states[0]
        if out:
            _write_state(state, out)
            console.print(f"[green]State written to {out}[/]")
        output(_display(state), fmt, title=f"{kind} applied")


@app.command()
@error_handler
def delete(
    kind: KindArg,
    import_id: ImportIdArg,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
) -> None:
    """Delete one record. Deleting a record that is already gone succeeds."""
    _validate_kind(kind)
    if not force and not Confirm.ask(f"Delete {kind} '{import_id}'?"):
        console.print("Cancelled.")
        return
    with make_provider(profile, url, username, password) as provider:
        known = provider.kind(kind).parse_import(import_id)
        result = provider.run(kind, "delete", known=known)
        check_result(result)
        console.print(f"[green]Deleted {kind} '{import_id}'.[/]")
