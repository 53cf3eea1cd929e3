"""Output dispatcher — renders state records in table, JSON, YAML, or CSV format."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console

from scc_cli.output.tables import cell, kv_table, make_table

console = Console()


def to_data(data: Any) -> Any:
    """Convert models (or lists of models) into plain JSON-compatible data."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [to_data(item) for item in data]
    return data


def records_to_rows(
    records: Sequence[dict[str, Any]], columns: Sequence[str] | None = None,
) -> tuple[list[str], list[list[Any]]]:
    """Columns (first-seen order unless given) and rows for a list of records."""
    if columns is None:
        seen: dict[str, None] = {}
        for record in records:
            seen.update(dict.fromkeys(record))
        columns = list(seen)
    rows = [[record.get(col) for col in columns] for record in records]
    return list(columns), rows


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(to_data(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    console.print(
        yaml.safe_dump(to_data(data), default_flow_style=False, sort_keys=False), end="", markup=False,
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows([[cell(v) for v in row] for row in rows])
    console.print(buf.getvalue(), end="", markup=False)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    title: str | None = None,
    secret_keys: Sequence[str] = (),
) -> None:
    """Print data as a Rich table: one row per record, or key/value for one record."""
    plain = to_data(data)
    if isinstance(plain, dict):
        console.print(kv_table(plain, title=title, secret_keys=secret_keys))
    elif isinstance(plain, list):
        cols, rows = records_to_rows(plain, columns)
        console.print(make_table(title, cols, rows))
    else:
        console.print(plain)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    title: str | None = None,
    secret_keys: Sequence[str] = (),
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        plain = to_data(data)
        records = plain if isinstance(plain, list) else [plain]
        output_csv(*records_to_rows(records, columns))
    else:
        output_table(data, columns=columns, title=title, secret_keys=secret_keys)
