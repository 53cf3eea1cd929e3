"""Tests for output formatting."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import yaml
from rich.console import Console

from scc_cli.output.formatter import output, records_to_rows, to_data
from scc_cli.output.tables import cell, kv_table, make_table
from scc_cli.resources.domain_mapping import DomainMappingState


def _capture(fn, *args, **kwargs) -> str:
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=200)
    with patch("scc_cli.output.formatter.console", console):
        fn(*args, **kwargs)
    return buf.getvalue()


def _render(table) -> str:
    buf = StringIO()
    Console(file=buf, force_terminal=True, width=120).print(table)
    return buf.getvalue()


class TestTables:
    def test_make_table(self):
        out = _render(make_table("Test", ["A", "B"], [["1", "2"], ["3", None]]))
        assert "Test" in out
        assert "3" in out

    def test_kv_table_masks_secrets(self):
        out = _render(kv_table({"user": "admin", "password": "hunter2"}, secret_keys=["password"]))
        assert "admin" in out
        assert "hunter2" not in out

    def test_cell_renders_nested_as_json(self):
        assert cell({"connected": True}) == '{"connected":true}'
        assert cell(None) == ""
        assert cell(3) == "3"


class TestRecords:
    def test_to_data_models(self):
        state = DomainMappingState(region_host="r", subaccount="s", internal_domain="i")
        assert to_data([state])[0]["internal_domain"] == "i"

    def test_columns_in_first_seen_order(self):
        columns, rows = records_to_rows([{"a": 1}, {"b": 2, "a": 3}])
        assert columns == ["a", "b"]
        assert rows == [[1, None], [3, 2]]


class TestOutput:
    def test_json(self):
        out = _capture(output, {"version": "2.17.0"}, "json")
        assert json.loads(out) == {"version": "2.17.0"}

    def test_yaml_model(self):
        state = DomainMappingState(region_host="r", subaccount="s", internal_domain="i")
        out = _capture(output, state, "yaml")
        assert yaml.safe_load(out)["internal_domain"] == "i"

    def test_csv(self):
        out = _capture(output, [{"kind": "subaccount", "toggle": "connected"}], "csv")
        lines = out.strip().splitlines()
        assert lines[0] == "kind,toggle"
        assert lines[1] == "subaccount,connected"

    def test_csv_single_record(self):
        out = _capture(output, {"a": 1}, "csv")
        assert out.strip().splitlines() == ["a", "1"]

    def test_table_list(self):
        out = _capture(output, [{"name": "dev", "url": "https://scc:8443"}], "table", title="Profiles")
        assert "Profiles" in out
        assert "https://scc:8443" in out

    def test_table_single_record(self):
        out = _capture(output, {"name": "dev"}, "table")
        assert "dev" in out
