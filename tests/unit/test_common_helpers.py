"""Tests for shared command helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from scc_cli.client.errors import Diagnostic
from scc_cli.commands._common import check_result, load_document, read_pem
from scc_cli.resources.provider import OperationResult


class TestLoadDocument:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "desired.yaml"
        path.write_text("region_host: cf.eu10.hana.ondemand.com\nport: 3000\nenabled: true\n")
        assert load_document(path) == {
            "region_host": "cf.eu10.hana.ondemand.com",
            "port": 3000,
            "enabled": True,
        }

    def test_json(self, tmp_path: Path):
        path = tmp_path / "state.json"
        path.write_text('{"id": 7, "comment": null}')
        assert load_document(path) == {"id": 7, "comment": None}

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_document(path)

    def test_unparsable(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(ValueError, match="Cannot parse"):
            load_document(path)


class TestReadPem:
    def test_none(self):
        assert read_pem(None) is None

    def test_reads_contents(self, tmp_path: Path, pem_material):
        path = tmp_path / "ca.pem"
        path.write_text(pem_material["certificate"])
        assert read_pem(path) == pem_material["certificate"]


class TestCheckResult:
    def test_ok(self):
        check_result(OperationResult())

    def test_diagnostics_exit(self):
        result = OperationResult(diagnostics=[Diagnostic(summary="error reading the cloud connector subaccount")])
        with pytest.raises(typer.Exit) as exc_info:
            check_result(result)
        assert exc_info.value.exit_code == 1

    def test_not_found_exits_with_not_found_code(self):
        result = OperationResult(diagnostics=[
            Diagnostic(summary="error reading the cloud connector subaccount", error="NotFoundError"),
        ])
        with pytest.raises(typer.Exit) as exc_info:
            check_result(result)
        assert exc_info.value.exit_code == 4
