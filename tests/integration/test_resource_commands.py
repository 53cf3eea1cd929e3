"""Integration tests for resource commands — kinds, list, get, apply, delete."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import respx
import yaml
from typer.testing import CliRunner

from scc_cli.app import app

runner = CliRunner()

URL = "https://scc.example.com:8443"
VERSION_URL = f"{URL}/api/v1/connector/version"
REGION = "cf.eu10.hana.ondemand.com"
SUB = "0bcb0012-a982-42f9-bda4-0a5cb15f88c8"
SUBACCOUNT = f"{URL}/api/v1/configuration/subaccounts/{REGION}/{SUB}"
K8S = f"{SUBACCOUNT}/channels/K8S"
COMMON_OPTS = ["--url", URL, "--username", "Administrator", "--password", "manage"]


@pytest.fixture
def probe():
    with respx.mock(assert_all_called=False) as mock:
        mock.get(VERSION_URL).mock(return_value=httpx.Response(200, json={"version": "2.17.1"}))
        yield mock


def channel(**overrides) -> dict:
    record = {"id": 5, "type": "K8S", "k8sCluster": "c.example.com:443", "k8sService": "svc", "port": 3000}
    record.update(overrides)
    return record


class TestKinds:
    def test_kinds_json(self):
        result = runner.invoke(app, ["resource", "kinds", "--format", "json"])
        assert result.exit_code == 0
        kinds = {row["kind"]: row for row in json.loads(result.stdout)}
        assert len(kinds) == 7
        assert kinds["system_mapping"]["import_id"] == "region_host,subaccount,virtual_host,virtual_port"
        assert kinds["subaccount"]["toggle"] == "connected"
        assert kinds["domain_mapping"]["toggle"] == ""

    def test_unknown_kind(self):
        result = runner.invoke(app, ["resource", "get", "destination", "a,b", *COMMON_OPTS])
        assert result.exit_code == 1
        assert "Unknown resource kind" in result.output


class TestList:
    def test_list_channels(self, probe):
        probe.get(K8S).mock(return_value=httpx.Response(200, json=[channel(id=1), channel(id=2, k8sService="b")]))
        result = runner.invoke(app, [
            "resource", "list", "subaccount_k8s_service_channel",
            "--region-host", REGION, "--subaccount", SUB, "--format", "json", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [r["id"] for r in rows] == [1, 2]
        assert rows[0]["region_host"] == REGION

    def test_list_missing_parent(self, probe):
        result = runner.invoke(app, [
            "resource", "list", "domain_mapping", "--region-host", REGION, *COMMON_OPTS,
        ])
        assert result.exit_code == 1
        assert "invalid configuration for the cloud connector domain mapping" in result.output

    def test_list_connection_refused(self):
        with respx.mock:
            respx.get(VERSION_URL).mock(side_effect=httpx.ConnectError("refused"))
            result = runner.invoke(app, [
                "resource", "list", "subaccount", *COMMON_OPTS,
            ])
        assert result.exit_code == 2
        assert "Cannot connect" in result.output


class TestGet:
    def test_get_writes_state_file(self, probe, tmp_path: Path, subaccount_payload):
        probe.get(SUBACCOUNT).mock(return_value=httpx.Response(200, json=subaccount_payload))
        out = tmp_path / "state.yaml"
        result = runner.invoke(app, [
            "resource", "get", "subaccount", f"{REGION},{SUB}",
            "--out", str(out), "--format", "json", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        shown = json.loads(result.stdout)
        assert shown["connected"] is True
        saved = yaml.safe_load(out.read_text())
        assert saved["subaccount"] == SUB
        assert saved["tunnel"]["state"] == "Connected"

    def test_get_malformed_identifier(self, probe):
        result = runner.invoke(app, [
            "resource", "get", "subaccount_k8s_service_channel", f"{REGION},{SUB}", *COMMON_OPTS,
        ])
        assert result.exit_code == 1
        assert "region_host,subaccount,id" in result.output

    def test_get_not_found(self, probe):
        probe.get(f"{K8S}/9").mock(return_value=httpx.Response(404, text="no such channel"))
        result = runner.invoke(app, [
            "resource", "get", "subaccount_k8s_service_channel", f"{REGION},{SUB},9", *COMMON_OPTS,
        ])
        assert result.exit_code == 4
        assert "error importing the cloud connector subaccount K8S service channel" in result.output


class TestApply:
    def _desired(self, tmp_path: Path, **overrides) -> Path:
        doc = {
            "region_host": REGION,
            "subaccount": SUB,
            "k8s_cluster": "c.example.com:443",
            "k8s_service": "svc",
            "port": 3000,
        }
        doc.update(overrides)
        path = tmp_path / "desired.yaml"
        path.write_text(yaml.safe_dump(doc))
        return path

    def test_create_channel(self, probe, tmp_path: Path):
        probe.post(K8S).mock(return_value=httpx.Response(201))
        probe.get(K8S).mock(return_value=httpx.Response(200, json=[channel()]))
        probe.put(f"{K8S}/5/state").mock(return_value=httpx.Response(200))
        probe.get(f"{K8S}/5").mock(return_value=httpx.Response(200, json=channel(enabled=True)))
        out = tmp_path / "state.json"

        result = runner.invoke(app, [
            "resource", "apply", "subaccount_k8s_service_channel",
            "--file", str(self._desired(tmp_path, enabled=True)),
            "--out", str(out), "--format", "json", *COMMON_OPTS,
        ])

        assert result.exit_code == 0, result.output
        state = json.loads(out.read_text())
        assert state["id"] == 5
        assert state["enabled"] is True

    def test_update_identity_change_is_rejected_before_any_write(self, probe, tmp_path: Path):
        known = tmp_path / "known.json"
        known.write_text(json.dumps({
            "region_host": "cf.us10.hana.ondemand.com", "subaccount": SUB, "id": 5,
            "k8s_cluster": "c.example.com:443", "k8s_service": "svc", "port": 3000,
        }))
        result = runner.invoke(app, [
            "resource", "apply", "subaccount_k8s_service_channel",
            "--file", str(self._desired(tmp_path)), "--state", str(known), *COMMON_OPTS,
        ])
        assert result.exit_code == 1
        assert "error updating the cloud connector subaccount K8S service channel" in result.output
        assert [c.request.url.path for c in probe.calls] == ["/api/v1/connector/version"]

    def test_apply_rejects_unknown_field(self, probe, tmp_path: Path):
        result = runner.invoke(app, [
            "resource", "apply", "subaccount_k8s_service_channel",
            "--file", str(self._desired(tmp_path, colour="red")), *COMMON_OPTS,
        ])
        assert result.exit_code == 1

    def test_subaccount_password_masked_in_output(self, probe, tmp_path: Path, subaccount_payload):
        probe.post(f"{URL}/api/v1/configuration/subaccounts").mock(
            return_value=httpx.Response(201, json=subaccount_payload),
        )
        probe.get(SUBACCOUNT).mock(return_value=httpx.Response(200, json=subaccount_payload))
        desired = tmp_path / "subaccount.yaml"
        desired.write_text(yaml.safe_dump({
            "region_host": REGION, "subaccount": SUB,
            "cloud_user": "admin@example.com", "cloud_password": "hunter2",
        }))
        out = tmp_path / "state.yaml"

        result = runner.invoke(app, [
            "resource", "apply", "subaccount", "--file", str(desired),
            "--out", str(out), "--format", "json", *COMMON_OPTS,
        ])

        assert result.exit_code == 0, result.output
        assert "hunter2" not in result.output
        assert yaml.safe_load(out.read_text())["cloud_password"] == "hunter2"


class TestDelete:
    def test_delete(self, probe):
        route = probe.delete(f"{SUBACCOUNT}/domainMappings/internal.corp").mock(
            return_value=httpx.Response(204),
        )
        result = runner.invoke(app, [
            "resource", "delete", "domain_mapping", f"{REGION},{SUB},internal.corp", "--force", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert route.called
        assert "Deleted" in result.output

    def test_delete_already_gone(self, probe):
        probe.delete(f"{K8S}/5").mock(return_value=httpx.Response(404))
        result = runner.invoke(app, [
            "resource", "delete", "subaccount_k8s_service_channel", f"{REGION},{SUB},5", "--force", *COMMON_OPTS,
        ])
        assert result.exit_code == 0

    def test_delete_malformed_identifier(self, probe):
        result = runner.invoke(app, [
            "resource", "delete", "subaccount_k8s_service_channel", f"{REGION},{SUB},abc", "--force", *COMMON_OPTS,
        ])
        assert result.exit_code == 11

    def test_delete_cancelled(self):
        result = runner.invoke(app, [
            "resource", "delete", "subaccount", f"{REGION},{SUB}", *COMMON_OPTS,
        ], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
