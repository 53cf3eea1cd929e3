"""Tests for the connector HTTP client."""

import httpx
import pytest
import respx

from scc_cli.client.auth import BasicAuth
from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import ConnectionFailed, NotFoundError, RequestError

BASE = "https://scc.example.com:8443"


class TestConnectorClient:
    @respx.mock
    def test_get(self):
        route = respx.get(f"{BASE}/api/v1/connector/version").mock(
            return_value=httpx.Response(200, json={"version": "2.17.0"})
        )
        with ConnectorClient(f"{BASE}/", auth=BasicAuth("a", "b")) as client:
            resp = client.get("/api/v1/connector/version")
        assert resp.json() == {"version": "2.17.0"}
        assert route.calls.last.request.headers["Accept"] == "*/*"

    @respx.mock
    def test_not_found(self):
        respx.get(f"{BASE}/missing").mock(return_value=httpx.Response(404, text="nope"))
        with ConnectorClient(BASE) as client, pytest.raises(NotFoundError) as exc_info:
            client.get("/missing")
        assert exc_info.value.url == f"{BASE}/missing"
        assert exc_info.value.body == "nope"

    @respx.mock
    def test_error_status(self):
        respx.put(f"{BASE}/x").mock(return_value=httpx.Response(409, text="conflict"))
        with ConnectorClient(BASE) as client, pytest.raises(RequestError, match="409: conflict"):
            client.put("/x")

    @respx.mock
    def test_connect_error(self):
        respx.get(f"{BASE}/x").mock(side_effect=httpx.ConnectError("refused"))
        with ConnectorClient(BASE) as client, pytest.raises(ConnectionFailed, match="Cannot connect"):
            client.get("/x")

    @respx.mock
    def test_timeout(self):
        respx.get(f"{BASE}/x").mock(side_effect=httpx.ReadTimeout("slow"))
        with ConnectorClient(BASE) as client, pytest.raises(ConnectionFailed, match="timed out"):
            client.get("/x")

    @respx.mock
    def test_other_transport_error(self):
        respx.delete(f"{BASE}/x").mock(side_effect=httpx.RemoteProtocolError("eof"))
        with ConnectorClient(BASE) as client, pytest.raises(ConnectionFailed):
            client.delete("/x")
