"""E2E test configuration — custom CLI options for a live connector."""

from __future__ import annotations

import pytest


def pytest_addoption(parser):
    parser.addoption("--connector-url", action="store", default=None)
    parser.addoption("--connector-username", action="store", default=None)
    parser.addoption("--connector-password", action="store", default=None)
    parser.addoption("--region-host", action="store", default=None)
    parser.addoption("--subaccount", action="store", default=None)


@pytest.fixture
def conn_opts(request):
    url = request.config.getoption("--connector-url")
    username = request.config.getoption("--connector-username")
    password = request.config.getoption("--connector-password")
    if not url or not username or not password:
        pytest.skip("Live connector credentials not provided")
    return ["--url", url, "--username", username, "--password", password]


@pytest.fixture
def subaccount_ref(request):
    region_host = request.config.getoption("--region-host")
    subaccount = request.config.getoption("--subaccount")
    if not region_host or not subaccount:
        pytest.skip("No existing subaccount given (--region-host/--subaccount)")
    return region_host, subaccount
