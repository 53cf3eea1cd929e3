"""Connector HTTP client."""

from __future__ import annotations

import logging
import ssl
from typing import Any

import httpx

from scc_cli.client.errors import ConnectionFailed, NotFoundError, RequestError
from scc_cli.config.constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class ConnectorClient:
    """Synchronous HTTP client for the connector REST API.

    Authentication is fixed at construction time; every request carries
    it. Requests are never retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth: httpx.Auth | None = None,
        verify: ssl.SSLContext | bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=auth,
            verify=verify,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "*/*"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ConnectorClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.status_code < 400:
            return response
        request = response.request
        error_cls = NotFoundError if response.status_code == 404 else RequestError
        raise error_cls(
            response.status_code,
            response.text,
            method=request.method,
            url=str(request.url),
        )

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise ConnectionFailed(
                f"Cannot connect to connector at {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ConnectionFailed(
                f"Request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise ConnectionFailed(
                f"Invalid URL for connector at {self.base_url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise ConnectionFailed(
                f"Request to {self.base_url} failed: {exc}"
            ) from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return self._handle_response(response)

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)
