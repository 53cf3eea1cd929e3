"""Single-call request execution with typed response decoding."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import DecodeError
from scc_cli.models.common import RequestBody

logger = logging.getLogger(__name__)

T = TypeVar("T")

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


def serialize_body(body: RequestBody | Mapping[str, Any] | None) -> bytes | None:
    """Render a request body as JSON, or ``None`` when there is none."""
    if body is None:
        return None
    data = body.to_body() if isinstance(body, RequestBody) else dict(body)
    return json.dumps(data).encode()


@overload
def execute(
    client: ConnectorClient,
    method: str,
    path: str,
    body: RequestBody | Mapping[str, Any] | None = ...,
    decode_into: None = ...,
) -> None: ...


@overload
def execute(
    client: ConnectorClient,
    method: str,
    path: str,
    body: RequestBody | Mapping[str, Any] | None,
    decode_into: type[T],
) -> T: ...


def execute(
    client: ConnectorClient,
    method: str,
    path: str,
    body: RequestBody | Mapping[str, Any] | None = None,
    decode_into: Any = None,
) -> Any:
    """Issue one request and optionally decode its JSON body.

    ``decode_into`` is any type pydantic can validate, e.g. a model class
    or ``list[Model]``. HTTP errors surface as ``RequestError`` from the
    client; a 2xx body that does not fit ``decode_into`` raises
    ``DecodeError``.
    """
    method = method.upper()
    if method not in METHODS:
        raise ValueError(f"Invalid request method: {method}")

    content = serialize_body(body)
    kwargs: dict[str, Any] = {}
    if content is not None:
        kwargs["content"] = content
        kwargs["headers"] = {"Content-Type": "application/json"}

    response = client.request(method, path, **kwargs)
    if decode_into is None:
        return None

    try:
        return TypeAdapter(decode_into).validate_json(response.content)
    except ValidationError as exc:
        logger.debug("Cannot decode %s %s body: %r", method, path, response.text)
        raise DecodeError(
            f"Failed to decode response of {method} {path}: {exc}"
        ) from exc
