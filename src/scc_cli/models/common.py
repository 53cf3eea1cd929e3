"""Base models shared by every wire record."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """A JSON object as the connector sends it (camelCase field names)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestBody(WireModel):
    """A typed request body for one endpoint."""

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ConnectorVersion(WireModel):
    """Response of the version endpoint used by the liveness probe."""

    version: str | None = None
