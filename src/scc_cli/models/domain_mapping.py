"""Domain mapping wire records."""

from __future__ import annotations

from scc_cli.models.common import RequestBody, WireModel


class DomainMapping(WireModel):
    virtual_domain: str | None = None
    internal_domain: str | None = None


class DomainMappingRequest(RequestBody):
    virtual_domain: str
    internal_domain: str
