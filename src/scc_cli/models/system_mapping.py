"""System mapping and system mapping resource wire records."""

from __future__ import annotations

from pydantic import Field

from scc_cli.models.common import RequestBody, WireModel


class SystemMapping(WireModel):
    """A virtual-to-internal host mapping."""

    virtual_host: str | None = None
    virtual_port: str | None = None
    local_host: str | None = None
    local_port: str | None = None
    creation_date: str | None = None
    protocol: str | None = None
    backend_type: str | None = None
    authentication_mode: str | None = None
    host_in_header: str | None = None
    sid: str | None = None
    total_resources_count: int | None = None
    enabled_resources_count: int | None = None
    description: str | None = None
    sap_router: str | None = None


class SystemMappingRequest(RequestBody):
    virtual_host: str
    virtual_port: str
    local_host: str
    local_port: str
    protocol: str
    backend_type: str
    authentication_mode: str | None = None
    host_in_header: str | None = None
    sid: str | None = None
    description: str | None = None
    sap_router: str | None = None


class SystemMappingResource(WireModel):
    """A URL path exposed through a system mapping."""

    url_path: str | None = Field(default=None, alias="id")
    enabled: bool | None = None
    exact_match_only: bool | None = None
    websocket_upgrade_allowed: bool | None = None
    creation_date: str | None = None
    description: str | None = None


class UpdateSystemMappingResourceRequest(RequestBody):
    enabled: bool | None = None
    exact_match_only: bool | None = None
    websocket_upgrade_allowed: bool | None = None
    description: str | None = None


class CreateSystemMappingResourceRequest(UpdateSystemMappingResourceRequest):
    url_path: str = Field(alias="id")
