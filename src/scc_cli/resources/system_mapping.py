"""System mappings and the URL-path resources exposed through them."""

from __future__ import annotations

from typing import Any

from scc_cli.api.paths import (
    system_mapping_path,
    system_mapping_resource_path,
    system_mapping_resources_path,
    system_mappings_path,
)
from scc_cli.models.system_mapping import (
    CreateSystemMappingResourceRequest,
    SystemMapping,
    SystemMappingRequest,
    SystemMappingResource,
    UpdateSystemMappingResourceRequest,
)
from scc_cli.resources.protocol import ResourceKind, ResourceState, wire_fields


class SystemMappingState(ResourceState):
    identity_fields = ("region_host", "subaccount", "virtual_host", "virtual_port")
    import_fields = ("region_host", "subaccount", "virtual_host", "virtual_port")
    parent_fields = ("region_host", "subaccount")

    region_host: str
    subaccount: str
    virtual_host: str
    virtual_port: str
    local_host: str | None = None
    local_port: str | None = None
    protocol: str | None = None
    backend_type: str | None = None
    authentication_mode: str | None = None
    host_in_header: str | None = None
    sid: str | None = None
    description: str | None = None
    sap_router: str | None = None
    creation_date: str | None = None
    total_resources_count: int | None = None
    enabled_resources_count: int | None = None


class SystemMappingKind(ResourceKind):
    """Virtual host:port to internal host:port mapping."""

    name = "system_mapping"
    title = "system mapping"
    state_model = SystemMappingState
    wire_model = SystemMapping

    def collection_path(self, ref: Any) -> str:
        return system_mappings_path(ref.region_host, ref.subaccount)

    def item_path(self, state: SystemMappingState) -> str:
        return system_mapping_path(
            state.region_host, state.subaccount, state.virtual_host, state.virtual_port,
        )

    def create_body(self, desired: SystemMappingState) -> SystemMappingRequest:
        return SystemMappingRequest.model_validate(
            desired.model_dump(
                include=set(SystemMappingRequest.model_fields), exclude_none=True,
            )
        )

    def observed(self, wire: SystemMapping) -> dict[str, Any]:
        return wire_fields(wire)


class SystemMappingResourceState(ResourceState):
    identity_fields = (
        "region_host", "subaccount", "virtual_host", "virtual_port", "url_path",
    )
    import_fields = identity_fields
    parent_fields = ("region_host", "subaccount", "virtual_host", "virtual_port")

    region_host: str
    subaccount: str
    virtual_host: str
    virtual_port: str
    url_path: str
    enabled: bool | None = None
    exact_match_only: bool | None = None
    websocket_upgrade_allowed: bool | None = None
    description: str | None = None
    creation_date: str | None = None


class SystemMappingResourceKind(ResourceKind):
    """A URL path prefix reachable through a system mapping.

    The path is the record's id and is encoded before it goes into the
    item URL.
    """

    name = "system_mapping_resource"
    title = "system mapping resource"
    state_model = SystemMappingResourceState
    wire_model = SystemMappingResource

    def collection_path(self, ref: Any) -> str:
        return system_mapping_resources_path(
            ref.region_host, ref.subaccount, ref.virtual_host, ref.virtual_port,
        )

    def item_path(self, state: SystemMappingResourceState) -> str:
        return system_mapping_resource_path(
            state.region_host,
            state.subaccount,
            state.virtual_host,
            state.virtual_port,
            state.url_path,
        )

    def create_body(
        self, desired: SystemMappingResourceState,
    ) -> CreateSystemMappingResourceRequest:
        return CreateSystemMappingResourceRequest(
            url_path=desired.url_path,
            enabled=desired.enabled,
            exact_match_only=desired.exact_match_only,
            websocket_upgrade_allowed=desired.websocket_upgrade_allowed,
            description=desired.description,
        )

    def update_body(
        self, desired: SystemMappingResourceState,
    ) -> UpdateSystemMappingResourceRequest:
        return UpdateSystemMappingResourceRequest(
            enabled=desired.enabled,
            exact_match_only=desired.exact_match_only,
            websocket_upgrade_allowed=desired.websocket_upgrade_allowed,
            description=desired.description,
        )

    def observed(self, wire: SystemMappingResource) -> dict[str, Any]:
        return wire_fields(wire)
