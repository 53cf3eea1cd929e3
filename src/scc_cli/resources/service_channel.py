"""Subaccount service channels (K8S and ABAP Cloud).

The server allocates the numeric channel id, so a freshly created
channel is found again by its natural key in the channel collection.
"""

from __future__ import annotations

from typing import Any

from scc_cli.api.paths import channel_path, channel_state_path, channels_path
from scc_cli.models.service_channel import (
    ABAPServiceChannel,
    ABAPServiceChannelRequest,
    ChannelStateRequest,
    K8SServiceChannel,
    K8SServiceChannelRequest,
    ServiceChannel,
    ServiceChannelState,
)
from scc_cli.resources.protocol import NaturalKeyKind, ResourceState, wire_fields


class ServiceChannelStateBase(ResourceState):
    identity_fields = ("region_host", "subaccount", "id")
    server_assigned = ("id",)
    import_fields = ("region_host", "subaccount", "id")
    parent_fields = ("region_host", "subaccount")

    region_host: str
    subaccount: str
    id: int | None = None
    type: str | None = None
    port: int | None = None
    enabled: bool | None = None
    connections: int | None = None
    comment: str | None = None
    state: ServiceChannelState | None = None


class K8SServiceChannelState(ServiceChannelStateBase):
    k8s_cluster: str | None = None
    k8s_service: str | None = None


class ABAPServiceChannelState(ServiceChannelStateBase):
    abap_cloud_tenant_host: str | None = None
    instance_number: int | None = None


class _ServiceChannelKind(NaturalKeyKind):
    channel_type: str
    toggle_field = "enabled"

    def collection_path(self, ref: Any) -> str:
        return channels_path(ref.region_host, ref.subaccount, self.channel_type)

    def item_path(self, state: Any) -> str:
        return channel_path(state.region_host, state.subaccount, self.channel_type, state.id)

    def state_path(self, state: Any) -> str:
        return channel_state_path(
            state.region_host, state.subaccount, self.channel_type, state.id,
        )

    def toggle_body(self, desired: Any) -> ChannelStateRequest | None:
        if desired.enabled is None:
            return None
        return ChannelStateRequest(enabled=desired.enabled)

    def observed(self, wire: ServiceChannel) -> dict[str, Any]:
        return wire_fields(wire)


class K8SServiceChannelKind(_ServiceChannelKind):
    name = "subaccount_k8s_service_channel"
    title = "subaccount K8S service channel"
    state_model = K8SServiceChannelState
    wire_model = K8SServiceChannel
    channel_type = "K8S"

    def create_body(self, desired: K8SServiceChannelState) -> K8SServiceChannelRequest:
        if not desired.k8s_cluster or not desired.k8s_service or desired.port is None:
            raise ValueError("k8s_cluster, k8s_service and port are required for a K8S channel")
        return K8SServiceChannelRequest(
            k8s_cluster=desired.k8s_cluster,
            k8s_service=desired.k8s_service,
            port=desired.port,
            connections=desired.connections,
            comment=desired.comment,
        )

    def wire_key(self, wire: K8SServiceChannel) -> Any:
        return (wire.k8s_cluster, wire.k8s_service)

    def state_key(self, state: K8SServiceChannelState) -> Any:
        return (state.k8s_cluster, state.k8s_service)


class ABAPServiceChannelKind(_ServiceChannelKind):
    name = "subaccount_abap_service_channel"
    title = "subaccount ABAP service channel"
    state_model = ABAPServiceChannelState
    wire_model = ABAPServiceChannel
    channel_type = "ABAPCloud"

    def create_body(self, desired: ABAPServiceChannelState) -> ABAPServiceChannelRequest:
        if not desired.abap_cloud_tenant_host or desired.instance_number is None:
            raise ValueError(
                "abap_cloud_tenant_host and instance_number are required for an ABAP channel"
            )
        return ABAPServiceChannelRequest(
            abap_cloud_tenant_host=desired.abap_cloud_tenant_host,
            instance_number=desired.instance_number,
            connections=desired.connections,
            comment=desired.comment,
        )

    def wire_key(self, wire: ABAPServiceChannel) -> Any:
        return wire.abap_cloud_tenant_host

    def state_key(self, state: ABAPServiceChannelState) -> Any:
        return state.abap_cloud_tenant_host
