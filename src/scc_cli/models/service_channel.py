"""Service channel wire records (K8S and ABAP Cloud)."""

from __future__ import annotations

from pydantic import Field

from scc_cli.models.common import RequestBody, WireModel


class ServiceChannelState(WireModel):
    connected: bool | None = None
    opened_connections: int | None = None
    connected_since_time_stamp: int | None = None


class ServiceChannel(WireModel):
    """Fields common to every service channel type."""

    id: int | None = None
    type: str | None = None
    port: int | None = None
    enabled: bool | None = None
    connections: int | None = None
    comment: str | None = None
    state: ServiceChannelState | None = None


class K8SServiceChannel(ServiceChannel):
    k8s_cluster: str | None = Field(default=None, alias="k8sCluster")
    k8s_service: str | None = Field(default=None, alias="k8sService")


class ABAPServiceChannel(ServiceChannel):
    abap_cloud_tenant_host: str | None = None
    instance_number: int | None = None


class K8SServiceChannelRequest(RequestBody):
    k8s_cluster: str = Field(alias="k8sCluster")
    k8s_service: str = Field(alias="k8sService")
    port: int
    connections: int | None = None
    comment: str | None = None


class ABAPServiceChannelRequest(RequestBody):
    abap_cloud_tenant_host: str
    instance_number: int
    connections: int | None = None
    comment: str | None = None


class ChannelStateRequest(RequestBody):
    enabled: bool
