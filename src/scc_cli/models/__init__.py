"""Pydantic wire models for the connector configuration API."""

from scc_cli.models.common import ConnectorVersion, RequestBody, WireModel
from scc_cli.models.domain_mapping import DomainMapping, DomainMappingRequest
from scc_cli.models.service_channel import (
    ABAPServiceChannel,
    ABAPServiceChannelRequest,
    ChannelStateRequest,
    K8SServiceChannel,
    K8SServiceChannelRequest,
    ServiceChannel,
    ServiceChannelState,
)
from scc_cli.models.subaccount import (
    CreateSubaccountRequest,
    CreateSubaccountWithAuthRequest,
    Subaccount,
    SubaccountSummary,
    SubaccountTunnel,
    TunnelStateRequest,
    UpdateSubaccountRequest,
)
from scc_cli.models.system_mapping import (
    CreateSystemMappingResourceRequest,
    SystemMapping,
    SystemMappingRequest,
    SystemMappingResource,
    UpdateSystemMappingResourceRequest,
)

__all__ = [
    "ABAPServiceChannel",
    "ABAPServiceChannelRequest",
    "ChannelStateRequest",
    "ConnectorVersion",
    "CreateSubaccountRequest",
    "CreateSubaccountWithAuthRequest",
    "CreateSystemMappingResourceRequest",
    "DomainMapping",
    "DomainMappingRequest",
    "K8SServiceChannel",
    "K8SServiceChannelRequest",
    "RequestBody",
    "ServiceChannel",
    "ServiceChannelState",
    "Subaccount",
    "SubaccountSummary",
    "SubaccountTunnel",
    "SystemMapping",
    "SystemMappingRequest",
    "SystemMappingResource",
    "TunnelStateRequest",
    "UpdateSubaccountRequest",
    "UpdateSystemMappingResourceRequest",
]
