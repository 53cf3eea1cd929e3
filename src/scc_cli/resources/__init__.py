"""Resource kinds and the registry the provider and CLI look them up in."""

from __future__ import annotations

from scc_cli.resources.domain_mapping import DomainMappingKind, DomainMappingState
from scc_cli.resources.protocol import ResourceKind, ResourceState
from scc_cli.resources.service_channel import (
    ABAPServiceChannelKind,
    ABAPServiceChannelState,
    K8SServiceChannelKind,
    K8SServiceChannelState,
)
from scc_cli.resources.subaccount import (
    SubaccountKind,
    SubaccountState,
    SubaccountUsingAuthKind,
    SubaccountUsingAuthState,
)
from scc_cli.resources.system_mapping import (
    SystemMappingKind,
    SystemMappingResourceKind,
    SystemMappingResourceState,
    SystemMappingState,
)

KINDS: dict[str, type[ResourceKind]] = {
    kind.name: kind
    for kind in (
        SubaccountKind,
        SubaccountUsingAuthKind,
        SystemMappingKind,
        SystemMappingResourceKind,
        DomainMappingKind,
        K8SServiceChannelKind,
        ABAPServiceChannelKind,
    )
}

__all__ = [
    "ABAPServiceChannelKind",
    "ABAPServiceChannelState",
    "DomainMappingKind",
    "DomainMappingState",
    "K8SServiceChannelKind",
    "K8SServiceChannelState",
    "KINDS",
    "ResourceKind",
    "ResourceState",
    "SubaccountKind",
    "SubaccountState",
    "SubaccountUsingAuthKind",
    "SubaccountUsingAuthState",
    "SystemMappingKind",
    "SystemMappingResourceKind",
    "SystemMappingResourceState",
    "SystemMappingState",
]
