"""Path templates for the subaccount configuration endpoints.

Every builder returns a path relative to the connector base URL. Only
identifier segments that may carry ``/``, ``+`` or ``-`` go through
:func:`encode_segment`; literal segments are never encoded.
"""

from __future__ import annotations

from scc_cli.config.constants import SUBACCOUNTS_BASE


def encode_segment(raw: str) -> str:
    """Encode an identifier so it survives as a single path segment.

    The replacements run in this order so an escaped ``-`` can never be
    confused with a ``/`` that was turned into ``-``.
    """
    return raw.replace("+", "+2B").replace("-", "+2D").replace("/", "-")


def subaccounts_path() -> str:
    return SUBACCOUNTS_BASE


def subaccount_path(region_host: str, subaccount: str) -> str:
    return f"{SUBACCOUNTS_BASE}/{region_host}/{subaccount}"


def subaccount_state_path(region_host: str, subaccount: str) -> str:
    return f"{subaccount_path(region_host, subaccount)}/state"


def subaccount_trust_path(region_host: str, subaccount: str) -> str:
    return f"{subaccount_path(region_host, subaccount)}/trust"


def domain_mappings_path(region_host: str, subaccount: str) -> str:
    return f"{subaccount_path(region_host, subaccount)}/domainMappings"


def domain_mapping_path(region_host: str, subaccount: str, internal_domain: str) -> str:
    return f"{domain_mappings_path(region_host, subaccount)}/{internal_domain}"


def system_mappings_path(region_host: str, subaccount: str) -> str:
    return f"{subaccount_path(region_host, subaccount)}/systemMappings"


def system_mapping_path(
    region_host: str, subaccount: str, virtual_host: str, virtual_port: str,
) -> str:
    base = system_mappings_path(region_host, subaccount)
    return f"{base}/{virtual_host}:{virtual_port}"


def system_mapping_resources_path(
    region_host: str, subaccount: str, virtual_host: str, virtual_port: str,
) -> str:
    base = system_mapping_path(region_host, subaccount, virtual_host, virtual_port)
    return f"{base}/resources"


def system_mapping_resource_path(
    region_host: str,
    subaccount: str,
    virtual_host: str,
    virtual_port: str,
    resource_id: str,
) -> str:
    base = system_mapping_resources_path(
        region_host, subaccount, virtual_host, virtual_port,
    )
    return f"{base}/{encode_segment(resource_id)}"


def channels_path(region_host: str, subaccount: str, channel_type: str) -> str:
    return f"{subaccount_path(region_host, subaccount)}/channels/{channel_type}"


def channel_path(
    region_host: str, subaccount: str, channel_type: str, channel_id: int,
) -> str:
    return f"{channels_path(region_host, subaccount, channel_type)}/{channel_id}"


def channel_state_path(
    region_host: str, subaccount: str, channel_type: str, channel_id: int,
) -> str:
    return f"{channel_path(region_host, subaccount, channel_type, channel_id)}/state"
