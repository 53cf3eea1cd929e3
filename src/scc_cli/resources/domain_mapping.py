"""Domain mappings: rewrite an internal domain to the virtual one seen in the cloud."""

from __future__ import annotations

from typing import Any

from scc_cli.api.paths import domain_mapping_path, domain_mappings_path
from scc_cli.client.errors import NotFoundError
from scc_cli.models.domain_mapping import DomainMapping, DomainMappingRequest
from scc_cli.resources.protocol import NaturalKeyKind, ResourceState, find_by_natural_key


class DomainMappingState(ResourceState):
    """The internal domain is both the record key and a mutable field."""

    identity_fields = ("region_host", "subaccount")
    import_fields = ("region_host", "subaccount", "internal_domain")
    parent_fields = ("region_host", "subaccount")

    region_host: str
    subaccount: str
    internal_domain: str
    virtual_domain: str | None = None


class DomainMappingKind(NaturalKeyKind):
    name = "domain_mapping"
    title = "domain mapping"
    state_model = DomainMappingState
    wire_model = DomainMapping

    def collection_path(self, ref: Any) -> str:
        return domain_mappings_path(ref.region_host, ref.subaccount)

    def item_path(self, state: DomainMappingState) -> str:
        return domain_mapping_path(state.region_host, state.subaccount, state.internal_domain)

    def create_body(self, desired: DomainMappingState) -> DomainMappingRequest:
        if desired.virtual_domain is None:
            raise ValueError("virtual_domain is required for a domain mapping")
        return DomainMappingRequest(
            virtual_domain=desired.virtual_domain,
            internal_domain=desired.internal_domain,
        )

    def observed(self, wire: DomainMapping) -> dict[str, Any]:
        return {
            "virtual_domain": wire.virtual_domain,
            "internal_domain": wire.internal_domain,
        }

    def wire_key(self, wire: DomainMapping) -> Any:
        return wire.internal_domain

    def state_key(self, state: DomainMappingState) -> Any:
        return state.internal_domain

    def locate_updated(self, desired: DomainMappingState) -> DomainMapping:
        return self.locate_by_key(desired)

    def locate_existing(self, known: DomainMappingState) -> DomainMapping:
        record = find_by_natural_key(
            self.fetch_collection(known), self.wire_key, self.state_key(known),
        )
        if record is None:
            raise NotFoundError(
                404,
                f"no domain mapping with internal domain {known.internal_domain!r}",
                method="GET",
                url=self.collection_path(known),
            )
        return record
