"""Subaccount resource kinds: credential-based and authentication-data-based."""

from __future__ import annotations

import logging
from typing import Any

from scc_cli.api.paths import (
    subaccount_path,
    subaccount_state_path,
    subaccount_trust_path,
    subaccounts_path,
)
from scc_cli.client.errors import ReconciliationFailure
from scc_cli.client.executor import execute
from scc_cli.models.subaccount import (
    CreateSubaccountRequest,
    CreateSubaccountWithAuthRequest,
    Subaccount,
    SubaccountSummary,
    SubaccountTunnel,
    TunnelStateRequest,
    UpdateSubaccountRequest,
)
from scc_cli.resources.protocol import ResourceKind, ResourceState, Write

logger = logging.getLogger(__name__)

CONNECTED = "Connected"


class SubaccountState(ResourceState):
    """A subaccount registered with cloud user credentials."""

    identity_fields = ("region_host", "subaccount", "cloud_user", "cloud_password")
    import_fields = ("region_host", "subaccount")

    region_host: str
    subaccount: str
    cloud_user: str | None = None
    cloud_password: str | None = None
    location_id: str | None = None
    display_name: str | None = None
    description: str | None = None
    connected: bool | None = None
    tunnel: SubaccountTunnel | None = None


class SubaccountUsingAuthState(ResourceState):
    """A subaccount registered from a downloaded authentication data blob.

    Region host and subaccount id are read out of the blob by the server.
    """

    identity_fields = ("region_host", "subaccount")
    server_assigned = ("region_host", "subaccount")
    import_fields = ("region_host", "subaccount")

    region_host: str | None = None
    subaccount: str | None = None
    authentication_data: str | None = None
    location_id: str | None = None
    display_name: str | None = None
    description: str | None = None
    connected: bool | None = None
    tunnel: SubaccountTunnel | None = None


def _observed(wire: Subaccount) -> dict[str, Any]:
    tunnel = wire.tunnel
    return {
        "location_id": wire.location_id,
        "display_name": wire.display_name,
        "description": wire.description,
        "connected": tunnel.state == CONNECTED if tunnel and tunnel.state else None,
        "tunnel": tunnel,
    }


class _SubaccountBase(ResourceKind):
    wire_model = Subaccount
    toggle_field = "connected"

    def collection_path(self, ref: Any) -> str:
        return subaccounts_path()

    def item_path(self, state: Any) -> str:
        return subaccount_path(state.region_host, state.subaccount)

    def state_path(self, state: Any) -> str:
        return subaccount_state_path(state.region_host, state.subaccount)

    def update_body(self, desired: Any) -> UpdateSubaccountRequest:
        return UpdateSubaccountRequest(
            location_id=desired.location_id,
            display_name=desired.display_name,
            description=desired.description,
        )

    def toggle_body(self, desired: Any) -> TunnelStateRequest | None:
        if desired.connected is None:
            return None
        return TunnelStateRequest(connected=desired.connected)

    def observed(self, wire: Subaccount) -> dict[str, Any]:
        return _observed(wire)

    def fetch_collection(self, ref: Any) -> list[SubaccountSummary]:
        return execute(
            self.client, "GET", subaccounts_path(), decode_into=list[SubaccountSummary],
        )

    def list_records(self, **parent: str) -> list[Any]:
        """List registered subaccounts (summary fields only)."""
        return [
            self.state_model.model_validate({
                "region_host": summary.region_host,
                "subaccount": summary.subaccount,
                "location_id": summary.location_id,
            })
            for summary in self.fetch_collection(None)
        ]


class SubaccountKind(_SubaccountBase):
    name = "subaccount"
    title = "subaccount"
    state_model = SubaccountState

    def create_body(self, desired: SubaccountState) -> CreateSubaccountRequest:
        if not desired.cloud_user or not desired.cloud_password:
            raise ValueError("cloud_user and cloud_password are required to create a subaccount")
        return CreateSubaccountRequest(
            region_host=desired.region_host,
            subaccount=desired.subaccount,
            cloud_user=desired.cloud_user,
            cloud_password=desired.cloud_password,
            location_id=desired.location_id,
            display_name=desired.display_name,
            description=desired.description,
        )


class SubaccountUsingAuthKind(_SubaccountBase):
    name = "subaccount_using_auth"
    title = "subaccount using authentication data"
    state_model = SubaccountUsingAuthState

    def create_body(self, desired: SubaccountUsingAuthState) -> CreateSubaccountWithAuthRequest:
        if not desired.authentication_data:
            raise ValueError("authentication_data is required to create a subaccount")
        return CreateSubaccountWithAuthRequest(
            authentication_data=desired.authentication_data,
            location_id=desired.location_id,
            display_name=desired.display_name,
            description=desired.description,
        )

    def create(self, desired: SubaccountUsingAuthState) -> SubaccountUsingAuthState:
        """Register from authentication data, sync trust, then apply the toggle.

        The POST response is the only place the server-assigned region
        host and subaccount id appear, so it is decoded before anything
        else happens.
        """
        created = execute(
            self.client, "POST", subaccounts_path(), self.create_body(desired), Subaccount,
        )
        if not created.region_host or not created.subaccount:
            raise ReconciliationFailure(
                "The subaccount was created but the response carries no region host or subaccount id"
            )
        anchored = desired.model_copy(update={
            "region_host": created.region_host,
            "subaccount": created.subaccount,
        })

        writes = []
        if created.tunnel and created.tunnel.state == CONNECTED:
            writes.append(Write("POST", subaccount_trust_path(created.region_host, created.subaccount)))
        toggle = self.toggle_body(desired)
        if toggle is not None:
            writes.append(Write("PUT", self.state_path(anchored), toggle))
        wire = self.apply_and_reconcile(writes, lambda: self.fetch(anchored))
        return self.finalize(anchored, wire)
