"""Subaccount wire records and request bodies."""

from __future__ import annotations

from pydantic import Field

from scc_cli.models.common import RequestBody, WireModel


class SubaccountCertificate(WireModel):
    not_after_time_stamp: int | None = None
    not_before_time_stamp: int | None = None
    subject_dn: str | None = Field(default=None, alias="subjectDN")
    issuer: str | None = None
    serial_number: str | None = None


class ApplicationConnection(WireModel):
    connection_count: int | None = None
    name: str | None = None
    type: str | None = None


class TunnelServiceChannel(WireModel):
    type: str | None = None
    state: str | None = None
    details: str | None = None
    comment: str | None = None


class SubaccountTunnel(WireModel):
    """Tunnel status reported for a subaccount."""

    state: str | None = None
    connected_since_time_stamp: int | None = None
    connections: int | None = None
    user: str | None = None
    subaccount_certificate: SubaccountCertificate | None = None
    application_connections: list[ApplicationConnection] = Field(default_factory=list)
    service_channels: list[TunnelServiceChannel] = Field(default_factory=list)


class Subaccount(WireModel):
    """A subaccount as returned by ``GET /subaccounts/{region}/{subaccount}``."""

    region_host: str | None = None
    subaccount: str | None = None
    location_id: str | None = Field(default=None, alias="locationID")
    display_name: str | None = None
    description: str | None = None
    tunnel: SubaccountTunnel | None = None


class SubaccountSummary(WireModel):
    """An entry of ``GET /subaccounts``."""

    region_host: str | None = None
    subaccount: str | None = None
    location_id: str | None = Field(default=None, alias="locationID")


class CreateSubaccountRequest(RequestBody):
    region_host: str
    subaccount: str
    cloud_user: str
    cloud_password: str
    location_id: str | None = Field(default=None, alias="locationID")
    display_name: str | None = None
    description: str | None = None


class CreateSubaccountWithAuthRequest(RequestBody):
    authentication_data: str
    location_id: str | None = Field(default=None, alias="locationID")
    display_name: str | None = None
    description: str | None = None


class UpdateSubaccountRequest(RequestBody):
    location_id: str | None = Field(default=None, alias="locationID")
    display_name: str | None = None
    description: str | None = None


class TunnelStateRequest(RequestBody):
    connected: bool
