"""Host-facing entry point: configure once, then run lifecycle operations."""

from __future__ import annotations

import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field

from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import Diagnostic, NotFoundError, SCCError
from scc_cli.client.transport import build_client_from_profile
from scc_cli.config.models import ConnectorProfile
from scc_cli.resources import KINDS
from scc_cli.resources.protocol import ResourceKind, ResourceState

logger = logging.getLogger(__name__)

Operation = Literal["create", "read", "update", "delete", "import", "list"]

_VERBS: dict[str, str] = {
    "create": "creating",
    "read": "reading",
    "update": "updating",
    "delete": "deleting",
    "import": "importing",
    "list": "reading",
}


class OperationResult(BaseModel):
    """Outcome of one operation: new state record(s) or diagnostics."""

    states: list[ResourceState] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def state(self) -> ResourceState | None:
        return self.states[0] if self.states else None

    @property
    def not_found(self) -> bool:
        """True when the operation failed because the remote record does not exist."""
        return any(d.error == NotFoundError.__name__ for d in self.diagnostics)


class ConnectorProvider:
    """Holds the connector client and dispatches operations to resource kinds.

    The client is passed explicitly; tests inject one built on a mock
    transport.
    """

    def __init__(self, client: ConnectorClient | None = None) -> None:
        self._client = client

    @property
    def client(self) -> ConnectorClient:
        if self._client is None:
            raise SCCError("Provider is not configured; call configure() first")
        return self._client

    def configure(
        self,
        profile: ConnectorProfile,
        *,
        transport: httpx.BaseTransport | None = None,
        probe: bool = True,
    ) -> list[Diagnostic]:
        """Build the client from *profile*. Returns diagnostics on failure."""
        try:
            self._client = build_client_from_profile(profile, transport=transport, probe=probe)
        except SCCError as exc:
            return [exc.to_diagnostic("error configuring the cloud connector client")]
        logger.debug("Provider configured for %s", profile.url)
        return []

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> ConnectorProvider:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def kind(self, name: str) -> ResourceKind:
        try:
            kind_cls = KINDS[name]
        except KeyError:
            raise ValueError(
                f"Unknown resource kind {name!r}. Known kinds: {', '.join(sorted(KINDS))}"
            ) from None
        return kind_cls(self.client)

    def parse_state(self, kind_name: str, data: dict[str, Any]) -> ResourceState:
        """Validate a desired or known state document for *kind_name*."""
        return self.kind(kind_name).state_model.model_validate(data)

    def run(
        self,
        kind_name: str,
        operation: Operation,
        *,
        desired: ResourceState | None = None,
        known: ResourceState | None = None,
        import_id: str | None = None,
        parent: dict[str, str] | None = None,
    ) -> OperationResult:
        """Execute one operation, turning taxonomy errors into diagnostics.

        Desired-state validation failures (``ValueError``) are reported the
        same way; anything else propagates.
        """
        kind = self.kind(kind_name)
        logger.debug("Running %s on %s", operation, kind.name)
        try:
            if operation == "create":
                states = [kind.create(_required(desired, "desired"))]
            elif operation == "read":
                states = [kind.read(_required(known, "known"))]
            elif operation == "update":
                states = [kind.update(_required(desired, "desired"), _required(known, "known"))]
            elif operation == "delete":
                states = [kind.delete(_required(known, "known"))]
            elif operation == "import":
                states = [kind.import_state(_required(import_id, "import_id"))]
            elif operation == "list":
                states = kind.list_records(**(parent or {}))
            else:
                raise ValueError(f"Unknown operation {operation!r}")
        except SCCError as exc:
            summary = f"error {_VERBS[operation]} the cloud connector {kind.title}"
            logger.debug("%s: %s", summary, exc)
            return OperationResult(diagnostics=[exc.to_diagnostic(summary)])
        except ValueError as exc:
            summary = f"invalid configuration for the cloud connector {kind.title}"
            return OperationResult(
                diagnostics=[
                    Diagnostic(summary=summary, detail=str(exc), error=type(exc).__name__),
                ],
            )
        return OperationResult(states=states)


def _required(value: Any, name: str) -> Any:
    if value is None:
        raise ValueError(f"The {name} state is required for this operation")
    return value
