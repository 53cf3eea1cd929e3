"""Reconciliation protocol shared by every resource kind.

A resource kind maps one remote record type onto a desired-state model.
Every entry point is a fresh request/response cycle; nothing is cached
between calls and no step is issued before the previous one has
answered.

Create::

    POST collection -> GET (item, or collection + natural key lookup)
        [-> PUT .../state -> GET item]

Update::

    identity guard -> PUT item [-> PUT .../state] -> GET

Delete::

    DELETE item (404 counts as done) -> snapshot of the known state

Identity fields come from the caller and are never replaced by server
values; everything else is overwritten from the latest response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from types import SimpleNamespace
from typing import Any, ClassVar, Generic, NamedTuple, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from scc_cli.client.connector import ConnectorClient
from scc_cli.client.errors import (
    DuplicateNaturalKey,
    IdentityMismatch,
    MalformedImportIdentifier,
    NotFoundError,
    ReconciliationFailure,
)
from scc_cli.client.executor import execute
from scc_cli.config.constants import IMPORT_ID_DELIMITER
from scc_cli.models.common import RequestBody, WireModel

logger = logging.getLogger(__name__)


class ResourceState(BaseModel):
    """Desired or last-known state of one remote record.

    Class attributes describe the record's identity:

    - ``identity_fields``: set by the caller, immutable once set.
    - ``server_assigned``: identity fields the server allocates on create.
    - ``import_fields``: ordered fields of the composite import identifier,
      i.e. exactly what Read needs.
    - ``parent_fields``: fields naming the collection the record lives in.
    """

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    identity_fields: ClassVar[tuple[str, ...]] = ()
    server_assigned: ClassVar[tuple[str, ...]] = ()
    import_fields: ClassVar[tuple[str, ...]] = ()
    parent_fields: ClassVar[tuple[str, ...]] = ()


S = TypeVar("S", bound=ResourceState)
W = TypeVar("W", bound=WireModel)


class Write(NamedTuple):
    """One mutating call of a multi-step operation."""

    method: str
    path: str
    body: RequestBody | None = None


def wire_fields(wire: WireModel) -> dict[str, Any]:
    """Return a wire record's fields by attribute name, nested models intact."""
    return {name: getattr(wire, name) for name in type(wire).model_fields}


def find_by_natural_key(
    records: Sequence[W],
    key: Callable[[W], Any],
    wanted: Any,
) -> W | None:
    """Return the single record whose key equals *wanted*.

    Returns ``None`` when nothing matches and raises
    ``DuplicateNaturalKey`` when more than one record matches.
    """
    matches = [record for record in records if key(record) == wanted]
    if len(matches) > 1:
        raise DuplicateNaturalKey(wanted, len(matches))
    return matches[0] if matches else None


def parse_import_id(import_id: str, fields: Sequence[str]) -> dict[str, str]:
    """Split a composite import identifier into its named parts."""
    expected = IMPORT_ID_DELIMITER.join(fields)
    parts = [part.strip() for part in import_id.split(IMPORT_ID_DELIMITER)]
    if len(parts) != len(fields):
        raise MalformedImportIdentifier(
            import_id, expected, f"expected {len(fields)} fields, got {len(parts)}",
        )
    empty = [name for name, part in zip(fields, parts) if not part]
    if empty:
        raise MalformedImportIdentifier(
            import_id, expected, f"empty {', '.join(empty)}",
        )
    return dict(zip(fields, parts))


class ResourceKind(Generic[S, W]):
    """Create/read/update/delete/import/list for one remote record type.

    Subclasses set the class attributes and implement the path and body
    hooks; the protocol itself lives here and is identical for every kind.
    """

    name: ClassVar[str]
    title: ClassVar[str]
    state_model: ClassVar[type[ResourceState]]
    wire_model: ClassVar[type[WireModel]]
    toggle_field: ClassVar[str | None] = None

    def __init__(self, client: ConnectorClient) -> None:
        self.client = client

    # -- hooks ---------------------------------------------------------

    def collection_path(self, ref: Any) -> str:
        raise NotImplementedError

    def item_path(self, state: S) -> str:
        raise NotImplementedError

    def state_path(self, state: S) -> str:
        raise NotImplementedError(f"{self.name} has no toggle endpoint")

    def create_body(self, desired: S) -> RequestBody:
        raise NotImplementedError

    def update_body(self, desired: S) -> RequestBody:
        return self.create_body(desired)

    def toggle_body(self, desired: S) -> RequestBody | None:
        return None

    def observed(self, wire: W) -> dict[str, Any]:
        """Map a wire record onto state field names."""
        raise NotImplementedError

    # -- primitives ----------------------------------------------------

    def fetch(self, state: S) -> W:
        return execute(self.client, "GET", self.item_path(state), decode_into=self.wire_model)

    def fetch_collection(self, ref: Any) -> list[W]:
        return execute(
            self.client, "GET", self.collection_path(ref),
            decode_into=list[self.wire_model],  # type: ignore[name-defined]
        )

    def apply_and_reconcile(
        self,
        writes: Sequence[Write],
        locate: Callable[[], W],
    ) -> W:
        """Issue *writes* in order, then fetch the canonical record.

        The remote API does not return the full object from a write, so
        the result always comes from *locate*. A failing step stops the
        sequence; earlier writes are not rolled back.
        """
        for write in writes:
            logger.debug("%s: %s %s", self.name, write.method, write.path)
            execute(self.client, write.method, write.path, write.body)
        return locate()

    def locate_created(self, desired: S) -> W:
        return self.fetch(desired)

    def locate_updated(self, desired: S) -> W:
        return self.fetch(desired)

    def locate_existing(self, known: S) -> W:
        return self.fetch(known)

    def finalize(self, known: S, wire: W) -> S:
        """Merge a server record into *known* without touching its identity."""
        state = known.model_copy(update=self.observed(wire))
        keep = {
            field: getattr(known, field)
            for field in known.identity_fields
            if getattr(known, field) is not None
        }
        return state.model_copy(update=keep)

    def guard_identity(self, desired: S, known: S) -> S:
        """Reject identity drift; return *desired* with known identity filled in.

        ``None`` on either side means "not known yet" and is not drift.
        """
        mismatched = []
        for field in desired.identity_fields:
            wanted, current = getattr(desired, field), getattr(known, field)
            if wanted is not None and current is not None and wanted != current:
                mismatched.append(field)
        if mismatched:
            raise IdentityMismatch(self.title, mismatched)
        fill = {
            field: getattr(known, field)
            for field in desired.identity_fields
            if getattr(desired, field) is None
        }
        return desired.model_copy(update=fill)

    def toggle_changed(self, desired: S, known: S) -> bool:
        if self.toggle_field is None:
            return False
        wanted = getattr(desired, self.toggle_field)
        return wanted is not None and wanted != getattr(known, self.toggle_field)

    def require_identity(self, state: S) -> None:
        missing = [f for f in state.import_fields if getattr(state, f) is None]
        if missing:
            raise ReconciliationFailure(
                f"Cannot address the {self.title} without {', '.join(missing)}"
            )

    # -- entry points --------------------------------------------------

    def create(self, desired: S) -> S:
        wire = self.apply_and_reconcile(
            [Write("POST", self.collection_path(desired), self.create_body(desired))],
            lambda: self.locate_created(desired),
        )
        state = self.finalize(desired, wire)
        toggle = self.toggle_body(desired)
        if toggle is not None:
            wire = self.apply_and_reconcile(
                [Write("PUT", self.state_path(state), toggle)],
                lambda: self.fetch(state),
            )
            state = self.finalize(state, wire)
        return state

    def read(self, known: S) -> S:
        self.require_identity(known)
        return self.finalize(known, self.locate_existing(known))

    def update(self, desired: S, known: S) -> S:
        target = self.guard_identity(desired, known)
        self.require_identity(known)
        writes = [Write("PUT", self.item_path(known), self.update_body(target))]
        toggle = self.toggle_body(target) if self.toggle_changed(target, known) else None
        if toggle is not None:
            writes.append(Write("PUT", self.state_path(target), toggle))
        wire = self.apply_and_reconcile(writes, lambda: self.locate_updated(target))
        return self.finalize(target, wire)

    def delete(self, known: S) -> S:
        self.require_identity(known)
        try:
            execute(self.client, "DELETE", self.item_path(known))
        except NotFoundError:
            logger.info("%s already absent, nothing to delete", self.title)
        snapshot = self.finalize(known, self.wire_model())
        return snapshot.model_copy(
            update={field: getattr(known, field) for field in known.import_fields},
        )

    def parse_import(self, import_id: str) -> S:
        """Turn a composite import identifier into a state holding identity only."""
        fields = self.state_model.import_fields
        values = parse_import_id(import_id, fields)
        try:
            return self.state_model.model_validate(values)  # type: ignore[return-value]
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise MalformedImportIdentifier(
                import_id, IMPORT_ID_DELIMITER.join(fields), reason,
            ) from exc

    def import_state(self, import_id: str) -> S:
        return self.read(self.parse_import(import_id))

    def list_records(self, **parent: str) -> list[S]:
        """Read every record of the collection named by *parent*."""
        missing = [f for f in self.state_model.parent_fields if not parent.get(f)]
        if missing:
            raise ValueError(f"Listing {self.title}s requires {', '.join(missing)}")
        ref = SimpleNamespace(**parent)
        return [
            self.state_model.model_validate({**parent, **self.observed(wire)})  # type: ignore[misc]
            for wire in self.fetch_collection(ref)
        ]


class NaturalKeyKind(ResourceKind[S, W]):
    """A kind whose records are found in their collection by a natural key.

    Used where the server assigns the identifier only after creation, or
    where the item endpoint is not addressable before the record exists.
    """

    def wire_key(self, wire: W) -> Any:
        raise NotImplementedError

    def state_key(self, state: S) -> Any:
        raise NotImplementedError

    def locate_by_key(self, state: S) -> W:
        record = find_by_natural_key(
            self.fetch_collection(state), self.wire_key, self.state_key(state),
        )
        if record is None:
            raise ReconciliationFailure(
                f"The {self.title} {self.state_key(state)!r} was written but"
                " is missing from the collection"
            )
        return record

    def locate_created(self, desired: S) -> W:
        return self.locate_by_key(desired)
