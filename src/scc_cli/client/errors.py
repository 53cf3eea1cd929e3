"""Typed exceptions, host diagnostics, and the CLI error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, Literal, TypeVar

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class Diagnostic(BaseModel):
    """A structured failure handed back to the host."""

    severity: Literal["error", "warning"] = "error"
    summary: str
    detail: str = ""
    error: str | None = Field(
        default=None, description="Exception class name, e.g. NotFoundError",
    )


class SCCError(Exception):
    """Base exception for scc-cli."""

    exit_code: int = 1

    def to_diagnostic(self, summary: str) -> Diagnostic:
        return Diagnostic(
            severity="error", summary=summary, detail=str(self), error=type(self).__name__,
        )


class ConfigurationError(SCCError):
    """Bad connection settings, detected before any network call."""

    exit_code = 6


class InvalidCredentialFormat(ConfigurationError):
    """A certificate or key field is not well-formed PEM."""

    def __init__(self, field: str, reason: str = "") -> None:
        self.field = field
        msg = f"The provided {field} is not a valid PEM-encoded block"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingAuthentication(ConfigurationError):
    """Neither basic nor certificate credentials were supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Either a username/password or a client certificate/key must be"
            " provided for authentication."
        )


class ConflictingAuthentication(ConfigurationError):
    """Both basic and certificate credentials were supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Both basic authentication and certificate-based authentication"
            " were provided. Only one can be used."
        )


class ConnectionFailed(SCCError):
    """Cannot reach the connector."""

    exit_code = 2


class AuthenticationRejected(SCCError):
    """The connector refused the supplied credentials (401/403)."""

    exit_code = 3


class RequestError(SCCError):
    """The connector answered with an HTTP error status."""

    exit_code = 7

    def __init__(
        self,
        status_code: int,
        body: str = "",
        *,
        method: str = "",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        target = f"{method} {url} ".lstrip() if method or url else ""
        super().__init__(f"{target}failed with status {status_code}: {body}")


class NotFoundError(RequestError):
    """Resource not found (404)."""

    exit_code = 4


class DecodeError(SCCError):
    """A successful response could not be decoded into the expected type."""

    exit_code = 8


class ReconciliationFailure(SCCError):
    """The write succeeded but the written record cannot be located."""

    exit_code = 9


class DuplicateNaturalKey(ReconciliationFailure):
    """More than one record in a collection shares the lookup key."""

    def __init__(self, key: Any, count: int) -> None:
        self.key = key
        self.count = count
        super().__init__(
            f"{count} records share the key {key!r}; the created record"
            " cannot be told apart from its siblings"
        )


class IdentityMismatch(SCCError):
    """An update tried to change fields that identify the remote record."""

    exit_code = 10

    def __init__(self, kind: str, fields: list[str]) -> None:
        self.kind = kind
        self.fields = fields
        super().__init__(
            f"Failed to update the {kind} due to mismatched configuration"
            f" values: {', '.join(fields)} cannot be changed in place"
        )


class MalformedImportIdentifier(SCCError):
    """An import identifier has the wrong shape for its resource kind."""

    exit_code = 11

    def __init__(self, import_id: str, expected: str, reason: str = "") -> None:
        self.import_id = import_id
        self.expected = expected
        msg = f"Expected import identifier with format: {expected}. Got: {import_id!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


def error_handler(func: F) -> F:
    """Decorator that catches SCCError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SCCError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
