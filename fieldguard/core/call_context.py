"""Call Context — per-request scratch state shared by the engine and its caller.

Invariants:
    - One CallContext per request; created and discarded by the caller
    - invoked only ever goes False -> True
    - last_errors mirrors last_result: the error map of a Failure, {} after a Success
    - Query helpers never mutate the context and never expose its internal dict

Design Decisions:
    - Dataclass with plain query functions (not methods): helpers mirror the
      template-side accessors and stay usable on a bare context in tests
"""

from dataclasses import dataclass

from fieldguard.core.domain_types import ErrorMessage, FieldName
from fieldguard.core.validation_result import ValidationResult


@dataclass
class CallContext:
    """What the engine recorded during the current request."""

    # Validation was attempted at least once in this request
    invoked: bool = False

    # Outcome of the most recent validate() call
    last_result: ValidationResult | None = None

    # Error map of the most recent call (None until a call finishes)
    last_errors: dict[FieldName, ErrorMessage] | None = None

    # Identity of the handler serving the request, for the audit hook
    handler: str | None = None

    def mark_invoked(self) -> None:
        self.invoked = True

    def record(self, result: ValidationResult) -> None:
        self.last_result = result
        self.last_errors = dict(result.errors)


def has_errors(ctx: CallContext) -> bool:
    return bool(ctx.last_errors)


def error_for(ctx: CallContext, field: FieldName) -> ErrorMessage | None:
    if not ctx.last_errors:
        return None
    return ctx.last_errors.get(field)


def errors(ctx: CallContext) -> dict[FieldName, ErrorMessage]:
    """Whole error map of the last call (a copy)."""
    return dict(ctx.last_errors or {})


def any_error(ctx: CallContext) -> ErrorMessage | None:
    """One of the current error messages. Which one is unspecified."""
    if not ctx.last_errors:
        return None
    return next(iter(ctx.last_errors.values()))
