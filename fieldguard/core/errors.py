"""Error Hierarchy — typed, categorized exceptions for fieldguard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only caller contract violations are raised; field-level failures are returned as data
    - to_response() produces the REST error envelope used by the FastAPI handler

Design Decisions:
    - Single hierarchy with FieldGuardError base: one FastAPI handler catches all
    - ErrorContext as dataclass: carries field/handler details without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    handler: str | None = None


class FieldGuardError(Exception):
    """Base exception for all fieldguard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field_name,
                    "handler": self.context.handler,
                },
            }
        }


# ─── Caller Contract Errors (500-level) ──────────────────────────

class InvalidRuleSpecError(FieldGuardError):
    """Rules passed to validate() are malformed. Programming error, never recovered."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Wrong validation rules: {message}",
            "INVALID_RULE_SPEC", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class UnknownRuleError(InvalidRuleSpecError):
    """A check or filter was referenced by a name that is not registered."""
    def __init__(self, kind: str, name: str, context: ErrorContext | None = None):
        super().__init__(f"unknown {kind} '{name}'", context)
        self.code = "UNKNOWN_RULE"
        self.kind = kind
        self.name = name


class ValidatorNotRegisteredError(FieldGuardError):
    """A route asked for request validation on an app without register_validation()."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Field validation is not registered on this application. "
            "Call register_validation(app) at startup.",
            "VALIDATOR_NOT_REGISTERED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
