"""Route Dependencies — per-request context and a validation helper bound to it.

Invariants:
    - Exactly one CallContext per request, kept on request.state
    - The FieldValidator comes from app.state (set by register_validation)
    - RequestValidation.validate() reads GET+POST params only when no record is passed

Design Decisions:
    - FastAPI Depends over globals: routes declare what they need, tests can override
"""

from fastapi import Depends, Request

from fieldguard.api.params import collect_params
from fieldguard.core import call_context
from fieldguard.core.call_context import CallContext
from fieldguard.core.domain_types import ErrorMessage, FieldName, InputRecord
from fieldguard.core.errors import ErrorContext, ValidatorNotRegisteredError
from fieldguard.core.format_errors import ErrorStringOptions, error_string
from fieldguard.core.validation_result import ValidationResult
from fieldguard.services.field_validator import FieldValidator
from fieldguard.services.request_audit import handler_name

STATE_CONTEXT = "fieldguard_context"
STATE_VALIDATOR = "field_validator"


def get_call_context(request: Request) -> CallContext:
    ctx = getattr(request.state, STATE_CONTEXT, None)
    if ctx is None:
        ctx = CallContext()
        setattr(request.state, STATE_CONTEXT, ctx)
    if ctx.handler is None:
        ctx.handler = handler_name(request.scope)
    return ctx


def get_field_validator(request: Request) -> FieldValidator:
    validator = getattr(request.app.state, STATE_VALIDATOR, None)
    if validator is None:
        raise ValidatorNotRegisteredError(
            ErrorContext(handler=handler_name(request.scope)),
        )
    return validator


class RequestValidation:
    """Validation helpers for one request, mirroring the template-side accessors."""

    def __init__(self, request: Request, validator: FieldValidator, ctx: CallContext):
        self._request = request
        self._validator = validator
        self._ctx = ctx

    async def validate(self, rules, record: InputRecord | None = None) -> ValidationResult:
        params = await collect_params(self._request) if record is None else None
        return self._validator.validate(self._ctx, rules, record, params=params)

    def has_errors(self) -> bool:
        return call_context.has_errors(self._ctx)

    def error_for(self, field: FieldName) -> ErrorMessage | None:
        return call_context.error_for(self._ctx, field)

    def errors(self) -> dict[FieldName, ErrorMessage]:
        return call_context.errors(self._ctx)

    def any_error(self) -> ErrorMessage | None:
        return call_context.any_error(self._ctx)

    def error_string(self, options: ErrorStringOptions | None = None) -> str:
        return error_string(self._ctx, options)


def get_request_validation(
    request: Request,
    validator: FieldValidator = Depends(get_field_validator),
    ctx: CallContext = Depends(get_call_context),
) -> RequestValidation:
    return RequestValidation(request, validator, ctx)
