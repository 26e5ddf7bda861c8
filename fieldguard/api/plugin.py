"""Plugin Registration — wires field validation into a FastAPI application.

Invariants:
    - register_validation() is called once, before the app starts serving
    - Every request gets a fresh CallContext from the audit middleware
    - The audit runs after the response is produced and never alters it
    - Settings.log_level and Settings.log_format configure the fieldguard logger

Design Decisions:
    - One entry point installs state, middleware and error handlers together,
      so an app cannot end up with the validator but without the audit hook
"""

import logging

from fastapi import FastAPI, Request

from fieldguard.api.dependencies import STATE_CONTEXT, STATE_VALIDATOR
from fieldguard.api.error_handlers import register_error_handlers
from fieldguard.config import Settings, get_settings
from fieldguard.core.call_context import CallContext
from fieldguard.infrastructure.observability import setup_logging
from fieldguard.services.field_validator import FieldValidator
from fieldguard.services.request_audit import audit_request, handler_name

logger = logging.getLogger(__name__)


def register_validation(app: FastAPI, settings: Settings | None = None) -> FieldValidator:
    """Configure logging and attach a FieldValidator, audit middleware and error handlers."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    validator = FieldValidator(settings.engine_config())
    setattr(app.state, STATE_VALIDATOR, validator)
    _install_audit_middleware(app)
    register_error_handlers(app)
    logger.info(
        "Field validation registered (explicit=%s, autofields=%s)",
        settings.explicit, settings.autofields,
    )
    return validator


def _install_audit_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def validation_audit(request: Request, call_next):
        ctx = CallContext()
        setattr(request.state, STATE_CONTEXT, ctx)
        response = await call_next(request)
        audit_request(ctx, handler_name(request.scope))
        return response
