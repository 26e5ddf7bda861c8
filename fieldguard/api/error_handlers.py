"""Error Handlers — maps fieldguard exceptions to structured JSON responses.

Invariants:
    - FieldGuardError -> JSON envelope with code, message, category, severity
    - Only raised errors land here; field-level failures are data returned to the route

Design Decisions:
    - No catch-all handler: the host application owns its generic 500 policy
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fieldguard.core.errors import FieldGuardError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register fieldguard error handlers on the FastAPI app."""

    @app.exception_handler(FieldGuardError)
    async def fieldguard_error_handler(request: Request, exc: FieldGuardError):
        """Handle malformed rules and missing registration."""
        logger.error(
            f"FieldGuardError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
