"""Request Audit — end-of-request report of handlers that never validated input.

Invariants:
    - Purely observational: never raises, never changes the response
    - Reports only when the handler identity is known and validation was not invoked
"""

import logging
from typing import Any, Mapping

from fieldguard.core.call_context import CallContext

logger = logging.getLogger(__name__)


def handler_name(scope: Mapping[str, Any]) -> str | None:
    """Name of the matched route (or endpoint function) in an ASGI scope."""
    route = scope.get("route")
    name = getattr(route, "name", None)
    if name:
        return name
    endpoint = scope.get("endpoint")
    return getattr(endpoint, "__name__", None)


def audit_request(ctx: CallContext, handler: str | None = None) -> bool:
    """True when the request is fine (validated, or no known handler)."""
    if ctx.invoked:
        return True
    handler = handler or ctx.handler
    if not handler:
        return True
    logger.debug(
        "No validation performed for handler %s", handler,
        extra={"handler": handler},
    )
    return False
