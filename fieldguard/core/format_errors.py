"""Error String Formatting — joins an error map into one human-readable line.

Invariants:
    - No errors -> empty string
    - Messages appear in error-map order
    - single=True yields exactly one formatted message
"""

from dataclasses import dataclass
from typing import Mapping

from fieldguard.core.call_context import CallContext
from fieldguard.core.domain_types import ErrorMessage, FieldName


@dataclass(frozen=True)
class ErrorStringOptions:
    """Formatting for error_string(). template receives {field} and {message}."""
    template: str = "[{field}] {message}"
    separator: str = "; "
    single: bool = False


def format_error_string(
    error_map: Mapping[FieldName, ErrorMessage] | None,
    options: ErrorStringOptions | None = None,
) -> str:
    options = options or ErrorStringOptions()
    if not error_map:
        return ""
    parts = [
        options.template.format(field=field, message=message)
        for field, message in error_map.items()
    ]
    if options.single:
        return parts[0]
    return options.separator.join(parts)


def error_string(ctx: CallContext, options: ErrorStringOptions | None = None) -> str:
    return format_error_string(ctx.last_errors, options)
