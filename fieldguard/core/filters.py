"""Built-in Filters — value transforms applied before any check runs.

Invariants:
    - Filters never fail and never drop a field; they only return a new value
    - None passes through untouched
    - A list value (repeated request parameter) is filtered item by item
"""

import re
from functools import wraps
from typing import Any

from fieldguard.core.domain_types import FilterFn
from fieldguard.core.errors import InvalidRuleSpecError, UnknownRuleError

_WHITESPACE_RUN = re.compile(r"\s+")


def _each(fn):
    """Apply a str -> str transform to a scalar or to every item of a list."""
    @wraps(fn)
    def apply(value: Any) -> Any:
        if isinstance(value, list):
            return [fn(v) if isinstance(v, str) else v for v in value]
        if isinstance(value, str):
            return fn(value)
        return value
    return apply


@_each
def trim(value: str) -> str:
    return value.strip()


@_each
def strip(value: str) -> str:
    """Collapse inner whitespace runs to a single space."""
    return _WHITESPACE_RUN.sub(" ", value)


@_each
def lc(value: str) -> str:
    return value.lower()


@_each
def uc(value: str) -> str:
    return value.upper()


@_each
def ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


FILTERS: dict[str, FilterFn] = {
    "trim": trim,
    "strip": strip,
    "lc": lc,
    "uc": uc,
    "ucfirst": ucfirst,
}


def compile_filter(spec: Any) -> tuple[FilterFn, ...]:
    """Turn one FilterSpec (callable, name, or list of those) into a chain."""
    if callable(spec):
        return (spec,)
    if isinstance(spec, str):
        fn = FILTERS.get(spec)
        if fn is None:
            raise UnknownRuleError("filter", spec)
        return (fn,)
    if isinstance(spec, list):
        chain: list[FilterFn] = []
        for item in spec:
            chain.extend(compile_filter(item))
        return tuple(chain)
    raise InvalidRuleSpecError(f"unsupported filter {spec!r}")
