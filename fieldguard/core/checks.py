"""Built-in Checks — parameterized rule factories and the name registry.

Invariants:
    - Every factory returns a CheckFn: (value, record) -> ErrorMessage | None
    - Only required, required_if and existing fail on an empty value;
      every other check passes when the value is None or ""
    - Factories never read or write anything outside their arguments

Design Decisions:
    - Factories over classes: a check is a closure, callers can pass their own
      plain function anywhere a built-in is accepted
    - Explicit CHECK_RULES dict: every name -> factory mapping visible in one place
"""

import re
from typing import Any, Callable, Iterable, Mapping

from fieldguard.core.domain_types import CheckFn, ErrorMessage
from fieldguard.core.errors import InvalidRuleSpecError, UnknownRuleError

INVALID_VALUE = "Invalid value"


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def _lengths(value: Any) -> list[int]:
    """String length of a value, or of each item of a repeated parameter."""
    values = value if isinstance(value, list) else [value]
    return [len(str(v)) for v in values]


# ─── Presence ────────────────────────────────────────────────────

def required(message: ErrorMessage = "Required") -> CheckFn:
    """Value must be present and not the empty string."""
    def check(value, record):
        return message if is_empty(value) else None
    return check


def required_if(
    condition: bool | Callable[[Mapping[str, Any]], bool],
    message: ErrorMessage = "Required",
) -> CheckFn:
    """Like required, but only when condition (a bool or a record predicate) holds."""
    def check(value, record):
        active = condition(record) if callable(condition) else condition
        if active and is_empty(value):
            return message
        return None
    return check


def existing(message: ErrorMessage = "Must be defined") -> CheckFn:
    """Value must be defined; the empty string counts as defined."""
    def check(value, record):
        return message if value is None else None
    return check


# ─── Comparison ──────────────────────────────────────────────────

def equal_to(other: str, message: ErrorMessage = INVALID_VALUE) -> CheckFn:
    """Value must equal the (filtered) value of another field."""
    def check(value, record):
        other_value = record.get(other)
        if is_empty(value) and is_empty(other_value):
            return None
        return None if value == other_value else message
    return check


def in_(choices: Iterable[Any], message: ErrorMessage = INVALID_VALUE) -> CheckFn:
    allowed = tuple(choices)

    def check(value, record):
        if is_empty(value):
            return None
        return None if value in allowed else message
    return check


def is_a(kind: type | tuple[type, ...], message: ErrorMessage = INVALID_VALUE) -> CheckFn:
    def check(value, record):
        if is_empty(value):
            return None
        return None if isinstance(value, kind) else message
    return check


def like(pattern: str | re.Pattern, message: ErrorMessage = INVALID_VALUE) -> CheckFn:
    """Value must match pattern (unanchored search, like Perl's =~)."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(value, record):
        if is_empty(value):
            return None
        values = value if isinstance(value, list) else [value]
        if all(regex.search(str(v)) for v in values):
            return None
        return message
    return check


# ─── Length ──────────────────────────────────────────────────────

def long_between(
    min_length: int, max_length: int, message: ErrorMessage | None = None,
) -> CheckFn:
    message = message or f"Must be between {min_length} and {max_length} symbols"

    def check(value, record):
        if is_empty(value):
            return None
        if all(min_length <= n <= max_length for n in _lengths(value)):
            return None
        return message
    return check


def long_at_least(length: int, message: ErrorMessage | None = None) -> CheckFn:
    message = message or f"Must be at least {length} symbols"

    def check(value, record):
        if is_empty(value):
            return None
        return None if all(n >= length for n in _lengths(value)) else message
    return check


def long_at_most(length: int, message: ErrorMessage | None = None) -> CheckFn:
    message = message or f"Must be at most {length} symbols"

    def check(value, record):
        if is_empty(value):
            return None
        return None if all(n <= length for n in _lengths(value)) else message
    return check


# ─── Registry ────────────────────────────────────────────────────

CHECK_RULES: dict[str, Callable[..., CheckFn]] = {
    "required": required,
    "required_if": required_if,
    "existing": existing,
    "equal_to": equal_to,
    "in": in_,
    "is_a": is_a,
    "like": like,
    "long_between": long_between,
    "long_at_least": long_at_least,
    "long_at_most": long_at_most,
}


def build_named_check(name: str, *args: Any) -> CheckFn:
    """Look up a registered rule and apply its parameters."""
    factory = CHECK_RULES.get(name)
    if factory is None:
        raise UnknownRuleError("check", name)
    try:
        return factory(*args)
    except TypeError as e:
        raise InvalidRuleSpecError(f"bad parameters for check '{name}': {e}") from e


def compile_check(spec: Any) -> tuple[CheckFn, ...]:
    """Turn one CheckSpec into the ordered chain of callables it stands for.

    Accepted shapes: a callable, a rule name ("required"), a rule tuple
    (("equal_to", "pass")), or a list mixing any of these.
    """
    if callable(spec):
        return (spec,)
    if isinstance(spec, str):
        return (build_named_check(spec),)
    if isinstance(spec, tuple) and spec and isinstance(spec[0], str):
        return (build_named_check(spec[0], *spec[1:]),)
    if isinstance(spec, list):
        chain: list[CheckFn] = []
        for item in spec:
            chain.extend(compile_check(item))
        return tuple(chain)
    raise InvalidRuleSpecError(f"unsupported check {spec!r}")
