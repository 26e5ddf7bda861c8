"""Domain Types — names for the values that flow through the validation engine.

Invariants:
    - A FieldKey is a literal name (str), a compiled pattern, or a tuple of literal names
    - Pattern keys never name a single field; they match fields dynamically
    - CheckFn returns None on success, an ErrorMessage on failure (never raises for bad input)
    - FilterFn only transforms; it has no failure channel

Design Decisions:
    - Aliases over NewType: callers pass plain dicts from request parsing,
      wrapping every key would add noise without catching real bugs
    - ErrorKind as str Enum: serializes to JSON without custom encoders
"""

import re
from enum import Enum
from typing import Any, Callable, Mapping, Union


# ─── Value Types ─────────────────────────────────────────────────

FieldName = str
ErrorMessage = str
FieldValue = Union[str, list[str], None]

InputRecord = Mapping[FieldName, Any]
FieldKey = Union[FieldName, re.Pattern, tuple[FieldName, ...]]

CheckFn = Callable[[Any, Mapping[FieldName, Any]], Union[ErrorMessage, None]]
FilterFn = Callable[[Any], Any]


# ─── Messages ────────────────────────────────────────────────────

MISSING_RULE_MESSAGE = 'No validation rules for field "{field}"'


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Why a field ended up in the error map. Same map shape for both kinds."""
    MISSING_RULE = "missing_rule"
    CHECK_FAILURE = "check_failure"
