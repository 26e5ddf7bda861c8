"""Explicit Rule Enforcement — every resolved field must carry its own check.

Invariants:
    - All functions are PURE: no IO, no logging, no side effects
    - Return error map on violation, None on success
    - All violators are reported together, never only the first
    - Fields in exclude are never reported; pattern keys never count as a rule

Design Decisions:
    - Return the error map (not an exception): a missing rule is reported in the
      same shape as a failed check, so callers render both the same way
"""

from typing import Iterable

from fieldguard.core.domain_types import MISSING_RULE_MESSAGE, ErrorMessage, FieldName
from fieldguard.core.resolve_fields import literal_check_fields
from fieldguard.core.rule_spec import RuleSpec


def find_fields_without_rules(
    fields: Iterable[FieldName], spec: RuleSpec, exclude: frozenset[FieldName],
) -> list[FieldName]:
    ruled = set(literal_check_fields(spec))
    return [f for f in fields if f not in exclude and f not in ruled]


def missing_rule_errors(fields: Iterable[FieldName]) -> dict[FieldName, ErrorMessage]:
    return {f: MISSING_RULE_MESSAGE.format(field=f) for f in fields}


def check_explicit_rules(
    fields: Iterable[FieldName], spec: RuleSpec, exclude: frozenset[FieldName],
) -> dict[FieldName, ErrorMessage] | None:
    """Error map for fields lacking a literal check, or None when all are covered."""
    missing = find_fields_without_rules(fields, spec, exclude)
    if missing:
        return missing_rule_errors(missing)
    return None
