"""Check/Filter Execution — filters, then checks, over the effective field set.

Invariants:
    - The caller's input record is never mutated; filtered values live in a new dict
    - Filters run before any check, in declaration order
    - The first failing check for a field wins; other fields keep being checked
    - Checks see the whole filtered record read-only
    - Success carries exactly the effective fields (absent ones as None), Failure carries no data
"""

from types import MappingProxyType
from typing import Any, Sequence

from fieldguard.core.domain_types import (
    ErrorKind, ErrorMessage, FieldKey, FieldName, InputRecord,
)
from fieldguard.core.rule_spec import RuleSpec
from fieldguard.core.validation_result import Failure, Success, ValidationResult


def key_matches(key: FieldKey, field: FieldName) -> bool:
    if isinstance(key, str):
        return key == field
    if isinstance(key, tuple):
        return field in key
    return key.search(field) is not None


def apply_filters(
    record: InputRecord, spec: RuleSpec, fields: Sequence[FieldName],
) -> dict[FieldName, Any]:
    values = {f: record.get(f) for f in fields}
    for key, chain in spec.filters:
        for f in fields:
            if not key_matches(key, f):
                continue
            for fn in chain:
                values[f] = fn(values[f])
    return values


def run_checks(
    values: dict[FieldName, Any], spec: RuleSpec, fields: Sequence[FieldName],
) -> dict[FieldName, ErrorMessage]:
    errors: dict[FieldName, ErrorMessage] = {}
    view = MappingProxyType(values)
    for key, chain in spec.checks:
        for f in fields:
            if f in errors or not key_matches(key, f):
                continue
            for check in chain:
                message = check(values[f], view)
                if message is not None:
                    errors[f] = message
                    break
    return errors


def execute_rules(
    record: InputRecord, spec: RuleSpec, fields: Sequence[FieldName],
) -> ValidationResult:
    values = apply_filters(record, spec, fields)
    errors = run_checks(values, spec, fields)
    if errors:
        return Failure.of(errors, ErrorKind.CHECK_FAILURE)
    return Success(data=values)
