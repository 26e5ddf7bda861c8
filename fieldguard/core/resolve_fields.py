"""Field Resolution — derives the effective field set for one validation call.

Invariants:
    - Result is deduplicated, first occurrence keeps its position
    - Pattern check keys never contribute a field
    - With autofields off only the explicitly listed fields are used
    - Discovery order: listed fields, then input keys, then literal check keys
"""

from typing import Iterable, Iterator

from fieldguard.core.domain_types import FieldKey, FieldName
from fieldguard.core.rule_spec import RuleSpec


def literal_names(key: FieldKey) -> tuple[FieldName, ...]:
    """Field names a check key refers to by name. Patterns name none."""
    if isinstance(key, str):
        return (key,)
    if isinstance(key, tuple):
        return key
    return ()


def literal_check_fields(spec: RuleSpec) -> Iterator[FieldName]:
    for key, _ in spec.checks:
        yield from literal_names(key)


def dedupe(names: Iterable[FieldName]) -> tuple[FieldName, ...]:
    return tuple(dict.fromkeys(names))


def resolve_fields(
    spec: RuleSpec, input_keys: Iterable[FieldName], autofields: bool,
) -> tuple[FieldName, ...]:
    if not autofields:
        return dedupe(spec.fields)
    return dedupe([*spec.fields, *input_keys, *literal_check_fields(spec)])
