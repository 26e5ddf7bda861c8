"""Engine Configuration — immutable policy shared by every validation call.

Invariants:
    - EngineConfig is frozen: set once when the validator is built, never changed per call
    - exclude is a frozenset; order is irrelevant for membership
"""

from dataclasses import dataclass, field
from typing import Iterable

from fieldguard.core.domain_types import FieldName


@dataclass(frozen=True)
class EngineConfig:
    """Field-resolution and explicitness policy."""

    # Every resolved field must have its own literal check
    explicit: bool = False

    # Derive fields from input keys and literal check keys
    autofields: bool = True

    # Fields allowed through explicit mode without a check (e.g. csrf tokens)
    exclude: frozenset[FieldName] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls, explicit: bool = False, autofields: bool = True,
        exclude: Iterable[FieldName] = (),
    ) -> "EngineConfig":
        return cls(explicit=explicit, autofields=autofields, exclude=frozenset(exclude))
