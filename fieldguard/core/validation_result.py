"""Validation Result — Success(data) or Failure(errors), never both.

Invariants:
    - Success.data keys equal the effective field set exactly
    - Failure carries no data; Failure.errors is never empty
    - Failure.kinds has the same keys as Failure.errors
    - bool(result) is True only for Success, so `if data := validate(...)` reads naturally
"""

from dataclasses import dataclass, field
from typing import Any, Union

from fieldguard.core.domain_types import ErrorKind, ErrorMessage, FieldName


@dataclass(frozen=True)
class Success:
    data: dict[FieldName, Any]

    @property
    def ok(self) -> bool:
        return True

    @property
    def errors(self) -> dict[FieldName, ErrorMessage]:
        return {}

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    errors: dict[FieldName, ErrorMessage]
    kinds: dict[FieldName, ErrorKind] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    @classmethod
    def of(cls, errors: dict[FieldName, ErrorMessage], kind: ErrorKind) -> "Failure":
        return cls(errors=dict(errors), kinds={f: kind for f in errors})


ValidationResult = Union[Success, Failure]
