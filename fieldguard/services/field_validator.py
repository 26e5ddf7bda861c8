"""Field Validator — runs the validation pipeline and records the outcome.

Invariants:
    - Malformed rules raise InvalidRuleSpecError before the context is touched
    - ctx.invoked is set before the outcome is known
    - Explicit-mode violations short-circuit: no filter or check runs
    - Every call ends with ctx.record(result); the validator keeps no reference to ctx
    - Logging is observational only (debug level), it never changes the result

Design Decisions:
    - Thin imperative shell over core/: normalize -> resolve -> enforce -> execute,
      each step a pure function
    - params accepts a mapping or a zero-arg callable so request parsing only
      happens when no explicit record is given
"""

import logging
from typing import Callable, Iterable

from fieldguard.core.call_context import CallContext
from fieldguard.core.domain_types import ErrorKind, FieldName, InputRecord
from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.enforce_explicit import check_explicit_rules
from fieldguard.core.execute_rules import execute_rules
from fieldguard.core.resolve_fields import resolve_fields
from fieldguard.core.rule_spec import normalize_rules
from fieldguard.core.validation_result import Failure, ValidationResult

logger = logging.getLogger(__name__)


def _quoted(fields: Iterable[FieldName]) -> str:
    return ", ".join(f'"{f}"' for f in fields)


class FieldValidator:
    """Validates input records against rules under one EngineConfig."""

    def __init__(self, config: EngineConfig | None = None):
        self._config = config or EngineConfig()

    def validate(
        self,
        ctx: CallContext,
        rules,
        record: InputRecord | None = None,
        *,
        params: InputRecord | Callable[[], InputRecord] | None = None,
    ) -> ValidationResult:
        """Validate record (or the request params when record is None)."""
        spec = normalize_rules(rules)
        ctx.mark_invoked()

        if record is None:
            record = params() if callable(params) else (params or {})

        fields = resolve_fields(spec, record.keys(), self._config.autofields)

        if self._config.explicit:
            missing = check_explicit_rules(fields, spec, self._config.exclude)
            if missing:
                logger.debug(
                    "no validation rules for %s", _quoted(missing),
                    extra={"fields": list(missing), "handler": ctx.handler},
                )
                result = Failure.of(missing, ErrorKind.MISSING_RULE)
                ctx.record(result)
                return result

        result = execute_rules(record, spec.with_fields(fields), fields)
        if result:
            logger.debug("validation succeeded", extra={"handler": ctx.handler})
        else:
            logger.debug(
                "validation failed: %s", ", ".join(result.errors),
                extra={"fields": list(result.errors), "handler": ctx.handler},
            )
        ctx.record(result)
        return result
