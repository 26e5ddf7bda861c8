"""Rule Normalization — tests for normalize_rules.

Tests cover:
    - Shorthand pair sequence becomes checks with empty fields/filters
    - Full mapping form keeps fields and filters
    - Named checks and filters are resolved to callables up front
    - Malformed rules raise InvalidRuleSpecError immediately
    - The caller's rules object is never mutated
"""

import re

import pytest

from fieldguard.core.checks import required
from fieldguard.core.errors import InvalidRuleSpecError, UnknownRuleError
from fieldguard.core.rule_spec import RuleSpec, normalize_rules


# ─── Accepted shapes ─────────────────────────────────────────────

def test_pair_sequence_becomes_checks():
    spec = normalize_rules([("name", "required")])
    assert len(spec.checks) == 1
    key, chain = spec.checks[0]
    assert key == "name"
    assert len(chain) == 1
    assert spec.fields == ()
    assert spec.filters == ()


def test_empty_sequence_is_valid():
    spec = normalize_rules([])
    assert spec.checks == ()


def test_mapping_form_keeps_fields_and_filters():
    spec = normalize_rules({
        "checks": [("name", "required")],
        "fields": ["name", "email"],
        "filters": [("email", ["trim", "lc"])],
    })
    assert spec.fields == ("name", "email")
    key, chain = spec.filters[0]
    assert key == "email"
    assert len(chain) == 2


def test_mapping_checks_may_be_a_dict():
    spec = normalize_rules({"checks": {"a": "required", "b": ("equal_to", "a")}})
    assert [key for key, _ in spec.checks] == ["a", "b"]


def test_pattern_and_tuple_keys_accepted():
    pattern = re.compile(r"^tag_")
    spec = normalize_rules([(pattern, "required"), (["p1", "p2"], "required")])
    assert spec.checks[0][0] is pattern
    assert spec.checks[1][0] == ("p1", "p2")


def test_callable_check_kept_as_is():
    def no_bob(value, record):
        return "No bobs" if value == "bob" else None

    spec = normalize_rules([("name", no_bob)])
    assert spec.checks[0][1] == (no_bob,)


def test_check_list_flattens_to_chain():
    spec = normalize_rules([("name", ["required", ("long_at_most", 5), required()])])
    assert len(spec.checks[0][1]) == 3


def test_rule_spec_passes_through():
    spec = RuleSpec()
    assert normalize_rules(spec) is spec


# ─── Rejected shapes ─────────────────────────────────────────────

@pytest.mark.parametrize("rules", [None, "required", 42, object()])
def test_non_sequence_non_mapping_rejected(rules):
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules(rules)


def test_mapping_without_checks_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules({"fields": ["a"]})


def test_unknown_mapping_key_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules({"checks": [], "autorules": True})


def test_non_pair_entry_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules(["name", "required"])


def test_bad_key_type_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules([(42, "required")])


def test_fields_as_string_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules({"checks": [], "fields": "name"})


def test_unknown_check_name_rejected():
    with pytest.raises(UnknownRuleError) as exc:
        normalize_rules([("name", "is_shiny")])
    assert exc.value.code == "UNKNOWN_RULE"
    assert "is_shiny" in exc.value.message


def test_unknown_filter_name_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules({"checks": [], "filters": [("name", "sparkle")]})


def test_bad_check_parameters_rejected():
    with pytest.raises(InvalidRuleSpecError):
        normalize_rules([("name", ("long_between", 1))])


def test_rejected_rule_names_its_field():
    with pytest.raises(UnknownRuleError) as exc:
        normalize_rules([("name", "required"), ("email", "is_shiny")])
    assert exc.value.context.field_name == "email"
    assert exc.value.to_response()["error"]["context"]["field"] == "email"


def test_rejected_rule_names_pattern_and_tuple_keys():
    with pytest.raises(InvalidRuleSpecError) as exc:
        normalize_rules({"checks": [], "filters": [(re.compile("^tag_"), "sparkle")]})
    assert exc.value.context.field_name == "^tag_"
    with pytest.raises(InvalidRuleSpecError) as exc:
        normalize_rules([(("a", "b"), 42)])
    assert exc.value.context.field_name == "a, b"


# ─── Purity ──────────────────────────────────────────────────────

def test_caller_rules_not_mutated():
    rules = {"checks": [("name", "required")]}
    normalize_rules(rules)
    normalize_rules(rules)
    assert rules == {"checks": [("name", "required")]}


def test_with_fields_returns_new_spec():
    spec = normalize_rules({"checks": [], "fields": ["a"]})
    widened = spec.with_fields(["a", "b"])
    assert spec.fields == ("a",)
    assert widened.fields == ("a", "b")
