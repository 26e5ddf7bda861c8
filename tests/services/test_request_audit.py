"""Request Audit — tests for the end-of-request "no validation" report.

Tests cover:
    - Invoked contexts pass silently
    - Unknown handler passes silently
    - Known handler without validation is logged
    - handler_name() reads route name, then endpoint name
"""

import logging
from types import SimpleNamespace

from fieldguard.core.call_context import CallContext
from fieldguard.services.request_audit import audit_request, handler_name


def test_invoked_context_passes():
    ctx = CallContext(invoked=True)
    assert audit_request(ctx, "signup") is True


def test_unknown_handler_passes():
    assert audit_request(CallContext(), None) is True


def test_unvalidated_handler_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="fieldguard"):
        assert audit_request(CallContext(), "signup") is False
    assert "No validation performed for handler signup" in caplog.text


def test_falls_back_to_context_handler(caplog):
    with caplog.at_level(logging.DEBUG, logger="fieldguard"):
        assert audit_request(CallContext(handler="profile")) is False
    assert "profile" in caplog.text


def test_handler_name_prefers_route_name():
    def endpoint():
        pass

    scope = {"route": SimpleNamespace(name="create_user"), "endpoint": endpoint}
    assert handler_name(scope) == "create_user"


def test_handler_name_uses_endpoint():
    def show_user():
        pass

    assert handler_name({"endpoint": show_user}) == "show_user"


def test_handler_name_missing():
    assert handler_name({}) is None
