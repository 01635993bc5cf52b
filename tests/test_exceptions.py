"""
Quora Backend — Exception Hierarchy Tests
===========================================

What we test:
    ✅ Default code, message and status per error class
    ✅ Caller-supplied context dicts are copied, never mutated
"""

from quora.exceptions import (
    AnswerNotFoundError,
    DuplicateKeyError,
    QuoraError,
    UserNotFoundError,
)


class TestErrorDefaults:

    def test_not_found_defaults(self):
        exc = AnswerNotFoundError(resource_id="a-1")

        assert isinstance(exc, QuoraError)
        assert exc.code == "ANS-001"
        assert exc.status_code == 404
        assert exc.message == "Entered answer uuid does not exist"
        assert exc.context == {"resource_id": "a-1"}

    def test_duplicate_key_records_field(self):
        exc = DuplicateKeyError(field="email")

        assert exc.code == "DUP-001"
        assert exc.field == "email"
        assert exc.context == {"field": "email"}


class TestErrorContext:

    def test_not_found_leaves_callers_dict_alone(self):
        shared = {"action": "profile lookup"}

        exc = UserNotFoundError(resource_id="u-1", context=shared)

        assert shared == {"action": "profile lookup"}
        assert exc.context == {"action": "profile lookup", "resource_id": "u-1"}

    def test_duplicate_key_leaves_callers_dict_alone(self):
        shared = {"action": "user insert"}

        first = DuplicateKeyError(field="email", context=shared)
        second = DuplicateKeyError(field="username", context=shared)

        assert shared == {"action": "user insert"}
        assert first.context["field"] == "email"
        assert second.context["field"] == "username"
