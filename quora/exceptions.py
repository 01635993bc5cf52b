"""
Quora Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for every failure a domain operation
       can report.
How:   Each domain exception carries a stable short `code` (suitable for
       client-side branching), a human-readable `message` chosen at the raise
       site, and a default HTTP `status_code`. The global handlers registered
       in main.py turn them into `{"code", "message"}` JSON bodies.
Who:   Raised by the security helpers, stores and services; caught by the
       global handlers.

Exception Hierarchy:
    QuoraError (base)
    ├── SignUpRestrictedError          → 409
    │   ├── UsernameTakenError          SGR-001
    │   └── EmailTakenError             SGR-002
    ├── AuthenticationFailedError      → 401
    │   ├── UnknownUsernameError        ATH-001
    │   └── BadPasswordError            ATH-002
    ├── AuthorizationFailedError       → 403
    │   ├── NotSignedInError            ATHR-001 (SGR-001 / 401 at sign-out)
    │   ├── SignedOutError              ATHR-002
    │   ├── NotOwnerError               ATHR-003
    │   ├── NotOwnerOrAdminError        ATHR-003
    │   └── NotAdminError               ATHR-003
    ├── ResourceNotFoundError          → 404
    │   ├── UserNotFoundError           USR-001
    │   ├── QuestionNotFoundError       QUES-001
    │   ├── InvalidQuestionError        QUES-001
    │   └── AnswerNotFoundError         ANS-001
    ├── DuplicateKeyError              → 409 (store-level unique violation)
    └── DatabaseError                  → 500 (unclassified store failure)

The taxonomy is keyed by class, not by message: the same kind may carry a
different message at each call site (e.g. SignedOutError).
"""

from typing import Any, Dict, Optional


class QuoraError(Exception):
    """
    Base exception for all Quora application errors.

    Attributes:
        code:        Stable short code returned to clients
        message:     User-facing error description (safe to return in API response)
        status_code: HTTP status the calling layer should answer with
        context:     Additional debug info (logged but NOT returned to client)
    """

    code: str = "GEN-001"
    default_message: str = "An unexpected error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ══════════════════════════════════════════════════════════════════════════
# Sign-up
# ══════════════════════════════════════════════════════════════════════════

class SignUpRestrictedError(QuoraError):
    """A natural key of the candidate user is already registered."""

    status_code = 409


class UsernameTakenError(SignUpRestrictedError):
    code = "SGR-001"
    default_message = "Try any other Username, this Username has already been taken"


class EmailTakenError(SignUpRestrictedError):
    code = "SGR-002"
    default_message = "This user has already been registered, try with any other emailId"


# ══════════════════════════════════════════════════════════════════════════
# Sign-in
# ══════════════════════════════════════════════════════════════════════════

class AuthenticationFailedError(QuoraError):
    """Credentials presented at sign-in did not match a user."""

    status_code = 401


class UnknownUsernameError(AuthenticationFailedError):
    code = "ATH-001"
    default_message = "This username does not exist"


class BadPasswordError(AuthenticationFailedError):
    code = "ATH-002"
    default_message = "Password failed"


# ══════════════════════════════════════════════════════════════════════════
# Authorization
# ══════════════════════════════════════════════════════════════════════════

class AuthorizationFailedError(QuoraError):
    """
    The caller may not perform the operation.

    Covers both token problems (no session, signed-out session) and
    role/ownership violations. 403 at resource boundaries; sign-out reports
    an unknown token with 401 instead (see UserService.sign_out).
    """

    status_code = 403


class NotSignedInError(AuthorizationFailedError):
    code = "ATHR-001"
    default_message = "User has not signed in"


class SignedOutError(AuthorizationFailedError):
    code = "ATHR-002"
    default_message = "User is signed out"


class NotOwnerError(AuthorizationFailedError):
    code = "ATHR-003"
    default_message = "Only the owner can edit this resource"


class NotOwnerOrAdminError(AuthorizationFailedError):
    code = "ATHR-003"
    default_message = "Only the owner or admin can delete this resource"


class NotAdminError(AuthorizationFailedError):
    code = "ATHR-003"
    default_message = "Unauthorized Access, Entered user is not an admin"


# ══════════════════════════════════════════════════════════════════════════
# Missing resources
# ══════════════════════════════════════════════════════════════════════════

class ResourceNotFoundError(QuoraError):
    """
    A resource addressed by public id does not exist.

    Stores return None for missing records; services convert None into
    one of these so the handler can answer 404.
    """

    status_code = 404

    def __init__(
        self,
        message: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class UserNotFoundError(ResourceNotFoundError):
    code = "USR-001"
    default_message = "User with entered uuid does not exist"


class QuestionNotFoundError(ResourceNotFoundError):
    code = "QUES-001"
    default_message = "Entered question uuid does not exist"


class InvalidQuestionError(ResourceNotFoundError):
    code = "QUES-001"
    default_message = "The question entered is invalid"


class AnswerNotFoundError(ResourceNotFoundError):
    code = "ANS-001"
    default_message = "Entered answer uuid does not exist"


# ══════════════════════════════════════════════════════════════════════════
# Store failures
# ══════════════════════════════════════════════════════════════════════════

class DuplicateKeyError(QuoraError):
    """
    Raised by a store when an insert violates a unique constraint.

    `field` names the natural key that collided (e.g. "username") when the
    store can tell; services translate it into the matching domain error.
    """

    code = "DUP-001"
    default_message = "A record with the same unique key already exists"
    status_code = 409

    def __init__(
        self,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(context=ctx)
        self.field = field


class DatabaseError(QuoraError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; details stay in
    the server log.
    """

    code = "DB-001"
    default_message = "A database error occurred. Please try again later."
    status_code = 500
