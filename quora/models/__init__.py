# Models package init
"""
Quora Backend — ORM Models
===========================

Importing this package registers every table on `Base.metadata`
(Alembic and the test suite rely on that).
"""

from quora.models.answer import Answer
from quora.models.question import Question
from quora.models.session import UserSession
from quora.models.user import User, UserRole

__all__ = ["Answer", "Question", "User", "UserRole", "UserSession"]
