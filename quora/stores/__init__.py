# Stores package init
"""
Quora Backend — Entity Stores
==============================

Persistence interfaces (quora.stores.base) and their async SQLAlchemy
implementation (quora.stores.sql).
"""

from quora.stores.base import AnswerStore, QuestionStore, SessionStore, Stores, UserStore
from quora.stores.sql import SqlStores

__all__ = ["AnswerStore", "QuestionStore", "SessionStore", "SqlStores", "Stores", "UserStore"]
