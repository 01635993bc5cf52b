"""
Quora Backend — SQLAlchemy Entity Stores
==========================================

What:  Async SQLAlchemy implementations of the store interfaces.
How:   Every store wraps one request-scoped AsyncSession. Writes are flushed
       immediately (so surrogate keys and constraint violations surface at
       the call site) but only committed by `SqlStores.transaction()`.

Error translation:
    IntegrityError on a unique key  → DuplicateKeyError(field)
    any other SQLAlchemyError       → DatabaseError (details logged only)
"""

import logging
import re
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator, List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quora.exceptions import DatabaseError, DuplicateKeyError
from quora.models import Answer, Question, User, UserSession
from quora.stores.base import AnswerStore, QuestionStore, SessionStore, Stores, UserStore

logger = logging.getLogger(__name__)

# Named unique constraints (models and migration 001) → natural key
_CONSTRAINT_FIELDS = {
    "uq_users_username": "username",
    "uq_users_email": "email",
    "uq_user_auth_access_token": "access_token",
}
# SQLite reports "UNIQUE constraint failed: <table>.<column>" instead
_COLUMN_FIELDS = {
    "users.username": "username",
    "users.email": "email",
    "user_auth.access_token": "access_token",
}

_PG_CONSTRAINT = re.compile(r'unique constraint "([^"]+)"')
_SQLITE_COLUMNS = re.compile(r"UNIQUE constraint failed: ([\w.,\s]+)")


def _unique_field(error: IntegrityError) -> Optional[str]:
    """
    Name the natural key behind a unique violation, or None.

    Only the constraint (or table.column) identifier is consulted. The
    message text also carries the offending value, which may itself
    contain a column name.
    """
    orig = error.orig
    # asyncpg sets constraint_name on the driver error the dialect wraps
    constraint = getattr(orig, "constraint_name", None) or getattr(
        orig.__cause__, "constraint_name", None
    )
    detail = str(orig)
    if constraint is None:
        match = _PG_CONSTRAINT.search(detail)
        constraint = match.group(1) if match else None
    if constraint is not None:
        return _CONSTRAINT_FIELDS.get(constraint)

    match = _SQLITE_COLUMNS.search(detail)
    if match is None:
        return None
    for column in match.group(1).split(","):
        field = _COLUMN_FIELDS.get(column.strip())
        if field is not None:
            return field
    return None


@contextmanager
def _db_errors(action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures raised inside the block."""
    try:
        yield
    except IntegrityError as e:
        field = _unique_field(e)
        logger.warning("Unique constraint violated during %s (field=%s)", action, field)
        raise DuplicateKeyError(field=field, context={"action": action}) from e
    except SQLAlchemyError as e:
        logger.error("Database error during %s: %s", action, str(e), exc_info=True)
        raise DatabaseError(context={"action": action, "error_type": type(e).__name__}) from e


class _SqlStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _first(self, statement, action: str):
        with _db_errors(action):
            result = await self._session.execute(statement)
            return result.scalars().first()

    async def _list(self, statement, action: str) -> list:
        with _db_errors(action):
            result = await self._session.execute(statement)
            return list(result.scalars().all())

    async def _add(self, entity, action: str):
        with _db_errors(action):
            self._session.add(entity)
            await self._session.flush()
        return entity

    async def _flush(self, entity, action: str):
        with _db_errors(action):
            await self._session.flush()
        return entity

    async def _remove(self, entity, action: str):
        with _db_errors(action):
            await self._session.delete(entity)
            await self._session.flush()
        return entity

    async def _bulk_delete(self, statement, action: str) -> int:
        with _db_errors(action):
            result = await self._session.execute(
                statement.execution_options(synchronize_session=False)
            )
            return result.rowcount or 0


class SqlUserStore(_SqlStore, UserStore):

    async def by_username(self, username: str) -> Optional[User]:
        return await self._first(select(User).where(User.username == username), "user lookup")

    async def by_email(self, email: str) -> Optional[User]:
        return await self._first(select(User).where(User.email == email), "user lookup")

    async def by_public_id(self, public_id: str) -> Optional[User]:
        return await self._first(select(User).where(User.uuid == public_id), "user lookup")

    async def insert(self, user: User) -> User:
        return await self._add(user, "user insert")

    async def delete(self, user: User) -> User:
        return await self._remove(user, "user delete")


class SqlSessionStore(_SqlStore, SessionStore):

    async def by_access_token(self, access_token: str) -> Optional[UserSession]:
        return await self._first(
            select(UserSession).where(UserSession.access_token == access_token),
            "session lookup",
        )

    async def insert(self, session: UserSession) -> UserSession:
        return await self._add(session, "session insert")

    async def update(self, session: UserSession) -> UserSession:
        return await self._flush(session, "session update")

    async def delete_by_user(self, user: User) -> int:
        return await self._bulk_delete(
            delete(UserSession).where(UserSession.user_id == user.id),
            "session cascade delete",
        )


class SqlQuestionStore(_SqlStore, QuestionStore):

    async def by_public_id(self, public_id: str) -> Optional[Question]:
        return await self._first(
            select(Question).where(Question.uuid == public_id), "question lookup"
        )

    async def insert(self, question: Question) -> Question:
        return await self._add(question, "question insert")

    async def update(self, question: Question) -> Question:
        return await self._flush(question, "question update")

    async def delete(self, question: Question) -> Question:
        return await self._remove(question, "question delete")

    async def all(self) -> List[Question]:
        return await self._list(select(Question).order_by(Question.id), "question listing")

    async def all_by_owner(self, user_public_id: str) -> List[Question]:
        owner_ids = select(User.id).where(User.uuid == user_public_id)
        return await self._list(
            select(Question).where(Question.user_id.in_(owner_ids)).order_by(Question.id),
            "question listing",
        )

    async def delete_by_owner(self, user: User) -> int:
        return await self._bulk_delete(
            delete(Question).where(Question.user_id == user.id),
            "question cascade delete",
        )


class SqlAnswerStore(_SqlStore, AnswerStore):

    async def by_public_id(self, public_id: str) -> Optional[Answer]:
        return await self._first(select(Answer).where(Answer.uuid == public_id), "answer lookup")

    async def insert(self, answer: Answer) -> Answer:
        return await self._add(answer, "answer insert")

    async def update(self, answer: Answer) -> Answer:
        return await self._flush(answer, "answer update")

    async def delete(self, answer: Answer) -> Answer:
        return await self._remove(answer, "answer delete")

    async def all_by_question(self, question_public_id: str) -> List[Answer]:
        question_ids = select(Question.id).where(Question.uuid == question_public_id)
        return await self._list(
            select(Answer).where(Answer.question_id.in_(question_ids)).order_by(Answer.id),
            "answer listing",
        )

    async def delete_by_question(self, question: Question) -> int:
        return await self._bulk_delete(
            delete(Answer).where(Answer.question_id == question.id),
            "answer cascade delete",
        )

    async def delete_by_owner(self, user: User) -> int:
        owned_questions = select(Question.id).where(Question.user_id == user.id)
        return await self._bulk_delete(
            delete(Answer).where(
                or_(Answer.user_id == user.id, Answer.question_id.in_(owned_questions))
            ),
            "answer cascade delete",
        )


class SqlStores(Stores):
    """All four stores bound to one AsyncSession, plus its transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self.users = SqlUserStore(session)
        self.sessions = SqlSessionStore(session)
        self.questions = SqlQuestionStore(session)
        self.answers = SqlAnswerStore(session)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Commit on normal exit, roll back on any exception.

        A failing commit is rolled back too and surfaces as DatabaseError.
        """
        try:
            yield
            with _db_errors("commit"):
                await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
