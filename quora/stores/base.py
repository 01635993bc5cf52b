"""
Quora Backend — Abstract Entity Store Interfaces
==================================================

What:  Abstract base classes defining the persistence operations the domain
       services consume.
How:   Concrete implementations (quora.stores.sql) inherit from these and
       implement every method. Services only ever see these interfaces, so a
       test can hand them any implementation.

Contract shared by every store:
    - Lookups return None for a missing record, never raise
    - `insert` assigns surrogate keys and returns the persisted entity
    - A unique-constraint violation on insert raises DuplicateKeyError
    - Any other backend failure raises DatabaseError
    - Nothing is committed by a store method; the enclosing
      `Stores.transaction()` commits or rolls back
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from quora.models import Answer, Question, User, UserSession


class UserStore(ABC):
    """Users keyed by public id and by natural key (username, email)."""

    @abstractmethod
    async def by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def by_public_id(self, public_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def insert(self, user: User) -> User:
        """
        Persist a new user.

        Raises:
            DuplicateKeyError: username or email already registered;
                `field` is "username" or "email" when known.
        """
        ...

    @abstractmethod
    async def delete(self, user: User) -> User:
        """Remove the user row and return the (now detached) entity."""
        ...


class SessionStore(ABC):
    """Bearer-token sessions, looked up by the token string itself."""

    @abstractmethod
    async def by_access_token(self, access_token: str) -> Optional[UserSession]:
        """
        Find a session by token, active or not.

        The returned session has its `user` loaded.
        """
        ...

    @abstractmethod
    async def insert(self, session: UserSession) -> UserSession:
        ...

    @abstractmethod
    async def update(self, session: UserSession) -> UserSession:
        ...

    @abstractmethod
    async def delete_by_user(self, user: User) -> int:
        """Delete every session of `user`; returns the number removed."""
        ...


class QuestionStore(ABC):

    @abstractmethod
    async def by_public_id(self, public_id: str) -> Optional[Question]:
        ...

    @abstractmethod
    async def insert(self, question: Question) -> Question:
        ...

    @abstractmethod
    async def update(self, question: Question) -> Question:
        ...

    @abstractmethod
    async def delete(self, question: Question) -> Question:
        ...

    @abstractmethod
    async def all(self) -> List[Question]:
        """Every question, oldest first. No pagination."""
        ...

    @abstractmethod
    async def all_by_owner(self, user_public_id: str) -> List[Question]:
        ...

    @abstractmethod
    async def delete_by_owner(self, user: User) -> int:
        ...


class AnswerStore(ABC):

    @abstractmethod
    async def by_public_id(self, public_id: str) -> Optional[Answer]:
        ...

    @abstractmethod
    async def insert(self, answer: Answer) -> Answer:
        ...

    @abstractmethod
    async def update(self, answer: Answer) -> Answer:
        ...

    @abstractmethod
    async def delete(self, answer: Answer) -> Answer:
        ...

    @abstractmethod
    async def all_by_question(self, question_public_id: str) -> List[Answer]:
        ...

    @abstractmethod
    async def delete_by_question(self, question: Question) -> int:
        ...

    @abstractmethod
    async def delete_by_owner(self, user: User) -> int:
        """Delete answers written by `user` and answers to `user`'s questions."""
        ...


class Stores(ABC):
    """
    The four stores plus the transaction boundary that spans them.

    Every domain operation runs as:

        async with stores.transaction():
            ...store calls...

    Leaving the block normally commits; leaving it with an exception rolls
    back and re-raises.
    """

    users: UserStore
    sessions: SessionStore
    questions: QuestionStore
    answers: AnswerStore

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        ...
