"""
Quora Backend — Question Service
==================================

What:  Question CRUD gated by the Authorization Guard and ownership rules.

Ownership rules:
    edit    owner only                  → NotOwnerError
    delete  owner, or any admin         → NotOwnerOrAdminError
    read    any signed-in user
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, List

from quora.exceptions import NotOwnerError, NotOwnerOrAdminError, QuestionNotFoundError, UserNotFoundError
from quora.models import Question
from quora.services import utc_now
from quora.services.authorization import AuthorizationService, is_owner
from quora.stores.base import Stores

logger = logging.getLogger(__name__)


class QuestionService:

    def __init__(self, stores: Stores, clock: Callable[[], datetime] = utc_now):
        self._stores = stores
        self._clock = clock
        self._authorization = AuthorizationService(stores)

    async def create(self, content: str, access_token: str) -> Question:
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to post a question"
            )
            question = Question(
                uuid=str(uuid.uuid4()),
                content=content,
                date=self._clock(),
                user=session.user,
            )
            question = await self._stores.questions.insert(question)

        logger.info("User %s created question %s", session.user.uuid, question.uuid)
        return question

    async def list_all(self, access_token: str) -> List[Question]:
        async with self._stores.transaction():
            await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to get all questions"
            )
            return await self._stores.questions.all()

    async def list_by_user(self, user_public_id: str, access_token: str) -> List[Question]:
        """
        All questions posted by one user.

        Raises:
            UserNotFoundError: no user with this public id
        """
        async with self._stores.transaction():
            await self._authorization.check_authorization(
                access_token,
                "User is signed out.Sign in first to get all questions posted by a specific user",
            )
            if await self._stores.users.by_public_id(user_public_id) is None:
                raise UserNotFoundError(
                    message="User with entered uuid whose question details are to be seen does not exist",
                    resource_id=user_public_id,
                )
            return await self._stores.questions.all_by_owner(user_public_id)

    async def edit(self, question_public_id: str, content: str, access_token: str) -> Question:
        """
        Replace the content of a question. Owner only.

        Raises:
            QuestionNotFoundError: no question with this public id
            NotOwnerError: the acting user did not post the question
        """
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to edit the question"
            )
            question = await self._stores.questions.by_public_id(question_public_id)
            if question is None:
                raise QuestionNotFoundError(resource_id=question_public_id)

            if not is_owner(session.user, question.user):
                logger.warning(
                    "User %s attempted to edit question %s owned by %s",
                    session.user.uuid, question.uuid, question.user.uuid,
                )
                raise NotOwnerError(message="Only the question owner can edit the question")

            question.content = content
            return await self._stores.questions.update(question)

    async def delete(self, question_public_id: str, access_token: str) -> Question:
        """
        Delete a question and its answers. Owner or admin.

        Raises:
            QuestionNotFoundError: no question with this public id
            NotOwnerOrAdminError: the acting user is neither owner nor admin
        """
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to delete a question"
            )
            question = await self._stores.questions.by_public_id(question_public_id)
            if question is None:
                raise QuestionNotFoundError(resource_id=question_public_id)

            actor = session.user
            if not (is_owner(actor, question.user) or actor.is_admin):
                logger.warning(
                    "User %s attempted to delete question %s owned by %s",
                    actor.uuid, question.uuid, question.user.uuid,
                )
                raise NotOwnerOrAdminError(
                    message="Only the question owner or admin can delete the question"
                )

            await self._stores.answers.delete_by_question(question)
            deleted = await self._stores.questions.delete(question)

        logger.info("User %s deleted question %s", actor.uuid, deleted.uuid)
        return deleted
