"""
Quora Backend — Answer Service
================================

What:  Answer CRUD gated by the Authorization Guard and ownership rules.

Check order:
    create / list_for_question resolve the question BEFORE the Guard, so an
    unknown question reports InvalidQuestionError even without a token.
    edit / delete run the Guard first, like every other operation.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, List

from quora.exceptions import AnswerNotFoundError, InvalidQuestionError, NotOwnerError, NotOwnerOrAdminError
from quora.models import Answer
from quora.services import utc_now
from quora.services.authorization import AuthorizationService, is_owner
from quora.stores.base import Stores

logger = logging.getLogger(__name__)


class AnswerService:

    def __init__(self, stores: Stores, clock: Callable[[], datetime] = utc_now):
        self._stores = stores
        self._clock = clock
        self._authorization = AuthorizationService(stores)

    async def create(self, answer_text: str, question_public_id: str, access_token: str) -> Answer:
        """
        Post an answer to an existing question.

        Raises:
            InvalidQuestionError: checked first, no question with this public id
            NotSignedInError / SignedOutError: Guard failures
        """
        async with self._stores.transaction():
            question = await self._stores.questions.by_public_id(question_public_id)
            if question is None:
                raise InvalidQuestionError(resource_id=question_public_id)

            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to post an answer"
            )
            answer = Answer(
                uuid=str(uuid.uuid4()),
                answer=answer_text,
                date=self._clock(),
                user=session.user,
                question=question,
            )
            answer = await self._stores.answers.insert(answer)

        logger.info("User %s answered question %s (%s)", session.user.uuid, question.uuid, answer.uuid)
        return answer

    async def edit(self, answer_public_id: str, content: str, access_token: str) -> Answer:
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to edit an answer"
            )
            answer = await self._stores.answers.by_public_id(answer_public_id)
            if answer is None:
                raise AnswerNotFoundError(resource_id=answer_public_id)

            if not is_owner(session.user, answer.user):
                logger.warning(
                    "User %s attempted to edit answer %s owned by %s",
                    session.user.uuid, answer.uuid, answer.user.uuid,
                )
                raise NotOwnerError(message="Only the answer owner can edit the answer")

            answer.answer = content
            return await self._stores.answers.update(answer)

    async def delete(self, answer_public_id: str, access_token: str) -> Answer:
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to delete an answer"
            )
            answer = await self._stores.answers.by_public_id(answer_public_id)
            if answer is None:
                raise AnswerNotFoundError(resource_id=answer_public_id)

            actor = session.user
            if not (is_owner(actor, answer.user) or actor.is_admin):
                logger.warning(
                    "User %s attempted to delete answer %s owned by %s",
                    actor.uuid, answer.uuid, answer.user.uuid,
                )
                raise NotOwnerOrAdminError(
                    message="Only the answer owner or admin can delete the answer"
                )

            deleted = await self._stores.answers.delete(answer)

        logger.info("User %s deleted answer %s", actor.uuid, deleted.uuid)
        return deleted

    async def list_for_question(self, question_public_id: str, access_token: str) -> List[Answer]:
        async with self._stores.transaction():
            question = await self._stores.questions.by_public_id(question_public_id)
            if question is None:
                raise InvalidQuestionError(
                    message="The question with entered uuid whose details are to be seen does not exist",
                    resource_id=question_public_id,
                )

            await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to get the answers"
            )
            return await self._stores.answers.all_by_question(question_public_id)
