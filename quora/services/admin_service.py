"""
Quora Backend — Admin Service
===============================

What:  Operations reserved for users with the `admin` role.
How:   Guard check, role check, then an explicit cascade: the target's
       answers (and answers to the target's questions), questions and
       sessions are removed before the user row itself.
"""

import logging

from quora.exceptions import NotAdminError, UserNotFoundError
from quora.models import User
from quora.services.authorization import AuthorizationService
from quora.stores.base import Stores

logger = logging.getLogger(__name__)


class AdminService:

    def __init__(self, stores: Stores):
        self._stores = stores
        self._authorization = AuthorizationService(stores)

    async def delete_user(self, user_public_id: str, access_token: str) -> User:
        """
        Delete a user and everything that depends on them.

        Returns:
            The deleted user (detached, still readable).

        Raises:
            NotSignedInError / SignedOutError: Guard failures
            NotAdminError: the acting user is not an admin
            UserNotFoundError: no user with this public id
        """
        async with self._stores.transaction():
            session = await self._authorization.check_authorization(
                access_token, "User is signed out"
            )
            actor = session.user
            if not actor.is_admin:
                logger.warning("Non-admin %s attempted to delete user %s", actor.uuid, user_public_id)
                raise NotAdminError()

            target = await self._stores.users.by_public_id(user_public_id)
            if target is None:
                raise UserNotFoundError(
                    message="User with entered uuid to be deleted does not exist",
                    resource_id=user_public_id,
                )

            answers = await self._stores.answers.delete_by_owner(target)
            questions = await self._stores.questions.delete_by_owner(target)
            sessions = await self._stores.sessions.delete_by_user(target)
            deleted = await self._stores.users.delete(target)

        logger.info(
            "Admin %s deleted user %s (%d questions, %d answers, %d sessions)",
            actor.uuid, deleted.uuid, questions, answers, sessions,
        )
        return deleted
