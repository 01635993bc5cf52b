"""
Quora Backend — Authorization Guard
=====================================

What:  The precondition every authenticated operation runs first.
How:   Looks the presented token up in the session store:
           no session          → NotSignedInError ("User has not signed in")
           session logged out  → SignedOutError (caller's message)
           otherwise           → the session; `session.user` is the actor
Who:   Called by the user, admin, question and answer services.

The check has no side effects. The session's expires_at is deliberately not
compared with the clock: a token stays valid until its owner signs out.
"""

import logging

from quora.exceptions import NotSignedInError, SignedOutError
from quora.models import User, UserSession
from quora.stores.base import Stores

logger = logging.getLogger(__name__)


class AuthorizationService:

    def __init__(self, stores: Stores):
        self._stores = stores

    async def check_authorization(self, access_token: str, signed_out_message: str) -> UserSession:
        """
        Resolve the active session behind `access_token`.

        Args:
            access_token: Bearer token as presented by the client
            signed_out_message: Message for SignedOutError, worded for the
                action being attempted (e.g. "Sign in first to post an answer")

        Raises:
            NotSignedInError: No session carries this token
            SignedOutError: The session was closed by sign-out
        """
        session = None
        if access_token:
            session = await self._stores.sessions.by_access_token(access_token)

        if session is None:
            logger.warning("Rejected request with unknown access token")
            raise NotSignedInError()

        if session.logout_at is not None:
            logger.warning("Rejected request on signed-out session %s", session.uuid)
            raise SignedOutError(message=signed_out_message)

        return session


def is_owner(actor: User, owner: User) -> bool:
    """Ownership is decided by public id, not by object identity."""
    return actor.uuid == owner.uuid
