"""
Quora Backend — User Service
==============================

What:  Registration, sign-in/sign-out and profile lookup.
Who:   Called by the /user and /userprofile route handlers.

Sign-in Flow:
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ username │───▶│ recompute    │───▶│ issue token  │───▶│ persist  │
    │ lookup   │    │ hash w/ salt │    │ (JWT)        │    │ session  │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘
         │ absent          │ mismatch
         ▼                 ▼
    ATH-001           ATH-002   (no session row is written)
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable

from quora.exceptions import (
    BadPasswordError,
    DuplicateKeyError,
    EmailTakenError,
    NotSignedInError,
    UnknownUsernameError,
    UserNotFoundError,
    UsernameTakenError,
)
from quora.models import User, UserRole, UserSession
from quora.security.passwords import PasswordEncoder
from quora.security.tokens import TokenIssuer
from quora.services import utc_now
from quora.services.authorization import AuthorizationService
from quora.stores.base import Stores

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=10)


class UserService:
    """
    Account lifecycle operations.

    Args:
        stores: Entity stores plus transaction boundary
        password_encoder: Salted hash derivation / verification
        token_issuer: Signs the access token handed out at sign-in
        clock: Returns "now"; injectable for tests
        session_ttl: expires_at - login_at for new sessions
    """

    def __init__(
        self,
        stores: Stores,
        password_encoder: PasswordEncoder,
        token_issuer: TokenIssuer,
        clock: Callable[[], datetime] = utc_now,
        session_ttl: timedelta = SESSION_TTL,
    ):
        self._stores = stores
        self._passwords = password_encoder
        self._tokens = token_issuer
        self._clock = clock
        self._session_ttl = session_ttl
        self._authorization = AuthorizationService(stores)

    async def sign_up(self, candidate: User) -> User:
        """
        Register a new user.

        `candidate.password` holds the plaintext on the way in; it is
        replaced by the salted hash before anything is persisted.

        Raises:
            UsernameTakenError: username already registered (checked first)
            EmailTakenError: email already registered
        """
        async with self._stores.transaction():
            if await self._stores.users.by_username(candidate.username) is not None:
                raise UsernameTakenError()
            if await self._stores.users.by_email(candidate.email) is not None:
                raise EmailTakenError()

            salt, password_hash = self._passwords.encode(candidate.password)
            candidate.salt = salt
            candidate.password = password_hash
            candidate.uuid = candidate.uuid or str(uuid.uuid4())
            candidate.role = candidate.role or UserRole.NONADMIN.value

            try:
                user = await self._stores.users.insert(candidate)
            except DuplicateKeyError as e:
                # Lost a race with a concurrent sign-up
                if e.field == "username":
                    raise UsernameTakenError() from e
                if e.field == "email":
                    raise EmailTakenError() from e
                raise

        logger.info("Registered user %s", user.uuid)
        return user

    async def sign_in(self, username: str, password: str) -> UserSession:
        """
        Verify credentials and open a new session.

        Raises:
            UnknownUsernameError: no user with this username
            BadPasswordError: password does not match the stored hash
        """
        async with self._stores.transaction():
            user = await self._stores.users.by_username(username)
            if user is None:
                raise UnknownUsernameError()

            if not self._passwords.verify(password, user.salt, user.password):
                logger.warning("Failed sign-in for user %s", user.uuid)
                raise BadPasswordError()

            now = self._clock()
            expires_at = now + self._session_ttl
            session = UserSession(
                uuid=str(uuid.uuid4()),
                user=user,
                access_token=self._tokens.issue(user.uuid, now, expires_at),
                login_at=now,
                expires_at=expires_at,
            )
            session = await self._stores.sessions.insert(session)

        logger.info("User %s signed in (session %s)", user.uuid, session.uuid)
        return session

    async def sign_out(self, access_token: str) -> UserSession:
        """
        Close the session behind `access_token`.

        Looks the token up directly rather than through the Guard. A session
        that is already signed out is closed again (logout_at moves to now);
        only an unknown token fails.

        Raises:
            NotSignedInError: SGR-001 / 401, no session carries this token
        """
        async with self._stores.transaction():
            session = None
            if access_token:
                session = await self._stores.sessions.by_access_token(access_token)
            if session is None:
                raise NotSignedInError(
                    message="User is not Signed in",
                    code="SGR-001",
                    status_code=401,
                )

            session.logout_at = self._clock()
            session = await self._stores.sessions.update(session)

        logger.info("User %s signed out (session %s)", session.user.uuid, session.uuid)
        return session

    async def get_user_details(self, user_public_id: str, access_token: str) -> User:
        """
        Any signed-in user may view any profile.

        Raises:
            NotSignedInError / SignedOutError: Guard failures
            UserNotFoundError: no user with this public id
        """
        async with self._stores.transaction():
            await self._authorization.check_authorization(
                access_token, "User is signed out.Sign in first to get user details"
            )
            user = await self._stores.users.by_public_id(user_public_id)
            if user is None:
                raise UserNotFoundError(resource_id=user_public_id)
        return user
