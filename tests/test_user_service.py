"""
Quora Backend — User Service & Authorization Guard Tests
==========================================================

What:  Registration, sign-in/out and profile lookup against a real (in-memory)
       database, plus the Guard's three outcomes.
How:   Service fixtures from conftest.py share one SqlStores per test; a few
       cases use mock_stores to force store-level races.

What we test:
    ✅ Sign-up hashes the password, assigns a uuid and the nonadmin role
    ✅ Duplicate username (checked first) and duplicate email
    ✅ Concurrent sign-up race: DuplicateKeyError → the matching domain error
    ✅ Sign-in: unknown user, wrong password (no session written), success
    ✅ Two sign-ins produce two distinct active sessions
    ✅ Sign-out: unknown token, success, repeated sign-out
    ✅ Guard: no session / signed out / active; expiry is not enforced
    ✅ Profile lookup: guard first, then user existence
"""

from datetime import timedelta

import pytest

from quora.exceptions import (
    BadPasswordError,
    DuplicateKeyError,
    EmailTakenError,
    NotSignedInError,
    SignedOutError,
    UnknownUsernameError,
    UserNotFoundError,
    UsernameTakenError,
)
from quora.services.authorization import AuthorizationService
from quora.services.user_service import UserService


class TestSignUp:

    @pytest.mark.asyncio
    async def test_sign_up_success(self, user_service, password_encoder, new_user):
        user = await user_service.sign_up(new_user("alice", password="pa55"))

        assert user.id is not None
        assert len(user.uuid) == 36
        assert user.role == "nonadmin"
        assert user.password != "pa55"
        assert password_encoder.encode("pa55", user.salt) == user.password

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, user_service, new_user):
        await user_service.sign_up(new_user("alice"))

        with pytest.raises(UsernameTakenError) as exc_info:
            await user_service.sign_up(new_user("alice", email="other@example.com"))

        assert exc_info.value.code == "SGR-001"
        assert exc_info.value.message == "Try any other Username, this Username has already been taken"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, user_service, new_user):
        await user_service.sign_up(new_user("alice", email="same@example.com"))

        with pytest.raises(EmailTakenError) as exc_info:
            await user_service.sign_up(new_user("bob", email="same@example.com"))

        assert exc_info.value.code == "SGR-002"
        assert exc_info.value.message == "This user has already been registered, try with any other emailId"

    @pytest.mark.asyncio
    async def test_username_checked_before_email(self, user_service, new_user):
        await user_service.sign_up(new_user("alice", email="same@example.com"))

        with pytest.raises(UsernameTakenError):
            await user_service.sign_up(new_user("alice", email="same@example.com"))

    @pytest.mark.asyncio
    async def test_failed_sign_up_leaves_no_user(self, user_service, stores, new_user):
        await user_service.sign_up(new_user("alice", email="same@example.com"))
        with pytest.raises(EmailTakenError):
            await user_service.sign_up(new_user("bob", email="same@example.com"))

        assert await stores.users.by_username("bob") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, expected",
        [("username", UsernameTakenError), ("email", EmailTakenError)],
    )
    async def test_insert_race_is_translated(
        self, mock_stores, password_encoder, token_issuer, new_user, field, expected
    ):
        mock_stores.users.by_username.return_value = None
        mock_stores.users.by_email.return_value = None
        mock_stores.users.insert.side_effect = DuplicateKeyError(field=field)
        service = UserService(mock_stores, password_encoder, token_issuer)

        with pytest.raises(expected):
            await service.sign_up(new_user("alice"))


class TestSignIn:

    @pytest.mark.asyncio
    async def test_unknown_username(self, user_service):
        with pytest.raises(UnknownUsernameError) as exc_info:
            await user_service.sign_in("ghost", "secret")
        assert exc_info.value.code == "ATH-001"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_password_writes_no_session(self, mock_stores, password_encoder, token_issuer, new_user):
        salt, password_hash = password_encoder.encode("right")
        user = new_user("alice")
        user.uuid, user.salt, user.password = "u-1", salt, password_hash
        mock_stores.users.by_username.return_value = user
        service = UserService(mock_stores, password_encoder, token_issuer)

        with pytest.raises(BadPasswordError) as exc_info:
            await service.sign_in("alice", "wrong")

        assert exc_info.value.code == "ATH-002"
        mock_stores.sessions.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sign_in_opens_session(self, user_service, new_user, clock):
        user = await user_service.sign_up(new_user("alice"))

        session = await user_service.sign_in("alice", "secret")

        assert session.user.uuid == user.uuid
        assert session.access_token
        assert session.logout_at is None
        assert session.login_at == clock.start
        assert session.expires_at - session.login_at == timedelta(hours=10)

    @pytest.mark.asyncio
    async def test_two_sign_ins_give_two_active_sessions(self, user_service, stores, new_user):
        await user_service.sign_up(new_user("alice"))

        first = await user_service.sign_in("alice", "secret")
        second = await user_service.sign_in("alice", "secret")

        assert first.access_token != second.access_token
        assert (await stores.sessions.by_access_token(first.access_token)).is_active
        assert (await stores.sessions.by_access_token(second.access_token)).is_active


class TestSignOut:

    @pytest.mark.asyncio
    async def test_unknown_token(self, user_service):
        with pytest.raises(NotSignedInError) as exc_info:
            await user_service.sign_out("no-such-token")

        assert exc_info.value.code == "SGR-001"
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "User is not Signed in"

    @pytest.mark.asyncio
    async def test_sign_out_sets_logout_time(self, user_service, make_user):
        user, token = await make_user("alice")

        session = await user_service.sign_out(token)

        assert session.user.uuid == user.uuid
        assert session.logout_at is not None
        assert not session.is_active

    @pytest.mark.asyncio
    async def test_sign_out_twice_succeeds(self, user_service, make_user):
        _, token = await make_user("alice")

        first = await user_service.sign_out(token)
        first_logout = first.logout_at
        second = await user_service.sign_out(token)

        assert second.logout_at > first_logout

    @pytest.mark.asyncio
    async def test_sign_out_only_closes_one_session(self, user_service, make_user, stores):
        _, token = await make_user("alice")
        other = await user_service.sign_in("alice", "secret")

        await user_service.sign_out(token)

        assert (await stores.sessions.by_access_token(other.access_token)).is_active


class TestAuthorizationGuard:

    @pytest.mark.asyncio
    async def test_no_session(self, stores):
        guard = AuthorizationService(stores)
        with pytest.raises(NotSignedInError) as exc_info:
            await guard.check_authorization("bogus", "signed out")
        assert exc_info.value.code == "ATHR-001"
        assert exc_info.value.message == "User has not signed in"
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_empty_token_is_not_signed_in(self, mock_stores):
        guard = AuthorizationService(mock_stores)
        with pytest.raises(NotSignedInError):
            await guard.check_authorization("", "signed out")
        mock_stores.sessions.by_access_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_signed_out_uses_callers_message(self, stores, user_service, make_user):
        _, token = await make_user("alice")
        await user_service.sign_out(token)

        guard = AuthorizationService(stores)
        with pytest.raises(SignedOutError) as exc_info:
            await guard.check_authorization(token, "Sign in first to do this")

        assert exc_info.value.code == "ATHR-002"
        assert exc_info.value.message == "Sign in first to do this"

    @pytest.mark.asyncio
    async def test_active_session_returns_actor(self, stores, make_user):
        user, token = await make_user("alice")

        session = await AuthorizationService(stores).check_authorization(token, "unused")

        assert session.user.uuid == user.uuid

    @pytest.mark.asyncio
    async def test_expired_session_still_authorizes(self, stores, make_user, clock):
        user, token = await make_user("alice")
        user_id = user.uuid
        async with stores.transaction():
            stale = await stores.sessions.by_access_token(token)
            stale.expires_at = clock.start - timedelta(days=1)
            await stores.sessions.update(stale)

        session = await AuthorizationService(stores).check_authorization(token, "unused")

        assert session.expires_at < clock.start
        assert session.logout_at is None
        assert session.user.uuid == user_id


class TestUserDetails:

    @pytest.mark.asyncio
    async def test_any_signed_in_user_sees_any_profile(self, user_service, make_user):
        alice, _ = await make_user("alice")
        _, bob_token = await make_user("bob")

        found = await user_service.get_user_details(alice.uuid, bob_token)

        assert found.username == "alice"

    @pytest.mark.asyncio
    async def test_unknown_user(self, user_service, make_user):
        _, token = await make_user("alice")

        with pytest.raises(UserNotFoundError) as exc_info:
            await user_service.get_user_details("missing", token)

        assert exc_info.value.code == "USR-001"
        assert exc_info.value.message == "User with entered uuid does not exist"

    @pytest.mark.asyncio
    async def test_guard_runs_before_lookup(self, user_service):
        with pytest.raises(NotSignedInError):
            await user_service.get_user_details("missing", "bogus")

    @pytest.mark.asyncio
    async def test_signed_out_message(self, user_service, make_user):
        alice, token = await make_user("alice")
        await user_service.sign_out(token)

        with pytest.raises(SignedOutError) as exc_info:
            await user_service.get_user_details(alice.uuid, token)

        assert exc_info.value.message == "User is signed out.Sign in first to get user details"
