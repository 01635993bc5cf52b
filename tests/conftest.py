"""
Quora Backend — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:       fresh in-memory SQLite database with all tables
    ├── db_session:      AsyncSession bound to db_engine
    ├── stores:          SqlStores over db_session
    ├── mock_stores:     Stores built from mocks (no database at all)
    ├── password_encoder / token_issuer: fast, test-keyed security helpers
    ├── clock:           deterministic, advancing clock
    ├── user_service / admin_service / question_service / answer_service
    ├── make_user:       registers a user (optionally admin) and signs them in
    └── test_client:     HTTPX AsyncClient wired to the app and db_engine
"""

import os
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any quora imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["LOG_LEVEL"] = "WARNING"

from quora.database import Base, build_engine, build_session_factory  # noqa: E402
from quora.models import User, UserRole  # noqa: E402
from quora.security.passwords import PasswordEncoder  # noqa: E402
from quora.security.tokens import TokenIssuer  # noqa: E402
from quora.services.admin_service import AdminService  # noqa: E402
from quora.services.answer_service import AnswerService  # noqa: E402
from quora.services.question_service import QuestionService  # noqa: E402
from quora.services.user_service import UserService  # noqa: E402
from quora.stores.sql import SqlStores  # noqa: E402

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"
START = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class SteppingClock:
    """Returns START, START+1s, START+2s... so every call yields a new instant."""

    def __init__(self, start: datetime = START):
        self.start = start
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A brand-new in-memory database per test.

    StaticPool keeps the single connection (and therefore the data) alive
    for the lifetime of the engine.
    """
    engine = build_engine(TEST_DB_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = build_session_factory(db_engine)
    async with factory() as session:
        yield session


@pytest.fixture
def stores(db_session):
    """
    SqlStores over the test session.

    A refused operation rolls back and expires every loaded entity; copy
    public ids into locals before calling one and asserting afterwards.
    """
    return SqlStores(db_session)


@pytest.fixture
def mock_stores():
    """
    Stores built entirely from mocks.

    Every store method is an AsyncMock; `transaction()` is a no-op async
    context manager. Configure return values per test.
    """

    @asynccontextmanager
    async def _transaction():
        yield

    stores = MagicMock()
    stores.transaction = MagicMock(side_effect=lambda: _transaction())
    stores.users = AsyncMock()
    stores.sessions = AsyncMock()
    stores.questions = AsyncMock()
    stores.answers = AsyncMock()
    return stores


# ══════════════════════════════════════════════════════════════════════════
# Security & Service Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def password_encoder():
    return PasswordEncoder(rounds=1000, salt_size=16)


@pytest.fixture
def token_issuer():
    return TokenIssuer(secret="test-secret-not-real")


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def user_service(stores, password_encoder, token_issuer, clock):
    return UserService(stores, password_encoder, token_issuer, clock=clock)


@pytest.fixture
def admin_service(stores):
    return AdminService(stores)


@pytest.fixture
def question_service(stores, clock):
    return QuestionService(stores, clock=clock)


@pytest.fixture
def answer_service(stores, clock):
    return AnswerService(stores, clock=clock)


def build_candidate(username: str, email: str = None, password: str = "secret", role: str = None) -> User:
    """Unsaved User carrying a plaintext password, as the signup route builds it."""
    return User(
        first_name=username.capitalize(),
        last_name="Tester",
        username=username,
        email=email or f"{username}@example.com",
        password=password,
        country="India",
        about_me="Just testing",
        dob="1990-01-01",
        contact_number="9999999999",
        role=role,
    )


@pytest.fixture
def make_user(user_service):
    """
    Register a user and sign them in. Returns (user, access_token).

    Usage:
        alice, alice_token = await make_user("alice")
        root, root_token = await make_user("root", admin=True)
    """

    async def _make(username: str, admin: bool = False, password: str = "secret"):
        role = UserRole.ADMIN.value if admin else None
        user = await user_service.sign_up(build_candidate(username, password=password, role=role))
        session = await user_service.sign_in(username, password)
        return user, session.access_token

    return _make


@pytest.fixture
def new_user():
    """Factory for unsaved users: `new_user("alice", email=..., role=...)`."""
    return build_candidate


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    `get_stores` is overridden so every request runs against this test's
    in-memory database.
    """
    from quora.dependencies import get_stores
    from quora.main import app

    factory = build_session_factory(db_engine)

    async def _test_stores():
        async with factory() as session:
            yield SqlStores(session)

    app.dependency_overrides[get_stores] = _test_stores
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
