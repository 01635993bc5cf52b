"""
Quora Backend — FastAPI Dependency Wiring
===========================================

What:  Builds the per-request object graph: AsyncSession → SqlStores →
       services. Routes only ever ask for a service or the access token.
How:   Plain FastAPI `Depends()` chains. Tests override `get_stores` (or any
       service factory) through `app.dependency_overrides`.
"""

from datetime import timedelta

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from quora.config import settings
from quora.database import get_db_session
from quora.security.passwords import password_encoder
from quora.security.tokens import token_issuer
from quora.services.admin_service import AdminService
from quora.services.answer_service import AnswerService
from quora.services.question_service import QuestionService
from quora.services.user_service import UserService
from quora.stores.base import Stores
from quora.stores.sql import SqlStores

BEARER_PREFIX = "Bearer "


def get_stores(db: AsyncSession = Depends(get_db_session)) -> Stores:
    return SqlStores(db)


def get_access_token(authorization: str = Header(default="")) -> str:
    """
    Bearer token from the `authorization` header.

    Both `Bearer <token>` and a bare token are accepted. A missing header
    yields "", which the Guard reports as not signed in.
    """
    token = authorization.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    return token


def get_user_service(stores: Stores = Depends(get_stores)) -> UserService:
    return UserService(
        stores,
        password_encoder=password_encoder,
        token_issuer=token_issuer,
        session_ttl=timedelta(hours=settings.session_ttl_hours),
    )


def get_admin_service(stores: Stores = Depends(get_stores)) -> AdminService:
    return AdminService(stores)


def get_question_service(stores: Stores = Depends(get_stores)) -> QuestionService:
    return QuestionService(stores)


def get_answer_service(stores: Stores = Depends(get_stores)) -> AnswerService:
    return AnswerService(stores)
