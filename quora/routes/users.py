"""
Quora Backend — User Route Handlers
=====================================

What:  POST /user/signup, POST /user/signin, POST /user/signout and
       GET /userprofile/{userId}.
How:   Thin handlers: translate the wire request into a UserService call
       and the returned entity into a response schema. Failures propagate
       to the global exception handlers.

Sign-in credentials travel as `authorization: Basic base64(username:password)`;
the issued bearer token comes back in the `access_token` response header.
"""

import base64
import binascii
import logging
from typing import Tuple

from fastapi import APIRouter, Depends, Header, Response

from quora.dependencies import get_access_token, get_user_service
from quora.exceptions import UnknownUsernameError
from quora.models import User
from quora.schemas.common import ErrorResponse
from quora.schemas.user import (
    SigninResponse,
    SignoutResponse,
    SignupUserRequest,
    SignupUserResponse,
    UserDetailsResponse,
)
from quora.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])

BASIC_PREFIX = "Basic "


def parse_basic_credentials(authorization: str) -> Tuple[str, str]:
    """
    Decode `Basic base64(username:password)`.

    Anything unreadable is reported the same way as an unknown username,
    so malformed headers get a 401 instead of a 500.
    """
    if not authorization.startswith(BASIC_PREFIX):
        raise UnknownUsernameError()
    try:
        decoded = base64.b64decode(authorization[len(BASIC_PREFIX):].strip(), validate=True)
        username, separator, password = decoded.decode("utf-8").partition(":")
    except (binascii.Error, UnicodeDecodeError):
        raise UnknownUsernameError()
    if not separator:
        raise UnknownUsernameError()
    return username, password


@router.post(
    "/user/signup",
    status_code=201,
    response_model=SignupUserResponse,
    responses={409: {"description": "Username or email taken", "model": ErrorResponse}},
    summary="Register a new user",
)
async def signup(
    request: SignupUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> SignupUserResponse:
    candidate = User(
        first_name=request.first_name,
        last_name=request.last_name,
        username=request.user_name,
        email=request.email_address,
        password=request.password,
        country=request.country,
        about_me=request.about_me,
        dob=request.dob,
        contact_number=request.contact_number,
    )
    user = await user_service.sign_up(candidate)
    return SignupUserResponse(id=user.uuid)


@router.post(
    "/user/signin",
    response_model=SigninResponse,
    responses={401: {"description": "Unknown username or wrong password", "model": ErrorResponse}},
    summary="Sign in with Basic credentials",
)
async def signin(
    response: Response,
    authorization: str = Header(default=""),
    user_service: UserService = Depends(get_user_service),
) -> SigninResponse:
    username, password = parse_basic_credentials(authorization)
    session = await user_service.sign_in(username, password)
    response.headers["access_token"] = session.access_token
    return SigninResponse(id=session.user.uuid)


@router.post(
    "/user/signout",
    response_model=SignoutResponse,
    responses={401: {"description": "Token not recognised", "model": ErrorResponse}},
    summary="Close the session behind the bearer token",
)
async def signout(
    access_token: str = Depends(get_access_token),
    user_service: UserService = Depends(get_user_service),
) -> SignoutResponse:
    session = await user_service.sign_out(access_token)
    return SignoutResponse(id=session.user.uuid)


@router.get(
    "/userprofile/{user_id}",
    response_model=UserDetailsResponse,
    responses={
        403: {"description": "Not signed in", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="View any user's profile",
)
async def user_profile(
    user_id: str,
    access_token: str = Depends(get_access_token),
    user_service: UserService = Depends(get_user_service),
) -> UserDetailsResponse:
    user = await user_service.get_user_details(user_id, access_token)
    return UserDetailsResponse(
        first_name=user.first_name,
        last_name=user.last_name,
        user_name=user.username,
        email_address=user.email,
        country=user.country,
        about_me=user.about_me,
        dob=user.dob,
        contact_number=user.contact_number,
    )
