"""
Quora Backend — Question Route Handlers
=========================================

What:  /question/create, /question/all, /question/all/{userId},
       /question/edit/{questionId}, /question/delete/{questionId}.
"""

from typing import List

from fastapi import APIRouter, Depends

from quora.dependencies import get_access_token, get_question_service
from quora.schemas.common import ErrorResponse
from quora.schemas.content import (
    QuestionDetailsResponse,
    QuestionEditRequest,
    QuestionRequest,
    StatusResponse,
)
from quora.services.question_service import QuestionService

router = APIRouter(prefix="/question", tags=["Questions"])

_AUTH_ERRORS = {403: {"description": "Not signed in, or not allowed", "model": ErrorResponse}}


@router.post(
    "/create",
    status_code=201,
    response_model=StatusResponse,
    responses=_AUTH_ERRORS,
    summary="Post a question",
)
async def create_question(
    request: QuestionRequest,
    access_token: str = Depends(get_access_token),
    question_service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    question = await question_service.create(request.content, access_token)
    return StatusResponse(id=question.uuid, status="QUESTION CREATED")


@router.get(
    "/all",
    response_model=List[QuestionDetailsResponse],
    responses=_AUTH_ERRORS,
    summary="List every question",
)
async def get_all_questions(
    access_token: str = Depends(get_access_token),
    question_service: QuestionService = Depends(get_question_service),
) -> List[QuestionDetailsResponse]:
    questions = await question_service.list_all(access_token)
    return [QuestionDetailsResponse(id=q.uuid, content=q.content) for q in questions]


@router.get(
    "/all/{user_id}",
    response_model=List[QuestionDetailsResponse],
    responses={**_AUTH_ERRORS, 404: {"description": "User not found", "model": ErrorResponse}},
    summary="List the questions posted by one user",
)
async def get_all_questions_by_user(
    user_id: str,
    access_token: str = Depends(get_access_token),
    question_service: QuestionService = Depends(get_question_service),
) -> List[QuestionDetailsResponse]:
    questions = await question_service.list_by_user(user_id, access_token)
    return [QuestionDetailsResponse(id=q.uuid, content=q.content) for q in questions]


@router.put(
    "/edit/{question_id}",
    response_model=StatusResponse,
    responses={**_AUTH_ERRORS, 404: {"description": "Question not found", "model": ErrorResponse}},
    summary="Edit a question (owner only)",
)
async def edit_question_content(
    question_id: str,
    request: QuestionEditRequest,
    access_token: str = Depends(get_access_token),
    question_service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    question = await question_service.edit(question_id, request.content, access_token)
    return StatusResponse(id=question.uuid, status="QUESTION EDITED")


@router.delete(
    "/delete/{question_id}",
    response_model=StatusResponse,
    responses={**_AUTH_ERRORS, 404: {"description": "Question not found", "model": ErrorResponse}},
    summary="Delete a question (owner or admin)",
)
async def delete_question(
    question_id: str,
    access_token: str = Depends(get_access_token),
    question_service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    question = await question_service.delete(question_id, access_token)
    return StatusResponse(id=question.uuid, status="QUESTION DELETED")
