"""
Quora Backend — Answer Route Handlers
=======================================

What:  /question/{questionId}/answer/create, /answer/edit/{answerId},
       /answer/delete/{answerId}, /answer/all/{questionId}.
"""

from typing import List

from fastapi import APIRouter, Depends

from quora.dependencies import get_access_token, get_answer_service
from quora.schemas.common import ErrorResponse
from quora.schemas.content import (
    AnswerDetailsResponse,
    AnswerEditRequest,
    AnswerRequest,
    StatusResponse,
)
from quora.services.answer_service import AnswerService

router = APIRouter(tags=["Answers"])

_ERRORS = {
    403: {"description": "Not signed in, or not allowed", "model": ErrorResponse},
    404: {"description": "Question or answer not found", "model": ErrorResponse},
}


@router.post(
    "/question/{question_id}/answer/create",
    status_code=201,
    response_model=StatusResponse,
    responses=_ERRORS,
    summary="Answer a question",
)
async def create_answer(
    question_id: str,
    request: AnswerRequest,
    access_token: str = Depends(get_access_token),
    answer_service: AnswerService = Depends(get_answer_service),
) -> StatusResponse:
    answer = await answer_service.create(request.answer, question_id, access_token)
    return StatusResponse(id=answer.uuid, status="ANSWER CREATED")


@router.put(
    "/answer/edit/{answer_id}",
    response_model=StatusResponse,
    responses=_ERRORS,
    summary="Edit an answer (owner only)",
)
async def edit_answer_content(
    answer_id: str,
    request: AnswerEditRequest,
    access_token: str = Depends(get_access_token),
    answer_service: AnswerService = Depends(get_answer_service),
) -> StatusResponse:
    answer = await answer_service.edit(answer_id, request.content, access_token)
    return StatusResponse(id=answer.uuid, status="ANSWER EDITED")


@router.delete(
    "/answer/delete/{answer_id}",
    response_model=StatusResponse,
    responses=_ERRORS,
    summary="Delete an answer (owner or admin)",
)
async def delete_answer(
    answer_id: str,
    access_token: str = Depends(get_access_token),
    answer_service: AnswerService = Depends(get_answer_service),
) -> StatusResponse:
    answer = await answer_service.delete(answer_id, access_token)
    return StatusResponse(id=answer.uuid, status="ANSWER DELETED")


@router.get(
    "/answer/all/{question_id}",
    response_model=List[AnswerDetailsResponse],
    responses=_ERRORS,
    summary="List the answers to a question",
)
async def get_all_answers_to_question(
    question_id: str,
    access_token: str = Depends(get_access_token),
    answer_service: AnswerService = Depends(get_answer_service),
) -> List[AnswerDetailsResponse]:
    answers = await answer_service.list_for_question(question_id, access_token)
    return [
        AnswerDetailsResponse(
            id=a.uuid,
            question_content=a.question.content,
            answer_content=a.answer,
        )
        for a in answers
    ]
