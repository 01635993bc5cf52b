"""
Quora Backend — Question & Answer Schemas
===========================================

What:  Request bodies and response envelopes for /question and /answer.
"""

from pydantic import BaseModel, Field


class QuestionRequest(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class QuestionEditRequest(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class AnswerRequest(BaseModel):
    answer: str = Field(min_length=1, max_length=255)


class AnswerEditRequest(BaseModel):
    content: str = Field(min_length=1, max_length=255)


class StatusResponse(BaseModel):
    """Envelope shared by create/edit/delete: the entity's public id plus a status."""

    id: str
    status: str


class QuestionDetailsResponse(BaseModel):
    id: str
    content: str


class AnswerDetailsResponse(BaseModel):
    id: str
    question_content: str
    answer_content: str
