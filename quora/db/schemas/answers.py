import uuid

from pydantic import BaseModel, Field


class AnswerRequest(BaseModel):
    answer: str = Field(min_length=1, max_length=255)


class AnswerEditRequest(BaseModel):
    content: str = Field(min_length=1, max_length=255)


class AnswerResponse(BaseModel):
    id: uuid.UUID
    status: str


class AnswerEditResponse(AnswerResponse):
    pass


class AnswerDeleteResponse(AnswerResponse):
    pass


class AnswerDetailsResponse(BaseModel):
    id: uuid.UUID
    question_content: str
    answer_content: str
