import uuid

from pydantic import BaseModel, ConfigDict, Field


class QuestionRequest(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class QuestionEditRequest(BaseModel):
    content: str = Field(min_length=1, max_length=500)


class QuestionResponse(BaseModel):
    id: uuid.UUID
    status: str


class QuestionEditResponse(QuestionResponse):
    pass


class QuestionDeleteResponse(QuestionResponse):
    pass


class QuestionDetailsResponse(BaseModel):
    id: uuid.UUID
    content: str
    model_config = ConfigDict(from_attributes=True)
