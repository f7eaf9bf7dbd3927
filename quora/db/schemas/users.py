import uuid
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SignupUserRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    user_name: str = Field(min_length=1, max_length=30)
    email_address: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=1)
    country: Optional[str] = Field(default=None, max_length=30)
    about_me: Optional[str] = Field(default=None, max_length=50)
    dob: Optional[str] = Field(default=None, max_length=30)
    contact_number: Optional[str] = Field(default=None, max_length=30)

    @field_validator("user_name")
    @classmethod
    def _validate_user_name(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("user_name must not be blank")
        # Basic credentials are split on the first ':'
        if ":" in v:
            raise ValueError("user_name must not contain ':'")
        return v

    @field_validator("email_address")
    @classmethod
    def _validate_email(cls, v: str):
        cleaned = v.strip().lower()
        local, sep, domain = cleaned.partition("@")
        if not sep or not local or not domain:
            raise ValueError("email_address must look like name@domain")
        return cleaned


class SignupUserResponse(BaseModel):
    id: uuid.UUID
    status: str


class SigninResponse(BaseModel):
    id: uuid.UUID
    message: str


class SignoutResponse(BaseModel):
    id: uuid.UUID
    message: str


class UserDetailsResponse(BaseModel):
    first_name: str
    last_name: str
    user_name: str
    # ORM rows carry ``email``; re-validated responses carry ``email_address``
    email_address: str = Field(validation_alias=AliasChoices("email", "email_address"))
    country: Optional[str] = None
    about_me: Optional[str] = None
    dob: Optional[str] = None
    contact_number: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class UserDeleteResponse(BaseModel):
    id: uuid.UUID
    status: str
