"""
User account endpoints: sign-up, sign-in and sign-out.

Sign-in takes ``authorization: Basic base64(user:password)`` and returns the
new access token in the ``access-token`` response header.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header, Response, status

from quora.api.deps import get_access_token, get_user_service
from quora.constants import UserStatus
from quora.db import schemas
from quora.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["users"])

ACCESS_TOKEN_HEADER = "access-token"


@router.post("/signup", response_model=schemas.SignupUserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: schemas.SignupUserRequest,
    service: UserService = Depends(get_user_service),
):
    user = service.register(payload)
    return schemas.SignupUserResponse(id=user.id, status=UserStatus.USER_REGISTERED.value)


@router.post("/signin", response_model=schemas.SigninResponse)
def signin(
    response: Response,
    authorization: Optional[str] = Header(default=None),
    service: UserService = Depends(get_user_service),
):
    user, _auth, access_token = service.authenticate(authorization)
    response.headers[ACCESS_TOKEN_HEADER] = access_token
    return schemas.SigninResponse(id=user.id, message=UserStatus.SIGNIN_SUCCESSFUL.value)


@router.post("/signout", response_model=schemas.SignoutResponse)
def signout(
    access_token: Optional[str] = Depends(get_access_token),
    service: UserService = Depends(get_user_service),
):
    user = service.sign_out(access_token)
    return schemas.SignoutResponse(id=user.id, message=UserStatus.SIGNOUT_SUCCESSFUL.value)
