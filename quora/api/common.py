"""
Profile lookup for any signed-in user.
"""
from fastapi import APIRouter, Depends

from quora.api.deps import get_user_service, require_user
from quora.constants import UserAction
from quora.db import models, schemas
from quora.services.user_service import UserService

router = APIRouter(tags=["common"])


@router.get("/userprofile/{user_id}", response_model=schemas.UserDetailsResponse)
def get_user_profile(
    user_id: str,
    _current: models.User = Depends(require_user(UserAction.GET_USER_DETAILS)),
    service: UserService = Depends(get_user_service),
):
    user = service.get_user(user_id)
    return schemas.UserDetailsResponse.model_validate(user)
