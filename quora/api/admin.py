"""
Admin-only endpoints.
"""
from fastapi import APIRouter, Depends

from quora.api.deps import get_user_service, require_user
from quora.constants import UserAction, UserStatus
from quora.db import models, schemas
from quora.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.delete("/user/{user_id}", response_model=schemas.UserDeleteResponse)
def delete_user(
    user_id: str,
    current_user: models.User = Depends(require_user(UserAction.DELETE_USER)),
    service: UserService = Depends(get_user_service),
):
    deleted_id = service.delete_user(current_user, user_id)
    return schemas.UserDeleteResponse(id=deleted_id, status=UserStatus.USER_DELETED.value)
