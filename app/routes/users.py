from fastapi import APIRouter, Depends

from app.dependencies.services import get_user_service
from app.models.user import User
from app.schemas.user_schemas import UpdateUserRequest, UserResponse
from app.services.user_service import UserService
from app.utils.token import get_current_user

router = APIRouter()


@router.get("/me", response_model=UserResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/me", response_model=UserResponse)
def update_profile(
    data: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user)
):
    return service.update_profile(
        current_user.id,
        data.model_dump(exclude_unset=True, exclude_none=True),
    )
