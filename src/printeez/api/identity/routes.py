"""FastAPI endpoints for Identity."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from printeez.api.identity.schemas import RegisterUserRequest, UserIdResponse, UserResponse
from printeez.shared.api import current_user
from printeez.user.registration import RegisterUser
from printeez.user.user import User

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        name=body.name,
        email=body.email,
        password=body.password,
        address=body.address,
    )
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@router.get("/me", response_model=UserResponse)
async def who_am_i(user: User = Depends(current_user)) -> UserResponse:
    return UserResponse(
        user_id=str(user.id),
        name=user.name,
        email=user.email,
        address=user.address,
        is_admin=bool(user.is_admin),
    )
