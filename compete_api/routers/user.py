from fastapi import APIRouter, Depends, status
from compete_api.routers import UserIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.services.user import UserService
from compete_api.schemas.user import (
    LoginResponseSchema,
    LoginUserSchema,
    NewUserSchema,
    UpdateUserPayloadSchema,
    UserCreatedResponseSchema,
    UserResponseSchema,
)
from compete_api.utils.token import (
    AccessToken,
    admin_required,
    get_access_token_data,
)

router = APIRouter(prefix="/users", tags=["User"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreatedResponseSchema,
)
async def register(
    payload: NewUserSchema,
    service: UserService = Depends(UserService.get_service),
):
    user = await service.register(payload)
    return UserCreatedResponseSchema(
        message="User registered successfully", user_id=user.user_id
    )


@router.post("/login", response_model=LoginResponseSchema)
async def login(
    payload: LoginUserSchema,
    service: UserService = Depends(UserService.get_service),
):
    token, user = await service.login(payload)
    return LoginResponseSchema(
        message="Login successful", token=token, user_id=user.user_id
    )


@router.get("/profile", response_model=UserResponseSchema)
async def profile(
    authorization: AccessToken = Depends(get_access_token_data),
    service: UserService = Depends(UserService.get_service),
):
    return await service.me(authorization)


@router.patch("/profile/update", response_model=MessageResponseSchema)
async def update_profile(
    payload: UpdateUserPayloadSchema,
    authorization: AccessToken = Depends(get_access_token_data),
    service: UserService = Depends(UserService.get_service),
):
    await service.update_profile(authorization, payload.sparse())
    return MessageResponseSchema(message="Profile updated successfully.")


@router.get(
    "/list",
    response_model=list[UserResponseSchema],
    dependencies=[Depends(admin_required)],
)
async def get_list(
    service: UserService = Depends(UserService.get_service),
):
    return await service.get_list(service.key_column)


@router.delete(
    "/{user_id}",
    response_model=MessageResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def delete(
    user_id: UserIdType,
    service: UserService = Depends(UserService.get_service),
):
    await service.delete(user_id)
    return MessageResponseSchema(message="User deleted successfully.")
