from typing import Any, Mapping

from fastapi import status
from sqlalchemy import select

from compete_api.exceptions import ApiError
from compete_api.models.tables import User
from compete_api.schemas.user import LoginUserSchema, NewUserSchema
from compete_api.services import BaseService, ModelRequests
from compete_api.utils.password import get_password_hash, verify_password
from compete_api.utils.token import AccessToken, generate_access_token


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class UserService(BaseService, ModelRequests[User]):
    model = User
    updatable_fields = (
        "name",
        "email",
        "phone",
        "type_of_institution",
        "affiliation",
        "programming_language",
        "preferred_ide",
        "mentor_details",
        "is_admin",
    )
    flag_fields = ("is_admin",)

    async def register(self, payload: NewUserSchema) -> User:
        data = payload.model_dump(exclude={"password", "is_admin"})
        return await self.post(
            **data,
            password_hash=get_password_hash(payload.password),
            is_admin=1 if payload.is_admin else 0,
        )

    async def login(self, payload: LoginUserSchema) -> tuple[str, User]:
        stmt = select(User).where(User.email == payload.email.lower())
        user = await self.session.scalar(stmt)
        if not user or not verify_password(payload.password, user.password_hash):
            raise InvalidCredentials()
        return generate_access_token(user.user_id, bool(user.is_admin)), user

    async def me(self, authorization: AccessToken) -> User:
        return await self.get(authorization.sub)

    async def update_profile(
        self, authorization: AccessToken, payload: Mapping[str, Any]
    ) -> bool:
        return await self.update(authorization.sub, payload)
