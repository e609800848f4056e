import logging
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import encode, decode, ExpiredSignatureError, InvalidTokenError
from pydantic import BaseModel, ValidationError

from compete_api.config import settings
from compete_api.exceptions import (
    InsufficientRole,
    InvalidCredential,
    MissingCredential,
)

logger = logging.getLogger(__name__)

optional_httpbearer = HTTPBearer(auto_error=False)


class AccessLevels(IntEnum):
    UNAUTHORIZED = 0
    AUTHORIZED = 1
    ADMIN = 2


class AccessToken(BaseModel):
    sub: int
    is_admin: bool = False
    exp: datetime
    iat: datetime
    token: str

    @property
    def access_lvl(self) -> AccessLevels:
        return AccessLevels.ADMIN if self.is_admin else AccessLevels.AUTHORIZED


def generate_jwt_token(data: dict, expires_delta: timedelta):
    now = datetime.now(timezone.utc)
    to_encode = {"exp": now + expires_delta, "iat": now, **data}
    encoded_jwt = encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def generate_access_token(user_id: int, is_admin: bool) -> str:
    return generate_jwt_token(
        dict(sub=str(user_id), is_admin=bool(is_admin)),
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRES_IN),
    )


def decode_jwt_token(token: str) -> dict:
    try:
        data = decode(
            jwt=token,
            key=settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )
    except ExpiredSignatureError:
        raise InvalidCredential(error="Token has expired")
    except InvalidTokenError as e:
        logger.debug("Rejected token: %s", e)
        raise InvalidCredential(error=str(e))
    return data


def verify_credential(token: str | None) -> AccessToken:
    if not token:
        raise MissingCredential()
    data = decode_jwt_token(token)
    try:
        return AccessToken(**data, token=token)
    except ValidationError:
        raise InvalidCredential(error="Malformed token claims")


async def get_access_token_data(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(optional_httpbearer),
) -> AccessToken:
    if authorization:
        return verify_credential(authorization.credentials)
    # any other scheme still carries its credential after the first space
    _, _, token = request.headers.get("Authorization", "").partition(" ")
    return verify_credential(token.strip())


def check_access_level(required_level: AccessLevels):
    async def access_level_dependency(
        token: AccessToken = Depends(get_access_token_data),
    ) -> AccessToken:
        if token.access_lvl < required_level:
            raise InsufficientRole()
        return token

    return access_level_dependency


admin_required = check_access_level(AccessLevels.ADMIN)
