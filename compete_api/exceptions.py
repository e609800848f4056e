from typing import Any
from fastapi import HTTPException, status


class ApiError(HTTPException):
    """HTTP error rendered as ``{"message": ..., **extra}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, **extra: Any) -> None:
        self.message = message or self.message
        self.extra = extra
        super().__init__(status_code=self.status_code, detail=self.message)

    @property
    def body(self) -> dict[str, Any]:
        return {"message": self.message, **self.extra}


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]], message: str | None = None) -> None:
        super().__init__(message, errors=errors)
        self.errors = errors


class UnknownFieldError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid fields provided"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(invalidFields=fields)
        self.fields = fields


class MissingCredential(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized - Token Required"


class InvalidCredential(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class InsufficientRole(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden - Admin Access Required"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class PersistenceError(ApiError):
    message = "Database operation failed"


class UploadFailed(ApiError):
    message = "Image upload failed"
