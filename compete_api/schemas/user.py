from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict

from compete_api.schemas import MessageResponseSchema, PartialPayloadSchema
from compete_api.utils.validation import boolean, email as email_rule, min_length, text


class NewUserSchema(BaseModel):
    name: Annotated[str, text("Name is required")]
    email: Annotated[str, email_rule("Valid email is required")]
    password: Annotated[str, min_length(6, "Password must be at least 6 characters long")]
    phone: Annotated[str, text("Phone number is required")] = None
    type_of_institution: Annotated[str, text("Type of institution is required")]
    affiliation: Annotated[str, text("Affiliation is required")] = None
    programming_language: Annotated[
        str, text("Preferred programming language is required")
    ] = None
    preferred_ide: Annotated[str, text("Preferred IDE is required")] = None
    mentor_details: Annotated[str, text("Mentor details are required")] = None
    is_admin: Annotated[bool, boolean("is_admin must be a boolean value")] = False


class LoginUserSchema(BaseModel):
    email: Annotated[str, email_rule("Valid email is required")]
    password: Annotated[str, text("Password is required")]


class UpdateUserPayloadSchema(PartialPayloadSchema):
    name: Annotated[str, text("Name must be a non-empty string")] = None
    email: Annotated[str, email_rule("Valid email is required")] = None
    phone: Annotated[str, text("Phone number must be a non-empty string")] = None
    type_of_institution: Annotated[
        str, text("Type of institution must be a non-empty string")
    ] = None
    affiliation: Annotated[str, text("Affiliation must be a non-empty string")] = None
    programming_language: Annotated[
        str, text("Preferred programming language must be a non-empty string")
    ] = None
    preferred_ide: Annotated[str, text("Preferred IDE must be a non-empty string")] = None
    mentor_details: Annotated[str, text("Mentor details must be a non-empty string")] = None
    is_admin: Annotated[bool, boolean("is_admin must be a boolean value")] = None


class UserResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    name: str
    email: str
    phone: str | None = None
    type_of_institution: str
    affiliation: str | None = None
    programming_language: str | None = None
    preferred_ide: str | None = None
    mentor_details: str | None = None
    is_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreatedResponseSchema(MessageResponseSchema):
    user_id: int


class LoginResponseSchema(MessageResponseSchema):
    token: str
    user_id: int
