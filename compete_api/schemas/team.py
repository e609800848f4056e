from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field

from compete_api.models.tables import REGISTRATION_STATUSES
from compete_api.schemas import MessageResponseSchema, PartialPayloadSchema
from compete_api.utils.validation import MAX_ID, numeric, one_of, text


class NewTeamSchema(BaseModel):
    team_name: Annotated[str, text("Team name is required")]
    leader_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Leader ID must be a number")
    ]
    school_name: Annotated[str, text("School name is required")]


class UpdateTeamPayloadSchema(PartialPayloadSchema):
    team_name: Annotated[str, text("Team name must be a non-empty string")] = None
    school_name: Annotated[str, text("School name must be a non-empty string")] = None


class TeamSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    team_id: int
    team_name: str
    leader_id: int
    school_name: str


class TeamCreatedResponseSchema(MessageResponseSchema):
    team_id: int


class NewRegistrationSchema(BaseModel):
    competition_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Competition ID must be a number")
    ]
    user_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("User ID must be a number")
    ]
    team_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Team ID must be a number")
    ]


class RegistrationStatusPayloadSchema(PartialPayloadSchema):
    status: Annotated[
        str,
        one_of(
            REGISTRATION_STATUSES,
            "Status must be either pending, approved, or withdrawn",
        ),
    ]


class RegistrationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    registration_id: int
    competition_id: int
    user_id: int
    team_id: int
    status: str
    registered_at: datetime | None = None


class RegistrationCreatedResponseSchema(MessageResponseSchema):
    registration_id: int
