from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict

from compete_api.models.tables import COMPETITION_CATEGORIES, COMPETITION_STATUSES
from compete_api.schemas import MessageResponseSchema, PartialPayloadSchema
from compete_api.utils.validation import iso_date, one_of, string, text

Status = Annotated[str, one_of(COMPETITION_STATUSES, "Invalid status")]
Category = Annotated[str, one_of(COMPETITION_CATEGORIES, "Invalid category")]


class NewCompetitionSchema(BaseModel):
    name: Annotated[str, text("Competition name is required")]
    description: Annotated[str, string("Description must be a string")] = None
    start_date: Annotated[datetime, iso_date("Valid start date is required")]
    end_date: Annotated[datetime, iso_date("Valid end date is required")]
    status: Status
    category: Category


class UpdateCompetitionPayloadSchema(PartialPayloadSchema):
    name: Annotated[str, string("Competition name must be a string")] = None
    description: Annotated[str, string("Description must be a string")] = None
    start_date: Annotated[datetime, iso_date("Valid start date is required")] = None
    end_date: Annotated[datetime, iso_date("Valid end date is required")] = None
    status: Status = None
    category: Category = None


class CompetitionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    competition_id: int
    name: str
    description: str | None = None
    start_date: datetime
    end_date: datetime
    status: str
    category: str


class CompetitionCreatedResponseSchema(MessageResponseSchema):
    competition_id: int
