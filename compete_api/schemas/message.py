from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field

from compete_api.models.tables import RECIPIENT_GROUPS
from compete_api.schemas import MessageResponseSchema, PartialPayloadSchema
from compete_api.utils.validation import MAX_ID, numeric, one_of, text


class NewMessageSchema(BaseModel):
    sender_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Sender ID must be a number")
    ]
    recipient_group: Annotated[
        str,
        one_of(
            RECIPIENT_GROUPS,
            'Recipient group must be either "all", "admin", or "users"',
        ),
    ]
    content: Annotated[str, text("Content is required")]


class UpdateMessagePayloadSchema(PartialPayloadSchema):
    content: Annotated[str, text("Content must be a non-empty string")] = None


class MessageSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    message_id: int
    sender_id: int
    recipient_group: str
    content: str
    sent_date: datetime


class MessageCreatedResponseSchema(MessageResponseSchema):
    message_id: int
