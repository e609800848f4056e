from fastapi import APIRouter, Depends, status
from compete_api.routers import MessageIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.schemas.message import (
    MessageCreatedResponseSchema,
    MessageSchema,
    NewMessageSchema,
    UpdateMessagePayloadSchema,
)
from compete_api.services.message import MessageService

router = APIRouter(prefix="/messages", tags=["Message"])


@router.post(
    "/messages/create",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageCreatedResponseSchema,
)
async def create(
    payload: NewMessageSchema,
    service: MessageService = Depends(MessageService.get_service),
):
    message = await service.create(payload)
    return MessageCreatedResponseSchema(
        message="Message sent successfully.", message_id=message.message_id
    )


@router.get("/messages", response_model=list[MessageSchema])
async def get_list(
    service: MessageService = Depends(MessageService.get_service),
):
    return await service.get_all()


@router.get("/messages/{message_id}", response_model=MessageSchema)
async def get(
    message_id: MessageIdType,
    service: MessageService = Depends(MessageService.get_service),
):
    return await service.get(message_id)


@router.patch("/messages/{message_id}", response_model=MessageResponseSchema)
@router.patch("/messages/{message_id}/update", response_model=MessageResponseSchema)
async def update(
    message_id: MessageIdType,
    payload: UpdateMessagePayloadSchema,
    service: MessageService = Depends(MessageService.get_service),
):
    await service.update(message_id, payload.sparse())
    return MessageResponseSchema(message="Message updated successfully.")


@router.delete("/messages/{message_id}", response_model=MessageResponseSchema)
async def delete(
    message_id: MessageIdType,
    service: MessageService = Depends(MessageService.get_service),
):
    await service.delete(message_id)
    return MessageResponseSchema(message="Message deleted successfully.")
