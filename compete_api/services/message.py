from compete_api.models.tables import Message
from compete_api.schemas.message import NewMessageSchema
from compete_api.services import BaseService, ModelRequests


class MessageService(BaseService, ModelRequests[Message]):
    model = Message
    updatable_fields = ("content",)

    async def create(self, payload: NewMessageSchema) -> Message:
        return await self.post(**payload.model_dump())

    async def get_all(self) -> list[Message]:
        # newest first; ids break ties between messages sent in the same instant
        return await self.get_list(Message.sent_date.desc(), Message.message_id.desc())
