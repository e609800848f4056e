from compete_api.schemas import MessageResponseSchema


class ImageUploadedResponseSchema(MessageResponseSchema):
    imageUrl: str
    image_id: int
