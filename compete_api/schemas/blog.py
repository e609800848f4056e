from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field

from compete_api.schemas import MessageResponseSchema, PartialPayloadSchema
from compete_api.utils.validation import MAX_ID, numeric, text

ImageId = Annotated[
    int, Field(gt=0, le=MAX_ID), numeric("Image ID must be a number")
]


class NewBlogSchema(BaseModel):
    title: Annotated[str, text("Title is required")]
    content: Annotated[str, text("Content is required")]
    author_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Author ID must be a number")
    ]
    image_id: ImageId = None


class UpdateBlogPayloadSchema(PartialPayloadSchema):
    title: Annotated[str, text("Title must be a non-empty string")] = None
    content: Annotated[str, text("Content must be a non-empty string")] = None
    image_id: ImageId = None


class BlogSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    blog_id: int
    title: str
    content: str
    author_id: int
    image_id: int | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NewCommentSchema(BaseModel):
    blog_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("Blog ID must be a number")
    ]
    user_id: Annotated[
        int, Field(gt=0, le=MAX_ID), numeric("User ID must be a number")
    ]
    content: Annotated[str, text("Content is required")]
    image_id: ImageId = None


class UpdateCommentPayloadSchema(PartialPayloadSchema):
    content: Annotated[str, text("Content must be a non-empty string")] = None
    image_id: ImageId = None


class CommentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int
    blog_id: int
    user_id: int
    content: str
    image_id: int | None = None
    image_url: str | None = None
    created_at: datetime | None = None


class BlogDetailSchema(BaseModel):
    blog: BlogSchema
    comments: list[CommentSchema]


class BlogCreatedResponseSchema(MessageResponseSchema):
    blog_id: int


class CommentCreatedResponseSchema(MessageResponseSchema):
    comment_id: int
