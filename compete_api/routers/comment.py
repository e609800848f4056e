from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from compete_api.routers import CommentIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.schemas.blog import (
    CommentCreatedResponseSchema,
    CommentSchema,
    NewCommentSchema,
    UpdateCommentPayloadSchema,
)
from compete_api.services.blog import CommentService
from compete_api.utils.validation import MAX_ID, numeric

router = APIRouter(prefix="/comments", tags=["Comment"])


@router.post(
    "/comments/create",
    status_code=status.HTTP_201_CREATED,
    response_model=CommentCreatedResponseSchema,
)
async def create(
    payload: NewCommentSchema,
    service: CommentService = Depends(CommentService.get_service),
):
    comment = await service.create(payload)
    return CommentCreatedResponseSchema(
        message="Comment created successfully.", comment_id=comment.comment_id
    )


@router.get("/comments", response_model=list[CommentSchema])
async def get_list(
    blog_id: Annotated[
        int, Query(gt=0, le=MAX_ID), numeric("Blog ID must be a number")
    ],
    service: CommentService = Depends(CommentService.get_service),
):
    return await service.get_for_blog(blog_id)


@router.get("/comments/{comment_id}", response_model=CommentSchema)
async def get(
    comment_id: CommentIdType,
    service: CommentService = Depends(CommentService.get_service),
):
    return await service.get_with_image(comment_id)


@router.patch("/comments/{comment_id}", response_model=MessageResponseSchema)
@router.patch("/comments/{comment_id}/update", response_model=MessageResponseSchema)
async def update(
    comment_id: CommentIdType,
    payload: UpdateCommentPayloadSchema,
    service: CommentService = Depends(CommentService.get_service),
):
    await service.update(comment_id, payload.sparse())
    return MessageResponseSchema(message="Comment updated successfully.")


@router.delete("/comments/{comment_id}", response_model=MessageResponseSchema)
async def delete(
    comment_id: CommentIdType,
    service: CommentService = Depends(CommentService.get_service),
):
    await service.delete(comment_id)
    return MessageResponseSchema(message="Comment deleted successfully.")
