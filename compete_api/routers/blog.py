from fastapi import APIRouter, Depends, status
from compete_api.routers import BlogIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.schemas.blog import (
    BlogCreatedResponseSchema,
    BlogDetailSchema,
    BlogSchema,
    NewBlogSchema,
    UpdateBlogPayloadSchema,
)
from compete_api.services.blog import BlogService

router = APIRouter(prefix="/blogs", tags=["Blog"])


@router.post(
    "/blogs/create",
    status_code=status.HTTP_201_CREATED,
    response_model=BlogCreatedResponseSchema,
)
async def create(
    payload: NewBlogSchema,
    service: BlogService = Depends(BlogService.get_service),
):
    blog = await service.create(payload)
    return BlogCreatedResponseSchema(
        message="Blog created successfully.", blog_id=blog.blog_id
    )


@router.get("/blogs", response_model=list[BlogSchema])
async def get_list(
    service: BlogService = Depends(BlogService.get_service),
):
    return await service.get_all()


@router.get("/blogs/{blog_id}", response_model=BlogDetailSchema)
async def get(
    blog_id: BlogIdType,
    service: BlogService = Depends(BlogService.get_service),
):
    return await service.get_details(blog_id)


@router.patch("/blogs/{blog_id}", response_model=MessageResponseSchema)
@router.patch("/blogs/{blog_id}/update", response_model=MessageResponseSchema)
async def update(
    blog_id: BlogIdType,
    payload: UpdateBlogPayloadSchema,
    service: BlogService = Depends(BlogService.get_service),
):
    await service.update(blog_id, payload.sparse())
    return MessageResponseSchema(message="Blog updated successfully.")


@router.delete("/blogs/{blog_id}", response_model=MessageResponseSchema)
async def delete(
    blog_id: BlogIdType,
    service: BlogService = Depends(BlogService.get_service),
):
    await service.delete(blog_id)
    return MessageResponseSchema(message="Blog deleted successfully.")
