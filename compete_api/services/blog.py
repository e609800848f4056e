from typing import Any

from sqlalchemy import Select, select

from compete_api.models.tables import Blog, Comment, Image
from compete_api.schemas.blog import NewBlogSchema, NewCommentSchema
from compete_api.services import BaseService, ModelRequests


def with_image_url(model) -> Select:
    """``SELECT model.*, images.url AS image_url`` with the image left-joined."""
    return select(*model.__table__.columns, Image.url.label("image_url")).join_from(
        model, Image, model.image_id == Image.image_id, isouter=True
    )


class BlogService(BaseService, ModelRequests[Blog]):
    model = Blog
    updatable_fields = ("title", "content", "image_id")

    async def create(self, payload: NewBlogSchema) -> Blog:
        return await self.post(**payload.model_dump())

    async def get_all(self) -> list[dict[str, Any]]:
        result = await self.session.execute(with_image_url(Blog).order_by(Blog.blog_id))
        return [dict(row) for row in result.mappings()]

    async def get_details(self, id: int) -> dict[str, Any]:
        result = await self.session.execute(
            with_image_url(Blog).where(Blog.blog_id == id)
        )
        blog = result.mappings().first()
        if blog is None:
            raise self.not_found()

        comments = await self.session.execute(
            with_image_url(Comment)
            .where(Comment.blog_id == id)
            .order_by(Comment.comment_id)
        )
        return {"blog": dict(blog), "comments": [dict(row) for row in comments.mappings()]}


class CommentService(BaseService, ModelRequests[Comment]):
    model = Comment
    updatable_fields = ("content", "image_id")

    async def create(self, payload: NewCommentSchema) -> Comment:
        return await self.post(**payload.model_dump())

    async def get_for_blog(self, blog_id: int) -> list[dict[str, Any]]:
        result = await self.session.execute(
            with_image_url(Comment)
            .where(Comment.blog_id == blog_id)
            .order_by(Comment.comment_id)
        )
        return [dict(row) for row in result.mappings()]

    async def get_with_image(self, id: int) -> dict[str, Any]:
        result = await self.session.execute(
            with_image_url(Comment).where(Comment.comment_id == id)
        )
        comment = result.mappings().first()
        if comment is None:
            raise self.not_found()
        return dict(comment)
