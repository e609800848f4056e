from datetime import datetime
from typing import Annotated
from sqlalchemy.orm import Mapped, mapped_column, DeclarativeBase, declared_attr
from sqlalchemy import DateTime, ForeignKey, SmallInteger, String, func
from sqlalchemy.ext.asyncio import AsyncAttrs
from compete_api.models import (
    created_at,
    updated_at,
    int_pk,
    str_nullable,
    str_required,
    str_uniq,
    text_required,
)


def fk(target: str, nullable: bool = False, ondelete: str = "CASCADE"):
    return mapped_column(
        ForeignKey(target, ondelete=ondelete, onupdate="CASCADE"), nullable=nullable
    )


user_fk = Annotated[int, fk("users.user_id")]
image_nullable_fk = Annotated[int, fk("images.image_id", True, "SET NULL")]

COMPETITION_STATUSES = ("upcoming", "active", "completed")
COMPETITION_CATEGORIES = ("high_school", "tertiary")
REGISTRATION_STATUSES = ("pending", "approved", "withdrawn")
RECIPIENT_GROUPS = ("all", "admin", "users")


class Base(AsyncAttrs, DeclarativeBase):
    __abstract__ = True

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return "".join(
            f'{c.lower() if i == 0 else "_" + c.lower() if c.isupper() and i > 0 and cls.__name__[i-1].islower() else c.lower()}'
            for i, c in enumerate(cls.__name__)
        ) + "s"


class User(Base):
    user_id: Mapped[int_pk]
    name: Mapped[str_required]
    email: Mapped[str_uniq]
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str_nullable]
    type_of_institution: Mapped[str_required]
    affiliation: Mapped[str_nullable]
    programming_language: Mapped[str_nullable]
    preferred_ide: Mapped[str_nullable]
    mentor_details: Mapped[str_nullable]
    is_admin: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=0, server_default="0"
    )
    created_at: Mapped[created_at]
    updated_at: Mapped[updated_at]


class Competition(Base):
    competition_id: Mapped[int_pk]
    name: Mapped[str_required]
    description: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    category: Mapped[str] = mapped_column(String(16), nullable=False)


class Team(Base):
    team_id: Mapped[int_pk]
    team_name: Mapped[str_required]
    leader_id: Mapped[user_fk]
    school_name: Mapped[str_required]


class Registration(Base):
    registration_id: Mapped[int_pk]
    competition_id: Mapped[int] = fk("competitions.competition_id")
    user_id: Mapped[user_fk]
    team_id: Mapped[int] = fk("teams.team_id")
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="pending", server_default="pending"
    )
    registered_at: Mapped[created_at]


class Message(Base):
    message_id: Mapped[int_pk]
    sender_id: Mapped[user_fk]
    recipient_group: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[text_required]
    sent_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class Image(Base):
    image_id: Mapped[int_pk]
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    uploader_id: Mapped[user_fk]
    uploaded_at: Mapped[created_at]


class Blog(Base):
    blog_id: Mapped[int_pk]
    title: Mapped[str_required]
    content: Mapped[text_required]
    author_id: Mapped[user_fk]
    image_id: Mapped[image_nullable_fk]
    created_at: Mapped[created_at]
    updated_at: Mapped[updated_at]


class Comment(Base):
    comment_id: Mapped[int_pk]
    blog_id: Mapped[int] = fk("blogs.blog_id")
    user_id: Mapped[user_fk]
    content: Mapped[text_required]
    image_id: Mapped[image_nullable_fk]
    created_at: Mapped[created_at]
