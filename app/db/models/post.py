"""
File: app/db/models/post.py
Description: 文章模型 (N:1 User, M:N Category)

tags 使用通用 JSON 列存储有序字符串列表，PostgreSQL / SQLite 均可用。

Created: 2026-10-18
"""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import IntIdModel

if TYPE_CHECKING:
    from app.db.models.post_category import PostCategory
    from app.db.models.user import User


class Post(IntIdModel):
    """
    文章表
    """

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False, comment="标题")

    content: Mapped[str | None] = mapped_column(Text, nullable=True, comment="正文")

    published: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=text("false"),
        nullable=False,
        comment="是否发布",
    )

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
        comment="作者ID",
    )

    view_count: Mapped[int] = mapped_column(
        Integer,
        default=0,
        server_default=text("0"),
        nullable=False,
        comment="浏览次数",
    )

    tags: Mapped[list[str]] = mapped_column(
        JSON, default=list, nullable=False, comment="标签 (有序)"
    )

    author: Mapped["User"] = relationship(back_populates="posts")

    categories: Mapped[list["PostCategory"]] = relationship(
        back_populates="post", passive_deletes="all"
    )
