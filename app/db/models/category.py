"""
File: app/db/models/category.py
Description: 分类模型 (M:N Post)

Created: 2026-10-18
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import IntIdBase, utcnow

if TYPE_CHECKING:
    from app.db.models.post_category import PostCategory


class Category(IntIdBase):
    """
    分类表 (只有创建时间，无 updated_at)
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, comment="分类名称"
    )

    description: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="分类描述"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        comment="创建时间 (UTC)",
    )

    posts: Mapped[list["PostCategory"]] = relationship(
        back_populates="category", passive_deletes="all"
    )
