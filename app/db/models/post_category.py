"""
File: app/db/models/post_category.py
Description: 文章-分类关联表 (Join Entity)

复合主键 (post_id, category_id)：同一对 (文章, 分类) 最多出现一次，
并发重复写入由主键约束拦截。表名由类名自动推导为 post_category。

Created: 2026-10-18
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import Base, utcnow

if TYPE_CHECKING:
    from app.db.models.category import Category
    from app.db.models.post import Post


class PostCategory(Base):
    """
    文章分类关联
    """

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="RESTRICT"),
        primary_key=True,
        comment="文章ID",
    )

    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        primary_key=True,
        comment="分类ID",
    )

    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        comment="关联时间 (UTC)",
    )

    assigned_by: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="关联操作人"
    )

    post: Mapped["Post"] = relationship(back_populates="categories")

    category: Mapped["Category"] = relationship(back_populates="posts")
