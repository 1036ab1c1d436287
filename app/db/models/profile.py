"""
File: app/db/models/profile.py
Description: 用户档案模型 (1:1 User)

联系方式等低频资料与 User 核心表分离。
- user_id 唯一，保证一个用户最多一份档案
- email 独立于 users.email 做唯一约束

Created: 2025-12-02
Updated: 2026-10-18 (Blog schema)
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import IntIdModel

if TYPE_CHECKING:
    from app.db.models.user import User


class Profile(IntIdModel):
    """
    用户档案表
    """

    __tablename__ = "profiles"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        unique=True,  # 确保 1:1 关系
        nullable=False,
        comment="关联用户ID",
    )

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="联系邮箱"
    )

    name: Mapped[str | None] = mapped_column(
        String(100), nullable=True, comment="姓名/昵称"
    )

    address: Mapped[str] = mapped_column(String(255), nullable=False, comment="地址")

    # E.164 格式，例如 +8613800000000
    phone: Mapped[str] = mapped_column(String(20), nullable=False, comment="电话")

    bio: Mapped[str | None] = mapped_column(Text, nullable=True, comment="个人简介")

    date_of_birth: Mapped[date | None] = mapped_column(
        Date, nullable=True, comment="出生日期"
    )

    user: Mapped["User"] = relationship(back_populates="profile")
