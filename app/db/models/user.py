"""
File: app/db/models/user.py
Description: 用户核心账号模型

继承自 IntIdModel，自动拥有：
1. 自增主键
2. created_at / updated_at (UTC)

约束：
- username 唯一且非空白
- email 可空，存在时唯一
- 密码只存 Argon2 哈希
- 与 Profile / Post 的外键为 RESTRICT：有档案或文章的用户不可物理删除

Created: 2025-11-25
Updated: 2026-10-18 (Blog schema)
"""

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, DateTime, Enum, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.models.base import IntIdModel

if TYPE_CHECKING:
    from app.db.models.post import Post
    from app.db.models.profile import Profile


class UserRole(str, enum.Enum):
    """用户角色 (仅定义，当前无接口基于角色鉴权)"""

    USER = "USER"
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"


class User(IntIdModel):
    """
    用户模型 (账号域)
    """

    __tablename__ = "users"

    __table_args__ = (
        CheckConstraint("length(trim(username)) > 0", name="username_not_empty"),
        CheckConstraint("length(hashed_password) > 0", name="password_not_empty"),
    )

    # --------------------------------------------------------------------------
    # 核心凭证
    # --------------------------------------------------------------------------

    username: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, comment="用户名"
    )

    # 密码：存储 Argon2id 哈希值
    hashed_password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="密码哈希值"
    )

    email: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True, comment="用户邮箱"
    )

    # --------------------------------------------------------------------------
    # 状态与角色
    # --------------------------------------------------------------------------

    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="最后登录时间 (UTC)"
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        server_default=text("true"),
        nullable=False,
        comment="是否激活",
    )

    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"),
        default=UserRole.USER,
        server_default=UserRole.USER.value,
        nullable=False,
        comment="角色",
    )

    # --------------------------------------------------------------------------
    # 关联 (删除由数据库 RESTRICT 把关，ORM 不级联、不置空)
    # --------------------------------------------------------------------------

    profile: Mapped["Profile | None"] = relationship(
        back_populates="user", uselist=False, passive_deletes="all"
    )

    posts: Mapped[list["Post"]] = relationship(
        back_populates="author", passive_deletes="all", order_by="Post.id"
    )
