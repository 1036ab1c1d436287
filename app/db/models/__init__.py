"""
File: app/db/models/__init__.py
Description: ORM 模型注册表

导入所有业务模型，确保 Base.metadata 完整
(启动建表 create_all 与测试夹具依赖于此)。

注意：新增 Model 文件必须在此处导入。

Created: 2025-11-25
"""

# 1. 基类与组件
from app.db.models.base import (
    Base,
    IntIdBase,
    IntIdModel,
    TimestampMixin,
)

# 2. 业务模型
from app.db.models.category import Category
from app.db.models.post import Post
from app.db.models.post_category import PostCategory
from app.db.models.profile import Profile
from app.db.models.user import User, UserRole

__all__ = [
    # 基类
    "Base",
    "IntIdBase",
    "IntIdModel",
    "TimestampMixin",
    # 业务模型
    "Category",
    "Post",
    "PostCategory",
    "Profile",
    "User",
    "UserRole",
]
