"""
File: app/domains/posts/schemas.py
Description: 文章领域 Pydantic 模型

1. PostCreate: POST /insert-post 参数 (文章字段 + 首个分类关联)
2. PostRead: 文章响应
3. PostDetail: GET /post/{id} 响应，附带作者与分类关联

Created: 2026-10-18
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.core.schemas import CamelModel
from app.domains.categories.schemas import CategoryRead

MAX_TAGS = 20
TAG_MAX_LENGTH = 50


class PostCreate(CamelModel):
    """
    创建文章参数。
    category_id / assigned_by 不属于 Post 表，用于同一事务内写入关联行。
    """

    title: str = Field(..., min_length=1, max_length=255, description="标题")
    content: str | None = Field(default=None, description="正文 (可选)")
    published: bool = Field(default=False, description="是否发布")
    tags: list[str] = Field(
        default_factory=list, max_length=MAX_TAGS, description="标签 (保持顺序)"
    )
    author_id: int = Field(..., gt=0, description="作者 ID")
    category_id: int = Field(..., gt=0, description="分类 ID")
    assigned_by: str | None = Field(
        default=None, min_length=1, max_length=100, description="关联操作人 (可选)"
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("标题不能为空白字符串")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """每个标签非空且不超过 TAG_MAX_LENGTH 字符"""
        for tag in v:
            if not tag.strip() or len(tag) > TAG_MAX_LENGTH:
                raise ValueError(f"标签必须为 1-{TAG_MAX_LENGTH} 个非空白字符")
        return v


class PostRead(CamelModel):
    id: int
    title: str
    content: str | None = None
    published: bool
    author_id: int
    view_count: int
    tags: list[str]
    created_at: datetime
    updated_at: datetime


class PostAuthor(CamelModel):
    id: int
    username: str


class PostCategoryRead(CamelModel):
    category_id: int
    assigned_at: datetime
    assigned_by: str
    category: CategoryRead


class PostDetail(PostRead):
    author: PostAuthor
    categories: list[PostCategoryRead]
