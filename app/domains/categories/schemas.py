"""
File: app/domains/categories/schemas.py
Description: 分类领域的 Pydantic 模型

Created: 2026-10-18
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.core.schemas import CamelModel


class CategoryCreate(CamelModel):
    """
    创建分类参数 (Request Body)
    """

    name: str = Field(..., min_length=1, max_length=100, description="分类名称 (唯一)")
    description: str | None = Field(default=None, max_length=2000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """去除首尾空白，全空白视为缺失"""
        v = v.strip()
        if not v:
            raise ValueError("分类名称不能为空白字符串")
        return v


class CategoryRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime
