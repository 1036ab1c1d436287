"""
File: app/domains/categories/repository.py
Description: 分类数据访问层

Created: 2026-10-18
"""

from pydantic import BaseModel
from sqlalchemy import select

from app.db.models.category import Category
from app.db.repositories.base import BaseRepository
from app.domains.categories.schemas import CategoryCreate


class CategoryRepository(BaseRepository[Category, CategoryCreate, BaseModel]):
    async def get_by_name(self, name: str) -> Category | None:
        stmt = select(Category).where(Category.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
