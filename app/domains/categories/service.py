"""
File: app/domains/categories/service.py
Description: 分类领域服务层

同名分类只允许一个：先查重 (409)，并发场景下由 name 唯一约束兜底，
第二个写入者同样得到 409，不会产生重复行。

Created: 2026-10-18
"""

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AppException
from app.core.logging import logger
from app.db.models.category import Category
from app.domains.categories.constants import CategoryErrorCode
from app.domains.categories.repository import CategoryRepository
from app.domains.categories.schemas import CategoryCreate


class CategoryService:
    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    async def create(self, obj_in: CategoryCreate) -> Category:
        if await self.repo.get_by_name(obj_in.name):
            raise AppException(CategoryErrorCode.NAME_EXIST)

        try:
            category = await self.repo.create(obj_in)
            await self.repo.session.commit()
        except IntegrityError:
            await self.repo.session.rollback()
            logger.bind(name=obj_in.name).warning("Category name conflict on insert")
            raise AppException(CategoryErrorCode.NAME_EXIST) from None

        logger.bind(category_id=category.id, name=category.name).info(
            "Category created successfully"
        )

        return category
