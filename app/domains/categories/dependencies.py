"""
File: app/domains/categories/dependencies.py
Description: 分类领域依赖注入定义

Created: 2026-10-18
"""

from typing import Annotated

from fastapi import Depends

from app.api.deps import DBSession
from app.db.models.category import Category
from app.domains.categories.repository import CategoryRepository
from app.domains.categories.service import CategoryService


async def get_category_repository(session: DBSession) -> CategoryRepository:
    return CategoryRepository(model=Category, session=session)


async def get_category_service(
    repo: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> CategoryService:
    return CategoryService(repo)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
