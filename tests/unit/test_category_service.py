"""
File: tests/unit/test_category_service.py
Description: 分类领域服务单元测试

Created: 2026-10-18
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AppException
from app.db.models.category import Category
from app.domains.categories.repository import CategoryRepository
from app.domains.categories.schemas import CategoryCreate
from app.domains.categories.service import CategoryService


@pytest.fixture
def category_service(db_session: AsyncSession) -> CategoryService:
    return CategoryService(repo=CategoryRepository(model=Category, session=db_session))


@pytest.mark.asyncio
async def test_create_category(category_service: CategoryService) -> None:
    category = await category_service.create(CategoryCreate(name="Tech"))

    assert category.id is not None
    assert category.name == "Tech"
    assert category.description is None


@pytest.mark.asyncio
async def test_name_constraint_backs_up_precheck(
    category_service: CategoryService, monkeypatch: pytest.MonkeyPatch
) -> None:
    """测试：并发写入绕过查重时，由唯一约束拦截并映射为 409"""
    await category_service.create(CategoryCreate(name="Tech"))

    async def _never_found(name: str) -> None:
        return None

    monkeypatch.setattr(category_service.repo, "get_by_name", _never_found)

    with pytest.raises(AppException) as excinfo:
        await category_service.create(CategoryCreate(name="Tech"))

    assert excinfo.value.code == "categories.name_exist"
    assert excinfo.value.http_status == 409
    assert await category_service.repo.count() == 1
