"""
File: tests/unit/test_repository.py
Description: 通用仓储基类单元测试

Created: 2026-10-18
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.category import Category
from app.domains.categories.repository import CategoryRepository


@pytest.fixture
def repo(db_session: AsyncSession) -> CategoryRepository:
    return CategoryRepository(model=Category, session=db_session)


@pytest.mark.asyncio
async def test_list_pagination(repo: CategoryRepository) -> None:
    for name in ("a", "b", "c"):
        await repo.create({"name": name})

    page = await repo.list(skip=1, limit=1)

    assert [category.name for category in page] == ["b"]
    assert await repo.count() == 3


@pytest.mark.asyncio
async def test_update_skips_protected_fields(repo: CategoryRepository) -> None:
    category = await repo.create({"name": "Tech"})
    original_id = category.id

    updated = await repo.update(category, {"id": 999, "description": "Programming"})

    assert updated.id == original_id
    assert updated.description == "Programming"


@pytest.mark.asyncio
async def test_delete_and_get(repo: CategoryRepository) -> None:
    category = await repo.create({"name": "Tech"})

    deleted = await repo.delete(category.id)

    assert deleted is category
    assert await repo.get(category.id) is None
    assert await repo.delete(category.id) is None
