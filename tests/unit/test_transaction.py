"""
File: tests/unit/test_transaction.py
Description: 事务辅助函数单元测试

Created: 2026-10-18
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.category import Category
from app.db.transaction import run_in_transaction
from app.domains.categories.repository import CategoryRepository


@pytest.mark.asyncio
async def test_commits_on_success(db_session: AsyncSession) -> None:
    repo = CategoryRepository(model=Category, session=db_session)

    async def work() -> Category:
        return await repo.create({"name": "Tech"})

    category = await run_in_transaction(db_session, work)

    assert category.id is not None
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_rolls_back_and_reraises(db_session: AsyncSession) -> None:
    """测试：中途抛错时已 flush 的写入全部撤销，异常原样抛出"""
    repo = CategoryRepository(model=Category, session=db_session)

    async def work() -> None:
        await repo.create({"name": "Tech"})
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await run_in_transaction(db_session, work)

    assert await repo.count() == 0
