"""
File: app/db/transaction.py
Description: 多步写入的原子事务封装

run_in_transaction 在同一个 AsyncSession 上执行一组写入步骤 (work)：
- 全部成功: commit，返回 work 的结果
- 任一步失败: rollback 后原样抛出，之前 flush 过的行一并撤销

隔离级别与冲突重试交给数据库本身，不在此实现。

Created: 2026-10-18
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import logger

T = TypeVar("T")


async def run_in_transaction(
    session: AsyncSession,
    work: Callable[[], Awaitable[T]],
) -> T:
    """
    原子执行 work()，work 内的 Repository 必须绑定同一个 session。

    用法:
        post = await run_in_transaction(session, create_post_with_category)
    """
    try:
        result = await work()
        await session.commit()
    except Exception:
        await session.rollback()
        logger.warning("Transaction rolled back")
        raise

    return result
