"""
File: app/api/deps.py
Description: 全局依赖注入定义 (DB Session)

每个请求从进程级连接池获取一个独立的 AsyncSession，
经由 Depends 显式注入 Repository / Service，不使用全局会话。

Created: 2025-12-05
Updated: 2026-10-18 (Drop JWT dependencies)
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    获取异步数据库会话依赖。
    使用 async with 确保请求结束时自动关闭 session (未提交的事务随之回滚)。
    """
    async with AsyncSessionLocal() as session:
        yield session


# 数据库会话依赖类型别名
DBSession = Annotated[AsyncSession, Depends(get_db)]
