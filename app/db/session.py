"""
File: app/db/session.py
Description: 数据库会话管理 (Async SQLAlchemy)

本模块负责：
1. 创建进程内唯一的 AsyncEngine (生产 postgresql+asyncpg，本地/测试 sqlite+aiosqlite)
2. 按方言配置连接池参数，从 Settings 读取
3. SQLite 连接建立时开启外键约束 (默认关闭)
4. 创建 AsyncSession 工厂 (AsyncSessionLocal)
5. 集成 orjson 用于 JSON 字段 (Post.tags) 序列化
6. 提供建表 / 引擎关闭函数，供 lifespan 调用

Created: 2025-11-24
Updated: 2026-10-18 (SQLite support, create_all)
"""

from typing import Any

import orjson
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings
from app.core.logging import logger
from app.db.models import Base


def _orjson_serializer(obj: Any) -> str:
    """orjson 返回 bytes，SQLAlchemy 需要 str，因此需 decode。"""
    return orjson.dumps(obj).decode("utf-8")


def _orjson_deserializer(obj: str | bytes) -> Any:
    return orjson.loads(obj)


def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite 默认不校验外键，每个新连接上开启。"""
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)


def build_engine_options(database_uri: str) -> dict[str, Any]:
    """
    根据方言组装 create_async_engine 参数。
    SQLite 使用 SQLAlchemy 默认池，不接受 pool_size 等参数。
    """
    options: dict[str, Any] = {
        "echo": settings.is_debug,
        "json_serializer": _orjson_serializer,
        "json_deserializer": _orjson_deserializer,
    }

    if database_uri.startswith("sqlite"):
        return options

    options.update(
        {
            "pool_pre_ping": settings.DB_POOL_PRE_PING,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
        }
    )
    return options


# 1. 创建异步引擎 (进程内共享，连接池由所有并发请求复用)
engine: AsyncEngine = create_async_engine(
    str(settings.SQLALCHEMY_DATABASE_URI),
    **build_engine_options(str(settings.SQLALCHEMY_DATABASE_URI)),
)
enable_sqlite_foreign_keys(engine)

# 2. 创建异步会话工厂
# expire_on_commit=False: 避免 commit 后访问属性触发隐式 IO (Async 模式下不支持)
AsyncSessionLocal: async_sessionmaker[AsyncSession] = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def init_db() -> None:
    """按 ORM 元数据建表 (已存在的表跳过)。"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.bind(tables=sorted(Base.metadata.tables)).info("Database schema ensured")


async def close_engine() -> None:
    """
    关闭数据库引擎，释放连接池资源。
    应在应用 shutdown 阶段调用。
    """
    await engine.dispose()
