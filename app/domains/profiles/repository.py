"""
File: app/domains/profiles/repository.py
Description: 档案数据访问层

所有查询均通过 ORM 构造，参数自动绑定，不拼接 SQL 字符串。

Created: 2026-10-18
"""

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.models.profile import Profile
from app.db.repositories.base import BaseRepository
from app.domains.profiles.schemas import ProfileCreate


class ProfileRepository(BaseRepository[Profile, ProfileCreate, BaseModel]):
    """
    档案仓储
    """

    async def get_by_user_id(self, user_id: int) -> Profile | None:
        stmt = select(Profile).where(Profile.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Profile | None:
        stmt = select(Profile).where(Profile.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_user(self, profile_id: int) -> Profile | None:
        """按主键查询档案，并预加载所属用户"""
        stmt = (
            select(Profile)
            .where(Profile.id == profile_id)
            .options(selectinload(Profile.user))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
