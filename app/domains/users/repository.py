"""
File: app/domains/users/repository.py
Description: 用户领域仓储层 (Repository)

继承通用 BaseRepository，扩展：
1. get_by_username / get_by_email: 唯一键查询
2. list_with_posts: 全量用户，预加载文章
3. count_dependents: 统计引用该用户的档案与文章 (删除前 RESTRICT 检查)

Created: 2025-11-25
Updated: 2026-10-18 (Blog API)
"""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from app.db.models.post import Post
from app.db.models.profile import Profile
from app.db.models.user import User
from app.db.repositories.base import BaseRepository
from app.domains.users.schemas import UserCreate, UserUpdate


class UserRepository(BaseRepository[User, UserCreate, UserUpdate]):
    """
    用户仓储类。
    继承了 BaseRepository 的 create/update/get/delete 方法。
    """

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_posts(self) -> list[User]:
        """
        查询全部用户，并用 selectinload 一次性加载文章
        (异步模式下禁止访问未加载的关系属性)。
        """
        stmt = (
            select(User)
            .options(selectinload(User.posts))
            .order_by(User.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_dependents(self, user_id: int) -> int:
        """统计引用该用户的 Profile + Post 行数"""
        profile_count = (
            select(func.count()).select_from(Profile).where(Profile.user_id == user_id)
        )
        post_count = (
            select(func.count()).select_from(Post).where(Post.author_id == user_id)
        )

        profiles = (await self.session.execute(profile_count)).scalar_one()
        posts = (await self.session.execute(post_count)).scalar_one()
        return profiles + posts
