"""
File: app/domains/posts/repository.py
Description: 文章领域仓储层

包含：
1. PostRepository: 文章 CRUD + 详情查询 (预加载作者与分类)
2. PostCategoryRepository: 关联行写入 (复合主键)

Created: 2026-10-18
"""

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.models.post import Post
from app.db.models.post_category import PostCategory
from app.db.repositories.base import BaseRepository
from app.domains.posts.schemas import PostCreate


class PostRepository(BaseRepository[Post, PostCreate, BaseModel]):
    """
    文章仓储
    """

    async def get_detail(self, post_id: int) -> Post | None:
        """
        查询文章详情。
        作者与分类关联 (及分类本身) 通过 selectinload 一次性加载。
        """
        stmt = (
            select(Post)
            .where(Post.id == post_id)
            .options(
                selectinload(Post.author),
                selectinload(Post.categories).selectinload(PostCategory.category),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


class PostCategoryRepository(BaseRepository[PostCategory, BaseModel, BaseModel]):
    """
    文章-分类关联仓储
    """
