"""
File: app/domains/posts/service.py
Description: 文章领域服务

职责：
1. 创建文章：作者存在性检查 (404) 后，在一个事务内写入 Post 与 PostCategory。
   任一步失败 (如分类不存在触发外键约束) 整体回滚，对外返回 500。
2. 文章详情：不存在返回 404。

Created: 2026-10-18
"""

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import AppException
from app.core.logging import logger
from app.db.models.post import Post
from app.db.transaction import run_in_transaction
from app.domains.posts.constants import DEFAULT_ASSIGNED_BY, PostErrorCode
from app.domains.posts.repository import PostCategoryRepository, PostRepository
from app.domains.posts.schemas import PostCreate
from app.domains.users.constants import UserErrorCode
from app.domains.users.repository import UserRepository


class PostService:
    """
    文章业务逻辑类
    """

    def __init__(
        self,
        repo: PostRepository,
        link_repo: PostCategoryRepository,
        user_repo: UserRepository,
    ):
        self.repo = repo
        self.link_repo = link_repo
        self.user_repo = user_repo

    async def create(self, obj_in: PostCreate) -> Post:
        """
        创建文章并关联分类 (原子)。
        """
        if not await self.user_repo.exists(obj_in.author_id):
            raise AppException(
                UserErrorCode.NOT_FOUND, message=f"作者 {obj_in.author_id} 不存在"
            )

        post_data = obj_in.model_dump(
            exclude={"category_id", "assigned_by"}, exclude_unset=True
        )
        assigned_by = obj_in.assigned_by or DEFAULT_ASSIGNED_BY

        async def create_post_with_category() -> Post:
            post = await self.repo.create(post_data)
            await self.link_repo.create(
                {
                    "post_id": post.id,
                    "category_id": obj_in.category_id,
                    "assigned_by": assigned_by,
                }
            )
            return post

        try:
            post = await run_in_transaction(
                self.repo.session, create_post_with_category
            )
        except SQLAlchemyError as exc:
            logger.bind(
                author_id=obj_in.author_id, category_id=obj_in.category_id
            ).opt(exception=exc).error("Post transaction failed")
            raise AppException(PostErrorCode.TRANSACTION_FAILED) from None

        logger.bind(
            post_id=post.id, author_id=post.author_id, category_id=obj_in.category_id
        ).info("Post created successfully")

        return post

    async def get_detail(self, post_id: int) -> Post:
        post = await self.repo.get_detail(post_id)
        if not post:
            raise AppException(
                PostErrorCode.NOT_FOUND, message=f"文章 {post_id} 不存在"
            )
        return post
