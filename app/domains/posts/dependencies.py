"""
File: app/domains/posts/dependencies.py
Description: 文章领域依赖注入定义

PostRepository / PostCategoryRepository / UserRepository 共享同一个请求会话，
事务才能覆盖文章与关联行两次写入。

Created: 2026-10-18
"""

from typing import Annotated

from fastapi import Depends

from app.api.deps import DBSession
from app.db.models.post import Post
from app.db.models.post_category import PostCategory
from app.domains.posts.repository import PostCategoryRepository, PostRepository
from app.domains.posts.service import PostService
from app.domains.users.dependencies import UserRepoDep


async def get_post_repository(session: DBSession) -> PostRepository:
    return PostRepository(model=Post, session=session)


async def get_post_category_repository(session: DBSession) -> PostCategoryRepository:
    return PostCategoryRepository(model=PostCategory, session=session)


async def get_post_service(
    repo: Annotated[PostRepository, Depends(get_post_repository)],
    link_repo: Annotated[PostCategoryRepository, Depends(get_post_category_repository)],
    user_repo: UserRepoDep,
) -> PostService:
    return PostService(repo=repo, link_repo=link_repo, user_repo=user_repo)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
