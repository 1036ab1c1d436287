"""
File: app/domains/profiles/dependencies.py
Description: 档案领域依赖注入定义

Created: 2026-10-18
"""

from typing import Annotated

from fastapi import Depends

from app.api.deps import DBSession
from app.db.models.profile import Profile
from app.domains.profiles.repository import ProfileRepository
from app.domains.profiles.service import ProfileService
from app.domains.users.dependencies import UserRepoDep


async def get_profile_repository(session: DBSession) -> ProfileRepository:
    """初始化 Repository 实例"""
    return ProfileRepository(model=Profile, session=session)


async def get_profile_service(
    repo: Annotated[ProfileRepository, Depends(get_profile_repository)],
    user_repo: UserRepoDep,
) -> ProfileService:
    """初始化 Service 实例 (两个 Repository 共享同一请求会话)"""
    return ProfileService(repo=repo, user_repo=user_repo)


ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
