"""
File: app/domains/profiles/service.py
Description: 档案领域服务层

1. 创建档案：用户存在性 (404)、一人一档 (409)、邮箱唯一 (409)
2. 查询档案：未找到时返回 None，由前端按 data === null 处理空状态

Created: 2026-10-18
"""

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AppException
from app.core.logging import logger
from app.db.models.profile import Profile
from app.domains.profiles.constants import ProfileErrorCode
from app.domains.profiles.repository import ProfileRepository
from app.domains.profiles.schemas import ProfileCreate
from app.domains.users.constants import UserErrorCode
from app.domains.users.repository import UserRepository
from app.utils.masking import mask_email, mask_phone


class ProfileService:
    """
    档案业务逻辑类
    """

    def __init__(self, repo: ProfileRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    async def create(self, obj_in: ProfileCreate) -> Profile:
        # 1. 所属用户必须存在
        if not await self.user_repo.exists(obj_in.user_id):
            raise AppException(
                UserErrorCode.NOT_FOUND, message=f"用户 {obj_in.user_id} 不存在"
            )

        # 2. 唯一性校验
        if await self.repo.get_by_user_id(obj_in.user_id):
            raise AppException(ProfileErrorCode.USER_HAS_PROFILE)

        if await self.repo.get_by_email(obj_in.email):
            raise AppException(ProfileErrorCode.EMAIL_EXIST)

        # 3. 持久化
        try:
            profile = await self.repo.create(obj_in)
            await self.repo.session.commit()
        except IntegrityError:
            await self.repo.session.rollback()
            # 预检之后的并发写入：按约束逐一判定冲突来源
            if await self.repo.get_by_user_id(obj_in.user_id):
                raise AppException(ProfileErrorCode.USER_HAS_PROFILE) from None
            if await self.repo.get_by_email(obj_in.email):
                raise AppException(ProfileErrorCode.EMAIL_EXIST) from None
            if not await self.user_repo.exists(obj_in.user_id):
                raise AppException(
                    UserErrorCode.NOT_FOUND, message=f"用户 {obj_in.user_id} 不存在"
                ) from None
            raise

        logger.bind(
            profile_id=profile.id,
            user_id=profile.user_id,
            email=mask_email(profile.email),
            phone=mask_phone(profile.phone),
        ).info("Profile created successfully")

        return profile

    async def get_with_user(self, profile_id: int) -> Profile | None:
        profile = await self.repo.get_with_user(profile_id)

        if not profile:
            logger.bind(profile_id=profile_id).info("profile_not_found")

        return profile
