"""
File: app/domains/users/service.py
Description: 用户领域服务 (业务逻辑层)

本模块封装用户管理的核心业务逻辑：
1. 创建：唯一性预检、哈希密码、写入数据库
2. 更新：用户名变更冲突检查、新密码重新哈希
3. 删除：RESTRICT 策略，存在档案/文章时拒绝
4. 列表：用户 + 文章摘要

注意：
- 事务提交 (Commit) 由本层负责，Repository 只 flush。
- 预检之后仍可能因并发写入撞上唯一约束，IntegrityError 同样映射为 409。
- 密码哈希使用异步版本函数，避免阻塞事件循环。

Created: 2025-11-25
Updated: 2026-10-18 (Blog API)
"""

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AppException
from app.core.logging import logger
from app.core.security import get_password_hash_async
from app.db.models.user import User
from app.domains.users.constants import UserErrorCode
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserCreate, UserUpdate


class UserService:
    """
    用户领域服务。

    职责：
    - 编排业务流程
    - 执行唯一性 / 存在性检查，决定 4xx 结果
    - 调用 Repository 进行数据持久化
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def create(self, obj_in: UserCreate) -> User:
        """
        创建新用户。
        """
        # 1. 唯一性校验 (Fail Fast)
        if await self.repo.get_by_username(obj_in.username):
            raise AppException(UserErrorCode.USERNAME_EXIST)

        if obj_in.email and await self.repo.get_by_email(obj_in.email):
            raise AppException(UserErrorCode.EMAIL_EXIST)

        # 2. 密码加密 (线程池)
        user_data = obj_in.model_dump(exclude={"password"}, exclude_unset=True)
        user_data["hashed_password"] = await get_password_hash_async(
            obj_in.password.get_secret_value()
        )

        # 3. 持久化与事务提交
        try:
            user = await self.repo.create(user_data)
            await self.repo.session.commit()
        except IntegrityError:
            await self.repo.session.rollback()
            raise AppException(await self._conflict_error(obj_in.email)) from None

        logger.bind(user_id=user.id, username=user.username).info(
            "User created successfully"
        )

        return user

    async def get(self, user_id: int) -> User:
        """
        获取用户，不存在时抛出 404。
        """
        user = await self.repo.get(user_id)
        if not user:
            raise AppException(
                UserErrorCode.NOT_FOUND, message=f"用户 {user_id} 不存在"
            )
        return user

    async def update(self, obj_in: UserUpdate) -> User:
        """
        更新用户名和/或密码。
        """
        user = await self.get(obj_in.id)

        # 显式传 null 视为未传
        update_data = {
            k: v
            for k, v in obj_in.model_dump(exclude={"id"}, exclude_unset=True).items()
            if v is not None
        }

        # 1. 处理密码修改 (SecretStr，只在哈希前取出明文)
        new_password = update_data.pop("password", None)
        if new_password is not None:
            update_data["hashed_password"] = await get_password_hash_async(
                new_password.get_secret_value()
            )

        # 2. 用户名变更冲突检查
        new_username = update_data.get("username")
        if new_username and new_username != user.username:
            existing = await self.repo.get_by_username(new_username)
            if existing and existing.id != user.id:
                raise AppException(UserErrorCode.USERNAME_EXIST)

        # 3. 执行更新并提交
        try:
            updated_user = await self.repo.update(user, update_data)
            await self.repo.session.commit()
        except IntegrityError:
            await self.repo.session.rollback()
            raise AppException(UserErrorCode.USERNAME_EXIST) from None

        logger.bind(
            user_id=obj_in.id,
            fields=sorted(k for k in update_data if k != "hashed_password"),
            password_changed=new_password is not None,
        ).info("User updated successfully")

        return updated_user

    async def delete(self, user_id: int) -> User:
        """
        物理删除用户 (RESTRICT)。
        返回被删除的用户对象，其已加载的属性仍可读取。
        """
        user = await self.get(user_id)

        if await self.repo.count_dependents(user_id):
            raise AppException(UserErrorCode.HAS_DEPENDENTS)

        try:
            await self.repo.delete(user_id)
            await self.repo.session.commit()
        except IntegrityError:
            # 预检后并发写入了档案/文章，由外键 RESTRICT 拦截
            await self.repo.session.rollback()
            raise AppException(UserErrorCode.HAS_DEPENDENTS) from None

        logger.bind(user_id=user_id).info("User deleted successfully")

        return user

    async def list_with_posts(self) -> list[User]:
        return await self.repo.list_with_posts()

    async def _conflict_error(self, email: str | None) -> UserErrorCode:
        """并发插入撞上唯一约束后，判断冲突的是邮箱还是用户名"""
        if email and await self.repo.get_by_email(email):
            return UserErrorCode.EMAIL_EXIST
        return UserErrorCode.USERNAME_EXIST
