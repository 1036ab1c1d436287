"""
File: tests/unit/test_profile_service.py
Description: 档案领域服务单元测试 (约束冲突归类)

Created: 2026-10-18
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AppException
from app.db.models.profile import Profile
from app.db.models.user import User
from app.domains.profiles.repository import ProfileRepository
from app.domains.profiles.schemas import ProfileCreate
from app.domains.profiles.service import ProfileService
from app.domains.users.repository import UserRepository


@pytest.fixture
def profile_service(db_session: AsyncSession) -> ProfileService:
    return ProfileService(
        repo=ProfileRepository(model=Profile, session=db_session),
        user_repo=UserRepository(model=User, session=db_session),
    )


def build_profile(user_id: int, email: str = "alice@example.com") -> ProfileCreate:
    return ProfileCreate(
        email=email, address="1 Main St", phone="+14155550123", user_id=user_id
    )


@pytest.mark.asyncio
async def test_user_removed_after_check_maps_to_not_found(
    profile_service: ProfileService, monkeypatch: pytest.MonkeyPatch
) -> None:
    """测试：存在性检查之后用户被删除，外键失败返回 404 而不是邮箱冲突"""
    real_exists = profile_service.user_repo.exists
    calls: list[int] = []

    async def _exists_only_first_time(user_id: int) -> bool:
        calls.append(user_id)
        if len(calls) == 1:
            return True
        return await real_exists(user_id)

    monkeypatch.setattr(profile_service.user_repo, "exists", _exists_only_first_time)

    with pytest.raises(AppException) as excinfo:
        await profile_service.create(build_profile(999))

    assert excinfo.value.code == "users.not_found"
    assert excinfo.value.http_status == 404
    assert await profile_service.repo.count() == 0


@pytest.mark.asyncio
async def test_email_race_maps_to_email_conflict(
    profile_service: ProfileService,
    db_session: AsyncSession,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """测试：邮箱查重被并发绕过时，唯一约束失败仍归类为邮箱冲突"""
    alice = User(username="alice", hashed_password="not-a-real-hash")
    bob = User(username="bob", hashed_password="not-a-real-hash")
    db_session.add_all([alice, bob])
    await db_session.commit()
    await profile_service.create(build_profile(alice.id))

    real_get_by_email = profile_service.repo.get_by_email
    calls: list[str] = []

    async def _miss_first_time(email: str) -> Profile | None:
        calls.append(email)
        if len(calls) == 1:
            return None
        return await real_get_by_email(email)

    monkeypatch.setattr(profile_service.repo, "get_by_email", _miss_first_time)

    with pytest.raises(AppException) as excinfo:
        await profile_service.create(build_profile(bob.id))

    assert excinfo.value.code == "profiles.email_exist"
    assert await profile_service.repo.count() == 1
