"""
File: app/domains/users/router.py
Description: 用户领域 HTTP 路由层

端点：
- POST   /user      创建用户
- PUT    /update    更新用户名 / 密码
- DELETE /delete    删除用户 (RESTRICT)
- GET    /get-user  用户列表 (附文章摘要)

统一使用 ResponseModel.success 返回响应信封。

Created: 2025-12-05
Updated: 2026-10-18 (Blog API endpoints)
"""

from fastapi import APIRouter, Request, status

from app.core.response import ResponseModel
from app.domains.users.constants import UserMsg
from app.domains.users.dependencies import UserServiceDep
from app.domains.users.schemas import (
    UserCreate,
    UserDelete,
    UserDetail,
    UserRead,
    UserUpdate,
)

router = APIRouter()


@router.post(
    "/user",
    response_model=ResponseModel[UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="创建用户",
    description="用户名 3-50 字符且唯一，密码至少 8 位 (哈希后存储)。",
)
async def create_user(
    request: Request,
    user_in: UserCreate,
    service: UserServiceDep,
) -> ResponseModel[UserRead]:
    user = await service.create(user_in)

    return ResponseModel.success(
        data=UserRead.model_validate(user),
        request_id=getattr(request.state, "request_id", None),
        message=UserMsg.CREATED,
    )


@router.put(
    "/update",
    response_model=ResponseModel[UserRead],
    summary="更新用户",
    description="按 id 更新用户名和/或密码，未传字段保持不变。",
)
async def update_user(
    request: Request,
    user_in: UserUpdate,
    service: UserServiceDep,
) -> ResponseModel[UserRead]:
    user = await service.update(user_in)

    return ResponseModel.success(
        data=UserRead.model_validate(user),
        request_id=getattr(request.state, "request_id", None),
        message=UserMsg.UPDATED,
    )


@router.delete(
    "/delete",
    response_model=ResponseModel[UserRead],
    summary="删除用户",
    description="存在关联档案或文章的用户不可删除 (409)。",
)
async def delete_user(
    request: Request,
    user_in: UserDelete,
    service: UserServiceDep,
) -> ResponseModel[UserRead]:
    user = await service.delete(user_in.id)

    return ResponseModel.success(
        data=UserRead.model_validate(user),
        request_id=getattr(request.state, "request_id", None),
        message=UserMsg.DELETED,
    )


@router.get(
    "/get-user",
    response_model=ResponseModel[list[UserDetail]],
    summary="用户列表",
)
async def list_users(
    request: Request,
    service: UserServiceDep,
) -> ResponseModel[list[UserDetail]]:
    users = await service.list_with_posts()

    return ResponseModel.success(
        data=[UserDetail.model_validate(user) for user in users],
        request_id=getattr(request.state, "request_id", None),
    )
