"""
File: app/domains/profiles/router.py
Description: 档案 HTTP 接口

- POST /profile       创建档案
- GET  /get-profile   按 id 查询档案 (附用户名)，未找到返回 200 + data=null

Created: 2026-10-18
"""

from typing import Annotated

from fastapi import APIRouter, Query, Request, status

from app.core.response import ResponseModel
from app.domains.profiles.constants import ProfileMsg
from app.domains.profiles.dependencies import ProfileServiceDep
from app.domains.profiles.schemas import ProfileCreate, ProfileDetail, ProfileRead

router = APIRouter()


@router.post(
    "/profile",
    response_model=ResponseModel[ProfileRead],
    status_code=status.HTTP_201_CREATED,
    summary="创建用户档案",
)
async def create_profile(
    request: Request,
    profile_in: ProfileCreate,
    service: ProfileServiceDep,
) -> ResponseModel[ProfileRead]:
    profile = await service.create(profile_in)

    return ResponseModel.success(
        data=ProfileRead.model_validate(profile),
        request_id=getattr(request.state, "request_id", None),
        message=ProfileMsg.CREATED,
    )


@router.get(
    "/get-profile",
    response_model=ResponseModel[ProfileDetail | None],
    summary="查询用户档案",
)
async def get_profile(
    request: Request,
    service: ProfileServiceDep,
    profile_id: Annotated[int, Query(alias="id", gt=0, description="档案 ID")],
) -> ResponseModel[ProfileDetail | None]:
    """
    - **Empty State**: 未找到档案时返回 200 OK 且 data 为 null。
    """
    profile = await service.get_with_user(profile_id)

    return ResponseModel.success(
        data=ProfileDetail.model_validate(profile) if profile else None,
        request_id=getattr(request.state, "request_id", None),
    )
