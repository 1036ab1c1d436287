"""
File: app/domains/posts/router.py
Description: 文章 HTTP 接口

- POST /insert-post  创建文章并关联分类 (事务)
- GET  /post/{id}    文章详情 (作者 + 分类)

Created: 2026-10-18
"""

from typing import Annotated

from fastapi import APIRouter, Path, Request, status

from app.core.response import ResponseModel
from app.domains.posts.constants import PostMsg
from app.domains.posts.dependencies import PostServiceDep
from app.domains.posts.schemas import PostCreate, PostDetail, PostRead

router = APIRouter()


@router.post(
    "/insert-post",
    response_model=ResponseModel[PostRead],
    status_code=status.HTTP_201_CREATED,
    summary="创建文章",
    description="文章与分类关联在同一事务内写入，任一步失败整体回滚。",
)
async def create_post(
    request: Request,
    post_in: PostCreate,
    service: PostServiceDep,
) -> ResponseModel[PostRead]:
    post = await service.create(post_in)

    return ResponseModel.success(
        data=PostRead.model_validate(post),
        request_id=getattr(request.state, "request_id", None),
        message=PostMsg.CREATED,
    )


@router.get(
    "/post/{post_id}",
    response_model=ResponseModel[PostDetail],
    summary="文章详情",
)
async def get_post(
    request: Request,
    post_id: Annotated[int, Path(gt=0, description="文章 ID")],
    service: PostServiceDep,
) -> ResponseModel[PostDetail]:
    post = await service.get_detail(post_id)

    return ResponseModel.success(
        data=PostDetail.model_validate(post),
        request_id=getattr(request.state, "request_id", None),
    )
