"""
File: app/domains/categories/router.py
Description: 分类 HTTP 接口

Created: 2026-10-18
"""

from fastapi import APIRouter, Request, status

from app.core.response import ResponseModel
from app.domains.categories.constants import CategoryMsg
from app.domains.categories.dependencies import CategoryServiceDep
from app.domains.categories.schemas import CategoryCreate, CategoryRead

router = APIRouter()


@router.post(
    "/category",
    response_model=ResponseModel[CategoryRead],
    status_code=status.HTTP_201_CREATED,
    summary="创建分类",
    description="分类名称唯一，重复创建返回 409。",
)
async def create_category(
    request: Request,
    category_in: CategoryCreate,
    service: CategoryServiceDep,
) -> ResponseModel[CategoryRead]:
    category = await service.create(category_in)

    return ResponseModel.success(
        data=CategoryRead.model_validate(category),
        request_id=getattr(request.state, "request_id", None),
        message=CategoryMsg.CREATED,
    )
