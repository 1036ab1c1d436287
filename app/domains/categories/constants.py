"""
File: app/domains/categories/constants.py
Description: 分类领域常量与业务错误码定义
Namespace: categories.*
"""

from starlette.status import HTTP_409_CONFLICT

from app.core.error_code import BaseErrorCode


class CategoryErrorCode(BaseErrorCode):
    """分类领域错误码"""

    NAME_EXIST = (HTTP_409_CONFLICT, "categories.name_exist", "该分类名称已存在")


class CategoryMsg:
    CREATED = "Category created successfully"
