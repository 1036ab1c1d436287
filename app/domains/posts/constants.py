"""
File: app/domains/posts/constants.py
Description: 文章领域常量与业务错误码定义
Namespace: posts.*
"""

from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.core.error_code import BaseErrorCode

# 请求未提供 assignedBy 时，关联记录的操作人
DEFAULT_ASSIGNED_BY = "system"


class PostErrorCode(BaseErrorCode):
    """文章领域错误码"""

    NOT_FOUND = (HTTP_404_NOT_FOUND, "posts.not_found", "文章不存在")
    # 文章 + 分类关联的事务任一步失败 (如分类不存在)，两行都不会落库
    TRANSACTION_FAILED = (
        HTTP_500_INTERNAL_SERVER_ERROR,
        "posts.transaction_failed",
        "创建文章失败",
    )


class PostMsg:
    CREATED = "Post created successfully"
