"""
File: app/core/exceptions.py
Description: 业务异常类与全局异常处理器

本模块负责：
1. 业务异常基类（AppException）接受 BaseErrorCode 枚举
2. 全局异常处理器自动将异常映射为：语义化 HTTP 状态码 + 字符串业务码
3. 参数校验失败时收集全部字段错误 [{field, message}, ...]，统一返回 400
4. 使用 ResponseModel.fail() 构造统一的失败响应信封

Created: 2025-11-24
Updated: 2026-10-18 (Collect all validation errors)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.error_code import BaseErrorCode, SystemErrorCode
from app.core.logging import logger
from app.core.response import ResponseModel
from app.utils.masking import mask_sensitive_data

# ------------------------------------------------------------------------------
# 1. 自定义业务异常类
# ------------------------------------------------------------------------------


class AppException(Exception):
    """
    应用基础异常类。

    用法示例:
        raise AppException(UserErrorCode.USERNAME_EXIST)
        raise AppException(PostErrorCode.NOT_FOUND, message="文章 42 不存在")
    """

    def __init__(
        self,
        error: BaseErrorCode,
        message: str = "",
        data: Any = None,
    ):
        # 自动从枚举中解构: (HTTP状态, 业务码, 默认文案)
        self.error = error
        self.http_status = error.http_status
        self.code = error.code
        self.message = message or error.msg
        self.data = data
        super().__init__(self.message)


# ------------------------------------------------------------------------------
# 2. 辅助函数
# ------------------------------------------------------------------------------


# 请求参数来源，作为 loc 的首段出现
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _get_request_id(request: Request) -> str:
    """尝试从 request.state 获取 request_id，如果不存在则返回 'unknown'"""
    return str(getattr(request.state, "request_id", "unknown"))


def collect_field_errors(errors: list[Any]) -> list[dict[str, str]]:
    """
    将 Pydantic 原始错误列表整理为 [{field, message}]。

    loc 示例: ('body', 'username') -> username, ('body', 'tags', 0) -> tags.0
    请求来源前缀 (body / query / path ...) 不计入字段名。
    只保留 field/message，丢弃 input/ctx (可能包含密码明文或不可序列化对象)。
    """
    field_errors: list[dict[str, str]] = []
    for error in errors:
        loc = error.get("loc", ())
        parts = [str(part) for part in loc]
        if len(parts) > 1 and parts[0] in REQUEST_LOCATIONS:
            parts = parts[1:]
        field_name = ".".join(parts) or "unknown"
        field_errors.append(
            {"field": field_name, "message": error.get("msg", "Invalid parameter")}
        )
    return field_errors


# ------------------------------------------------------------------------------
# 3. 全局异常处理器 (Handlers)
# ------------------------------------------------------------------------------


async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
    """
    处理自定义业务异常 (AppException)
    直接映射为定义好的 HTTP 状态码和 Code
    """
    request_id = _get_request_id(request)

    logger.bind(
        request_id=request_id,
        code=exc.code,
        http_status=exc.http_status,
        message=exc.message,
    ).warning("Business exception occurred")

    response_model = ResponseModel.fail(
        code=exc.code,
        message=exc.message,
        data=exc.data,
        request_id=request_id,
    )

    return ORJSONResponse(
        status_code=exc.http_status,
        content=response_model.model_dump(mode="json"),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """
    处理 Pydantic 校验异常 (FastAPI 默认 422)
    映射目标: HTTP 400 Bad Request / Code: system.invalid_params
    所有字段的错误一并返回，不在第一个错误处中断。
    """
    request_id = _get_request_id(request)

    field_errors = collect_field_errors(list(exc.errors()))
    first_error = field_errors[0] if field_errors else None

    readable_message = (
        f"{first_error['field']}: {first_error['message']}"
        if first_error
        else SystemErrorCode.INVALID_PARAMS.msg
    )

    logger.bind(
        request_id=request_id,
        detail=readable_message,
        errors=field_errors,
        body=mask_sensitive_data(exc.body),
    ).warning("Request validation failed")

    response_model = ResponseModel.fail(
        code=SystemErrorCode.INVALID_PARAMS.code,
        message=readable_message,
        data={"errors": field_errors},
        request_id=request_id,
    )

    return ORJSONResponse(
        status_code=SystemErrorCode.INVALID_PARAMS.http_status,
        content=response_model.model_dump(mode="json"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ORJSONResponse:
    """
    处理框架层面的 HTTP 异常 (如 404 Not Found, 405 Method Not Allowed)
    """
    request_id = _get_request_id(request)

    code_str = (
        SystemErrorCode.NOT_FOUND.code
        if exc.status_code == SystemErrorCode.NOT_FOUND.http_status
        else SystemErrorCode.HTTP_ERROR.code
    )

    logger.bind(
        request_id=request_id,
        status_code=exc.status_code,
        detail=str(exc.detail),
    ).warning("Framework HTTP exception occurred")

    response_model = ResponseModel.fail(
        code=code_str,
        message=str(exc.detail),
        request_id=request_id,
    )

    return ORJSONResponse(
        status_code=exc.status_code,
        content=response_model.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> ORJSONResponse:
    """
    处理未被 Service 归类的持久化异常 (连接中断、意外约束失败等)
    映射目标: HTTP 500 / Code: system.db_error
    """
    request_id = _get_request_id(request)

    logger.opt(exception=exc).bind(request_id=request_id).error(
        "Unclassified persistence error occurred"
    )

    response_model = ResponseModel.fail(
        code=SystemErrorCode.DB_ERROR.code,
        message=SystemErrorCode.DB_ERROR.msg,
        request_id=request_id,
    )

    return ORJSONResponse(
        status_code=SystemErrorCode.DB_ERROR.http_status,
        content=response_model.model_dump(mode="json"),
    )


async def general_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    处理所有未捕获的异常 (500 Internal Server Error)
    屏蔽内部细节，返回通用系统错误
    """
    request_id = _get_request_id(request)

    logger.opt(exception=exc).bind(request_id=request_id).error(
        "Unhandled system exception occurred"
    )

    response_model = ResponseModel.fail(
        code=SystemErrorCode.INTERNAL_ERROR.code,
        message=SystemErrorCode.INTERNAL_ERROR.msg,
        request_id=request_id,
    )

    return ORJSONResponse(
        status_code=SystemErrorCode.INTERNAL_ERROR.http_status,
        content=response_model.model_dump(mode="json"),
    )


# ------------------------------------------------------------------------------
# 4. 异常处理器注册函数
# ------------------------------------------------------------------------------


def register_exception_handlers(app: FastAPI) -> None:
    """
    统一注册所有异常处理器。
    应在 main.py 中调用。
    """
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore

    # Override FastAPI default 422
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore

    # 未归类的数据库异常 (500)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)  # type: ignore

    # 兜底 (500)
    app.add_exception_handler(Exception, general_exception_handler)
