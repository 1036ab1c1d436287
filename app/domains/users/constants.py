"""
File: app/domains/users/constants.py
Description: 用户领域常量定义 (错误码 + 成功提示)
Namespace: users.*
"""

from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from app.core.error_code import BaseErrorCode


class UserErrorCode(BaseErrorCode):
    """用户领域错误码"""

    # 格式: (HTTP状态, 业务码, 默认文案)

    NOT_FOUND = (HTTP_404_NOT_FOUND, "users.not_found", "用户不存在")
    USERNAME_EXIST = (HTTP_409_CONFLICT, "users.username_exist", "该用户名已被占用")
    EMAIL_EXIST = (HTTP_409_CONFLICT, "users.email_exist", "该邮箱已被注册")
    # 删除策略为 RESTRICT：存在档案或文章时拒绝删除
    HAS_DEPENDENTS = (
        HTTP_409_CONFLICT,
        "users.has_dependents",
        "该用户仍有关联的档案或文章，无法删除",
    )


class UserMsg:
    """业务文案常量"""

    CREATED = "User created successfully"
    UPDATED = "User updated successfully"
    DELETED = "User deleted successfully"
