"""
File: app/domains/profiles/constants.py
Description: 档案领域常量与业务错误码定义
Namespace: profiles.*
"""

from starlette.status import HTTP_409_CONFLICT

from app.core.error_code import BaseErrorCode


class ProfileErrorCode(BaseErrorCode):
    """档案领域错误码"""

    USER_HAS_PROFILE = (
        HTTP_409_CONFLICT,
        "profiles.user_has_profile",
        "该用户已存在档案",
    )
    EMAIL_EXIST = (HTTP_409_CONFLICT, "profiles.email_exist", "该邮箱已被其他档案使用")


class ProfileMsg:
    """业务文案常量"""

    CREATED = "Profile created successfully"
