"""
File: app/domains/users/schemas.py
Description: 用户领域 Pydantic 模型 (Schema)

本模块定义了用户相关的输入/输出数据结构：
1. UserCreate: POST /user 参数 (包含密码明文)
2. UserUpdate: PUT /update 参数 (id 必填，其余可选)
3. UserDelete: DELETE /delete 参数
4. UserRead: 精简响应 {id, username}，屏蔽密码
5. UserDetail: GET /get-user 列表项，附带文章 {id, title}

规范：
- 每个字段的规则声明在 Field / field_validator 上，Pydantic 会收集全部字段错误
- 可选字段缺省时跳过后续校验
- 对外字段名为 camelCase (见 CamelModel)

Created: 2025-11-25
Updated: 2026-10-18 (Blog API)
"""

from datetime import datetime

from pydantic import EmailStr, Field, SecretStr, field_validator

from app.core.schemas import CamelModel
from app.db.models.user import UserRole

# ------------------------------------------------------------------------------
# Constants (常量定义)
# ------------------------------------------------------------------------------

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
BLANK_USERNAME_MESSAGE = "用户名不能为空白字符串"
PASSWORD_LENGTH_MESSAGE = (
    f"密码长度必须为 {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} 个字符"
)


def check_password_length(v: SecretStr) -> SecretStr:
    """按明文长度校验 SecretStr"""
    if not PASSWORD_MIN_LENGTH <= len(v.get_secret_value()) <= PASSWORD_MAX_LENGTH:
        raise ValueError(PASSWORD_LENGTH_MESSAGE)
    return v


# ------------------------------------------------------------------------------
# Input Schemas (输入模型)
# ------------------------------------------------------------------------------


class UserCreate(CamelModel):
    """
    用户创建模型。
    """

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        description="用户名 (唯一)",
        examples=["alice"],
    )
    # SecretStr: repr / 日志 / 异常回溯中只显示 **********
    password: SecretStr = Field(..., description="明文密码 (仅用于哈希，不落库)")
    email: EmailStr | None = Field(default=None, description="邮箱 (可选, 唯一)")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        """用户名不能全为空白"""
        if v is not None and not v.strip():
            raise ValueError(BLANK_USERNAME_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr) -> SecretStr:
        return check_password_length(v)


class UserUpdate(CamelModel):
    """
    用户更新模型。
    仅更新传入的字段，id 用于定位用户。
    """

    id: int = Field(..., gt=0, description="用户 ID")
    username: str | None = Field(
        default=None,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
    )
    password: SecretStr | None = Field(default=None, description="新密码 (如需修改)")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        """用户名不能全为空白"""
        if v is not None and not v.strip():
            raise ValueError(BLANK_USERNAME_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None:
            return v
        return check_password_length(v)


class UserDelete(CamelModel):
    id: int = Field(..., gt=0, description="用户 ID")


# ------------------------------------------------------------------------------
# Output Schemas (输出/响应模型)
# ------------------------------------------------------------------------------


class UserRead(CamelModel):
    """
    用户精简响应。屏蔽了密码。
    """

    id: int = Field(..., description="用户 ID")
    username: str = Field(..., description="用户名")


class UserPostBrief(CamelModel):
    id: int
    title: str


class UserDetail(UserRead):
    """
    用户列表项 (GET /get-user)。
    """

    email: str | None = None
    is_active: bool
    role: UserRole
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime
    posts: list[UserPostBrief] = Field(default_factory=list, description="该用户的文章")
