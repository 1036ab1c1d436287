"""
File: app/domains/profiles/schemas.py
Description: 档案领域 Pydantic 模型

1. ProfileCreate: POST /profile 参数，电话强制 E.164 格式
2. ProfileRead: 档案响应
3. ProfileDetail: GET /get-profile 响应，附带所属用户 {id, username}

Created: 2026-10-18
"""

import re
from datetime import date, datetime

from pydantic import EmailStr, Field, field_validator

from app.core.schemas import CamelModel

# E.164 手机号正则：以 + 开头，后接 8-15 位数字
E164_PATTERN = re.compile(r"^\+\d{8,15}$")
E164_ERROR_MESSAGE = "电话必须符合 E.164 格式 (例如 +8613800000000)"


class ProfileCreate(CamelModel):
    """
    档案创建模型。
    """

    email: EmailStr = Field(..., description="联系邮箱 (唯一)")
    name: str | None = Field(default=None, max_length=100, description="姓名 (可选)")
    address: str = Field(..., min_length=1, max_length=255, description="地址")
    phone: str = Field(
        ...,
        description="电话 (E.164 格式)",
        examples=["+8613800000000", "+14155550123"],
    )
    user_id: int = Field(..., gt=0, description="所属用户 ID")
    bio: str | None = Field(default=None, max_length=2000, description="个人简介")
    date_of_birth: date | None = Field(default=None, description="出生日期")

    @field_validator("phone")
    @classmethod
    def validate_e164(cls, v: str) -> str:
        """验证电话是否符合 E.164 格式"""
        if not E164_PATTERN.match(v):
            raise ValueError(E164_ERROR_MESSAGE)
        return v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("地址不能为空白字符串")
        return v


class ProfileRead(CamelModel):
    """
    档案响应模型。
    """

    id: int
    email: str
    name: str | None = None
    address: str
    phone: str
    user_id: int
    bio: str | None = None
    date_of_birth: date | None = None
    created_at: datetime
    updated_at: datetime


class ProfileOwner(CamelModel):
    id: int
    username: str


class ProfileDetail(ProfileRead):
    user: ProfileOwner
