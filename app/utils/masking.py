"""
File: app/utils/masking.py
Description: PII 数据脱敏工具 (Data Masking)

本模块提供敏感信息脱敏功能，用于日志记录与错误响应时的隐私保护。
确保密码明文 / 哈希、联系方式不会原样出现在日志中。

特性：
1. 针对性脱敏: 手机号、邮箱。
2. 递归脱敏: 深度遍历字典/列表/元组，自动掩盖敏感 Key (如 password)。

Created: 2025-11-26
Updated: 2026-10-18 (Blog API sensitive keys)
"""

from typing import Any

# ==============================================================================
# 1. 敏感字段黑名单 (大小写不敏感)
# ==============================================================================
SENSITIVE_KEYS = {
    "password",
    "passwd",
    "hashed_password",
    "hashedpassword",
    "secret",
    "token",
    "access_token",
    "refresh_token",
    "api_key",
    "session_id",
}

MASK = "******"


# ==============================================================================
# 2. 基础脱敏函数
# ==============================================================================


def mask_phone(phone: str | None) -> str:
    """
    手机号脱敏。
    规则: 保留前3位和后4位，中间用 * 替换。
    示例: +8613800000000 -> +86****0000
    """
    if not phone or len(phone) < 7:
        return MASK
    return f"{phone[:3]}****{phone[-4:]}"


def mask_email(email: str | None) -> str:
    """
    邮箱脱敏。
    示例: alice@example.com -> a***@example.com
    """
    if not email or "@" not in email:
        return MASK

    user_part, domain_part = email.split("@", 1)
    if len(user_part) <= 1:
        masked_user = "*" * 4
    else:
        masked_user = f"{user_part[0]}***"
    return f"{masked_user}@{domain_part}"


def mask_secret(value: Any) -> str:
    """通用机密信息完全掩盖 (密码、Token)。"""
    if value is None:
        return ""
    return MASK


# ==============================================================================
# 3. 递归脱敏工具 (核心)
# ==============================================================================


def mask_sensitive_data(data: Any) -> Any:
    """
    递归遍历数据结构，自动对敏感字段进行脱敏。

    返回新的副本，不修改原数据。
    """
    if isinstance(data, dict):
        new_data = {}
        for k, v in data.items():
            if isinstance(k, str) and k.lower() in SENSITIVE_KEYS:
                new_data[k] = mask_secret(v)
            else:
                new_data[k] = mask_sensitive_data(v)
        return new_data

    if isinstance(data, list | tuple):
        return type(data)(mask_sensitive_data(item) for item in data)

    return data
