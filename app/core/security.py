"""
File: app/core/security.py
Description: 密码哈希工具模块 (Argon2id)

本模块负责：
1. 密码加密 (Hash): Argon2id，每次调用随机盐，同一明文多次哈希结果不同
2. 密码验证 (Verify): 校验明文与哈希
3. 异步封装: 哈希是刻意昂贵的 CPU 密集操作，放到线程池执行避免阻塞事件循环

Created: 2025-12-05
Updated: 2026-10-18 (Remove JWT helpers)
"""

from pwdlib import PasswordHash
from starlette.concurrency import run_in_threadpool

# pwdlib[argon2] 推荐配置即 Argon2id
password_hash = PasswordHash.recommended()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    验证明文密码与哈希值是否匹配。

    Args:
        plain_password: 明文密码
        hashed_password: 数据库存的哈希值 (Argon2 格式)

    Returns:
        bool: 匹配返回 True，否则 False
    """
    return password_hash.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    生成密码哈希值 (Argon2id)。

    Args:
        password: 明文密码

    Returns:
        str: 加密后的哈希字符串
    """
    return password_hash.hash(password)


async def get_password_hash_async(password: str) -> str:
    """
    异步生成密码哈希（线程池执行，避免阻塞事件循环）。

    Args:
        password: 明文密码

    Returns:
        str: 加密后的哈希字符串
    """
    return await run_in_threadpool(get_password_hash, password)
