"""
File: tests/integration/test_health.py
Description: 健康检查与根路由集成测试

/health 与业务接口一样使用统一响应信封，data 为 {"status": "ok"}。

Created: 2025-11-26
Updated: 2026-10-18 (Envelope)
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """
    测试：GET /health
    验证：
    1. 状态码 200
    2. 信封 code=success，data={"status": "ok"}
    3. 中间件生效：响应头 X-Request-ID 与信封 request_id 一致
    """
    response = await client.get("/health")

    assert response.status_code == 200

    body = response.json()
    assert body["code"] == "success"
    assert body["data"] == {"status": "ok"}

    request_id_header = response.headers.get("X-Request-ID")
    assert request_id_header
    assert body["request_id"] is None or body["request_id"] == request_id_header


@pytest.mark.asyncio
async def test_incoming_request_id_is_reused(client: AsyncClient) -> None:
    """测试：上游传入的 X-Request-ID 原样回传"""
    response = await client.get("/health", headers={"X-Request-ID": "trace-abc-123"})

    assert response.headers["X-Request-ID"] == "trace-abc-123"


@pytest.mark.asyncio
async def test_oversized_request_id_is_replaced(client: AsyncClient) -> None:
    """测试：过长的 X-Request-ID 被丢弃，重新生成"""
    incoming = "x" * 200
    response = await client.get("/health", headers={"X-Request-ID": incoming})

    assert response.headers["X-Request-ID"] != incoming


@pytest.mark.asyncio
async def test_root(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["code"] == "success"
    assert body["data"]["status"] == "running"


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(client: AsyncClient) -> None:
    """测试：未知路由返回 404 信封 (system.not_found)"""
    response = await client.get("/no-such-route")

    assert response.status_code == 404
    body = response.json()
    assert body["code"] == "system.not_found"
    assert body["data"] is None


@pytest.mark.asyncio
async def test_wrong_method_uses_envelope(client: AsyncClient) -> None:
    """测试：405 保留原状态码，业务码为 system.http_error"""
    response = await client.get("/user")

    assert response.status_code == 405
    assert response.json()["code"] == "system.http_error"
