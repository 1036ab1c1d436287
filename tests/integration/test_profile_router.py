"""
File: tests/integration/test_profile_router.py
Description: 档案路由 (profiles) 集成测试

覆盖端点：
- POST /profile
- GET  /get-profile?id=

Created: 2026-10-18
"""

from typing import Any

import pytest
from httpx import AsyncClient


async def create_user(client: AsyncClient, username: str = "alice") -> int:
    response = await client.post(
        "/user", json={"username": username, "password": "password123"}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


def profile_payload(user_id: int, **overrides: Any) -> dict[str, Any]:
    payload = {
        "email": "alice@example.com",
        "name": "Alice",
        "address": "1 Main St",
        "phone": "+14155550123",
        "userId": user_id,
        "bio": "Writer",
        "dateOfBirth": "1990-05-17",
    }
    payload.update(overrides)
    return payload


# ------------------------------------------------------------------------------
# POST /profile
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_profile(client: AsyncClient) -> None:
    user_id = await create_user(client)

    response = await client.post("/profile", json=profile_payload(user_id))

    assert response.status_code == 201
    body = response.json()
    assert body["code"] == "success"
    data = body["data"]
    assert data["userId"] == user_id
    assert data["email"] == "alice@example.com"
    assert data["phone"] == "+14155550123"
    assert data["dateOfBirth"] == "1990-05-17"
    assert isinstance(data["id"], int)


@pytest.mark.asyncio
async def test_create_profile_accepts_snake_case(client: AsyncClient) -> None:
    user_id = await create_user(client)
    payload = {
        "email": "alice@example.com",
        "address": "1 Main St",
        "phone": "+14155550123",
        "user_id": user_id,
    }

    response = await client.post("/profile", json=payload)

    assert response.status_code == 201
    assert response.json()["data"]["name"] is None


@pytest.mark.asyncio
async def test_create_profile_user_not_found(client: AsyncClient) -> None:
    response = await client.post("/profile", json=profile_payload(999))

    assert response.status_code == 404
    assert response.json()["code"] == "users.not_found"


@pytest.mark.asyncio
async def test_create_second_profile_for_user(client: AsyncClient) -> None:
    """测试：一个用户只能有一个档案"""
    user_id = await create_user(client)
    assert (await client.post("/profile", json=profile_payload(user_id))).status_code == 201

    response = await client.post(
        "/profile", json=profile_payload(user_id, email="other@example.com")
    )

    assert response.status_code == 409
    assert response.json()["code"] == "profiles.user_has_profile"


@pytest.mark.asyncio
async def test_create_profile_duplicate_email(client: AsyncClient) -> None:
    alice = await create_user(client, "alice")
    bob = await create_user(client, "bob")
    assert (await client.post("/profile", json=profile_payload(alice))).status_code == 201

    response = await client.post("/profile", json=profile_payload(bob))

    assert response.status_code == 409
    assert response.json()["code"] == "profiles.email_exist"


@pytest.mark.asyncio
async def test_create_profile_collects_all_errors(client: AsyncClient) -> None:
    """测试：邮箱、电话、地址同时非法"""
    user_id = await create_user(client)

    response = await client.post(
        "/profile",
        json=profile_payload(
            user_id, email="not-an-email", phone="13800000000", address="   "
        ),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "system.invalid_params"
    fields = {error["field"] for error in body["data"]["errors"]}
    assert fields == {"email", "phone", "address"}


# ------------------------------------------------------------------------------
# GET /get-profile
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_profile_with_user(client: AsyncClient) -> None:
    user_id = await create_user(client)
    created = await client.post("/profile", json=profile_payload(user_id))
    profile_id = created.json()["data"]["id"]

    response = await client.get("/get-profile", params={"id": profile_id})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == profile_id
    assert data["user"] == {"id": user_id, "username": "alice"}


@pytest.mark.asyncio
async def test_get_profile_not_found_returns_null(client: AsyncClient) -> None:
    """测试：档案不存在时返回 200 + data=null"""
    response = await client.get("/get-profile", params={"id": 999})

    assert response.status_code == 200
    body = response.json()
    assert body["code"] == "success"
    assert body["data"] is None


@pytest.mark.asyncio
async def test_get_profile_requires_valid_id(client: AsyncClient) -> None:
    missing = await client.get("/get-profile")
    assert missing.status_code == 400

    invalid = await client.get("/get-profile", params={"id": "abc"})
    assert invalid.status_code == 400
    assert invalid.json()["data"]["errors"][0]["field"] == "id"
