"""
File: tests/integration/test_post_router.py
Description: 文章路由 (posts) 集成测试

覆盖端点：
- POST /insert-post (文章 + 分类关联，同一事务)
- GET  /post/{id}

Created: 2026-10-18
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.post import Post
from app.db.models.post_category import PostCategory
from app.domains.posts.repository import PostCategoryRepository, PostRepository


async def create_author(client: AsyncClient, username: str = "alice") -> int:
    response = await client.post(
        "/user", json={"username": username, "password": "password123"}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


async def create_category(client: AsyncClient, name: str = "Tech") -> int:
    response = await client.post("/category", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


# ------------------------------------------------------------------------------
# POST /insert-post
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_insert_post(client: AsyncClient) -> None:
    author_id = await create_author(client)
    category_id = await create_category(client)

    response = await client.post(
        "/insert-post",
        json={
            "title": "Hello",
            "content": "First post",
            "tags": ["intro", "python"],
            "authorId": author_id,
            "categoryId": category_id,
            "assignedBy": "editor",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["code"] == "success"
    data = body["data"]
    assert data["title"] == "Hello"
    assert data["authorId"] == author_id
    assert data["published"] is False
    assert data["viewCount"] == 0
    assert data["tags"] == ["intro", "python"]


@pytest.mark.asyncio
async def test_get_post_detail(client: AsyncClient) -> None:
    """测试：文章详情附带作者与分类关联"""
    author_id = await create_author(client)
    category_id = await create_category(client)
    created = await client.post(
        "/insert-post",
        json={
            "title": "Hello",
            "authorId": author_id,
            "categoryId": category_id,
            "assignedBy": "editor",
        },
    )
    post_id = created.json()["data"]["id"]

    response = await client.get(f"/post/{post_id}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == post_id
    assert data["author"] == {"id": author_id, "username": "alice"}
    assert len(data["categories"]) == 1
    link = data["categories"][0]
    assert link["categoryId"] == category_id
    assert link["assignedBy"] == "editor"
    assert link["category"]["name"] == "Tech"


@pytest.mark.asyncio
async def test_insert_post_default_assigned_by(client: AsyncClient) -> None:
    author_id = await create_author(client)
    category_id = await create_category(client)
    created = await client.post(
        "/insert-post",
        json={"title": "Hello", "authorId": author_id, "categoryId": category_id},
    )
    post_id = created.json()["data"]["id"]

    response = await client.get(f"/post/{post_id}")

    assert response.json()["data"]["categories"][0]["assignedBy"] == "system"


@pytest.mark.asyncio
async def test_insert_post_unknown_category_rolls_back(
    client: AsyncClient, db_session: AsyncSession
) -> None:
    """测试：分类不存在时整个事务回滚，不留下孤立文章"""
    author_id = await create_author(client)

    response = await client.post(
        "/insert-post",
        json={"title": "Orphan", "authorId": author_id, "categoryId": 999},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "posts.transaction_failed"
    assert body["data"] is None

    assert await PostRepository(model=Post, session=db_session).count() == 0
    assert (
        await PostCategoryRepository(model=PostCategory, session=db_session).count()
        == 0
    )

    missing = await client.get("/post/1")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_insert_post_unknown_author(client: AsyncClient) -> None:
    category_id = await create_category(client)

    response = await client.post(
        "/insert-post",
        json={"title": "Hello", "authorId": 999, "categoryId": category_id},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "users.not_found"


@pytest.mark.asyncio
async def test_insert_post_collects_all_errors(client: AsyncClient) -> None:
    response = await client.post("/insert-post", json={"title": "", "authorId": "abc"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["data"]["errors"]}
    assert fields == {"title", "authorId", "categoryId"}


@pytest.mark.asyncio
async def test_insert_post_rejects_blank_tags(client: AsyncClient) -> None:
    response = await client.post(
        "/insert-post",
        json={"title": "Hello", "authorId": 1, "categoryId": 1, "tags": ["ok", " "]},
    )

    assert response.status_code == 400
    assert response.json()["data"]["errors"][0]["field"] == "tags"


# ------------------------------------------------------------------------------
# GET /post/{id}
# ------------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_post_not_found(client: AsyncClient) -> None:
    response = await client.get("/post/999")

    assert response.status_code == 404
    body = response.json()
    assert body["code"] == "posts.not_found"
    assert body["data"] is None


@pytest.mark.asyncio
async def test_get_post_invalid_id(client: AsyncClient) -> None:
    response = await client.get("/post/abc")

    assert response.status_code == 400
    assert response.json()["data"]["errors"][0]["field"] == "post_id"


@pytest.mark.asyncio
async def test_insert_post_non_string_tag_names_the_list_field(
    client: AsyncClient,
) -> None:
    """测试：列表元素错误的字段名包含列表字段与下标"""
    response = await client.post(
        "/insert-post",
        json={"title": "Hello", "authorId": 1, "categoryId": 1, "tags": ["ok", 1]},
    )

    assert response.status_code == 400
    errors = response.json()["data"]["errors"]
    assert errors == [{"field": "tags.1", "message": "Input should be a valid string"}]
