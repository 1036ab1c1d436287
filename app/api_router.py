"""
File: app/api_router.py
Description: 根 API 路由聚合层

本模块负责：
1. 聚合所有业务领域的 Router (users, profiles, categories, posts)
2. 统一设置标签 (Tags) 用于 OpenAPI 文档分组

各领域路由自带完整路径 (/user, /get-profile, /post/{id} ...)，此处不再加前缀。

Created: 2025-12-05
Updated: 2026-10-18 (Blog API domains)
"""

from fastapi import APIRouter

from app.domains.categories.router import router as categories_router
from app.domains.posts.router import router as posts_router
from app.domains.profiles.router import router as profiles_router
from app.domains.users.router import router as users_router

api_router = APIRouter()

# ------------------------------------------------------------------------------
# 注册领域路由
# ------------------------------------------------------------------------------

api_router.include_router(users_router, tags=["users"])
api_router.include_router(profiles_router, tags=["profiles"])
api_router.include_router(categories_router, tags=["categories"])
api_router.include_router(posts_router, tags=["posts"])
