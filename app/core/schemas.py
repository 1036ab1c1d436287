"""
File: app/core/schemas.py
Description: 领域 Schema 公共基类

对外 JSON 字段统一使用 camelCase (authorId, categoryId ...)，
Python 内部仍使用 snake_case；两种写法在入参中均可识别。

Created: 2026-10-18
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 别名 + 允许按字段名填充 + 支持从 ORM 对象读取"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
