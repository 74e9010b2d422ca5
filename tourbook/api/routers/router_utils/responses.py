"""
Response mapping utilities.

Services return plain dicts; routers validate them into their response
schemas before handing them to FastAPI.
"""

from typing import Any, Iterable, TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def map_one(schema: type[M], data: dict[str, Any]) -> M:
    """Validate one service dict into ``schema``."""
    return schema.model_validate(data)


def map_many(schema: type[M], rows: Iterable[dict[str, Any]]) -> list[M]:
    """Validate a list of service dicts into ``schema``."""
    return [schema.model_validate(row) for row in rows]
