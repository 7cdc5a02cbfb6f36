"""
Pydantic schemas for recipe endpoints.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, PrivateAttr, model_validator

from .models import RECIPE_FIELDS


def _as_text(value: Any) -> str:
    """
    Render a JSON value the way it is stored in a TEXT column.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class RecipeFields(BaseModel):
    """
    Request body for POST and PATCH. Every field is optional here; create
    checks presence itself so it can answer with its own message.

    Any JSON value is accepted and stored as text. Falsy raw values
    (`0`, `false`, `""`, `{}`, `[]`) are remembered so create can reject
    them even though their text form is not empty.
    """

    title: str | None = None
    making_time: str | None = None
    serves: str | None = None
    ingredients: str | None = None
    cost: str | None = None

    _falsy_fields: frozenset[str] = PrivateAttr(default=frozenset())

    @model_validator(mode="wrap")
    @classmethod
    def _coerce_to_text(cls, data: Any, handler):
        if not isinstance(data, dict):
            return handler(data)

        falsy = frozenset(name for name in RECIPE_FIELDS if name in data and not data[name])
        converted = {
            key: (_as_text(value) if key in RECIPE_FIELDS and value is not None else value)
            for key, value in data.items()
        }
        model = handler(converted)
        model._falsy_fields = falsy
        return model

    def missing_fields(self) -> list[str]:
        return [
            name
            for name in RECIPE_FIELDS
            if name in self._falsy_fields or not getattr(self, name)
        ]
