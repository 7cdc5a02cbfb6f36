"""
Recipe business logic.

Every route answers 200 with a message body, including "not found" and
missing-field cases; only unknown routes get a 404 (see `main.py`).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from core.timestamps import format_timestamp

from . import schemas
from .models import RECIPE_FIELDS, Recipe
from .repository import RecipeStore

logger = logging.getLogger(__name__)

# `id` is a SERIAL (int4) column.
MAX_RECIPE_ID = 2**31 - 1
# Matches no row; used for ids that do not parse.
NO_MATCH_ID = 0

CREATED_MESSAGE = "Recipe successfully created!"
CREATE_FAILED_MESSAGE = "Recipe creation failed!"
DETAILS_MESSAGE = "Recipe details by id"
UPDATED_MESSAGE = "Recipe successfully updated!"
REMOVED_MESSAGE = "Recipe successfully removed!"
NOT_FOUND_MESSAGE = "No Recipe found"

# ASCII-only; underscores and non-ASCII digits are rejected.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def parse_recipe_id(raw: str) -> int:
    """
    Loose numeric coercion of a path segment: decimal or exponent text,
    or an unsigned 0x/0o/0b literal. Integral floats ("3.0", "1e1") are
    accepted; anything else, including blank text, maps to `NO_MATCH_ID`.
    """
    text = (raw or "").strip()
    if _PREFIXED_RE.fullmatch(text):
        value = int(text, 0)
    elif _DECIMAL_RE.fullmatch(text):
        number = float(text)
        if not math.isfinite(number) or not number.is_integer():
            return NO_MATCH_ID
        value = int(number)
    else:
        return NO_MATCH_ID
    if value < 1 or value > MAX_RECIPE_ID:
        return NO_MATCH_ID
    return value


def to_record(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": recipe.id,
        "title": recipe.title,
        "making_time": recipe.making_time,
        "serves": recipe.serves,
        "ingredients": recipe.ingredients,
        "cost": recipe.cost,
        "created_at": format_timestamp(recipe.created_at),
        "updated_at": format_timestamp(recipe.updated_at),
    }


class RecipeService:
    def __init__(self, store: RecipeStore) -> None:
        self.store = store

    async def create(self, payload: schemas.RecipeFields | None) -> dict[str, Any]:
        payload = payload or schemas.RecipeFields()
        missing = payload.missing_fields()
        if missing:
            logger.info("recipe_create_rejected missing=%s", ",".join(missing))
            return {
                "message": CREATE_FAILED_MESSAGE,
                "required": ", ".join(RECIPE_FIELDS),
            }

        recipe = await self.store.create(
            title=str(payload.title),
            making_time=str(payload.making_time),
            serves=str(payload.serves),
            ingredients=str(payload.ingredients),
            cost=str(payload.cost),
        )
        logger.info("recipe_created id=%s", recipe.id)
        return {"message": CREATED_MESSAGE, "recipe": [to_record(recipe)]}

    async def list(self) -> dict[str, Any]:
        recipes = await self.store.list()
        return {"recipes": [to_record(recipe) for recipe in recipes]}

    async def get(self, raw_id: str) -> dict[str, Any]:
        recipe = await self.store.get(parse_recipe_id(raw_id))
        return {
            "message": DETAILS_MESSAGE,
            "recipe": [to_record(recipe)] if recipe is not None else [],
        }

    async def update(self, raw_id: str, payload: schemas.RecipeFields | None) -> dict[str, Any]:
        recipe_id = parse_recipe_id(raw_id)
        changes = payload.model_dump(exclude_none=True) if payload is not None else {}
        recipe = await self.store.update(recipe_id, **changes)
        if recipe is None:
            return {"message": NOT_FOUND_MESSAGE}

        logger.info("recipe_updated id=%s fields=%s", recipe.id, ",".join(sorted(changes)))
        return {"message": UPDATED_MESSAGE, "recipe": [to_record(recipe)]}

    async def delete(self, raw_id: str) -> dict[str, Any]:
        recipe_id = parse_recipe_id(raw_id)
        removed = await self.store.delete(recipe_id)
        if not removed:
            return {"message": NOT_FOUND_MESSAGE}

        logger.info("recipe_deleted id=%s", recipe_id)
        return {"message": REMOVED_MESSAGE}
