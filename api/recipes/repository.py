"""
Recipe persistence.
This module is where recipe-related SQL lives.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.db import Database, affected_rows

from .models import Recipe

_COLUMNS = "id, title, making_time, serves, ingredients, cost, created_at, updated_at"


class RecipeStore(Protocol):
    """Behaviour the recipe service needs from its storage."""

    async def create(
        self,
        *,
        title: str,
        making_time: str,
        serves: str,
        ingredients: str,
        cost: str,
    ) -> Recipe:
        """Persist a new recipe and return the stored row."""

    async def list(self) -> list[Recipe]:
        """Return every recipe ordered by ascending id."""

    async def get(self, recipe_id: int) -> Recipe | None:
        """Return one recipe or None."""

    async def update(
        self,
        recipe_id: int,
        *,
        title: str | None = None,
        making_time: str | None = None,
        serves: str | None = None,
        ingredients: str | None = None,
        cost: str | None = None,
    ) -> Recipe | None:
        """Overwrite the given fields, keep the rest. None when missing."""

    async def delete(self, recipe_id: int) -> bool:
        """Remove a recipe. False when nothing matched."""


def _row_to_recipe(row: dict[str, Any]) -> Recipe:
    return Recipe(
        id=int(row["id"]),
        title=row["title"],
        making_time=row["making_time"],
        serves=row["serves"],
        ingredients=row["ingredients"],
        cost=row["cost"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class RecipeRepository:
    """
    PostgreSQL-backed `RecipeStore`.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    async def ensure_schema(self) -> None:
        await self.db.execute(
            """
            CREATE TABLE IF NOT EXISTS recipes (
              id SERIAL PRIMARY KEY,
              title TEXT NOT NULL,
              making_time TEXT NOT NULL,
              serves TEXT NOT NULL,
              ingredients TEXT NOT NULL,
              cost TEXT NOT NULL,
              created_at TIMESTAMP NOT NULL DEFAULT NOW(),
              updated_at TIMESTAMP NOT NULL DEFAULT NOW()
            )
            """
        )

    async def create(
        self,
        *,
        title: str,
        making_time: str,
        serves: str,
        ingredients: str,
        cost: str,
    ) -> Recipe:
        row = await self.db.fetch_one(
            f"""
            INSERT INTO recipes (title, making_time, serves, ingredients, cost)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {_COLUMNS}
            """,
            title,
            making_time,
            serves,
            ingredients,
            cost,
        )
        if row is None:
            raise RuntimeError("Failed to insert recipe.")
        return _row_to_recipe(row)

    async def list(self) -> list[Recipe]:
        rows = await self.db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM recipes
            ORDER BY id ASC
            """
        )
        return [_row_to_recipe(row) for row in rows]

    async def get(self, recipe_id: int) -> Recipe | None:
        row = await self.db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM recipes
            WHERE id = $1
            """,
            recipe_id,
        )
        return _row_to_recipe(row) if row is not None else None

    async def update(
        self,
        recipe_id: int,
        *,
        title: str | None = None,
        making_time: str | None = None,
        serves: str | None = None,
        ingredients: str | None = None,
        cost: str | None = None,
    ) -> Recipe | None:
        """
        Coalescing update in one statement: NULL parameters keep the stored
        value, and a missing row yields no RETURNING row.
        """
        row = await self.db.fetch_one(
            f"""
            UPDATE recipes
            SET title = COALESCE($1, title),
                making_time = COALESCE($2, making_time),
                serves = COALESCE($3, serves),
                ingredients = COALESCE($4, ingredients),
                cost = COALESCE($5, cost),
                updated_at = NOW()
            WHERE id = $6
            RETURNING {_COLUMNS}
            """,
            title,
            making_time,
            serves,
            ingredients,
            cost,
            recipe_id,
        )
        return _row_to_recipe(row) if row is not None else None

    async def delete(self, recipe_id: int) -> bool:
        status = await self.db.execute(
            """
            DELETE FROM recipes
            WHERE id = $1
            """,
            recipe_id,
        )
        return affected_rows(status) > 0
