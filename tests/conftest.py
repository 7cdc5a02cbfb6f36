from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from main import create_app
from recipes.models import Recipe


class InMemoryRecipeStore:
    """Simple storage backend used for tests."""

    def __init__(self) -> None:
        self._recipes: dict[int, Recipe] = {}
        self._next_id = 1

    async def create(self, *, title, making_time, serves, ingredients, cost) -> Recipe:
        now = datetime.now().replace(microsecond=0)
        recipe = Recipe(
            id=self._next_id,
            title=title,
            making_time=making_time,
            serves=serves,
            ingredients=ingredients,
            cost=cost,
            created_at=now,
            updated_at=now,
        )
        self._recipes[recipe.id] = recipe
        self._next_id += 1
        return recipe

    async def list(self) -> list[Recipe]:
        return [self._recipes[key] for key in sorted(self._recipes)]

    async def get(self, recipe_id: int) -> Recipe | None:
        return self._recipes.get(recipe_id)

    async def update(self, recipe_id: int, **changes) -> Recipe | None:
        existing = self._recipes.get(recipe_id)
        if existing is None:
            return None
        fields = {key: value for key, value in changes.items() if value is not None}
        updated = replace(existing, updated_at=datetime.now(), **fields)
        self._recipes[recipe_id] = updated
        return updated

    async def delete(self, recipe_id: int) -> bool:
        return self._recipes.pop(recipe_id, None) is not None


@pytest.fixture
def store() -> InMemoryRecipeStore:
    return InMemoryRecipeStore()


@pytest.fixture
def client(store: InMemoryRecipeStore):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def recipe_payload() -> dict:
    return {
        "title": "Chicken Curry",
        "making_time": "45 min",
        "serves": "4 people",
        "ingredients": "onion, chicken, seasoning",
        "cost": "1000",
    }
