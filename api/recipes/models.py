from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Recipe:
    """Domain object representing a stored recipe row."""

    id: int
    title: str
    making_time: str
    serves: str
    ingredients: str
    cost: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


RECIPE_FIELDS = ("title", "making_time", "serves", "ingredients", "cost")


__all__ = ["Recipe", "RECIPE_FIELDS"]
