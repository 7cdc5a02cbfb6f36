"""
Recipe dependencies for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Request

from .service import RecipeService


def get_recipe_service(request: Request) -> RecipeService:
    service = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise RuntimeError("Recipe service is not initialized. Is the app lifespan running?")
    return service
