"""
Recipe API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import schemas
from .dependencies import get_recipe_service
from .service import RecipeService

router = APIRouter()


@router.post("/recipes")
@router.post("/recipes/", include_in_schema=False)
async def create_recipe(
    payload: schemas.RecipeFields | None = None,
    service: RecipeService = Depends(get_recipe_service),
) -> dict:
    return await service.create(payload)


@router.get("/recipes")
@router.get("/recipes/", include_in_schema=False)
async def list_recipes(
    service: RecipeService = Depends(get_recipe_service),
) -> dict:
    return await service.list()


@router.get("/recipes/{recipe_id}")
@router.get("/recipes/{recipe_id}/", include_in_schema=False)
async def get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> dict:
    return await service.get(recipe_id)


@router.patch("/recipes/{recipe_id}")
@router.patch("/recipes/{recipe_id}/", include_in_schema=False)
async def update_recipe(
    recipe_id: str,
    payload: schemas.RecipeFields | None = None,
    service: RecipeService = Depends(get_recipe_service),
) -> dict:
    return await service.update(recipe_id, payload)


@router.delete("/recipes/{recipe_id}")
@router.delete("/recipes/{recipe_id}/", include_in_schema=False)
async def delete_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> dict:
    return await service.delete(recipe_id)
