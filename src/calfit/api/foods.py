"""Food database endpoints."""

from __future__ import annotations

from dataclasses import asdict
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from calfit.api.auth import get_container, require_api_token
from calfit.api.models import FoodCreateRequest

router = APIRouter(
    prefix="/foods", tags=["foods"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def search_foods(
    request: Request, query: str | None = None, limit: int = 20
) -> dict[str, object]:
    """Search foods by name."""
    container = get_container(request)
    foods = container.food_catalog_service.search(query, limit=limit)
    return {"foods": [asdict(food) for food in foods]}


@router.get("/favorites")
async def favorite_foods(request: Request) -> dict[str, object]:
    """Return foods flagged as favourite."""
    container = get_container(request)
    favorites = container.food_catalog_service.favorites()
    return {"foods": [asdict(food) for food in favorites]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(body: FoodCreateRequest, request: Request) -> dict[str, object]:
    """Add a manually entered food."""
    container = get_container(request)
    food = container.food_catalog_service.create_food(body.model_dump())
    return asdict(food)


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    """Return one food."""
    container = get_container(request)
    food = container.food_catalog_service.get_food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(food)


@router.put("/{food_id}/favorite")
async def set_favorite(
    food_id: UUID, request: Request, value: bool = True
) -> dict[str, object]:
    """Flag or unflag a favourite."""
    container = get_container(request)
    container.food_catalog_service.set_favorite(food_id, value)
    return {"id": str(food_id), "is_favorite": value}
