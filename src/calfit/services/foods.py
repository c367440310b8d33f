"""Food database lookups with caching."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calfit.domain.library import Food
from calfit.services.cache import Cache

_CATALOG_KEY = "foods:all"

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the food database."""

    def list_foods(self) -> list[Food]:
        """Return every food."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def set_favorite(self, food_id: UUID, is_favorite: bool) -> None:
        """Flag or unflag a food as favourite."""


@dataclass
class FoodCatalogService:
    """Service for searching and extending the food database."""

    repository: FoodRepository
    cache: Cache
    catalog_ttl_seconds: int = 300

    def search(self, query: str | None, limit: int = 20) -> list[Food]:
        """Return foods whose name contains the query, ignoring case."""
        if not query or not query.strip():
            return []
        needle = query.strip().lower()
        matches = [food for food in self._catalog() if needle in food.name.lower()]
        return matches[:limit]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id."""
        for food in self._catalog():
            if food.id == food_id:
                return food
        return self.repository.get_food(food_id)

    def create_food(self, payload: dict[str, object]) -> Food:
        """Add a manually entered food."""
        food = self.repository.create_food(payload)
        self.cache.delete(_CATALOG_KEY)
        return food

    def favorites(self) -> list[Food]:
        """Return foods flagged as favourite."""
        return [food for food in self._catalog() if food.is_favorite]

    def set_favorite(self, food_id: UUID, is_favorite: bool) -> None:
        """Flag or unflag a favourite."""
        self.repository.set_favorite(food_id, is_favorite)
        self.cache.delete(_CATALOG_KEY)

    def _catalog(self) -> list[Food]:
        cached = self.cache.get(_CATALOG_KEY)
        if isinstance(cached, list):
            return cached
        foods = self.repository.list_foods()
        self.cache.set(_CATALOG_KEY, foods, ttl_seconds=self.catalog_ttl_seconds)
        _logger.info("Loaded food catalog: %s foods", len(foods))
        return foods
