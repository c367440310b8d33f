"""Supabase implementation for the food database."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calfit.domain.library import Food
from calfit.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the foods table."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return every food ordered by name."""
        response = (
            self.client.table("foods").select("*").order("name", desc=False).execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def set_favorite(self, food_id: UUID, is_favorite: bool) -> None:
        """Update the favourite flag."""
        self.client.table("foods").update({"is_favorite": is_favorite}).eq(
            "id", str(food_id)
        ).execute()


def _parse_food(row: dict[str, object]) -> Food:
    serving_size = row.get("serving_size")
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein") or 0.0),
        fat_g=float(row.get("fat") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        serving_size=(
            float(serving_size) if isinstance(serving_size, int | float) else None
        ),
        serving_unit=str(row.get("serving_unit") or "g"),
        brand=row.get("brand"),
        barcode=row.get("barcode"),
        user_id=UUID(str(row["user_id"])) if row.get("user_id") else None,
        is_favorite=bool(row.get("is_favorite", False)),
    )
