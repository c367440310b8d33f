"""Supabase repository for the food log."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from calfit.domain.meals import FoodEntry, FoodSnapshot, MealType
from calfit.services.food_log import FoodLogRepository

_COLUMNS = (
    "id, user_id, log_date, meal_type, food_id, name, quantity, calories, "
    "protein, fat, carbs, timestamp"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for the food_logs table."""

    client: Client

    def create_entry(
        self, user_id: UUID, day: date, meal_type: MealType, snapshot: FoodSnapshot
    ) -> FoodEntry:
        """Insert a log row and return it."""
        payload = {
            "user_id": str(user_id),
            "log_date": day.isoformat(),
            "meal_type": meal_type.value,
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }
        payload.update(_snapshot_payload(snapshot))
        response = self.client.table("food_logs").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food log entry")
        return _parse_row(response.data[0])

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a log row by id."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_entry(
        self, entry_id: UUID, meal_type: MealType, snapshot: FoodSnapshot
    ) -> None:
        """Update the meal slot and values of a log row."""
        payload: dict[str, object] = {"meal_type": meal_type.value}
        payload.update(_snapshot_payload(snapshot))
        self.client.table("food_logs").update(payload).eq(
            "id", str(entry_id)
        ).execute()

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a log row."""
        self.client.table("food_logs").delete().eq("id", str(entry_id)).execute()

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodEntry]:
        """Return log rows between two days, inclusive."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("timestamp", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_recent_entries(
        self, user_id: UUID, meal_type: MealType, limit: int
    ) -> list[FoodEntry]:
        """Return the latest log rows for a meal slot."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("meal_type", meal_type.value)
            .order("timestamp", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _snapshot_payload(snapshot: FoodSnapshot) -> dict[str, object]:
    return {
        "food_id": str(snapshot.food_id) if snapshot.food_id else None,
        "name": snapshot.name,
        "quantity": snapshot.quantity,
        "calories": snapshot.calories,
        "protein": snapshot.protein_g,
        "fat": snapshot.fat_g,
        "carbs": snapshot.carbs_g,
    }


def _parse_row(row: dict[str, object]) -> FoodEntry:
    timestamp_raw = row.get("timestamp")
    return FoodEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["log_date"])),
        meal_type=MealType(str(row["meal_type"])),
        name=str(row.get("name") or ""),
        quantity=float(row.get("quantity") or 1.0),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein") or 0.0),
        fat_g=float(row.get("fat") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        food_id=UUID(str(row["food_id"])) if row.get("food_id") else None,
        logged_at=(
            datetime.fromisoformat(timestamp_raw)
            if isinstance(timestamp_raw, str) and timestamp_raw
            else None
        ),
    )
