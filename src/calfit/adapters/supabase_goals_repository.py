"""Supabase repository for macro goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calfit.domain.goals import MacroTargets
from calfit.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for the user_goals table."""

    client: Client

    def get_goals(self, user_id: UUID) -> MacroTargets | None:
        """Return the user's goals row, if present."""
        response = (
            self.client.table("user_goals")
            .select("calories, protein, fat, carbs")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return MacroTargets(
            calories=int(row.get("calories") or 0),
            protein=int(row.get("protein") or 0),
            fat=int(row.get("fat") or 0),
            carbs=int(row.get("carbs") or 0),
        )

    def upsert_goals(self, user_id: UUID, targets: MacroTargets) -> None:
        """Insert or replace the user's goals row."""
        self.client.table("user_goals").upsert(
            {
                "id": str(user_id),
                "calories": targets.calories,
                "protein": targets.protein,
                "fat": targets.fat,
                "carbs": targets.carbs,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="id",
        ).execute()
