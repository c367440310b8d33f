"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calfit.domain.goals import MacroTargets, UserSettings
from calfit.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("name, notifications, calories, protein, fat, carbs")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        defaults = UserSettings()
        return UserSettings(
            name=str(row.get("name") or defaults.name),
            notifications=bool(row.get("notifications", defaults.notifications)),
            macro_targets=MacroTargets(
                calories=int(row.get("calories") or 0),
                protein=int(row.get("protein") or 0),
                fat=int(row.get("fat") or 0),
                carbs=int(row.get("carbs") or 0),
            ),
        )

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Insert or update the user's settings row."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "name": settings.name,
                "notifications": settings.notifications,
                "calories": settings.macro_targets.calories,
                "protein": settings.macro_targets.protein,
                "fat": settings.macro_targets.fat,
                "carbs": settings.macro_targets.carbs,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
