"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calfit.domain.models import BodyMetrics
from calfit.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the user_profiles table."""

    client: Client

    def get_metrics(self, user_id: UUID) -> BodyMetrics | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select("id, age, height, weight, body_fat_percentage, updated_at")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def upsert_metrics(self, metrics: BodyMetrics) -> BodyMetrics:
        """Insert or update the profile row and return it."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {
                    "id": str(metrics.user_id),
                    "age": metrics.age_years,
                    "height": metrics.height_cm,
                    "weight": metrics.weight_kg,
                    "body_fat_percentage": metrics.body_fat_percentage,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile in Supabase")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> BodyMetrics:
    updated_raw = row.get("updated_at")
    return BodyMetrics(
        user_id=UUID(str(row["id"])),
        age_years=int(row["age"]) if row.get("age") is not None else None,
        height_cm=_optional_float(row.get("height")),
        weight_kg=_optional_float(row.get("weight")),
        body_fat_percentage=_optional_float(row.get("body_fat_percentage")),
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else None
        ),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
