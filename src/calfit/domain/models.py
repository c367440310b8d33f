"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class BodyMetrics:
    """Body measurements stored on a user's profile."""

    user_id: UUID
    age_years: int | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    body_fat_percentage: float | None = None
    updated_at: datetime | None = None
