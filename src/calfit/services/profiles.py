"""User profile business logic."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from calfit.domain.models import BodyMetrics
from calfit.domain.program import ProfileInput


class ProfileRepository(Protocol):
    """Persistence interface for body metrics."""

    def get_metrics(self, user_id: UUID) -> BodyMetrics | None:
        """Return stored metrics for a user, if present."""

    def upsert_metrics(self, metrics: BodyMetrics) -> BodyMetrics:
        """Insert or update metrics and return the stored row."""


@dataclass
class ProfileService:
    """Application service for the user's body metrics."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> BodyMetrics | None:
        """Return the user's metrics, if any were saved."""
        return self.repository.get_metrics(user_id)

    def save_profile(self, metrics: BodyMetrics) -> BodyMetrics:
        """Persist the user's metrics."""
        return self.repository.upsert_metrics(metrics)

    def build_profile_input(self, user_id: UUID, answers: ProfileInput) -> ProfileInput:
        """Fill questionnaire gaps from the stored profile."""
        metrics = self.repository.get_metrics(user_id)
        if metrics is None:
            return answers
        return replace(
            answers,
            age_years=answers.age_years or metrics.age_years,
            height_cm=answers.height_cm or metrics.height_cm,
            current_weight_kg=answers.current_weight_kg or metrics.weight_kg,
            body_fat_percentage=(
                answers.body_fat_percentage
                if answers.body_fat_percentage is not None
                else metrics.body_fat_percentage
            ),
        )
