"""User settings service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from calfit.domain.goals import UserSettings
from calfit.services.goals import GoalsService

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the user's stored settings, if any."""

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Store the user's settings."""


@dataclass
class UserSettingsService:
    """Service for user settings, kept in sync with remote macro goals."""

    repository: UserSettingsRepository
    goals_service: GoalsService

    def get_settings(self, user_id: UUID) -> UserSettings:
        """Return stored settings or defaults, preferring remote goals."""
        settings = self.repository.get_settings(user_id) or UserSettings()
        goals = self.goals_service.get_targets(user_id)
        if goals is not None:
            settings = replace(settings, macro_targets=goals)
        return settings

    def save_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Persist settings and push the macro targets to the goals store."""
        self.repository.save_settings(user_id, settings)
        self.goals_service.save_targets(user_id, settings.macro_targets)
        _logger.info("Saved settings: user_id=%s", user_id)
        return settings

    def update_settings(self, user_id: UUID, **changes: object) -> UserSettings:
        """Merge changes into the current settings and save them."""
        current = self.get_settings(user_id)
        return self.save_settings(user_id, replace(current, **changes))

    def reset_settings(self, user_id: UUID) -> UserSettings:
        """Restore default settings."""
        return self.save_settings(user_id, UserSettings())
