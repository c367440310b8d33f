"""Local JSON file store for user settings."""

from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from pydantic import TypeAdapter

from calfit.domain.goals import UserSettings
from calfit.services.user_settings import UserSettingsRepository

_STORE_ADAPTER = TypeAdapter(dict[str, UserSettings])


@dataclass
class JsonUserSettingsRepository(UserSettingsRepository):
    """Keeps every user's settings in a single JSON document on disk."""

    path: Path

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored settings for a user."""
        return self._load().get(str(user_id))

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Write the user's settings, keeping other users untouched."""
        entries = self._load()
        entries[str(user_id)] = settings
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(_STORE_ADAPTER.dump_json(entries, indent=2))

    def _load(self) -> dict[str, UserSettings]:
        if not self.path.exists():
            return {}
        raw = self.path.read_bytes()
        if not raw.strip():
            return {}
        return _STORE_ADAPTER.validate_json(raw)
