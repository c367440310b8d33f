"""Tests for user settings."""

from pathlib import Path
from uuid import uuid4

from calfit.adapters.json_user_settings_repository import JsonUserSettingsRepository
from calfit.domain.goals import DEFAULT_MACRO_TARGETS, MacroTargets, UserSettings
from calfit.services.goals import GoalsService
from calfit.services.user_settings import UserSettingsService
from tests.conftest import InMemoryGoalsRepository, InMemoryUserSettingsRepository


def _service() -> tuple[UserSettingsService, InMemoryGoalsRepository]:
    goals_repository = InMemoryGoalsRepository()
    service = UserSettingsService(
        repository=InMemoryUserSettingsRepository(),
        goals_service=GoalsService(goals_repository),
    )
    return service, goals_repository


def test_defaults_for_new_user() -> None:
    service, _ = _service()

    settings = service.get_settings(uuid4())

    assert settings.name == "Utilisateur"
    assert settings.notifications is True
    assert settings.macro_targets == MacroTargets(
        calories=2200, protein=120, fat=70, carbs=250
    )


def test_remote_goals_override_local_targets() -> None:
    service, goals_repository = _service()
    user_id = uuid4()
    remote = MacroTargets(calories=1900, protein=140, fat=60, carbs=195)
    goals_repository.goals[user_id] = remote

    assert service.get_settings(user_id).macro_targets == remote


def test_save_settings_pushes_targets_to_goals() -> None:
    service, goals_repository = _service()
    user_id = uuid4()
    targets = MacroTargets(calories=2400, protein=180, fat=80, carbs=240)

    service.save_settings(
        user_id, UserSettings(name="Camille", macro_targets=targets)
    )

    assert goals_repository.goals[user_id] == targets
    assert service.get_settings(user_id).name == "Camille"


def test_update_settings_merges_changes() -> None:
    service, _ = _service()
    user_id = uuid4()
    service.save_settings(user_id, UserSettings(name="Sam"))

    updated = service.update_settings(user_id, notifications=False)

    assert updated.name == "Sam"
    assert updated.notifications is False


def test_reset_settings_restores_defaults() -> None:
    service, goals_repository = _service()
    user_id = uuid4()
    service.save_settings(
        user_id,
        UserSettings(
            name="Sam",
            macro_targets=MacroTargets(calories=1500, protein=100, fat=50, carbs=160),
        ),
    )

    reset = service.reset_settings(user_id)

    assert reset == UserSettings()
    assert goals_repository.goals[user_id] == DEFAULT_MACRO_TARGETS


def test_json_repository_persists_between_instances(tmp_path: Path) -> None:
    path = tmp_path / "store" / "settings.json"
    user_id = uuid4()
    other_id = uuid4()
    settings = UserSettings(
        name="Alex",
        notifications=False,
        macro_targets=MacroTargets(calories=2100, protein=150, fat=70, carbs=215),
    )

    JsonUserSettingsRepository(path).save_settings(user_id, settings)
    JsonUserSettingsRepository(path).save_settings(other_id, UserSettings())
    reloaded = JsonUserSettingsRepository(path)

    assert reloaded.get_settings(user_id) == settings
    assert reloaded.get_settings(other_id) == UserSettings()
    assert reloaded.get_settings(uuid4()) is None


def test_json_repository_missing_or_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    repository = JsonUserSettingsRepository(path)

    assert repository.get_settings(uuid4()) is None

    path.write_text("")
    assert repository.get_settings(uuid4()) is None
