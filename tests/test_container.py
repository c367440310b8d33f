"""Tests for container wiring."""

from calfit.adapters.json_user_settings_repository import JsonUserSettingsRepository
from calfit.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from calfit.config import Settings, parse_allowed_origins
from calfit.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.food_log_service is not None
    assert container.stats_service.repository is container.food_log_service.repository
    assert isinstance(
        container.user_settings_service.repository, SupabaseUserSettingsRepository
    )


def test_build_container_uses_local_settings_store(tmp_path) -> None:
    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        api_token="api-token",
        settings_store_path=str(tmp_path / "settings.json"),
    )

    container = build_container(settings)

    assert isinstance(
        container.user_settings_service.repository, JsonUserSettingsRepository
    )


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == ["*"]
    assert parse_allowed_origins(" * ") == ["*"]
    assert parse_allowed_origins("https://a.example/, https://b.example") == [
        "https://a.example",
        "https://b.example",
    ]
