"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from calfit.adapters.json_user_settings_repository import JsonUserSettingsRepository
from calfit.adapters.supabase_food_log_repository import SupabaseFoodLogRepository
from calfit.adapters.supabase_food_repository import SupabaseFoodRepository
from calfit.adapters.supabase_goals_repository import SupabaseGoalsRepository
from calfit.adapters.supabase_profile_repository import SupabaseProfileRepository
from calfit.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from calfit.config import Settings
from calfit.services.cache import InMemoryCache
from calfit.services.food_log import FoodLogService
from calfit.services.foods import FoodCatalogService
from calfit.services.goals import GoalsService
from calfit.services.profiles import ProfileService
from calfit.services.stats import StatsService
from calfit.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goals_service: GoalsService
    user_settings_service: UserSettingsService
    profile_service: ProfileService
    food_log_service: FoodLogService
    food_catalog_service: FoodCatalogService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    settings_repository: UserSettingsRepository
    if resolved_settings.settings_store_path:
        settings_repository = JsonUserSettingsRepository(
            Path(resolved_settings.settings_store_path)
        )
    else:
        settings_repository = SupabaseUserSettingsRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)

    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    user_settings_service = UserSettingsService(
        repository=settings_repository,
        goals_service=goals_service,
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    food_log_service = FoodLogService(food_log_repository)
    food_catalog_service = FoodCatalogService(
        repository=SupabaseFoodRepository(supabase_client),
        cache=InMemoryCache(),
        catalog_ttl_seconds=resolved_settings.food_cache_ttl_seconds,
    )
    stats_service = StatsService(food_log_repository)

    return AppContainer(
        settings=resolved_settings,
        goals_service=goals_service,
        user_settings_service=user_settings_service,
        profile_service=profile_service,
        food_log_service=food_log_service,
        food_catalog_service=food_catalog_service,
        stats_service=stats_service,
    )
