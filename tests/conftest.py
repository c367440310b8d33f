"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from calfit.config import Settings
from calfit.containers import AppContainer
from calfit.domain.goals import MacroTargets, UserSettings
from calfit.domain.library import Food
from calfit.domain.meals import FoodEntry, FoodSnapshot, MealType
from calfit.domain.models import BodyMetrics
from calfit.domain.program import (
    ActivityLevel,
    DietType,
    NutritionalGoal,
    Occupation,
    ProfileInput,
    Sex,
)
from calfit.services.cache import InMemoryCache
from calfit.services.food_log import FoodLogRepository, FoodLogService
from calfit.services.foods import FoodCatalogService, FoodRepository
from calfit.services.goals import GoalsRepository, GoalsService
from calfit.services.profiles import ProfileRepository, ProfileService
from calfit.services.stats import StatsService
from calfit.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    goals: dict[UUID, MacroTargets] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> MacroTargets | None:
        return self.goals.get(user_id)

    def upsert_goals(self, user_id: UUID, targets: MacroTargets) -> None:
        self.goals[user_id] = targets


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    settings: dict[UUID, UserSettings] = field(default_factory=dict)

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        return self.settings.get(user_id)

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        self.settings[user_id] = settings


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, BodyMetrics] = field(default_factory=dict)

    def get_metrics(self, user_id: UUID) -> BodyMetrics | None:
        return self.profiles.get(user_id)

    def upsert_metrics(self, metrics: BodyMetrics) -> BodyMetrics:
        stored = replace(metrics, updated_at=datetime.now(tz=UTC))
        self.profiles[metrics.user_id] = stored
        return stored


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: dict[UUID, FoodEntry] = field(default_factory=dict)

    def create_entry(
        self, user_id: UUID, day: date, meal_type: MealType, snapshot: FoodSnapshot
    ) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4(),
            user_id=user_id,
            day=day,
            meal_type=meal_type,
            name=snapshot.name,
            quantity=snapshot.quantity,
            calories=snapshot.calories,
            protein_g=snapshot.protein_g,
            fat_g=snapshot.fat_g,
            carbs_g=snapshot.carbs_g,
            food_id=snapshot.food_id,
            logged_at=datetime.now(tz=UTC),
        )
        self.entries[entry.id] = entry
        return entry

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        return self.entries.get(entry_id)

    def update_entry(
        self, entry_id: UUID, meal_type: MealType, snapshot: FoodSnapshot
    ) -> None:
        entry = self.entries[entry_id]
        self.entries[entry_id] = replace(
            entry,
            meal_type=meal_type,
            name=snapshot.name,
            quantity=snapshot.quantity,
            calories=snapshot.calories,
            protein_g=snapshot.protein_g,
            fat_g=snapshot.fat_g,
            carbs_g=snapshot.carbs_g,
        )

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodEntry]:
        return [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.day <= end
        ]

    def list_recent_entries(
        self, user_id: UUID, meal_type: MealType, limit: int
    ) -> list[FoodEntry]:
        matching = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and entry.meal_type == meal_type
        ]
        # Insertion order stands in for the timestamp ordering.
        return list(reversed(matching))[:limit]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food database for tests."""

    foods: dict[UUID, Food] = field(default_factory=dict)
    list_calls: int = 0

    def list_foods(self) -> list[Food]:
        self.list_calls += 1
        return sorted(self.foods.values(), key=lambda food: food.name)

    def get_food(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def create_food(self, payload: dict[str, object]) -> Food:
        food = Food(
            id=uuid4(),
            name=str(payload["name"]),
            calories=float(payload.get("calories", 0.0)),
            protein_g=float(payload.get("protein", 0.0)),
            fat_g=float(payload.get("fat", 0.0)),
            carbs_g=float(payload.get("carbs", 0.0)),
            serving_size=payload.get("serving_size"),
            serving_unit=str(payload.get("serving_unit") or "g"),
            brand=payload.get("brand"),
            barcode=payload.get("barcode"),
        )
        self.foods[food.id] = food
        return food

    def set_favorite(self, food_id: UUID, is_favorite: bool) -> None:
        self.foods[food_id] = replace(self.foods[food_id], is_favorite=is_favorite)

    def add(self, name: str, **values: object) -> Food:
        food = Food(
            id=uuid4(),
            name=name,
            calories=float(values.get("calories", 100.0)),
            protein_g=float(values.get("protein_g", 10.0)),
            fat_g=float(values.get("fat_g", 5.0)),
            carbs_g=float(values.get("carbs_g", 5.0)),
            is_favorite=bool(values.get("is_favorite", False)),
        )
        self.foods[food.id] = food
        return food


def make_profile(**overrides: object) -> ProfileInput:
    """Return the reference male profile, with optional overrides."""
    values: dict[str, object] = {
        "sex": Sex.MALE,
        "age_years": 30,
        "height_cm": 175.0,
        "current_weight_kg": 75.0,
        "activity_level": ActivityLevel.MODERATELY_ACTIVE,
        "occupation": Occupation.SEDENTARY_JOB,
        "diet_type": DietType.BALANCED,
        "nutritional_goal": NutritionalGoal.MAINTENANCE,
    }
    values.update(overrides)
    return ProfileInput(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        api_token="api-token",
    )


@pytest.fixture
def goals_repository() -> InMemoryGoalsRepository:
    return InMemoryGoalsRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(
    settings: Settings,
    goals_repository: InMemoryGoalsRepository,
    food_log_repository: InMemoryFoodLogRepository,
    food_repository: InMemoryFoodRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    goals_service = GoalsService(goals_repository)
    user_settings_service = UserSettingsService(
        repository=InMemoryUserSettingsRepository(),
        goals_service=goals_service,
    )
    return AppContainer(
        settings=settings,
        goals_service=goals_service,
        user_settings_service=user_settings_service,
        profile_service=ProfileService(profile_repository),
        food_log_service=FoodLogService(food_log_repository),
        food_catalog_service=FoodCatalogService(
            repository=food_repository, cache=InMemoryCache()
        ),
        stats_service=StatsService(food_log_repository),
    )
