"""Tests for stats service."""

from datetime import date, timedelta
from uuid import UUID, uuid4

from calfit.domain.meals import FoodSnapshot, MealType
from calfit.services.food_log import FoodLogService
from calfit.services.stats import StatsService
from tests.conftest import InMemoryFoodLogRepository


def _log(service: FoodLogService, user_id: UUID, day: date, calories: float) -> None:
    service.add_food(
        user_id,
        day,
        MealType.LUNCH,
        FoodSnapshot(
            name="Meal",
            quantity=1.0,
            calories=calories,
            protein_g=calories / 20,
            fat_g=calories / 40,
            carbs_g=calories / 10,
        ),
    )


def test_week_covers_seven_days_oldest_first() -> None:
    repository = InMemoryFoodLogRepository()
    food_log = FoodLogService(repository)
    user_id = uuid4()
    end = date(2026, 3, 8)
    _log(food_log, user_id, end, 1400)
    _log(food_log, user_id, end, 400)
    _log(food_log, user_id, end - timedelta(days=6), 2100)
    _log(food_log, user_id, end - timedelta(days=7), 9999)

    summary = StatsService(repository).get_week(user_id, end, 2000)

    assert len(summary.daily) == 7
    assert summary.daily[0].day == date(2026, 3, 2)
    assert summary.daily[0].calories == 2100
    assert summary.daily[-1].day == end
    assert summary.daily[-1].calories == 1800
    assert summary.daily[3].calories == 0
    assert summary.target_calories == 2000
    assert summary.days_logged == 2
    assert summary.avg_calories == 3900 / 7


def test_week_without_entries() -> None:
    summary = StatsService(InMemoryFoodLogRepository()).get_week(
        uuid4(), date(2026, 3, 8), 2200
    )

    assert all(day.calories == 0 for day in summary.daily)
    assert summary.avg_calories == 0
    assert summary.days_logged == 0
