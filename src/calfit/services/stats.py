"""Calorie history for the weekly chart."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from calfit.domain.meals import FoodEntry
from calfit.domain.stats import DailyTotals
from calfit.services.food_log import FoodLogRepository

WEEK_DAYS = 7


@dataclass
class PeriodSummary:
    """Per-day totals over a window, with averages across every day in it."""

    daily: list[DailyTotals]
    target_calories: int
    days_logged: int
    avg_calories: float
    avg_protein_g: float
    avg_fat_g: float
    avg_carbs_g: float


@dataclass
class StatsService:
    """Read-only aggregation over the food log."""

    repository: FoodLogRepository

    def get_week(
        self, user_id: UUID, end_day: date, target_calories: int
    ) -> PeriodSummary:
        """Return the seven days ending on ``end_day``, oldest first."""
        start = end_day - timedelta(days=WEEK_DAYS - 1)
        entries = self.repository.list_entries(user_id, start, end_day)
        days = [start + timedelta(days=offset) for offset in range(WEEK_DAYS)]
        return summarize(days, entries, target_calories)


def summarize(
    days: list[date], entries: list[FoodEntry], target_calories: int
) -> PeriodSummary:
    """Bucket entries by day and average over ``days``, empty days included."""
    buckets: dict[date, list[FoodEntry]] = defaultdict(list)
    for entry in entries:
        buckets[entry.day].append(entry)

    daily = [_day_totals(day, buckets.get(day, [])) for day in days]
    count = max(len(daily), 1)
    return PeriodSummary(
        daily=daily,
        target_calories=target_calories,
        days_logged=sum(1 for day in days if buckets.get(day)),
        avg_calories=sum(row.calories for row in daily) / count,
        avg_protein_g=sum(row.protein_g for row in daily) / count,
        avg_fat_g=sum(row.fat_g for row in daily) / count,
        avg_carbs_g=sum(row.carbs_g for row in daily) / count,
    )


def _day_totals(day: date, entries: list[FoodEntry]) -> DailyTotals:
    return DailyTotals(
        day=day,
        calories=sum(entry.calories for entry in entries),
        protein_g=sum(entry.protein_g for entry in entries),
        fat_g=sum(entry.fat_g for entry in entries),
        carbs_g=sum(entry.carbs_g for entry in entries),
    )
