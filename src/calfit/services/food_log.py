"""Food log service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from calfit.domain.goals import MacroTargets
from calfit.domain.library import Food
from calfit.domain.meals import (
    DailyLog,
    FoodEntry,
    FoodSnapshot,
    MacroProgress,
    MacroTotals,
    MealSummary,
    MealType,
)

_logger = logging.getLogger(__name__)

BALANCE_LOWER_RATIO = 0.85
BALANCE_UPPER_RATIO = 1.05


class FoodLogRepository(Protocol):
    """Persistence interface for logged foods."""

    def create_entry(
        self, user_id: UUID, day: date, meal_type: MealType, snapshot: FoodSnapshot
    ) -> FoodEntry:
        """Create a log entry and return it."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a log entry by id."""

    def update_entry(
        self, entry_id: UUID, meal_type: MealType, snapshot: FoodSnapshot
    ) -> None:
        """Replace the meal slot and values of an entry."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a log entry."""

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[FoodEntry]:
        """Return entries with start <= day <= end, oldest first."""

    def list_recent_entries(
        self, user_id: UUID, meal_type: MealType, limit: int
    ) -> list[FoodEntry]:
        """Return the most recent entries for a meal slot."""


def snapshot_from_food(food: Food, quantity: float = 1.0) -> FoodSnapshot:
    """Scale a food's per-serving macros by a quantity."""
    return FoodSnapshot(
        name=food.name,
        quantity=quantity,
        calories=food.calories * quantity,
        protein_g=food.protein_g * quantity,
        fat_g=food.fat_g * quantity,
        carbs_g=food.carbs_g * quantity,
        food_id=food.id,
    )


def is_perfect_balance(totals: MacroTotals, targets: MacroTargets) -> bool:
    """Return True when every macro is within 85%..105% of its target."""
    pairs = (
        (totals.protein_g, targets.protein),
        (totals.fat_g, targets.fat),
        (totals.carbs_g, targets.carbs),
    )
    for current, target in pairs:
        if target <= 0:
            return False
        ratio = current / target
        if not BALANCE_LOWER_RATIO <= ratio <= BALANCE_UPPER_RATIO:
            return False
    return True


@dataclass
class FoodLogService:
    """Service for logging foods per meal and summarising a day."""

    repository: FoodLogRepository

    def add_food(
        self, user_id: UUID, day: date, meal_type: MealType, snapshot: FoodSnapshot
    ) -> FoodEntry:
        """Log a food under a meal."""
        entry = self.repository.create_entry(user_id, day, meal_type, snapshot)
        _logger.info(
            "Logged food: user_id=%s day=%s meal=%s name=%s",
            user_id,
            day,
            meal_type,
            snapshot.name,
        )
        return entry

    def update_food(
        self, entry_id: UUID, changes: dict[str, object]
    ) -> FoodEntry | None:
        """Apply edits to a logged food.

        A new ``quantity`` rescales the stored macros unless explicit macro
        values are part of the same change.
        """
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        snapshot = _apply_changes(entry, changes)
        meal_type = MealType(str(changes.get("meal_type") or entry.meal_type))
        self.repository.update_entry(entry_id, meal_type, snapshot)
        return replace(
            entry,
            meal_type=meal_type,
            name=snapshot.name,
            quantity=snapshot.quantity,
            calories=snapshot.calories,
            protein_g=snapshot.protein_g,
            fat_g=snapshot.fat_g,
            carbs_g=snapshot.carbs_g,
        )

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return a logged food by id."""
        return self.repository.get_entry(entry_id)

    def remove_food(self, entry_id: UUID) -> FoodEntry | None:
        """Delete a logged food and return what was removed."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        self.repository.delete_entry(entry_id)
        return entry

    def get_day(self, user_id: UUID, day: date, targets: MacroTargets) -> DailyLog:
        """Return the day's meals with totals against targets."""
        entries = self.repository.list_entries(user_id, day, day)
        meals = []
        totals = MacroTotals()
        for meal_type in MealType:
            meal_entries = [entry for entry in entries if entry.meal_type == meal_type]
            meal_totals = _sum_totals(meal_entries)
            meals.append(
                MealSummary(
                    meal_type=meal_type, entries=meal_entries, totals=meal_totals
                )
            )
            totals = totals + meal_totals
        return DailyLog(
            day=day,
            meals=meals,
            totals=totals,
            calories=MacroProgress(current=totals.calories, target=targets.calories),
            protein=MacroProgress(current=totals.protein_g, target=targets.protein),
            fat=MacroProgress(current=totals.fat_g, target=targets.fat),
            carbs=MacroProgress(current=totals.carbs_g, target=targets.carbs),
            perfect_balance=is_perfect_balance(totals, targets),
        )

    def recent_foods(
        self, user_id: UUID, meal_type: MealType, limit: int = 30
    ) -> list[FoodEntry]:
        """Return recently logged foods for a meal, one per name."""
        seen: set[str] = set()
        recent: list[FoodEntry] = []
        for entry in self.repository.list_recent_entries(user_id, meal_type, limit):
            key = entry.name.strip().lower()
            if key in seen:
                continue
            seen.add(key)
            recent.append(entry)
        return recent


def _sum_totals(entries: list[FoodEntry]) -> MacroTotals:
    total = MacroTotals()
    for entry in entries:
        total = total + entry.totals
    return total


def _apply_changes(entry: FoodEntry, changes: dict[str, object]) -> FoodSnapshot:
    macro_keys = ("calories", "protein_g", "fat_g", "carbs_g")
    raw_quantity = changes.get("quantity")
    quantity = entry.quantity if raw_quantity is None else float(raw_quantity)
    values = {key: float(getattr(entry, key)) for key in macro_keys}
    if quantity != entry.quantity and entry.quantity > 0:
        factor = quantity / entry.quantity
        values = {key: value * factor for key, value in values.items()}
    for key in macro_keys:
        if changes.get(key) is not None:
            values[key] = float(changes[key])
    return FoodSnapshot(
        name=str(changes.get("name") or entry.name),
        quantity=quantity,
        food_id=entry.food_id,
        **values,
    )

