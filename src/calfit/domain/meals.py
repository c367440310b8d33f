"""Domain models for the food log."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class MealType(StrEnum):
    """Meal slot a food is logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MacroTotals:
    """Summed calories and macros."""

    calories: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbs_g: float = 0.0

    def __add__(self, other: "MacroTotals") -> "MacroTotals":
        return MacroTotals(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            carbs_g=self.carbs_g + other.carbs_g,
        )


@dataclass(frozen=True)
class FoodEntry:
    """A food logged under a meal on a given day.

    Macro values are already scaled by ``quantity``.
    """

    id: UUID
    user_id: UUID
    day: date
    meal_type: MealType
    name: str
    quantity: float
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    food_id: UUID | None = None
    logged_at: datetime | None = None

    @property
    def totals(self) -> MacroTotals:
        return MacroTotals(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )


@dataclass(frozen=True)
class MealSummary:
    """Entries and totals for one meal slot."""

    meal_type: MealType
    entries: list[FoodEntry]
    totals: MacroTotals


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount against a target."""

    current: float
    target: float


@dataclass(frozen=True)
class DailyLog:
    """Everything logged on one day, with progress toward targets."""

    day: date
    meals: list[MealSummary]
    totals: MacroTotals
    calories: MacroProgress
    protein: MacroProgress
    fat: MacroProgress
    carbs: MacroProgress
    perfect_balance: bool


@dataclass(frozen=True)
class FoodSnapshot:
    """Name and scaled macros of a food at the moment it is logged."""

    name: str
    quantity: float
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    food_id: UUID | None = None
