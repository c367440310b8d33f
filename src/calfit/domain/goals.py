"""Domain models for macro goals and user settings."""

from dataclasses import dataclass
from enum import StrEnum


class Macro(StrEnum):
    """Macronutrient whose percentage can be edited."""

    PROTEIN = "protein"
    FAT = "fat"
    CARBS = "carbs"


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie and gram targets."""

    calories: int
    protein: int
    fat: int
    carbs: int


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories per macro, in whole percent."""

    protein: int
    fat: int
    carbs: int

    @property
    def total(self) -> int:
        return self.protein + self.fat + self.carbs


DEFAULT_MACRO_TARGETS = MacroTargets(calories=2200, protein=120, fat=70, carbs=250)


@dataclass(frozen=True)
class UserSettings:
    """Per-user preferences shown on the settings page."""

    name: str = "Utilisateur"
    macro_targets: MacroTargets = DEFAULT_MACRO_TARGETS
    notifications: bool = True
