"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
