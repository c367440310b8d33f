"""Domain models for the food database."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Food:
    """A food with macros per serving."""

    id: UUID
    name: str
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    serving_size: float | None = None
    serving_unit: str = "g"
    brand: str | None = None
    barcode: str | None = None
    user_id: UUID | None = None
    is_favorite: bool = False
