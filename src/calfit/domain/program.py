"""Domain models for nutritional program calculation."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class Sex(StrEnum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Weekly training volume."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightlyActive"
    MODERATELY_ACTIVE = "moderatelyActive"
    VERY_ACTIVE = "veryActive"
    SUPER_ACTIVE = "superActive"


class Occupation(StrEnum):
    """Physical intensity of the user's job."""

    SEDENTARY_JOB = "sedentaryJob"
    MODERATE_JOB = "moderateJob"
    PHYSICAL_JOB = "physicalJob"


class DietType(StrEnum):
    """Eating style selected in the questionnaire."""

    BALANCED = "balanced"
    HIGH_PROTEIN = "highProtein"
    KETO = "keto"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    MEDITERRANEAN = "mediterranean"
    OTHER = "other"


class NutritionalGoal(StrEnum):
    """Program type the user is following."""

    CLEAN_BULK = "cleanBulk"
    BODY_RECOMPOSITION = "bodyRecomposition"
    PERFECT_DEFICIT = "perfectDeficit"
    PROGRESSIVE_FAT_LOSS = "progressiveFatLoss"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class ProfileInput:
    """Questionnaire answers feeding one calculation."""

    sex: Sex
    age_years: int | None
    height_cm: float | None
    current_weight_kg: float | None
    activity_level: ActivityLevel | None = None
    occupation: Occupation | None = None
    diet_type: DietType | None = None
    nutritional_goal: NutritionalGoal | None = None
    target_weight_kg: float | None = None
    body_fat_percentage: float | None = None
    meals_per_day: int | None = None


@dataclass(frozen=True)
class MacroSplit:
    """Fractions of total calories per macro, summing to 1.0."""

    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class CalculatedMacros:
    """Calorie total and gram targets."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int


@dataclass(frozen=True)
class MacroDistribution:
    """Whole-number percentages of calories per macro."""

    protein: int
    fat: int
    carbs: int


@dataclass(frozen=True)
class NutritionalProgram:
    """Maintenance and goal targets derived from a profile.

    ``ok`` is False when the profile lacked weight, height or age; every
    calorie and gram value is then zero and must be read as "insufficient
    data", not as a zero-calorie program.
    """

    maintenance: CalculatedMacros
    goal: CalculatedMacros
    macro_distribution: MacroDistribution
    bmr: float = 0.0
    lbm: float = 0.0
    ok: bool = True


@dataclass(frozen=True)
class Measurements:
    """Body measurements in centimetres."""

    chest: float = 0.0
    waist: float = 0.0
    hips: float = 0.0
    thighs: float = 0.0
    arms: float = 0.0


@dataclass(frozen=True)
class Performance:
    """Main lift results in kilograms."""

    bench_press: float = 0.0
    squat: float = 0.0
    deadlift: float = 0.0


@dataclass(frozen=True)
class WeeklyProgress:
    """Weekly check-in entry."""

    week: int
    day: date
    next_check_day: date
    weight_kg: float | None
    measurements: Measurements = field(default_factory=Measurements)
    performance: Performance = field(default_factory=Performance)
    notes: str = ""
    adjusted_macros: CalculatedMacros | None = None
