"""Nutritional program calculation.

Everything here is pure arithmetic over a ``ProfileInput``: BMR estimation,
maintenance and goal energy, gram distribution and percentage normalisation.
Invalid numeric input never raises; it yields zeros and ``ok=False``.
"""

import logging
import math
from dataclasses import replace
from datetime import date, timedelta
from typing import Literal

from calfit.domain.program import (
    ActivityLevel,
    CalculatedMacros,
    DietType,
    MacroDistribution,
    MacroSplit,
    NutritionalGoal,
    NutritionalProgram,
    Occupation,
    ProfileInput,
    Sex,
    WeeklyProgress,
)

_logger = logging.getLogger(__name__)

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_KG_BODY_FAT = 7700
MIN_ADJUSTED_CALORIES = 1200
WEEKLY_ADJUSTMENT_KCAL = 200

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.SUPER_ACTIVE: 1.9,
}

OCCUPATION_OFFSETS: dict[Occupation, float] = {
    Occupation.SEDENTARY_JOB: 0.0,
    Occupation.MODERATE_JOB: 0.1,
    Occupation.PHYSICAL_JOB: 0.2,
}

GOAL_MULTIPLIERS: dict[NutritionalGoal, float] = {
    NutritionalGoal.CLEAN_BULK: 1.15,
    NutritionalGoal.BODY_RECOMPOSITION: 1.0,
    NutritionalGoal.PERFECT_DEFICIT: 0.8,
    NutritionalGoal.PROGRESSIVE_FAT_LOSS: 0.9,
    NutritionalGoal.MAINTENANCE: 1.0,
}

BALANCED_SPLIT = MacroSplit(protein=0.30, fat=0.30, carbs=0.40)

DIET_SPLITS: dict[DietType, MacroSplit] = {
    DietType.BALANCED: BALANCED_SPLIT,
    DietType.HIGH_PROTEIN: MacroSplit(protein=0.40, fat=0.30, carbs=0.30),
    DietType.KETO: MacroSplit(protein=0.25, fat=0.70, carbs=0.05),
    DietType.VEGETARIAN: MacroSplit(protein=0.25, fat=0.30, carbs=0.45),
    DietType.VEGAN: MacroSplit(protein=0.20, fat=0.30, carbs=0.50),
    DietType.MEDITERRANEAN: MacroSplit(protein=0.25, fat=0.35, carbs=0.40),
    DietType.OTHER: BALANCED_SPLIT,
}

# Maintenance has no split of its own and falls through to the diet type.
GOAL_SPLITS: dict[NutritionalGoal, MacroSplit] = {
    NutritionalGoal.CLEAN_BULK: MacroSplit(protein=0.25, fat=0.25, carbs=0.50),
    NutritionalGoal.BODY_RECOMPOSITION: MacroSplit(
        protein=0.35, fat=0.25, carbs=0.40
    ),
    NutritionalGoal.PERFECT_DEFICIT: MacroSplit(protein=0.40, fat=0.30, carbs=0.30),
    NutritionalGoal.PROGRESSIVE_FAT_LOSS: MacroSplit(
        protein=0.35, fat=0.35, carbs=0.30
    ),
}

GOAL_LABELS: dict[NutritionalGoal, str] = {
    NutritionalGoal.CLEAN_BULK: "Clean muscle gain",
    NutritionalGoal.BODY_RECOMPOSITION: "Body recomposition",
    NutritionalGoal.PERFECT_DEFICIT: "Perfect deficit",
    NutritionalGoal.PROGRESSIVE_FAT_LOSS: "Progressive fat loss",
    NutritionalGoal.MAINTENANCE: "Weight maintenance",
}

_EMPTY_MACROS = CalculatedMacros(calories=0, protein_g=0, fat_g=0, carbs_g=0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def calculate_bmr(profile: ProfileInput) -> float:
    """Return the Mifflin-St Jeor BMR, or 0 when inputs are missing."""
    weight = profile.current_weight_kg
    height = profile.height_cm
    age = profile.age_years
    if not all(_is_positive(value) for value in (weight, height, age)):
        _logger.warning(
            "Missing data for BMR: age=%s weight=%s height=%s", age, weight, height
        )
        return 0.0

    offset = 5 if profile.sex == Sex.MALE else -161
    bmr = 10 * weight + 6.25 * height - 5 * age + offset
    return round(bmr, 2)


def _is_positive(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def calculate_lbm(profile: ProfileInput) -> float:
    """Return lean body mass in kg, or 0 when weight or body fat is missing."""
    weight = profile.current_weight_kg
    body_fat = profile.body_fat_percentage
    if not _is_positive(weight) or body_fat is None or not math.isfinite(body_fat):
        return 0.0
    return round(weight * (1 - body_fat / 100), 2)


def calculate_maintenance_tdee(profile: ProfileInput) -> int:
    """Return maintenance calories from BMR, activity and occupation."""
    bmr = calculate_bmr(profile)
    if bmr <= 0:
        return 0
    activity = ACTIVITY_MULTIPLIERS.get(profile.activity_level, 1.2)
    occupation = OCCUPATION_OFFSETS.get(profile.occupation, 0.0)
    return round_half_up(bmr * (activity + occupation))


def calculate_goal_tdee(profile: ProfileInput) -> int:
    """Return goal calories scaled from maintenance."""
    maintenance = calculate_maintenance_tdee(profile)
    if maintenance <= 0:
        return 0
    factor = GOAL_MULTIPLIERS.get(profile.nutritional_goal, 1.0)
    return round_half_up(maintenance * factor)


def select_distribution(profile: ProfileInput, *, use_goal: bool = True) -> MacroSplit:
    """Pick the macro split: goal first, then diet type, then balanced."""
    if use_goal and profile.nutritional_goal in GOAL_SPLITS:
        return GOAL_SPLITS[profile.nutritional_goal]
    if profile.diet_type in DIET_SPLITS:
        return DIET_SPLITS[profile.diet_type]
    return BALANCED_SPLIT


def distribute_macros(calories: int, split: MacroSplit) -> CalculatedMacros:
    """Convert a calorie total into gram targets."""
    if calories <= 0:
        return _EMPTY_MACROS
    return CalculatedMacros(
        calories=calories,
        protein_g=round_half_up(calories * split.protein / KCAL_PER_GRAM_PROTEIN),
        fat_g=round_half_up(calories * split.fat / KCAL_PER_GRAM_FAT),
        carbs_g=round_half_up(calories * split.carbs / KCAL_PER_GRAM_CARBS),
    )


def normalize_percentages(
    protein_g: float, fat_g: float, carbs_g: float, total_calories: float
) -> MacroDistribution:
    """Return whole percentages summing to exactly 100.

    Each macro is rounded on its own; whatever is left over after that,
    positive or negative, is added to carbs. Protein and fat keep their
    independently rounded values.
    """
    total = max(total_calories, 1)
    protein = round_half_up(protein_g * KCAL_PER_GRAM_PROTEIN / total * 100)
    fat = round_half_up(fat_g * KCAL_PER_GRAM_FAT / total * 100)
    carbs = round_half_up(carbs_g * KCAL_PER_GRAM_CARBS / total * 100)
    residual = 100 - (protein + fat + carbs)
    if residual:
        carbs += residual
    return MacroDistribution(protein=protein, fat=fat, carbs=carbs)


def calculate_nutritional_program(profile: ProfileInput) -> NutritionalProgram:
    """Compute maintenance and goal targets for a profile."""
    bmr = calculate_bmr(profile)
    maintenance = distribute_macros(
        calculate_maintenance_tdee(profile),
        select_distribution(profile, use_goal=False),
    )
    goal = distribute_macros(calculate_goal_tdee(profile), select_distribution(profile))
    distribution = normalize_percentages(
        goal.protein_g, goal.fat_g, goal.carbs_g, goal.calories
    )
    return NutritionalProgram(
        maintenance=maintenance,
        goal=goal,
        macro_distribution=distribution,
        bmr=bmr,
        lbm=calculate_lbm(profile),
        ok=bmr > 0,
    )


def macros_from_distribution(
    calories: int, distribution: MacroDistribution
) -> CalculatedMacros:
    """Derive gram targets from whole-number percentages."""
    return CalculatedMacros(
        calories=calories,
        protein_g=round_half_up(
            calories * distribution.protein / 100 / KCAL_PER_GRAM_PROTEIN
        ),
        fat_g=round_half_up(calories * distribution.fat / 100 / KCAL_PER_GRAM_FAT),
        carbs_g=round_half_up(
            calories * distribution.carbs / 100 / KCAL_PER_GRAM_CARBS
        ),
    )


def calculate_macro_adjustments(
    program: NutritionalProgram, last_weight_kg: float, new_weight_kg: float
) -> CalculatedMacros:
    """Return revised goal macros after a weekly weigh-in."""
    goal = program.goal
    maintenance = program.maintenance
    if new_weight_kg == last_weight_kg:
        return goal
    if new_weight_kg < last_weight_kg and goal.calories > maintenance.calories:
        return macros_from_distribution(
            goal.calories + WEEKLY_ADJUSTMENT_KCAL, program.macro_distribution
        )
    if new_weight_kg > last_weight_kg and goal.calories < maintenance.calories:
        calories = max(MIN_ADJUSTED_CALORIES, goal.calories - WEEKLY_ADJUSTMENT_KCAL)
        return macros_from_distribution(calories, program.macro_distribution)
    return goal


def calories_for_weight_change(
    direction: Literal["gain", "loss"], duration_weeks: int = 4
) -> float:
    """Daily calorie delta needed to move 1 kg over the given weeks."""
    per_day = KCAL_PER_KG_BODY_FAT / (duration_weeks * 7)
    return per_day if direction == "gain" else -per_day


def generate_progressive_plan(
    program: NutritionalProgram,
    duration_weeks: int = 12,
    target_weight_change_kg: float = 0,
) -> list[NutritionalProgram]:
    """Return one program per week, stepping goal calories each week.

    A program computed from an incomplete profile is returned on its own.
    """
    plans = [program]
    if not program.ok or target_weight_change_kg == 0 or duration_weeks <= 1:
        return plans

    direction = "gain" if target_weight_change_kg > 0 else "loss"
    weekly_delta = calories_for_weight_change(direction, duration_weeks)
    for _ in range(1, duration_weeks):
        previous = plans[-1]
        calories = round_half_up(previous.goal.calories + weekly_delta)
        goal = macros_from_distribution(calories, previous.macro_distribution)
        plans.append(replace(previous, goal=goal))
    return plans


def initial_weekly_progress(profile: ProfileInput, start: date) -> WeeklyProgress:
    """Build the first weekly check-in for a new program."""
    return WeeklyProgress(
        week=1,
        day=start,
        next_check_day=start + timedelta(days=7),
        weight_kg=profile.current_weight_kg,
    )


def nutritional_goal_label(goal: NutritionalGoal | str) -> str:
    """Return a display label for a goal, or the raw value if unknown."""
    try:
        return GOAL_LABELS[NutritionalGoal(goal)]
    except ValueError:
        return str(goal)
