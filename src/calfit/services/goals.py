"""Macro goal editing and persistence."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from calfit.domain.goals import Macro, MacroPercentages, MacroTargets
from calfit.domain.program import NutritionalProgram
from calfit.services.program import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    round_half_up,
)

_logger = logging.getLogger(__name__)

_MACRO_ORDER = (Macro.PROTEIN, Macro.FAT, Macro.CARBS)


class InsufficientProfileDataError(ValueError):
    """Raised when a program computed from incomplete data would be saved."""


class GoalsRepository(Protocol):
    """Persistence interface for macro targets."""

    def get_goals(self, user_id: UUID) -> MacroTargets | None:
        """Return stored targets for a user, if any."""

    def upsert_goals(self, user_id: UUID, targets: MacroTargets) -> None:
        """Insert or replace the user's targets."""


def percentages_from_grams(targets: MacroTargets) -> MacroPercentages:
    """Return each macro's rounded share of the calorie target."""
    protein_kcal = targets.protein * KCAL_PER_GRAM_PROTEIN
    fat_kcal = targets.fat * KCAL_PER_GRAM_FAT
    carbs_kcal = targets.carbs * KCAL_PER_GRAM_CARBS
    total = targets.calories or (protein_kcal + fat_kcal + carbs_kcal)
    if total <= 0:
        return MacroPercentages(protein=0, fat=0, carbs=0)
    return MacroPercentages(
        protein=round_half_up(protein_kcal / total * 100),
        fat=round_half_up(fat_kcal / total * 100),
        carbs=round_half_up(carbs_kcal / total * 100),
    )


def grams_from_percentages(
    percentages: MacroPercentages, calories: int
) -> MacroTargets:
    """Return gram targets for a calorie total split by percentages."""
    return MacroTargets(
        calories=calories,
        protein=round_half_up(
            calories * percentages.protein / 100 / KCAL_PER_GRAM_PROTEIN
        ),
        fat=round_half_up(calories * percentages.fat / 100 / KCAL_PER_GRAM_FAT),
        carbs=round_half_up(calories * percentages.carbs / 100 / KCAL_PER_GRAM_CARBS),
    )


def rebalance_percentages(
    percentages: MacroPercentages, macro: Macro, value: int
) -> MacroPercentages:
    """Set one macro's percentage and spread the difference over the others.

    The other two macros absorb the change in proportion to their current
    share, never dropping below zero. Any rounding remainder lands on the
    last of the other two in protein/fat/carbs order.
    """
    if not 0 <= value <= 100:
        raise ValueError(f"Percentage out of range: {value}")

    current = {m: getattr(percentages, m.value) for m in _MACRO_ORDER}
    difference = value - current[macro]
    updated = dict(current)
    updated[macro] = value

    others = [m for m in _MACRO_ORDER if m != macro]
    others_total = sum(current[m] for m in others)
    if others_total > 0:
        for other in others:
            ratio = current[other] / others_total
            updated[other] = max(0, round_half_up(current[other] - difference * ratio))

    new_total = sum(updated.values())
    if new_total != 100:
        updated[others[-1]] += 100 - new_total

    return MacroPercentages(
        protein=updated[Macro.PROTEIN],
        fat=updated[Macro.FAT],
        carbs=updated[Macro.CARBS],
    )


def change_calories(
    targets: MacroTargets, percentages: MacroPercentages, calories: int
) -> MacroTargets:
    """Apply a new calorie target, keeping the split when it is complete."""
    if percentages.total == 100:
        return grams_from_percentages(percentages, calories)
    return replace(targets, calories=calories)


def targets_from_program(program: NutritionalProgram) -> MacroTargets:
    """Return the goal targets of a computed program."""
    return MacroTargets(
        calories=program.goal.calories,
        protein=program.goal.protein_g,
        fat=program.goal.fat_g,
        carbs=program.goal.carbs_g,
    )


@dataclass
class GoalsService:
    """Service for reading and saving a user's macro targets."""

    repository: GoalsRepository

    def get_targets(self, user_id: UUID) -> MacroTargets | None:
        """Return the user's saved targets, if any."""
        return self.repository.get_goals(user_id)

    def save_targets(self, user_id: UUID, targets: MacroTargets) -> MacroTargets:
        """Persist targets for a user."""
        self.repository.upsert_goals(user_id, targets)
        return targets

    def apply_program(
        self, user_id: UUID, program: NutritionalProgram
    ) -> MacroTargets:
        """Persist the goal macros of a program as the user's targets."""
        if not program.ok:
            raise InsufficientProfileDataError(
                "Program was computed from an incomplete profile"
            )
        targets = targets_from_program(program)
        self.repository.upsert_goals(user_id, targets)
        _logger.info(
            "Applied program targets: user_id=%s calories=%s",
            user_id,
            targets.calories,
        )
        return targets
