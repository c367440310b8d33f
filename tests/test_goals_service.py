"""Tests for macro goal editing."""

from uuid import uuid4

import pytest

from calfit.domain.goals import (
    DEFAULT_MACRO_TARGETS,
    Macro,
    MacroPercentages,
    MacroTargets,
)
from calfit.services.goals import (
    GoalsService,
    InsufficientProfileDataError,
    change_calories,
    grams_from_percentages,
    percentages_from_grams,
    rebalance_percentages,
)
from calfit.services.program import calculate_nutritional_program
from tests.conftest import InMemoryGoalsRepository, make_profile


def test_percentages_from_default_targets() -> None:
    percentages = percentages_from_grams(DEFAULT_MACRO_TARGETS)

    assert percentages == MacroPercentages(protein=22, fat=29, carbs=45)


def test_percentages_from_empty_targets() -> None:
    empty = MacroTargets(calories=0, protein=0, fat=0, carbs=0)

    assert percentages_from_grams(empty).total == 0


def test_grams_from_percentages() -> None:
    targets = grams_from_percentages(
        MacroPercentages(protein=30, fat=30, carbs=40), 2000
    )

    assert targets == MacroTargets(calories=2000, protein=150, fat=67, carbs=200)


def test_rebalance_spreads_difference_proportionally() -> None:
    updated = rebalance_percentages(
        MacroPercentages(protein=30, fat=30, carbs=40), Macro.PROTEIN, 40
    )

    assert updated == MacroPercentages(protein=40, fat=26, carbs=34)
    assert updated.total == 100


def test_rebalance_with_empty_others_fills_last_macro() -> None:
    updated = rebalance_percentages(
        MacroPercentages(protein=100, fat=0, carbs=0), Macro.PROTEIN, 60
    )

    assert updated == MacroPercentages(protein=60, fat=0, carbs=40)


def test_rebalance_rejects_out_of_range_value() -> None:
    with pytest.raises(ValueError):
        rebalance_percentages(
            MacroPercentages(protein=30, fat=30, carbs=40), Macro.FAT, 120
        )


def test_change_calories_keeps_complete_split() -> None:
    targets = MacroTargets(calories=2000, protein=150, fat=67, carbs=200)

    updated = change_calories(
        targets, MacroPercentages(protein=30, fat=30, carbs=40), 2500
    )

    assert updated == MacroTargets(calories=2500, protein=188, fat=83, carbs=250)


def test_change_calories_with_incomplete_split_keeps_grams() -> None:
    updated = change_calories(
        DEFAULT_MACRO_TARGETS, MacroPercentages(protein=22, fat=29, carbs=45), 1800
    )

    assert updated.calories == 1800
    assert updated.protein == DEFAULT_MACRO_TARGETS.protein


def test_apply_program_saves_goal_targets() -> None:
    repository = InMemoryGoalsRepository()
    service = GoalsService(repository)
    user_id = uuid4()

    targets = service.apply_program(
        user_id, calculate_nutritional_program(make_profile())
    )

    assert targets == MacroTargets(calories=2633, protein=197, fat=88, carbs=263)
    assert service.get_targets(user_id) == targets


def test_apply_program_rejects_incomplete_profile() -> None:
    repository = InMemoryGoalsRepository()
    service = GoalsService(repository)
    program = calculate_nutritional_program(make_profile(height_cm=None))

    with pytest.raises(InsufficientProfileDataError):
        service.apply_program(uuid4(), program)

    assert repository.goals == {}
