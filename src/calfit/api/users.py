"""Per-user endpoints: goals, settings, profile and food log."""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from datetime import date  # noqa: TC003
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from calfit.api.auth import get_container, require_api_token
from calfit.api.models import (
    FoodEntryRequest,
    FoodEntryUpdate,
    MacroTargetsModel,
    ProfileModel,
    QuestionnaireAnswers,
    RebalanceRequest,
    SettingsModel,
    SettingsPatch,
)
from calfit.domain.goals import MacroTargets
from calfit.domain.meals import FoodSnapshot, MealType
from calfit.domain.models import BodyMetrics
from calfit.services.food_log import snapshot_from_food
from calfit.services.goals import (
    InsufficientProfileDataError,
    change_calories,
    grams_from_percentages,
    percentages_from_grams,
    rebalance_percentages,
)
from calfit.services.program import calculate_nutritional_program

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users/{user_id}",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)


@router.post("/program")
async def apply_program(
    user_id: UUID, answers: QuestionnaireAnswers, request: Request
) -> dict[str, object]:
    """Compute a program and save its goal macros as the user's targets."""
    container = get_container(request)
    profile = container.profile_service.build_profile_input(
        user_id, answers.to_profile_input()
    )
    program = calculate_nutritional_program(profile)
    try:
        targets = container.goals_service.apply_program(user_id, program)
    except InsufficientProfileDataError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return {"program": asdict(program), "targets": asdict(targets)}


@router.get("/goals")
async def get_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's targets and their percentage split."""
    targets = _current_targets(user_id, request)
    return {
        "targets": asdict(targets),
        "percentages": asdict(percentages_from_grams(targets)),
    }


@router.put("/goals")
async def save_goals(
    user_id: UUID, body: MacroTargetsModel, request: Request
) -> dict[str, object]:
    """Replace the user's targets."""
    container = get_container(request)
    targets = container.goals_service.save_targets(user_id, body.to_domain())
    return {
        "targets": asdict(targets),
        "percentages": asdict(percentages_from_grams(targets)),
    }


@router.post("/goals/rebalance")
async def rebalance_goals(user_id: UUID, body: RebalanceRequest) -> dict[str, object]:
    """Preview targets after editing a percentage or the calorie total."""
    targets = body.targets.to_domain()
    percentages = percentages_from_grams(targets)
    if body.macro is not None and body.value is not None:
        percentages = rebalance_percentages(percentages, body.macro, body.value)
        targets = grams_from_percentages(percentages, targets.calories)
    if body.calories is not None:
        targets = change_calories(targets, percentages, body.calories)
        if percentages.total != 100:
            percentages = percentages_from_grams(targets)
    return {"targets": asdict(targets), "percentages": asdict(percentages)}


@router.get("/settings")
async def get_settings(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's settings."""
    container = get_container(request)
    return asdict(container.user_settings_service.get_settings(user_id))


@router.put("/settings")
async def save_settings(
    user_id: UUID, body: SettingsModel, request: Request
) -> dict[str, object]:
    """Replace the user's settings."""
    container = get_container(request)
    try:
        saved = container.user_settings_service.save_settings(
            user_id, body.to_domain()
        )
    except Exception:
        logger.exception("Failed to save settings", extra={"user_id": str(user_id)})
        raise
    return asdict(saved)


@router.patch("/settings")
async def update_settings(
    user_id: UUID, body: SettingsPatch, request: Request
) -> dict[str, object]:
    """Merge changes into the user's settings."""
    container = get_container(request)
    changes: dict[str, object] = {}
    if body.name is not None:
        changes["name"] = body.name
    if body.notifications is not None:
        changes["notifications"] = body.notifications
    if body.macro_targets is not None:
        changes["macro_targets"] = body.macro_targets.to_domain()
    updated = container.user_settings_service.update_settings(user_id, **changes)
    return asdict(updated)


@router.delete("/settings")
async def reset_settings(user_id: UUID, request: Request) -> dict[str, object]:
    """Restore default settings."""
    container = get_container(request)
    return asdict(container.user_settings_service.reset_settings(user_id))


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return stored body metrics."""
    container = get_container(request)
    metrics = container.profile_service.get_profile(user_id)
    if metrics is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(metrics)


@router.put("/profile")
async def save_profile(
    user_id: UUID, body: ProfileModel, request: Request
) -> dict[str, object]:
    """Store body metrics."""
    container = get_container(request)
    saved = container.profile_service.save_profile(
        BodyMetrics(
            user_id=user_id,
            age_years=body.age,
            height_cm=body.height_cm,
            weight_kg=body.weight_kg,
            body_fat_percentage=body.body_fat_percentage,
        )
    )
    return asdict(saved)


@router.get("/log/{day}")
async def get_daily_log(
    user_id: UUID, day: date, request: Request
) -> dict[str, object]:
    """Return a day of logged meals against the user's targets."""
    container = get_container(request)
    targets = _current_targets(user_id, request)
    return asdict(container.food_log_service.get_day(user_id, day, targets))


@router.post("/log/{day}/{meal_type}", status_code=status.HTTP_201_CREATED)
async def add_food(
    user_id: UUID,
    day: date,
    meal_type: MealType,
    body: FoodEntryRequest,
    request: Request,
) -> dict[str, object]:
    """Log a food under a meal."""
    container = get_container(request)
    snapshot = _snapshot_for_request(body, request)
    entry = container.food_log_service.add_food(user_id, day, meal_type, snapshot)
    return asdict(entry)


@router.patch("/log/entries/{entry_id}")
async def update_food(
    user_id: UUID, entry_id: UUID, body: FoodEntryUpdate, request: Request
) -> dict[str, object]:
    """Edit a logged food."""
    container = get_container(request)
    _require_own_entry(user_id, entry_id, request)
    updated = container.food_log_service.update_food(
        entry_id, body.model_dump(exclude_none=True)
    )
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(updated)


@router.delete("/log/entries/{entry_id}")
async def remove_food(
    user_id: UUID, entry_id: UUID, request: Request
) -> dict[str, object]:
    """Remove a logged food."""
    container = get_container(request)
    _require_own_entry(user_id, entry_id, request)
    removed = container.food_log_service.remove_food(entry_id)
    if removed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return asdict(removed)


@router.get("/recent/{meal_type}")
async def recent_foods(
    user_id: UUID, meal_type: MealType, request: Request, limit: int = 30
) -> dict[str, object]:
    """Return recently logged foods for a meal."""
    container = get_container(request)
    entries = container.food_log_service.recent_foods(user_id, meal_type, limit)
    return {"foods": [asdict(entry) for entry in entries]}


@router.get("/week")
async def week_summary(
    user_id: UUID, request: Request, end: date | None = None
) -> dict[str, object]:
    """Return calories per day for the seven days ending on ``end``."""
    container = get_container(request)
    targets = _current_targets(user_id, request)
    summary = container.stats_service.get_week(
        user_id, end or date.today(), targets.calories
    )
    return asdict(summary)


def _current_targets(user_id: UUID, request: Request) -> MacroTargets:
    container = get_container(request)
    return container.user_settings_service.get_settings(user_id).macro_targets


def _snapshot_for_request(body: FoodEntryRequest, request: Request) -> FoodSnapshot:
    container = get_container(request)
    if body.food_id is not None:
        food = container.food_catalog_service.get_food(body.food_id)
        if food is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown food"
            )
        snapshot = snapshot_from_food(food, body.quantity)
        if body.name:
            snapshot = replace(snapshot, name=body.name)
        return snapshot
    if not body.name:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either food_id or name is required",
        )
    return FoodSnapshot(
        name=body.name,
        quantity=body.quantity,
        calories=body.calories,
        protein_g=body.protein_g,
        fat_g=body.fat_g,
        carbs_g=body.carbs_g,
    )


def _require_own_entry(user_id: UUID, entry_id: UUID, request: Request) -> None:
    container = get_container(request)
    entry = container.food_log_service.get_entry(entry_id)
    if entry is None or entry.user_id != user_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
