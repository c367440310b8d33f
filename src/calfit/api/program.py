"""Nutritional program endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from calfit.api.models import AdjustRequest, PlanRequest, QuestionnaireAnswers
from calfit.services.program import (
    calculate_macro_adjustments,
    calculate_nutritional_program,
    generate_progressive_plan,
    nutritional_goal_label,
)

router = APIRouter(prefix="/program", tags=["program"])


@router.post("/preview")
async def preview_program(answers: QuestionnaireAnswers) -> dict[str, object]:
    """Compute a program without saving it."""
    program = calculate_nutritional_program(answers.to_profile_input())
    return {
        "program": asdict(program),
        "goal_label": nutritional_goal_label(answers.nutritional_goal),
    }


@router.post("/plan")
async def progressive_plan(body: PlanRequest) -> dict[str, object]:
    """Return one program per week toward the target weight."""
    program = calculate_nutritional_program(body.answers.to_profile_input())
    change = body.target_weight_change_kg
    if change is None:
        change = _weight_change(body.answers)
    weeks = generate_progressive_plan(
        program,
        duration_weeks=body.duration_weeks,
        target_weight_change_kg=change,
    )
    return {"weeks": [asdict(week) for week in weeks]}


@router.post("/adjust")
async def adjust_program(body: AdjustRequest) -> dict[str, object]:
    """Return goal macros revised after a weigh-in."""
    program = calculate_nutritional_program(body.answers.to_profile_input())
    adjusted = calculate_macro_adjustments(
        program, body.last_weight_kg, body.new_weight_kg
    )
    return {"ok": program.ok, "macros": asdict(adjusted)}


def _weight_change(answers: QuestionnaireAnswers) -> float:
    if answers.target_weight_kg is None or answers.current_weight_kg is None:
        return 0.0
    return answers.target_weight_kg - answers.current_weight_kg
