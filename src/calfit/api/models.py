"""Pydantic models for API request bodies."""

from uuid import UUID

from pydantic import BaseModel, Field

from calfit.domain.goals import Macro, MacroTargets, UserSettings
from calfit.domain.meals import MealType
from calfit.domain.program import (
    ActivityLevel,
    DietType,
    NutritionalGoal,
    Occupation,
    ProfileInput,
    Sex,
)


class MealPreferences(BaseModel):
    """Meal slots the user wants planned."""

    breakfast: bool = True
    morning_snack: bool = False
    lunch: bool = True
    afternoon_snack: bool = False
    dinner: bool = True
    evening_snack: bool = False


class QuestionnaireAnswers(BaseModel):
    """Answers of the nutritional questionnaire.

    Body metrics are optional so that a partially filled form can still be
    previewed; the program then comes back with ``ok`` set to false.
    """

    name: str | None = None
    age: int | None = Field(default=None, ge=18, le=100)
    sex: Sex = Sex.MALE
    height_cm: float | None = Field(default=None, ge=140, le=220)
    current_weight_kg: float | None = Field(default=None, ge=40, le=200)
    target_weight_kg: float | None = Field(default=None, ge=40, le=200)
    body_fat_percentage: float | None = Field(default=None, ge=3, le=50)
    nutritional_goal: NutritionalGoal = NutritionalGoal.PROGRESSIVE_FAT_LOSS
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    occupation: Occupation = Occupation.SEDENTARY_JOB
    diet_type: DietType = DietType.BALANCED
    meals_per_day: int = Field(default=3, ge=2, le=6)
    meal_preferences: MealPreferences = Field(default_factory=MealPreferences)
    allergies: list[str] = Field(default_factory=list)
    food_preferences: list[str] = Field(default_factory=list)
    dietary_habits: str = ""

    def to_profile_input(self) -> ProfileInput:
        """Return the calculator input for these answers."""
        return ProfileInput(
            sex=self.sex,
            age_years=self.age,
            height_cm=self.height_cm,
            current_weight_kg=self.current_weight_kg,
            activity_level=self.activity_level,
            occupation=self.occupation,
            diet_type=self.diet_type,
            nutritional_goal=self.nutritional_goal,
            target_weight_kg=self.target_weight_kg,
            body_fat_percentage=self.body_fat_percentage,
            meals_per_day=self.meals_per_day,
        )


class PlanRequest(BaseModel):
    """Request for a week-by-week progressive plan."""

    answers: QuestionnaireAnswers
    duration_weeks: int = Field(default=12, ge=1, le=52)
    target_weight_change_kg: float | None = None


class AdjustRequest(BaseModel):
    """Weekly weigh-in used to adjust goal macros."""

    answers: QuestionnaireAnswers
    last_weight_kg: float = Field(gt=0)
    new_weight_kg: float = Field(gt=0)


class MacroTargetsModel(BaseModel):
    """Daily calorie and gram targets."""

    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    fat: int = Field(ge=0)
    carbs: int = Field(ge=0)

    def to_domain(self) -> MacroTargets:
        return MacroTargets(
            calories=self.calories,
            protein=self.protein,
            fat=self.fat,
            carbs=self.carbs,
        )


class RebalanceRequest(BaseModel):
    """Edit one macro's percentage or the calorie total."""

    targets: MacroTargetsModel
    macro: Macro | None = None
    value: int | None = Field(default=None, ge=0, le=100)
    calories: int | None = Field(default=None, ge=0)


class SettingsModel(BaseModel):
    """Full settings document."""

    name: str = "Utilisateur"
    notifications: bool = True
    macro_targets: MacroTargetsModel

    def to_domain(self) -> UserSettings:
        return UserSettings(
            name=self.name,
            notifications=self.notifications,
            macro_targets=self.macro_targets.to_domain(),
        )


class SettingsPatch(BaseModel):
    """Partial settings update."""

    name: str | None = None
    notifications: bool | None = None
    macro_targets: MacroTargetsModel | None = None


class ProfileModel(BaseModel):
    """Body metrics on the profile page."""

    age: int | None = Field(default=None, ge=18, le=100)
    height_cm: float | None = Field(default=None, gt=0)
    weight_kg: float | None = Field(default=None, gt=0)
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)


class FoodEntryRequest(BaseModel):
    """A food to log; either a catalog id or explicit macros.

    Explicit macros are totals for the logged portion. With ``food_id`` the
    catalog values are per serving and get multiplied by ``quantity``.
    """

    food_id: UUID | None = None
    name: str | None = None
    quantity: float = Field(default=1.0, gt=0)
    calories: float = Field(default=0.0, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)


class FoodEntryUpdate(BaseModel):
    """Edits to a logged food."""

    meal_type: MealType | None = None
    name: str | None = None
    quantity: float | None = Field(default=None, gt=0)
    calories: float | None = Field(default=None, ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)


class FoodCreateRequest(BaseModel):
    """Manually entered food for the database."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    serving_size: float | None = Field(default=None, gt=0)
    serving_unit: str = "g"
    brand: str | None = None
    barcode: str | None = None
