"""
Planner data model.

Wire/storage shapes (Preferences, WeeklyCheckIn, GenerationRequest) are
pydantic models so they validate what comes in from Supabase and HTTP.
Everything produced inside the pipeline is a plain dataclass.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Constants
# =============================================================================

MIN_MEALS_PER_DAY = 2
MAX_MEALS_PER_DAY = 5
DEFAULT_MEALS_PER_DAY = 3
DAYS_PER_WEEK = 7

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")

# Which meal slots a day has, in eating order
MEAL_TYPES_BY_COUNT: dict[int, tuple[str, ...]] = {
    2: ("lunch", "dinner"),
    3: ("breakfast", "lunch", "dinner"),
    4: ("breakfast", "lunch", "snack", "dinner"),
    5: ("breakfast", "snack", "lunch", "snack", "dinner"),
}

SUPPORTED_LANGUAGES = ("es", "en")


def meal_types_for(meals_per_day: int) -> tuple[str, ...]:
    """Meal slots for a day with the given number of meals."""
    clamped = min(max(meals_per_day, MIN_MEALS_PER_DAY), MAX_MEALS_PER_DAY)
    return MEAL_TYPES_BY_COUNT[clamped]


# =============================================================================
# Inputs
# =============================================================================

_LIST_FIELDS = ("allergies", "dislikes", "flavor_preferences", "preferred_cuisines")


class Preferences(BaseModel):
    """One user's survey answers (row of user_preferences)."""

    model_config = ConfigDict(extra="ignore")

    user_id: str | None = None
    goal: str = ""
    diet_type: str = ""
    activity_level: str | None = None
    allergies: list[str] = Field(default_factory=list)
    dislikes: list[str] = Field(default_factory=list)
    cooking_skill: str | None = None
    budget: str | None = None
    cooking_time: int | None = None  # minutes
    servings: int | None = None  # household size
    meal_complexity: str | None = None
    flavor_preferences: list[str] = Field(default_factory=list)
    preferred_cuisines: list[str] = Field(default_factory=list)
    meals_per_day: int = DEFAULT_MEALS_PER_DAY
    additional_notes: str | None = None

    # Optional demographics
    age: int | None = None
    gender: str | None = None
    weight: float | None = None

    @field_validator(*_LIST_FIELDS, mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return value or []

    @field_validator("goal", "diet_type", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return value or ""

    @field_validator("meals_per_day", mode="before")
    @classmethod
    def _clamp_meals_per_day(cls, value: Any) -> int:
        if value is None:
            return DEFAULT_MEALS_PER_DAY
        return min(max(int(value), MIN_MEALS_PER_DAY), MAX_MEALS_PER_DAY)


class WeeklyCheckIn(BaseModel):
    """
    Ad-hoc signal about the user's last week.

    Arrives camelCase from the app. Unknown values are kept as-is and
    simply produce no directive.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    weight_change: str | None = None  # up / down / same
    energy_level: str | None = None  # high / normal / low
    recipe_preferences: list[str] = Field(default_factory=list)
    custom_recipe_preference: str | None = None
    available_ingredients: str | None = None
    weekly_goals: list[str] = Field(default_factory=list)

    @field_validator("recipe_preferences", "weekly_goals", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return value or []

    @field_validator("weight_change", "energy_level", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value

    @property
    def tags(self) -> set[str]:
        """Recipe-preference and weekly-goal tags combined."""
        return {t.strip().lower() for t in [*self.recipe_preferences, *self.weekly_goals] if t}

    def is_empty(self) -> bool:
        return not (
            self.weight_change
            or self.energy_level
            or self.tags
            or (self.custom_recipe_preference or "").strip()
            or (self.available_ingredients or "").strip()
        )


class GenerationRequest(BaseModel):
    """Inbound request body for a generation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Left untyped: a malformed id must reach the pipeline and be
    # classified, not die in request parsing.
    user_id: Any = None
    force_new: bool = False
    language: str | None = None
    weekly_check_in: WeeklyCheckIn | None = None


# =============================================================================
# Pipeline values
# =============================================================================


@dataclass(frozen=True)
class ParsedPlan:
    """AI output that decoded to data. Not yet validated."""

    payload: Any


@dataclass(frozen=True)
class MalformedPlan:
    """AI output that could not be decoded."""

    reason: str
    raw_text: str


CandidatePlan = ParsedPlan | MalformedPlan


@dataclass
class PlannedMeal:
    """One validated meal, ready for illustration and persistence."""

    day: Any  # raw designator from the AI, normalized at persistence
    meal_type: str
    name: str
    description: str
    benefits: str
    ingredients: list[str] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    image_url: str | None = None


@dataclass
class MealPlanDraft:
    """A structurally valid plan that has not been stored yet."""

    meals: list[PlannedMeal]
    shopping_list: list[str] = field(default_factory=list)


@dataclass
class PersistedPlan:
    """What the persister wrote."""

    meal_plan_id: str
    meals_count: int
    shopping_list_saved: bool


@dataclass
class GenerationOutcome:
    """HTTP-ready pipeline result."""

    status_code: int
    body: dict

    @property
    def success(self) -> bool:
        return bool(self.body.get("success"))
