"""
Plan validation.

Runs between decoding and any side effect. A plan that fails here never
reaches image generation or the database.
"""

import logging
import re
from typing import Any

from chefly.errors import PlanValidationError
from chefly.planner.days import fold_text
from chefly.planner.models import MealPlanDraft, ParsedPlan, PlannedMeal, meal_types_for

logger = logging.getLogger(__name__)

REQUIRED_MEAL_FIELDS = ("day_of_week", "meal_type", "name", "description", "benefits")
MACRO_FIELDS = ("calories", "protein", "carbs", "fats")

# Accepted spellings (accent-folded) for each meal-type tag
MEAL_TYPE_ALIASES: dict[str, str] = {
    "breakfast": "breakfast",
    "desayuno": "breakfast",
    "lunch": "lunch",
    "almuerzo": "lunch",
    "comida": "lunch",
    "dinner": "dinner",
    "cena": "dinner",
    "snack": "snack",
    "merienda": "snack",
    "colacion": "snack",
    "tentempie": "snack",
}

_NUMBER_RE = re.compile(r"^\s*(-?\d+(?:[.,]\d+)?)")


def normalize_meal_type(value: Any) -> str | None:
    """Map a meal-type label onto its tag, or None if unknown."""
    if not isinstance(value, str):
        return None
    return MEAL_TYPE_ALIASES.get(fold_text(value))


def coerce_macro(value: Any) -> int:
    """
    Coerce a macro value to a non-negative int.

    Missing, null or unparseable values become 0. "25g" becomes 25.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMBER_RE.match(value)
        if not match:
            return 0
        number = float(match.group(1).replace(",", "."))
    else:
        return 0
    return max(0, round(number))


def coerce_text_list(value: Any) -> list[str]:
    """Coerce an ingredient/step field to a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    return [str(value)]


def _day_designator(meal: dict) -> Any:
    if meal.get("day_of_week") is not None:
        return meal["day_of_week"]
    return meal.get("day")


def _validate_meal(index: int, meal: Any, allowed_types: frozenset[str] | None = None) -> PlannedMeal:
    if not isinstance(meal, dict):
        raise PlanValidationError(f"Meal {index} is not an object", meal_index=index)

    for field_name in REQUIRED_MEAL_FIELDS:
        value = _day_designator(meal) if field_name == "day_of_week" else meal.get(field_name)
        if value is None:
            raise PlanValidationError(
                f"Meal {index} is missing required field '{field_name}'",
                meal_index=index,
                field=field_name,
            )

    meal_type = normalize_meal_type(meal["meal_type"])
    if meal_type is None:
        raise PlanValidationError(
            f"Meal {index} has unknown meal_type {meal['meal_type']!r}",
            meal_index=index,
            field="meal_type",
        )
    if allowed_types is not None and meal_type not in allowed_types:
        raise PlanValidationError(
            f"Meal {index} has meal_type {meal_type!r}, expected one of {sorted(allowed_types)}",
            meal_index=index,
            field="meal_type",
        )

    return PlannedMeal(
        day=_day_designator(meal),
        meal_type=meal_type,
        name=str(meal["name"]).strip(),
        description=str(meal["description"]).strip(),
        benefits=str(meal["benefits"]).strip(),
        ingredients=coerce_text_list(meal.get("ingredients")),
        steps=coerce_text_list(meal.get("steps")),
        **{macro: coerce_macro(meal.get(macro)) for macro in MACRO_FIELDS},
    )


def validate_plan(parsed: ParsedPlan, meals_per_day: int | None = None) -> MealPlanDraft:
    """
    Enforce the structural rules on a decoded plan.

    Checks, in order: the payload is an object; `meals` is a non-empty
    array; `shopping_list` is an array; every meal has its required fields
    and, when `meals_per_day` is given, a meal type from that day layout.

    Raises:
        PlanValidationError: on the first violation
    """
    payload = parsed.payload

    if not isinstance(payload, dict):
        raise PlanValidationError("AI response is not an object")

    meals = payload.get("meals")
    if not isinstance(meals, list):
        raise PlanValidationError("AI response has no meals array", field="meals")
    if not meals:
        raise PlanValidationError("AI response contains no meals", field="meals")

    shopping_list = payload.get("shopping_list")
    if not isinstance(shopping_list, list):
        raise PlanValidationError("AI response has no shopping_list array", field="shopping_list")

    allowed_types = frozenset(meal_types_for(meals_per_day)) if meals_per_day is not None else None
    planned = [_validate_meal(index, meal, allowed_types) for index, meal in enumerate(meals)]

    logger.info(f"Plan valid: {len(planned)} meals, {len(shopping_list)} shopping items")
    return MealPlanDraft(meals=planned, shopping_list=coerce_text_list(shopping_list))
