"""
Plan persistence.

Supabase gives us no transaction across tables, so the write is a short
sequence with one compensating step:

1. meal_plans row        - failure aborts, nothing to undo
2. meals batch           - failure or short insert deletes the plan row
3. shopping_lists row    - failure is logged; plan and meals stay

A plan row is never left behind without its meals.
"""

import logging
from datetime import date, timedelta

from supabase import Client

from chefly.db import client as db
from chefly.errors import PersistenceError
from chefly.planner.days import normalize_day
from chefly.planner.models import MealPlanDraft, PersistedPlan, PlannedMeal

logger = logging.getLogger(__name__)


def week_start(today: date | None = None) -> date:
    """Monday of the week containing `today`."""
    today = today or date.today()
    return today - timedelta(days=today.weekday())


def build_meal_row(meal_plan_id: str, meal: PlannedMeal) -> dict:
    """Row for the meals table. Macros default to 0, never null."""
    return {
        "meal_plan_id": meal_plan_id,
        "day_of_week": normalize_day(meal.day),
        "meal_type": meal.meal_type,
        "name": meal.name,
        "description": meal.description,
        "benefits": meal.benefits,
        "ingredients": meal.ingredients,
        "steps": meal.steps,
        "calories": meal.calories or 0,
        "protein": meal.protein or 0,
        "carbs": meal.carbs or 0,
        "fats": meal.fats or 0,
        "image_url": meal.image_url,
    }


async def _rollback_plan(meal_plan_id: str, client: Client | None) -> None:
    """Compensating delete. A failure here is logged, not raised."""
    try:
        await db.delete_meal_plan(meal_plan_id, client=client)
        logger.info(f"Rolled back meal plan {meal_plan_id}")
    except Exception as e:
        logger.error(f"Rollback of meal plan {meal_plan_id} failed, row may be orphaned: {e}")


async def persist_plan(
    user_id: str,
    draft: MealPlanDraft,
    fingerprint: str,
    *,
    client: Client | None = None,
    today: date | None = None,
) -> PersistedPlan:
    """
    Store a validated plan, its meals and its shopping list.

    Raises:
        PersistenceError: the plan row or the meal batch could not be stored
    """
    plan_row = {
        "user_id": user_id,
        "week_start_date": week_start(today).isoformat(),
        "preferences_hash": fingerprint,
    }

    # 1. Plan row
    try:
        plan = await db.insert_meal_plan(plan_row, client=client)
    except Exception as e:
        logger.error(f"Error creating meal plan: {e}")
        raise PersistenceError(f"Failed to create meal plan: {e}") from e

    meal_plan_id = plan["id"]
    logger.info(f"Meal plan created with ID: {meal_plan_id}")

    # 2. Meals, all in one batch
    meal_rows = [build_meal_row(meal_plan_id, meal) for meal in draft.meals]
    try:
        inserted = await db.insert_meals(meal_rows, client=client)
    except Exception as e:
        logger.error(f"Error inserting meals: {e}")
        # 3. Compensate
        await _rollback_plan(meal_plan_id, client)
        raise PersistenceError(f"Failed to insert meals: {e}") from e

    if len(inserted) < len(meal_rows):
        logger.error(f"Meal insert stored {len(inserted)} of {len(meal_rows)} meals")
        await _rollback_plan(meal_plan_id, client)
        raise PersistenceError(f"Failed to insert meals: stored {len(inserted)} of {len(meal_rows)}")

    logger.info(f"Inserted {len(inserted)} meals")

    # 4. Shopping list, best effort
    shopping_list_saved = True
    try:
        await db.insert_shopping_list(meal_plan_id, draft.shopping_list, client=client)
    except Exception as e:
        shopping_list_saved = False
        logger.warning(f"Error inserting shopping list for plan {meal_plan_id}, continuing: {e}")

    return PersistedPlan(
        meal_plan_id=meal_plan_id,
        meals_count=len(inserted),
        shopping_list_saved=shopping_list_saved,
    )
