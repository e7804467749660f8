"""
Meal-plan generation pipeline.

fingerprint -> prompt -> AI request -> validation -> images -> persistence

Every stage raises; this module is the single place failures are caught
and turned into a classified, localized response.
"""

import logging
import random
from typing import Any

from pydantic import ValidationError
from supabase import Client

from chefly.db import client as db
from chefly.errors import InvalidInputError, MissingPreferencesError
from chefly.planner.classifier import ErrorCategory, classify_error
from chefly.planner.fingerprint import fingerprint_preferences
from chefly.planner.i18n import resolve_language
from chefly.planner.images import illustrate_meals
from chefly.planner.models import (
    GenerationOutcome,
    GenerationRequest,
    MealPlanDraft,
    PersistedPlan,
    Preferences,
)
from chefly.planner.persister import persist_plan
from chefly.planner.prompts import compose_meal_plan_prompt, get_system_prompt
from chefly.planner.requester import request_plan
from chefly.planner.validator import validate_plan

logger = logging.getLogger(__name__)


def _require_user_id(user_id: Any) -> str:
    if not isinstance(user_id, str) or not user_id.strip():
        raise InvalidInputError(f"Missing or malformed userId: {user_id!r}")
    return user_id.strip()


async def load_preferences(user_id: str, client: Client | None = None) -> Preferences:
    """
    Read and validate a user's preferences.

    Raises:
        MissingPreferencesError: the user never completed the survey
    """
    row = await db.get_preferences(user_id, client=client)
    if row is None:
        raise MissingPreferencesError(user_id)
    return Preferences.model_validate(row)


async def _run_stages(
    request: GenerationRequest,
    language: str,
    *,
    rng: random.Random | None,
    db_client: Client | None,
) -> PersistedPlan:
    user_id = _require_user_id(request.user_id)

    if request.force_new:
        # No cached plans exist to bypass; every call generates
        logger.info(f"forceNew requested by {user_id}")

    preferences = await load_preferences(user_id, client=db_client)
    fingerprint = fingerprint_preferences(preferences)
    logger.info(f"Generating plan for {user_id} (lang={language}, fingerprint={fingerprint[:12]})")

    prompt = compose_meal_plan_prompt(
        preferences,
        language,
        check_in=request.weekly_check_in,
        rng=rng,
    )

    parsed = await request_plan(prompt, system_prompt=get_system_prompt(language))
    draft = validate_plan(parsed, meals_per_day=preferences.meals_per_day)

    illustrated = await illustrate_meals(draft.meals)
    draft = MealPlanDraft(meals=illustrated, shopping_list=draft.shopping_list)

    return await persist_plan(user_id, draft, fingerprint, client=db_client)


def _failure(exc: Exception, language: str) -> GenerationOutcome:
    classified = classify_error(exc, language)
    if classified.category == ErrorCategory.GENERATION_FAILED:
        logger.error(f"Meal plan generation failed: {exc}", exc_info=exc)
    else:
        logger.warning(f"Meal plan generation rejected ({classified.category.value}): {exc}")
    return GenerationOutcome(status_code=classified.status_code, body=classified.to_body())


async def generate_meal_plan(
    request: GenerationRequest,
    *,
    rng: random.Random | None = None,
    db_client: Client | None = None,
) -> GenerationOutcome:
    """
    Run the full pipeline for one request.

    Args:
        request: Parsed request body
        rng: Random source for prompt variation (fresh one per call if None)
        db_client: Supabase client (shared client if None)

    Returns:
        GenerationOutcome with status 200 and the success body, or the
        classified status and failure body. Never raises.
    """
    language = resolve_language(request.language)

    try:
        persisted = await _run_stages(request, language, rng=rng, db_client=db_client)
    except Exception as e:
        return _failure(e, language)

    logger.info(f"Meal plan {persisted.meal_plan_id} complete ({persisted.meals_count} meals)")
    return GenerationOutcome(
        status_code=200,
        body={
            "success": True,
            "mealPlanId": persisted.meal_plan_id,
            "mealsCount": persisted.meals_count,
            "cached": False,
        },
    )


async def run_generation(
    payload: Any,
    *,
    rng: random.Random | None = None,
    db_client: Client | None = None,
) -> GenerationOutcome:
    """Entry point for a raw request body (e.g. decoded JSON)."""
    raw_language = payload.get("language") if isinstance(payload, dict) else None
    language = resolve_language(raw_language if isinstance(raw_language, str) else None)

    if not isinstance(payload, dict):
        return _failure(InvalidInputError("Request body must be a JSON object"), language)

    try:
        request = GenerationRequest.model_validate(payload)
    except ValidationError as e:
        return _failure(InvalidInputError(f"Malformed request body: {e}"), language)

    return await generate_meal_plan(request, rng=rng, db_client=db_client)
