"""
Meal illustration.

One image request per meal, all in flight at once. Images are a nice-to-
have: a failed request leaves that meal without an image and nothing
else changes. This stage never raises.
"""

import asyncio
import dataclasses
import logging

from chefly.config import settings
from chefly.llm.client import generate_image
from chefly.planner.models import PlannedMeal
from chefly.planner.prompt_content import IMAGE_PROMPT

logger = logging.getLogger(__name__)


def build_image_prompt(meal: PlannedMeal) -> str:
    return IMAGE_PROMPT.format(name=meal.name, description=meal.description)


async def _illustrate_one(index: int, meal: PlannedMeal) -> str | None:
    """Image reference for one meal, or None on any failure."""
    try:
        reference = await generate_image(build_image_prompt(meal))
    except Exception as e:
        logger.warning(f"Image generation failed for meal {index} ({meal.name}): {e}")
        return None

    if not reference:
        logger.warning(f"No image returned for meal {index} ({meal.name})")
        return None
    return reference


async def illustrate_meals(meals: list[PlannedMeal]) -> list[PlannedMeal]:
    """
    Attach an image to every meal that gets one.

    Returns new meal objects in the same order; the inputs are not mutated.
    """
    if not meals:
        return []

    if not settings.chefly_generate_images:
        logger.info("Image generation disabled, skipping illustration")
        return [dataclasses.replace(meal) for meal in meals]

    references = await asyncio.gather(
        *(_illustrate_one(index, meal) for index, meal in enumerate(meals))
    )

    illustrated = [
        dataclasses.replace(meal, image_url=reference)
        for meal, reference in zip(meals, references)
    ]

    succeeded = sum(1 for reference in references if reference)
    logger.info(f"Illustrated {succeeded}/{len(meals)} meals")
    return illustrated
