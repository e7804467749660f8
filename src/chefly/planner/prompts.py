"""
Meal-plan prompt composition.

Builds the single instruction string sent to the text model. Pure string
work: nothing here can fail. Randomness (theme and variation seed) comes
from an injected random.Random so tests can pin it.
"""

import random

from chefly.planner import prompt_content as content
from chefly.planner.models import DAYS_PER_WEEK, Preferences, WeeklyCheckIn, meal_types_for


def _join(values: list[str]) -> str:
    return ", ".join(v for v in values if v)


def format_profile(preferences: Preferences, language: str) -> list[str]:
    """Goal, diet, activity and any demographics we have."""
    labels = content.LABELS[language]
    lines = [
        f"- {labels['goal']}: {preferences.goal}",
        f"- {labels['diet_type']}: {preferences.diet_type}",
    ]
    if preferences.activity_level:
        lines.append(f"- {labels['activity_level']}: {preferences.activity_level}")
    if preferences.age:
        lines.append(f"- {labels['age']}: {preferences.age}")
    if preferences.gender:
        lines.append(f"- {labels['gender']}: {preferences.gender}")
    if preferences.weight:
        lines.append(f"- {labels['weight']}: {preferences.weight:g}")
    return lines


def format_constraints(preferences: Preferences, language: str) -> list[str]:
    """Allergies and dislikes. Allergies are always stated, even when empty."""
    labels = content.LABELS[language]
    if preferences.allergies:
        lines = [f"- {labels['allergies']}: {_join(preferences.allergies)}"]
    else:
        lines = [f"- {labels['no_allergies']}"]
    if preferences.dislikes:
        lines.append(f"- {labels['dislikes']}: {_join(preferences.dislikes)}")
    return lines


def format_cooking(preferences: Preferences, language: str) -> list[str]:
    labels = content.LABELS[language]
    lines = []
    if preferences.cooking_skill:
        lines.append(f"- {labels['cooking_skill']}: {preferences.cooking_skill}")
    if preferences.cooking_time:
        lines.append("- " + labels["cooking_time"].format(minutes=preferences.cooking_time))
    if preferences.budget:
        lines.append(f"- {labels['budget']}: {preferences.budget}")
    if preferences.servings:
        lines.append("- " + labels["servings"].format(servings=preferences.servings))
    if preferences.meal_complexity:
        lines.append(f"- {labels['meal_complexity']}: {preferences.meal_complexity}")
    return lines


def format_taste(preferences: Preferences, language: str) -> list[str]:
    labels = content.LABELS[language]
    lines = []
    if preferences.flavor_preferences:
        lines.append(f"- {labels['flavor_preferences']}: {_join(preferences.flavor_preferences)}")
    if preferences.preferred_cuisines:
        lines.append(f"- {labels['preferred_cuisines']}: {_join(preferences.preferred_cuisines)}")
    return lines


def format_check_in(check_in: WeeklyCheckIn | None, language: str) -> list[str]:
    """
    Translate a weekly check-in into concrete dietary directives.

    Unknown values produce nothing.
    """
    if check_in is None:
        return []

    directives = content.CHECK_IN_DIRECTIVES[language]
    lines = []

    weight_key = f"weight_{check_in.weight_change}" if check_in.weight_change else None
    if weight_key in directives:
        lines.append(f"- {directives[weight_key]}")

    energy_key = f"energy_{check_in.energy_level}" if check_in.energy_level else None
    if energy_key in directives:
        lines.append(f"- {directives[energy_key]}")

    tags = check_in.tags
    for tag in content.CHECK_IN_TAGS:
        if tag in tags:
            lines.append(f"- {directives[tag]}")

    custom = (check_in.custom_recipe_preference or "").strip()
    if custom:
        lines.append("- " + directives["custom"].format(text=custom))

    available = (check_in.available_ingredients or "").strip()
    if available:
        lines.append("- " + directives["available"].format(text=available))

    return lines


def pick_variation(language: str, rng: random.Random) -> tuple[int, str]:
    """Draw a variation seed and a theme (uniformly) from the injected source."""
    seed = rng.randint(1000, 9999)
    theme = rng.choice(content.THEMES[language])
    return seed, theme


def format_output_contract(meals_per_day: int, language: str) -> str:
    return content.OUTPUT_FORMAT[language].format(
        total_meals=meals_per_day * DAYS_PER_WEEK,
        meals_per_day=meals_per_day,
        meal_types=", ".join(dict.fromkeys(meal_types_for(meals_per_day))),
    )


def get_system_prompt(language: str) -> str:
    return content.SYSTEM_PROMPT[language]


def compose_meal_plan_prompt(
    preferences: Preferences,
    language: str,
    *,
    check_in: WeeklyCheckIn | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Build the full generation prompt.

    Args:
        preferences: The user's stored preferences
        language: "es" or "en" (already resolved)
        check_in: Optional weekly check-in to bias this one generation
        rng: Random source for the theme and variation seed

    Returns:
        The prompt, entirely in `language`
    """
    rng = rng or random.Random()
    headers = content.HEADERS[language]
    meal_labels = content.MEAL_LABELS[language]
    meals_per_day = preferences.meals_per_day

    sections = [
        content.INTRO[language].format(
            meals_per_day=meals_per_day,
            meal_labels=", ".join(meal_labels[t] for t in meal_types_for(meals_per_day)),
        ),
        "\n".join([headers["profile"], *format_profile(preferences, language)]),
        "\n".join([headers["constraints"], *format_constraints(preferences, language)]),
    ]

    cooking = format_cooking(preferences, language)
    if cooking:
        sections.append("\n".join([headers["cooking"], *cooking]))

    taste = format_taste(preferences, language)
    if taste:
        sections.append("\n".join([headers["taste"], *taste]))

    notes = (preferences.additional_notes or "").strip()
    if notes:
        sections.append(f"{headers['notes']}\n{notes}")

    check_in_lines = format_check_in(check_in, language)
    if check_in_lines:
        sections.append("\n".join([headers["check_in"], *check_in_lines]))

    seed, theme = pick_variation(language, rng)
    sections.append(f"{headers['variety']}\n" + content.VARIETY[language].format(seed=seed, theme=theme))

    sections.append(f"{headers['output']}\n" + format_output_contract(meals_per_day, language))

    return "\n\n".join(sections)
