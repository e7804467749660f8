"""
Preference fingerprinting.

A stable digest of the preference fields that influence the prompt.
Stored on each meal plan as `preferences_hash` so a plan can be traced
back to the preferences that produced it.
"""

import hashlib
import json

from chefly.planner.models import Preferences

# Fields that change what we ask the AI for. Notes and demographics are
# deliberately absent.
FINGERPRINT_FIELDS = (
    "goal",
    "diet_type",
    "activity_level",
    "allergies",
    "dislikes",
    "cooking_skill",
    "budget",
    "cooking_time",
    "servings",
    "meal_complexity",
    "flavor_preferences",
    "preferred_cuisines",
    "meals_per_day",
)


def fingerprint_payload(preferences: Preferences) -> dict:
    """The normalized dict that gets hashed. Array fields are sorted."""
    payload = {}
    for name in FINGERPRINT_FIELDS:
        value = getattr(preferences, name)
        if isinstance(value, list):
            value = sorted(value)
        payload[name] = value
    return payload


def fingerprint_preferences(preferences: Preferences) -> str:
    """Deterministic, array-order-independent SHA-256 fingerprint."""
    canonical = json.dumps(
        fingerprint_payload(preferences),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
