"""
Chefly - Weekly meal-plan generation service.

Turns a user's stored preferences into a persisted, illustrated,
week-long meal plan and shopping list using a generative AI backend.
"""

__version__ = "1.0.0"
