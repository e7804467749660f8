"""
Chefly Planner - weekly meal-plan generation.

Public entry points are the two pipeline functions; the stage modules
are importable on their own for testing and reuse.
"""

from chefly.planner.pipeline import generate_meal_plan, run_generation

__all__ = ["generate_meal_plan", "run_generation"]
