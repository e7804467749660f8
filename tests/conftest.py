"""
Pytest configuration and fixtures for Chefly tests.
"""

import asyncio
import copy
import json
import os
import random
import uuid
from collections import defaultdict
from types import SimpleNamespace

import pytest

# Set test environment before importing chefly modules
os.environ["CHEFLY_ENV"] = "development"
os.environ.setdefault("OPENAI_API_KEY", "test-key-not-real")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ["CHEFLY_LOG_PROMPTS"] = "0"


def run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio needed)."""
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# In-memory Supabase stand-in
# ---------------------------------------------------------------------------


class FakeQuery:
    """Records one PostgREST-style call chain until execute()."""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table_name = table
        self.op: str | None = None
        self.payload = None
        self.filters: list[tuple[str, object]] = []
        self.limit_n: int | None = None
        self.order_by: tuple[str, bool] | None = None

    def select(self, *columns, **kwargs):
        if self.op is None:
            self.op = "select"
        return self

    def insert(self, data):
        self.op = "insert"
        self.payload = data
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def execute(self):
        return self.store._execute(self)


class FakeSupabase:
    """
    Minimal Supabase client: table().select/insert/delete().eq().execute().

    Failure injection:
        fail(table, op)          - execute() raises
        short_insert(table, n)   - insert stores and returns only n rows
    """

    def __init__(self):
        self.tables: dict[str, list[dict]] = defaultdict(list)
        self.calls: list[tuple[str, str]] = []
        self._failures: dict[tuple[str, str], Exception] = {}
        self._short_inserts: dict[str, int] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, table: str, op: str, exc: Exception | None = None) -> None:
        self._failures[(table, op)] = exc or RuntimeError(f"{op} on {table} failed")

    def short_insert(self, table: str, n: int) -> None:
        self._short_inserts[table] = n

    def rows(self, table: str) -> list[dict]:
        return self.tables[table]

    def seed(self, table: str, row: dict) -> dict:
        stored = {"id": str(uuid.uuid4()), **row}
        self.tables[table].append(stored)
        return stored

    def _matches(self, row: dict, filters) -> bool:
        return all(row.get(col) == val for col, val in filters)

    def _execute(self, query: FakeQuery):
        self.calls.append((query.table_name, query.op))
        failure = self._failures.get((query.table_name, query.op))
        if failure is not None:
            raise failure

        rows = self.tables[query.table_name]

        if query.op == "insert":
            batch = query.payload if isinstance(query.payload, list) else [query.payload]
            stored = [{"id": str(uuid.uuid4()), **copy.deepcopy(r)} for r in batch]
            if query.table_name in self._short_inserts:
                stored = stored[: self._short_inserts[query.table_name]]
            rows.extend(stored)
            return SimpleNamespace(data=copy.deepcopy(stored))

        if query.op == "delete":
            doomed = [r for r in rows if self._matches(r, query.filters)]
            self.tables[query.table_name] = [r for r in rows if not self._matches(r, query.filters)]
            if query.table_name == "meal_plans":
                # ON DELETE CASCADE
                ids = {r["id"] for r in doomed}
                for child in ("meals", "shopping_lists"):
                    self.tables[child] = [r for r in self.tables[child] if r.get("meal_plan_id") not in ids]
            return SimpleNamespace(data=copy.deepcopy(doomed))

        selected = [r for r in rows if self._matches(r, query.filters)]
        if query.order_by:
            column, desc = query.order_by
            selected.sort(key=lambda r: r.get(column), reverse=desc)
        if query.limit_n is not None:
            selected = selected[: query.limit_n]
        return SimpleNamespace(data=copy.deepcopy(selected))

    def ops(self, table: str) -> list[str]:
        return [op for t, op in self.calls if t == table]


@pytest.fixture
def fake_supabase():
    """In-memory Supabase client."""
    return FakeSupabase()


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_preferences_row():
    """A user_preferences row as Supabase returns it."""
    return {
        "id": "pref-1",
        "user_id": "user-1",
        "goal": "lose_weight",
        "diet_type": "vegan",
        "activity_level": "moderate",
        "allergies": ["peanuts"],
        "dislikes": ["mushrooms", "olives"],
        "cooking_skill": "intermediate",
        "budget": "medium",
        "cooking_time": 30,
        "servings": 2,
        "meal_complexity": "simple",
        "flavor_preferences": ["spicy", "savory"],
        "preferred_cuisines": ["mexican", "italian"],
        "meals_per_day": 3,
        "additional_notes": None,
        "age": 34,
        "gender": None,
        "weight": 72.5,
        "created_at": "2026-01-01T00:00:00Z",
        "updated_at": None,
    }


def make_meal(day=0, meal_type="breakfast", **overrides) -> dict:
    """One well-formed meal as the AI returns it."""
    meal = {
        "day_of_week": day,
        "meal_type": meal_type,
        "name": f"Meal {day}-{meal_type}",
        "description": "A tasty vegan dish",
        "ingredients": ["200g tofu", "1 cup spinach"],
        "steps": ["Chop", "Cook", "Serve"],
        "calories": 450,
        "protein": 22,
        "carbs": 50,
        "fats": 14,
        "benefits": "High in plant protein",
    }
    meal.update(overrides)
    return meal


def make_plan_payload(meals_per_day=3, shopping_items=15) -> dict:
    """A full week as the AI returns it."""
    types = {2: ["lunch", "dinner"], 3: ["breakfast", "lunch", "dinner"]}.get(
        meals_per_day, ["breakfast", "lunch", "snack", "dinner"]
    )
    meals = [make_meal(day, t) for day in range(7) for t in types]
    return {
        "meals": meals,
        "shopping_list": [f"item {i}" for i in range(shopping_items)],
    }


@pytest.fixture
def plan_payload():
    return make_plan_payload()


@pytest.fixture
def plan_text(plan_payload):
    """The payload wrapped the way models like to answer."""
    return f"```json\n{json.dumps(plan_payload)}\n```"


@pytest.fixture
def rng():
    return random.Random(42)
