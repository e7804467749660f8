"""
Chefly - Supabase Client.

Low-level database access. All queries go through here.

Every helper takes an optional `client` so callers (and tests) can
supply their own; otherwise the shared service-role client is used.
"""

from supabase import Client, create_client

from chefly.config import settings

# Singleton client instance
_client: Client | None = None

PREFERENCES_TABLE = "user_preferences"
MEAL_PLANS_TABLE = "meal_plans"
MEALS_TABLE = "meals"
SHOPPING_LISTS_TABLE = "shopping_lists"


def get_client() -> Client:
    """
    Get the Supabase client.

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        _client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _client


# =============================================================================
# Preferences Operations
# =============================================================================


async def get_preferences(user_id: str, client: Client | None = None) -> dict | None:
    """Get a user's preferences row, or None if they never completed the survey."""
    client = client or get_client()
    response = client.table(PREFERENCES_TABLE).select("*").eq("user_id", user_id).limit(1).execute()
    if not response.data:
        return None
    return response.data[0]


# =============================================================================
# Meal Plan Operations
# =============================================================================


async def insert_meal_plan(row: dict, client: Client | None = None) -> dict:
    """Insert a meal plan row and return it with its generated id."""
    client = client or get_client()
    response = client.table(MEAL_PLANS_TABLE).insert(row).execute()
    if not response.data:
        raise RuntimeError("Meal plan insert returned no row")
    return response.data[0]


async def get_meal_plan(meal_plan_id: str, client: Client | None = None) -> dict | None:
    """Get a single meal plan by ID."""
    client = client or get_client()
    response = client.table(MEAL_PLANS_TABLE).select("*").eq("id", meal_plan_id).limit(1).execute()
    if not response.data:
        return None
    return response.data[0]


async def delete_meal_plan(meal_plan_id: str, client: Client | None = None) -> None:
    """Delete a meal plan by ID."""
    client = client or get_client()
    client.table(MEAL_PLANS_TABLE).delete().eq("id", meal_plan_id).execute()


# =============================================================================
# Meal Operations
# =============================================================================


async def insert_meals(rows: list[dict], client: Client | None = None) -> list[dict]:
    """
    Insert a batch of meals in one request.

    Returns the inserted rows. Callers compare the count against what
    they submitted.
    """
    client = client or get_client()
    response = client.table(MEALS_TABLE).insert(rows).execute()
    return response.data or []


async def get_meals(meal_plan_id: str, client: Client | None = None) -> list[dict]:
    """Get all meals of a plan, ordered by day."""
    client = client or get_client()
    response = (
        client.table(MEALS_TABLE)
        .select("*")
        .eq("meal_plan_id", meal_plan_id)
        .order("day_of_week")
        .execute()
    )
    return response.data or []


# =============================================================================
# Shopping List Operations
# =============================================================================


async def insert_shopping_list(meal_plan_id: str, items: list[str], client: Client | None = None) -> dict:
    """Insert the shopping list for a plan."""
    client = client or get_client()
    data = {"meal_plan_id": meal_plan_id, "items": items}
    response = client.table(SHOPPING_LISTS_TABLE).insert(data).execute()
    if not response.data:
        raise RuntimeError("Shopping list insert returned no row")
    return response.data[0]


async def get_shopping_list(meal_plan_id: str, client: Client | None = None) -> dict | None:
    """Get the shopping list for a plan."""
    client = client or get_client()
    response = (
        client.table(SHOPPING_LISTS_TABLE).select("*").eq("meal_plan_id", meal_plan_id).limit(1).execute()
    )
    if not response.data:
        return None
    return response.data[0]
