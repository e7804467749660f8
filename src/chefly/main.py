"""
Chefly - CLI Entry Point.

Usage:
    chefly generate --user-id <id>   Generate a weekly plan for a user
    chefly show <meal_plan_id>       Print a stored plan
    chefly serve                     Run the HTTP API
    chefly health                    Check configuration
    chefly --help                    Show help
"""

import asyncio
import json

import typer
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

app = typer.Typer(
    name="chefly",
    help="Chefly - weekly meal-plan generation.",
    add_completion=False,
)
console = Console()

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@app.command()
def generate(
    user_id: str = typer.Option(..., "--user-id", "-u", help="User to generate a plan for"),
    language: str = typer.Option("es", "--language", "-L", help="Plan language (es or en)"),
    force_new: bool = typer.Option(False, "--force-new", help="Request a fresh plan"),
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log AI prompts to prompt_logs/"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate and store a weekly meal plan."""
    from chefly.llm.prompt_logger import enable_prompt_logging, get_session_log_dir
    from chefly.logging_config import configure_logging
    from chefly.planner.pipeline import run_generation

    configure_logging(verbose=verbose)
    if log_prompts:
        enable_prompt_logging(True)

    payload = {"userId": user_id, "language": language, "forceNew": force_new}

    with Live(Spinner("dots", text="Generating meal plan..."), console=console, transient=True):
        outcome = asyncio.run(run_generation(payload))

    style = "green" if outcome.success else "red"
    console.print(f"\n[bold {style}]HTTP {outcome.status_code}[/bold {style}]")
    console.print_json(json.dumps(outcome.body, ensure_ascii=False))

    if log_prompts:
        log_dir = get_session_log_dir()
        if log_dir:
            console.print(f"\n[dim]Prompts logged to: {log_dir}[/dim]")

    if not outcome.success:
        raise typer.Exit(1)


@app.command()
def show(meal_plan_id: str = typer.Argument(..., help="Meal plan ID")) -> None:
    """Print a stored meal plan with its meals and shopping list."""
    from chefly.db import client as db

    async def _load():
        plan = await db.get_meal_plan(meal_plan_id)
        if plan is None:
            return None, [], None
        return plan, await db.get_meals(meal_plan_id), await db.get_shopping_list(meal_plan_id)

    plan, meals, shopping = asyncio.run(_load())
    if plan is None:
        console.print(f"[red]Meal plan {meal_plan_id} not found[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Meal plan {plan['id']}[/bold] (week of {plan['week_start_date']})")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Day")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("kcal", justify="right")
    table.add_column("P/C/F", justify="right")
    table.add_column("Image")
    for meal in meals:
        day = meal.get("day_of_week", 0)
        table.add_row(
            DAY_LABELS[day] if 0 <= day <= 6 else str(day),
            meal.get("meal_type", ""),
            meal.get("name", ""),
            str(meal.get("calories") or 0),
            f"{meal.get('protein') or 0}/{meal.get('carbs') or 0}/{meal.get('fats') or 0}",
            "yes" if meal.get("image_url") else "-",
        )
    console.print(table)

    if shopping:
        console.print(f"\n[bold]Shopping list[/bold] ({len(shopping.get('items') or [])} items)")
        for item in shopping.get("items") or []:
            console.print(f"  - {item}")
    else:
        console.print("\n[dim]No shopping list stored[/dim]")


@app.command()
def serve(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload for development"),
) -> None:
    """Start the HTTP API."""
    import os

    import uvicorn

    actual_port = int(os.environ.get("PORT", port))

    console.print("\n[bold green]Chefly API[/bold green]")
    console.print(f"Starting server on http://localhost:{actual_port}")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    uvicorn.run(
        "chefly.web.app:app",
        host="0.0.0.0",
        port=actual_port,
        reload=reload,
    )


@app.command()
def health() -> None:
    """Check system health and configuration."""
    from chefly.config import get_settings

    console.print("\n[bold]Chefly Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("✅ Configuration loaded")
        console.print(f"   Environment: {settings.chefly_env}")
        console.print(f"   Log level: {settings.log_level}")
        console.print(f"   Text model: {settings.text_model}")
        console.print(f"   Image model: {settings.image_model}")

        if settings.openai_api_key.startswith("sk-") or settings.openai_base_url:
            console.print("✅ OpenAI API key configured")
        else:
            console.print("⚠️  OpenAI API key may be invalid")

        if settings.supabase_url.startswith("https://"):
            console.print("✅ Supabase URL configured")
        else:
            console.print("❌ Supabase URL missing or invalid")

        if not settings.chefly_generate_images:
            console.print("ℹ️  Image generation disabled")

        console.print("\n[green]All checks passed![/green]")

    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from chefly import __version__

    console.print(f"Chefly version {__version__}")


if __name__ == "__main__":
    app()
