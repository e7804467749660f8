"""
Chefly Web API - FastAPI application.

Exposes the generation pipeline to the mobile/web app.
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chefly import __version__
from chefly.planner.pipeline import run_generation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from chefly.config import settings
    from chefly.llm.prompt_logger import enable_prompt_logging
    from chefly.logging_config import configure_logging

    configure_logging()
    if settings.chefly_log_prompts:
        enable_prompt_logging(True)
    logger.info(f"Chefly API {__version__} starting ({settings.chefly_env})")
    yield


app = FastAPI(title="Chefly", version=__version__, lifespan=lifespan)

# The app is served from several origins (web, iOS and Android webviews)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/generate-meal-plan")
async def generate_meal_plan_endpoint(request: Request) -> JSONResponse:
    """
    Generate and store a new weekly meal plan.

    Body: {userId, forceNew?, language?, weeklyCheckIn?}

    The body is read raw so that a missing or malformed userId reaches the
    pipeline and gets the localized invalid_input response instead of a
    framework 422.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    outcome = await run_generation(payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)
