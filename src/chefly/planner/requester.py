"""
Plan requesting.

Sends the composed prompt to the text model and decodes the answer into a
candidate plan. Fails fast: no retries here.
"""

import json
import logging
import re

from chefly.errors import MalformedPlanError
from chefly.llm.client import generate_text
from chefly.planner.models import CandidatePlan, MalformedPlan, ParsedPlan

logger = logging.getLogger(__name__)

# ```json / ``` markers, on their own line or inline with the payload
_OPENING_FENCE = re.compile(r"^```[\w-]*\s*")
_CLOSING_FENCE = re.compile(r"\s*```\s*$")


def strip_code_fences(text: str) -> str:
    """
    Remove markdown fences and any prose around the JSON object.

    Models like to answer with ```json ... ``` or with a sentence before
    the payload.
    """
    content = _CLOSING_FENCE.sub("", _OPENING_FENCE.sub("", text.strip())).strip()

    if not content.startswith("["):
        start = content.find("{")
        end = content.rfind("}")
        if start != -1 and end > start:
            content = content[start : end + 1]

    return content


def parse_plan_text(text: str) -> CandidatePlan:
    """Decode raw model output into ParsedPlan or MalformedPlan."""
    if not text or not text.strip():
        return MalformedPlan(reason="empty response", raw_text=text or "")

    cleaned = strip_code_fences(text)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return MalformedPlan(reason=f"invalid JSON: {e}", raw_text=text)

    return ParsedPlan(payload=payload)


async def request_plan(prompt: str, *, system_prompt: str | None = None) -> ParsedPlan:
    """
    Ask the AI for a plan and decode it.

    Raises:
        AIRateLimitError / AIServiceError: transport failure
        MalformedPlanError: the answer was not decodable
    """
    text = await generate_text(prompt, system_prompt=system_prompt, node="meal_plan")

    candidate = parse_plan_text(text)
    if isinstance(candidate, MalformedPlan):
        logger.error(f"AI returned a malformed plan: {candidate.reason}")
        logger.debug(f"Malformed plan text: {candidate.raw_text[:500]}")
        raise MalformedPlanError(f"Could not parse AI response: {candidate.reason}")

    logger.info("AI plan decoded")
    return candidate
