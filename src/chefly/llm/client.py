"""
Chefly - AI Client.

Wraps the OpenAI async client for the two capabilities the planner needs:
- generate_text: prompt in, raw text out
- generate_image: prompt in, zero or one image reference out

OpenAI exceptions are translated into chefly.errors here so the rest of
the code never imports openai. The client is built with max_retries=0:
retrying is the caller's decision, not ours.
"""

import logging

import openai
from openai import AsyncOpenAI

from chefly.config import settings
from chefly.errors import AIRateLimitError, AIServiceError
from chefly.llm.prompt_logger import log_prompt

logger = logging.getLogger(__name__)

# Singleton client instance
_client: AsyncOpenAI | None = None


def get_async_client() -> AsyncOpenAI:
    """
    Get the async OpenAI client.

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        _client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
        )

    return _client


def _translate_error(e: Exception) -> AIServiceError:
    """Map an OpenAI exception onto our taxonomy."""
    if isinstance(e, openai.RateLimitError):
        return AIRateLimitError(str(e))
    if isinstance(e, openai.APIStatusError):
        if e.status_code == 429:
            return AIRateLimitError(str(e))
        return AIServiceError(f"AI service error ({e.status_code}): {e}", status_code=e.status_code)
    if isinstance(e, openai.APITimeoutError):
        return AIServiceError(f"AI service timed out: {e}")
    if isinstance(e, openai.APIConnectionError):
        return AIServiceError(f"AI service unreachable: {e}")
    return AIServiceError(f"AI request failed: {e}")


async def generate_text(
    prompt: str,
    *,
    system_prompt: str | None = None,
    node: str = "meal_plan",
) -> str:
    """
    Send a prompt to the chat model and return the raw text answer.

    Raises:
        AIRateLimitError: The service is throttling.
        AIServiceError: Any other transport failure, or an empty answer.
    """
    client = get_async_client()
    model = settings.text_model

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    logger.info(f"Calling text model {model} ({len(prompt)} prompt chars)")

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=settings.text_temperature,
            max_tokens=settings.text_max_tokens,
            timeout=settings.chefly_ai_timeout_seconds,
        )
    except openai.OpenAIError as e:
        log_prompt(node=node, model=model, prompt=prompt, system_prompt=system_prompt, error=str(e))
        raise _translate_error(e) from e

    content = response.choices[0].message.content if response.choices else None

    log_prompt(node=node, model=model, prompt=prompt, system_prompt=system_prompt, response=content)

    if not content:
        raise AIServiceError("AI service returned an empty response")

    usage = getattr(response, "usage", None)
    if usage is not None:
        logger.info(
            f"[AI Stats] Input: {usage.prompt_tokens}, Output: {usage.completion_tokens}, "
            f"Total: {usage.total_tokens}"
        )

    return content


async def generate_image(prompt: str, *, node: str = "meal_image") -> str | None:
    """
    Generate one image for a prompt.

    Returns:
        A hosted URL, a base64 data URL, or None when the service answered
        without an image.

    Raises:
        AIRateLimitError / AIServiceError on transport failure.
    """
    client = get_async_client()
    model = settings.image_model

    try:
        response = await client.images.generate(
            model=model,
            prompt=prompt,
            size=settings.image_size,
            n=1,
            timeout=settings.chefly_image_timeout_seconds,
        )
    except openai.OpenAIError as e:
        log_prompt(node=node, model=model, prompt=prompt, error=str(e))
        raise _translate_error(e) from e

    if not response.data:
        log_prompt(node=node, model=model, prompt=prompt)
        return None

    image = response.data[0]
    if image.url:
        reference = image.url
    elif image.b64_json:
        reference = f"data:image/png;base64,{image.b64_json}"
    else:
        reference = None

    log_prompt(node=node, model=model, prompt=prompt, response=(reference or "")[:120] or None)
    return reference
