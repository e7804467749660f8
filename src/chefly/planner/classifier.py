"""
Error classification.

Maps any pipeline failure onto a small, user-facing taxonomy with a
localized message and a stable status code. Parse, validation and
database failures all collapse into generation_failed.
"""

from dataclasses import dataclass
from enum import Enum

from chefly.errors import AIRateLimitError, InvalidInputError, MissingPreferencesError
from chefly.planner.i18n import resolve_language


class ErrorCategory(str, Enum):
    RATE_LIMITED = "rate_limited"
    INVALID_INPUT = "invalid_input"
    MISSING_PREFERENCES = "missing_preferences"
    GENERATION_FAILED = "generation_failed"


STATUS_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.RATE_LIMITED: 429,
    ErrorCategory.INVALID_INPUT: 400,
    ErrorCategory.MISSING_PREFERENCES: 400,
    ErrorCategory.GENERATION_FAILED: 500,
}

MESSAGES: dict[ErrorCategory, dict[str, str]] = {
    ErrorCategory.RATE_LIMITED: {
        "es": "Demasiadas solicitudes. Espera unos minutos e inténtalo de nuevo.",
        "en": "Too many requests. Please wait a few minutes and try again.",
    },
    ErrorCategory.INVALID_INPUT: {
        "es": "Solicitud no válida: falta el identificador de usuario o no es correcto.",
        "en": "Invalid request: the user identifier is missing or malformed.",
    },
    ErrorCategory.MISSING_PREFERENCES: {
        "es": "No encontramos tus preferencias. Completa el cuestionario antes de generar tu plan.",
        "en": "We couldn't find your preferences. Complete the survey before generating your plan.",
    },
    ErrorCategory.GENERATION_FAILED: {
        "es": "No pudimos generar tu plan de comidas. Inténtalo de nuevo en unos momentos.",
        "en": "We couldn't generate your meal plan. Please try again in a moment.",
    },
}


@dataclass(frozen=True)
class ClassifiedError:
    category: ErrorCategory
    message: str
    status_code: int
    details: str

    def to_body(self) -> dict:
        """Outbound failure body."""
        return {"success": False, "error": self.message, "details": self.details}


def categorize(exc: BaseException) -> ErrorCategory:
    if isinstance(exc, AIRateLimitError):
        return ErrorCategory.RATE_LIMITED
    if isinstance(exc, InvalidInputError):
        return ErrorCategory.INVALID_INPUT
    if isinstance(exc, MissingPreferencesError):
        return ErrorCategory.MISSING_PREFERENCES
    return ErrorCategory.GENERATION_FAILED


def classify_error(exc: BaseException, language: str | None = None) -> ClassifiedError:
    """Category, localized message, status code and raw details for a failure."""
    category = categorize(exc)
    lang = resolve_language(language)
    return ClassifiedError(
        category=category,
        message=MESSAGES[category][lang],
        status_code=STATUS_CODES[category],
        details=str(exc) or exc.__class__.__name__,
    )
