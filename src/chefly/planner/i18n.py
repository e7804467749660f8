"""Language code handling."""

from pydantic import ValidationError

from chefly.planner.models import SUPPORTED_LANGUAGES

FALLBACK_LANGUAGE = "es"


def default_language() -> str:
    """Configured default language; Spanish if settings cannot load."""
    from chefly.config import settings

    try:
        return settings.default_language
    except ValidationError:
        # Missing env must still produce a localized error response
        return FALLBACK_LANGUAGE


def resolve_language(code: str | None, default: str | None = None) -> str:
    """
    Map a client language code onto a supported language.

    'EN', 'en-US' and 'en_GB' all resolve to 'en'. Anything unsupported
    resolves to the default.
    """
    if isinstance(code, str) and code.strip():
        base = code.strip().lower().replace("_", "-").split("-")[0]
        if base in SUPPORTED_LANGUAGES:
            return base
    return default or default_language()
