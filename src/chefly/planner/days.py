"""
Day designator normalization.

The AI is asked for 0-6 indices but sometimes answers with day names,
in either language. Everything is mapped to Monday=0 ... Sunday=6.
"""

import logging
import unicodedata
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DAY = 0

DAY_NAMES: dict[str, int] = {
    # English
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    # Spanish (stored without accents, see fold_text)
    "lunes": 0,
    "martes": 1,
    "miercoles": 2,
    "jueves": 3,
    "viernes": 4,
    "sabado": 5,
    "domingo": 6,
}


def fold_text(text: str) -> str:
    """Lowercase and strip diacritics: 'Miércoles' -> 'miercoles'."""
    decomposed = unicodedata.normalize("NFKD", text.strip().lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _from_index(value: int, raw: Any) -> int:
    if 0 <= value <= 6:
        return value
    logger.warning(f"Day index {raw!r} out of range, defaulting to {DEFAULT_DAY}")
    return DEFAULT_DAY


def normalize_day(designator: Any) -> int:
    """
    Map a day designator to a canonical index in [0, 6].

    Unrecognized designators fall back to Monday (0) and are logged.
    """
    if isinstance(designator, bool):
        # bool is an int subclass; True is not "Tuesday"
        pass
    elif isinstance(designator, int):
        return _from_index(designator, designator)
    elif isinstance(designator, float) and designator.is_integer():
        return _from_index(int(designator), designator)
    elif isinstance(designator, str):
        folded = fold_text(designator)
        if folded.isdigit():
            return _from_index(int(folded), designator)
        if folded in DAY_NAMES:
            return DAY_NAMES[folded]

    logger.warning(f"Unrecognized day designator {designator!r}, defaulting to {DEFAULT_DAY}")
    return DEFAULT_DAY
