"""
Chefly - Logging setup.

One stderr handler for the whole process; noisy HTTP libraries are
turned down to WARNING.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%H:%M:%S"

_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "hpack")


def configure_logging(level: str | None = None, verbose: bool = False) -> None:
    """
    Configure root logging.

    Args:
        level: Explicit level name. Defaults to settings.log_level.
        verbose: Force DEBUG regardless of level.
    """
    if verbose:
        level = "DEBUG"
    elif level is None:
        from chefly.config import settings

        level = settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_FORMAT,
        datefmt=_DATEFMT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
