"""Runtime logging helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "projterm"

_CONFIGURED_LEVEL: int | None = None


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a Rich handler to the projterm logger once per level."""
    global _CONFIGURED_LEVEL

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    if level == _CONFIGURED_LEVEL:
        return

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
    )
    logger.setLevel(level)
    _CONFIGURED_LEVEL = level
