"""
Centralized logging configuration for the ladder package.

All engine modules log beneath the ``ladder`` logger namespace so callers can
route or silence the engine with a single logger.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path

ROOT_LOGGER = "ladder"

_FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "json": '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
}


def setup_logging(
    level: str | int = logging.INFO,
    log_file: str | Path | None = None,
    format_style: str = "detailed",
) -> logging.Logger:
    """Set up logging for the ladder package.

    Args:
        level: Logging level name or number. Defaults to logging.INFO.
        log_file: Optional file to also write logs to. Defaults to None.
        format_style: "simple", "detailed", or "json". Defaults to "detailed".

    Returns:
        The configured ``ladder`` logger.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        level = resolved

    if format_style not in _FORMATS:
        raise ValueError(
            f"Unknown format_style {format_style!r}; expected one of {sorted(_FORMATS)}"
        )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(_FORMATS[format_style])
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module (usually ``__name__``)."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
):
    """Context manager to log the timing of operations.

    Examples:
        >>> logger = get_logger(__name__)
        >>> with log_timing(logger, "simulating 50 games"):
        ...     result = simulator.run(...)
    """
    logger.log(level, "Starting %s", operation)
    started = time.perf_counter()
    try:
        yield
    except Exception as exc:
        logger.error(
            "Failed %s after %.4fs: %s", operation, time.perf_counter() - started, exc
        )
        raise
    logger.log(
        level, "Completed %s in %.4fs", operation, time.perf_counter() - started
    )
