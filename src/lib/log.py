"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
current extraction context without requiring explicit state passing.

Features:
- Context-aware logging tied to a connected context's verbosity
- Falls back to the DOCATTR_VERBOSITY setting when nothing is connected
- Rich formatting with timestamps, colors, and metadata
- Thread-safe using contextvars

Usage:
    from docattr.lib.log import LOG, state_connectToLogger

    # At the start of a documentation pass:
    state_connectToLogger(context)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Scan details appear if verbosity >= 2", level=2)
    LOG("Per-item trace appears if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold the current extraction context
_extraction_state: ContextVar[Optional[Any]] = ContextVar('extraction_state', default=None)

# Configure loguru with docattr-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a context object to the logging context.

    Any object with a ``verbosity`` attribute works; the documentation pipeline
    that drives docattr usually passes its own per-unit state.

    Args:
        state: Object with verbosity attribute, or None to disconnect
    """
    _extraction_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected context, else the configured default"""
    state = _extraction_state.get()
    if state is not None and hasattr(state, 'verbosity'):
        return state.verbosity
    return appsettings.verbosity


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Top comment found", level=2)
        LOG("Item 3 classified as Skip", level=3)
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
