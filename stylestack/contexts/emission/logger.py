"""
Emission context logger.

Provides logging interface for emission context with automatic [emit] prefix.
All emission modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[emit]"


def _log_error(message: str) -> None:
    """Log error message with [emit] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [emit] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [emit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
