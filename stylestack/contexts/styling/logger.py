"""
Styling context logger.

Provides logging interface for styling context with automatic [style] prefix.
All styling modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[style]"


def _log_info(message: str) -> None:
    """Log info message with [style] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [style] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
