"""
Session logger setup for STYLESTACK command-line runs.

Provides loguru configuration with a provenance header. Library modules never call
this; they log through their context's logger.py wrappers and inherit whatever
sinks the entry point configured.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

import stylestack

# Console colors per level
LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one session: DEBUG to a file, console_level and up to stdout.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "convert")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="convert",
            log_dir=Path("outs/logs/convert_20251114_123456"),
            extra_provenance={"Input PDF": "report.pdf"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Log command, working directory, interpreter and package version, plus extras."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"stylestack: {stylestack.__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
