"""
Conversion context logger.

Provides logging interface for conversion context with automatic [convert] prefix.
All conversion modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from stylestack.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[convert]"


def setup_conversion_logger(log_dir: Path, pdf_path: Path) -> Path:
    """
    Setup logger for conversion context.

    Args:
        log_dir: Directory for this conversion session
        pdf_path: Input PDF, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="convert",
        log_dir=log_dir,
        extra_provenance={"Input PDF": pdf_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [convert] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [convert] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [convert] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [convert] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_conversion_start(pdf_path: Path, vocabulary) -> None:
    """Log start of conversion with context."""
    _log_info(f"Starting conversion: {pdf_path.name}")
    _log_debug(f"  Source: {pdf_path}")
    _log_debug(f"  Vocabulary: {vocabulary}")


def log_conversion_result(result, elapsed_time: float) -> None:
    """
    Log conversion result.

    Args:
        result: ConversionResult from convert_pdf()
        elapsed_time: Time taken
    """
    name = result.input_path.name if result.input_path else "<document>"
    if result.success:
        _log_success(
            f"{name}: {result.pages} pages, {result.runs} lines, "
            f"{result.tokens} characters ({elapsed_time:.2f}s)"
        )
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to convert {name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
