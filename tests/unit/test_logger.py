"""Unit tests for session logger setup."""

import pytest
from loguru import logger

from stylestack.contexts.conversion.logger import setup_conversion_logger


@pytest.mark.unit
def test_conversion_logger_writes_provenance(tmp_path):
    log_dir = tmp_path / "logs" / "convert_test"

    try:
        log_file = setup_conversion_logger(log_dir, tmp_path / "report.pdf")
        logger.debug("debug goes to file only")
    finally:
        logger.remove()

    assert log_file == log_dir / "convert.log"
    content = log_file.read_text()
    assert "Input PDF:" in content
    assert "report.pdf" in content
    assert "stylestack:" in content
    assert "debug goes to file only" in content
