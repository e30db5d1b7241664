"""
Shared utilities for STYLESTACK.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps for log directories
"""

from stylestack.utils.logger import setup_logger
from stylestack.utils.timestamp import now

__all__ = ["setup_logger", "now"]
