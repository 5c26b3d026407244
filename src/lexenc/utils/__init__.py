"""Utility modules for lexenc.

Provides:
- logger: get_logger for logging
"""

from lexenc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
