"""Utility modules for lexkit.

Provides:
- logger: get_logger for logging
"""

from lexkit.utils.logger import get_logger

__all__ = [
    "get_logger",
]
