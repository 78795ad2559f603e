"""Utility modules for ssmlite.

Provides:
- logger: get_logger for logging
"""

from ssmlite.utils.logger import get_logger

__all__ = [
    "get_logger",
]
