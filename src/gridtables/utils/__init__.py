"""Utility modules for gridtables.

Provides:
- logger: get_logger for logging
"""

from gridtables.utils.logger import get_logger

__all__ = [
    "get_logger",
]
