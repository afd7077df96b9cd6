"""Utility modules for Lemmark.

Provides:
- logger: get_logger for logging
"""

from lemmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
