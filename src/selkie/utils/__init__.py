"""Utility modules for Selkie.

Provides:
- logger: get_logger for logging
"""

from selkie.utils.logger import get_logger

__all__ = [
    "get_logger",
]
