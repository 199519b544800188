"""
Utilities package for tablebench.

Exports shared helpers for logging and session profiling. Keep this package
lightweight and free of domain-specific logic.
"""

from tablebench.utils.logging import configure_logging, get_logger
from tablebench.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
