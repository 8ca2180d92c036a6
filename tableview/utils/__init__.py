"""
Utilities package for tableview.

Exports shared helpers for logging, display formatting and profiling.
Keep this package free of pipeline logic.
"""

from tableview.utils.display import collation_key, format_timestamp, parse_timestamp
from tableview.utils.logging import configure_logging, get_logger
from tableview.utils.profiler import ProfileStats, profile_block

__all__ = [
    "collation_key",
    "configure_logging",
    "format_timestamp",
    "get_logger",
    "parse_timestamp",
    "ProfileStats",
    "profile_block",
]
