"""
Utility functions
"""

from .helpers import format_walltime, parse_walltime, detect_scheduler, resolve_batch_system

__all__ = [
    "format_walltime",
    "parse_walltime",
    "detect_scheduler",
    "resolve_batch_system",
]
