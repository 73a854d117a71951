"""Utility modules"""

from harmonic_sort.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
