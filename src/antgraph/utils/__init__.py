"""
Utility functions for antgraph.

This module contains low-level helpers used across the system.
No graph logic should live here.
"""

from antgraph.utils.geometry import Point, reflect, is_non_negative

__all__ = [
    "Point",
    "reflect",
    "is_non_negative",
]
