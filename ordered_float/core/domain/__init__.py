"""
Domain models and value objects.

Contains the OrderedFloat wrapper (F32, F64) and key helpers built on it.
"""

from ordered_float.core.domain.keys import (
    total_max,
    total_min,
    total_sorted,
    total_unique,
)
from ordered_float.core.domain.ordered import F32, F64, OrderedFloat

__all__ = [
    # Wrapper
    "OrderedFloat",
    "F32",
    "F64",
    # Key helpers
    "total_sorted",
    "total_unique",
    "total_min",
    "total_max",
]
