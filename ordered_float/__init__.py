"""
ordered_float — totally ordered, hashable IEEE-754 float wrappers.

F32 and F64 behave like native floats for equality, ordering and hashing,
except that NaN equals NaN and sorts below every other value, and +0.0/-0.0
hash equally. Use them as dict/set keys and sort keys.
"""

from ordered_float.core.domain import (
    F32,
    F64,
    OrderedFloat,
    total_max,
    total_min,
    total_sorted,
    total_unique,
)

__version__ = "0.1.0"

__all__ = [
    "OrderedFloat",
    "F32",
    "F64",
    "total_sorted",
    "total_unique",
    "total_min",
    "total_max",
]
