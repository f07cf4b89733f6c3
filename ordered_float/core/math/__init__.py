"""
Core math modules для ordered_float

Битовые представления IEEE-754 и тотальный порядок над float.
"""

# Float Bits
from ordered_float.core.math.float_bits import (
    # Formats
    BINARY32,
    BINARY64,
    FORMATS,
    FloatFormat,
    # Classification
    is_exact_zero,
    is_nan,
    # Conversions
    from_bits,
    narrow,
    to_bits,
)

# Total Order
from ordered_float.core.math.total_order import (
    hash_bits,
    partial_cmp,
    total_cmp,
    total_eq,
    total_hash,
)

__all__ = [
    # Float Bits — Formats
    "BINARY32",
    "BINARY64",
    "FORMATS",
    "FloatFormat",
    # Float Bits — Classification
    "is_exact_zero",
    "is_nan",
    # Float Bits — Conversions
    "from_bits",
    "narrow",
    "to_bits",
    # Total Order
    "hash_bits",
    "partial_cmp",
    "total_cmp",
    "total_eq",
    "total_hash",
]
