"""
Contract Validation Module

Валидация и кодирование битово-точного payload обёртки OrderedFloat.
"""

from .codec import WRAPPERS, from_payload, to_payload
from .validators import (
    ContractValidator,
    OrderedFloatValidator,
    SchemaLoader,
    is_valid_ordered_float,
    validate_ordered_float,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderedFloatValidator",
    # Functions
    "validate_ordered_float",
    "is_valid_ordered_float",
    # Codec
    "WRAPPERS",
    "to_payload",
    "from_payload",
]
