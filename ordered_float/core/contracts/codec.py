"""
Payload codec для OrderedFloat

Битово-точная сериализация обёртки в ordered_float контракт:
    {"width": 32 | 64, "bits": <raw IEEE-754 bit pattern>}

Канонизация не выполняется: NaN payload и знак нуля сохраняются.
"""

from typing import Any, Dict, Final

from ordered_float.core.contracts.validators import validate_ordered_float
from ordered_float.core.domain.ordered import F32, F64, OrderedFloat

# Ширина в битах → класс обёртки
WRAPPERS: Final[dict[int, type[OrderedFloat]]] = {
    F32.FORMAT.width: F32,
    F64.FORMAT.width: F64,
}


def to_payload(value: OrderedFloat) -> Dict[str, Any]:
    """
    Payload обёртки.

    Examples:
        >>> to_payload(F32(1.0))
        {'width': 32, 'bits': 1065353216}
    """
    return {"width": value.FORMAT.width, "bits": value.to_bits()}


def from_payload(data: Dict[str, Any]) -> OrderedFloat:
    """
    Обёртка из payload.

    Args:
        data: Payload по схеме ordered_float

    Returns:
        F32 или F64 в зависимости от width

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    validate_ordered_float(data)
    wrapper = WRAPPERS[int(data["width"])]
    return wrapper.from_bits(int(data["bits"]))
