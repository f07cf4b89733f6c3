"""
Float Bits — IEEE-754 форматы и битовые представления

Модуль описывает два поддерживаемых формата (binary32 и binary64) и даёт
битово-точные преобразования между Python float и целочисленным битовым
паттерном:
- FloatFormat: неизменяемые параметры формата (ширина, struct-коды, канонические паттерны)
- to_bits / from_bits: float <-> битовый паттерн (через struct)
- narrow: округление Python float до ближайшего значения формата
- is_nan / is_exact_zero: классификация значений

Python float всегда binary64. Значение формата binary32 хранится как Python
float, точно представимый в binary32 (аналог нативного f32).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_bits(from_bits(b)) == b для любого b формата binary64
2. narrow идемпотентен: narrow(narrow(x)) совпадает с narrow(x) побитово
3. narrow никогда не бросает исключений (переполнение → бесконечность со знаком)
"""

import math
import struct
from dataclasses import dataclass
from typing import Final


# =============================================================================
# ФОРМАТЫ
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """Параметры IEEE-754 формата фиксированной ширины.

    - width: ширина в битах (32 или 64)
    - struct_float / struct_uint: коды struct для float и беззнакового целого
    - canonical_nan_bits: стандартный quiet-NaN, которым хешируется любой NaN
    - zero_bits: паттерн, которым хешируются +0.0 и -0.0
    """

    name: str
    width: int
    struct_float: str
    struct_uint: str
    canonical_nan_bits: int
    zero_bits: int = 0

    @property
    def bit_mask(self) -> int:
        """Маска всех битов формата."""
        return (1 << self.width) - 1


BINARY32: Final[FloatFormat] = FloatFormat(
    name="binary32",
    width=32,
    struct_float=">f",
    struct_uint=">I",
    canonical_nan_bits=0x7FC00000,
)

BINARY64: Final[FloatFormat] = FloatFormat(
    name="binary64",
    width=64,
    struct_float=">d",
    struct_uint=">Q",
    canonical_nan_bits=0x7FF8000000000000,
)

# Ширина в битах → формат
FORMATS: Final[dict[int, FloatFormat]] = {
    BINARY32.width: BINARY32,
    BINARY64.width: BINARY64,
}


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_nan(value: float) -> bool:
    """True для любого NaN (любой payload, любой знак)."""
    return math.isnan(value)


def is_exact_zero(value: float) -> bool:
    """
    Проверка на точный ноль.

    В отличие от сравнений с толерантностью, здесь ноль только +0.0 и -0.0.
    Нативное сравнение уже считает -0.0 == 0.0.
    """
    return value == 0.0


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def narrow(value: float, fmt: FloatFormat = BINARY64) -> float:
    """
    Округление значения до ближайшего представимого в формате fmt.

    Для binary64 это тождество. Для binary32 поведение совпадает с нативным
    приведением f64 → f32: round-to-nearest, конечные значения за пределами
    диапазона становятся бесконечностью того же знака, NaN остаётся NaN,
    знак нуля сохраняется.

    Args:
        value: Исходное значение
        fmt: Целевой формат (default: BINARY64)

    Returns:
        Значение, точно представимое в fmt

    Examples:
        >>> narrow(0.1, BINARY32)
        0.10000000149011612
        >>> narrow(1e300, BINARY32)
        inf
        >>> narrow(0.1)
        0.1
    """
    try:
        packed = struct.pack(fmt.struct_float, value)
    except OverflowError:
        # Вне диапазона binary32: насыщение до бесконечности со знаком
        return math.copysign(math.inf, value)
    return struct.unpack(fmt.struct_float, packed)[0]


def to_bits(value: float, fmt: FloatFormat = BINARY64) -> int:
    """
    Битовый паттерн значения в формате fmt.

    Args:
        value: Значение (для binary32 предварительно округляется через narrow)
        fmt: Формат (default: BINARY64)

    Returns:
        Беззнаковое целое в диапазоне [0, 2**fmt.width)

    Examples:
        >>> hex(to_bits(1.0))
        '0x3ff0000000000000'
        >>> hex(to_bits(-0.0, BINARY32))
        '0x80000000'
    """
    packed = struct.pack(fmt.struct_float, narrow(value, fmt))
    return struct.unpack(fmt.struct_uint, packed)[0]


def from_bits(bits: int, fmt: FloatFormat = BINARY64) -> float:
    """
    Значение по битовому паттерну формата fmt.

    Для binary32 signaling-NaN может вернуться как quiet-NaN: это поведение
    платформенного преобразования float → double.

    Args:
        bits: Битовый паттерн
        fmt: Формат (default: BINARY64)

    Returns:
        Python float

    Raises:
        ValueError: Если bits вне диапазона [0, 2**fmt.width)
    """
    if bits < 0 or bits > fmt.bit_mask:
        raise ValueError(
            f"bits must be in [0, 2**{fmt.width}) for {fmt.name}, got {bits:#x}"
        )

    packed = struct.pack(fmt.struct_uint, bits)
    return struct.unpack(fmt.struct_float, packed)[0]
