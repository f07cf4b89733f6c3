"""
Total Order — Тотальный порядок и согласованный хеш для float

Чистые функции над Python float, на которых построены обёртки F32/F64:
- total_eq: равенство, где NaN == NaN (любой payload и знак), +0.0 == -0.0
- total_cmp / partial_cmp: трёхзначное сравнение, всегда определённое
- hash_bits / total_hash: хеш, согласованный с total_eq

ПРАВИЛО ПОРЯДКА:
    Сначала нативное сравнение. Если оно не даёт результата (хотя бы один
    операнд NaN): NaN меньше любого не-NaN, NaN равен NaN.
    Следствие: NaN — единственный минимум, ниже -inf.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно одно из a < b, a == b, a > b для любой пары
2. total_eq(a, b) → total_hash(a) == total_hash(b)
3. Для не-NaN пар порядок совпадает с нативным
4. Ни одна функция не бросает исключений на любом float
"""

from ordered_float.core.math.float_bits import (
    BINARY64,
    FloatFormat,
    is_exact_zero,
    is_nan,
    to_bits,
)


# =============================================================================
# РАВЕНСТВО
# =============================================================================


def total_eq(a: float, b: float) -> bool:
    """
    Равенство с ослаблением для NaN.

    Отличается от нативного == только тем, что NaN равен любому NaN.

    Examples:
        >>> total_eq(float("nan"), -float("nan"))
        True
        >>> total_eq(0.0, -0.0)
        True
        >>> total_eq(float("nan"), 5.0)
        False
    """
    if is_nan(a) and is_nan(b):
        return True
    return a == b


# =============================================================================
# ПОРЯДОК
# =============================================================================


def total_cmp(a: float, b: float) -> int:
    """
    Трёхзначное сравнение в тотальном порядке.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если a == b (в смысле total_eq)
        +1 если a > b

    Examples:
        >>> total_cmp(1.0, 2.0)
        -1
        >>> total_cmp(float("nan"), float("-inf"))
        -1
        >>> total_cmp(-0.0, 0.0)
        0
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0

    # Нативный порядок не определён: хотя бы один операнд NaN
    a_nan = is_nan(a)
    b_nan = is_nan(b)
    if a_nan and not b_nan:
        return -1
    if b_nan and not a_nan:
        return 1
    return 0


def partial_cmp(a: float, b: float) -> int:
    """
    Частичное сравнение, которое для этого порядка всегда определено.

    Никогда не возвращает None: правило для NaN разрешает все случаи.
    """
    return total_cmp(a, b)


# =============================================================================
# ХЕШИРОВАНИЕ
# =============================================================================


def hash_bits(value: float, fmt: FloatFormat = BINARY64) -> int:
    """
    Битовый паттерн, по которому хешируется значение.

    Порядок приоритета:
    1. NaN → fmt.canonical_nan_bits (payload и знак игнорируются)
    2. +0.0 / -0.0 → fmt.zero_bits
    3. Иначе → собственный битовый паттерн значения

    Args:
        value: Значение
        fmt: Формат (default: BINARY64)

    Returns:
        Канонический битовый паттерн

    Examples:
        >>> hex(hash_bits(-float("nan")))
        '0x7ff8000000000000'
        >>> hash_bits(-0.0)
        0
    """
    if is_nan(value):
        return fmt.canonical_nan_bits
    if is_exact_zero(value):
        return fmt.zero_bits
    return to_bits(value, fmt)


def total_hash(value: float, fmt: FloatFormat = BINARY64) -> int:
    """Хеш, согласованный с total_eq."""
    return hash(hash_bits(value, fmt))
