"""
Keys — использование OrderedFloat как ключа сортировки и дедупликации

Тонкие помощники над сырыми float: обёртка применяется только как ключ,
возвращаются исходные значения (без округления и канонизации).
"""

from typing import Iterable

from ordered_float.core.domain.ordered import F64, OrderedFloat


def total_sorted(
    values: Iterable[float],
    *,
    wrapper: type[OrderedFloat] = F64,
    reverse: bool = False,
) -> list[float]:
    """
    Стабильная сортировка в тотальном порядке обёртки.

    NaN идут первыми (последними при reverse=True). +0.0 и -0.0 равны,
    их взаимный порядок сохраняется как во входе.

    Args:
        values: Исходные значения
        wrapper: Класс обёртки (F32 или F64, default: F64)
        reverse: Обратный порядок

    Returns:
        Новый отсортированный список

    Examples:
        >>> total_sorted([1.0, float("nan"), -1.0])
        [nan, -1.0, 1.0]
    """
    return sorted(values, key=wrapper, reverse=reverse)


def total_unique(
    values: Iterable[float],
    *,
    wrapper: type[OrderedFloat] = F64,
) -> list[float]:
    """
    Дедупликация с сохранением порядка по равенству обёртки.

    Сохраняется первое вхождение. Все NaN схлопываются в один элемент,
    +0.0 и -0.0 тоже.

    Args:
        values: Исходные значения
        wrapper: Класс обёртки (F32 или F64, default: F64)

    Returns:
        Новый список без дубликатов
    """
    seen: set[OrderedFloat] = set()
    result: list[float] = []

    for value in values:
        key = wrapper(value)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)

    return result


def total_min(values: Iterable[float], *, wrapper: type[OrderedFloat] = F64) -> float:
    """
    Минимум в тотальном порядке (любой NaN во входе и будет минимумом).

    Raises:
        ValueError: Если values пуст
    """
    items = list(values)
    if not items:
        raise ValueError("total_min() arg is an empty sequence")
    return min(items, key=wrapper)


def total_max(values: Iterable[float], *, wrapper: type[OrderedFloat] = F64) -> float:
    """
    Максимум в тотальном порядке (NaN возвращается, только если во входе одни NaN).

    Raises:
        ValueError: Если values пуст
    """
    items = list(values)
    if not items:
        raise ValueError("total_max() arg is an empty sequence")
    return max(items, key=wrapper)
