"""
OrderedFloat — Тотально упорядоченная хешируемая обёртка над float

Immutable value-объект с одним полем value. Пригоден как ключ dict/set,
ключ сортировки и токен дедупликации там, где нативное сравнение float
(частичный порядок из-за NaN) неприменимо.

Отличия от нативного float только в обработке NaN и нуля:
- NaN == NaN (любой payload и знак)
- NaN < любого не-NaN, включая -inf
- hash(+0.0) == hash(-0.0), hash одинаков для всех NaN

Две ширины: F32 (binary32) и F64 (binary64). Логика общая, различаются
только параметры формата (FloatFormat). Экземпляры разных ширин никогда
не равны и не сравниваются.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, SupportsFloat

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ordered_float.core.math.float_bits import (
    BINARY32,
    BINARY64,
    FloatFormat,
    from_bits,
    is_nan,
    narrow,
    to_bits,
)
from ordered_float.core.math.total_order import total_cmp, total_eq, total_hash


# =============================================================================
# BASE
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class OrderedFloat:
    """
    Общая реализация обёртки, параметризованная форматом FORMAT.

    Напрямую не создаётся: используйте F32 или F64.
    Все операции тотальны и не бросают исключений на любом float.
    """

    value: float = 0.0

    FORMAT: ClassVar[FloatFormat]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", narrow(float(self.value), self.FORMAT))

    # -------------------------------------------------------------------------
    # Конструкторы и преобразования
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: SupportsFloat) -> "OrderedFloat":
        """Обёртка над нативным float."""
        return cls(float(value))

    @classmethod
    def from_bits(cls, bits: int) -> "OrderedFloat":
        """
        Обёртка по битовому паттерну формата.

        Raises:
            ValueError: Если bits вне диапазона формата
        """
        return cls(from_bits(bits, cls.FORMAT))

    def to_bits(self) -> int:
        """Битовый паттерн обёрнутого значения (как есть, без канонизации)."""
        return to_bits(self.value, self.FORMAT)

    def is_nan(self) -> bool:
        return is_nan(self.value)

    def __float__(self) -> float:
        return self.value

    # -------------------------------------------------------------------------
    # Равенство, порядок, хеш
    # -------------------------------------------------------------------------

    def cmp(self, other: "OrderedFloat") -> int:
        """
        Трёхзначное сравнение: -1, 0 или +1.

        Raises:
            TypeError: Если other не того же класса
        """
        if other.__class__ is not self.__class__:
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return total_cmp(self.value, other.value)

    def partial_cmp(self, other: "OrderedFloat") -> int:
        """Как cmp: для этого типа результат всегда определён."""
        return self.cmp(other)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return total_eq(self.value, other.value)  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return not total_eq(self.value, other.value)  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return total_cmp(self.value, other.value) < 0  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return total_cmp(self.value, other.value) <= 0  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return total_cmp(self.value, other.value) > 0  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return total_cmp(self.value, other.value) >= 0  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return total_hash(self.value, self.FORMAT)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Схема для использования обёртки как типа поля pydantic модели.

        Принимает экземпляр класса или всё, что pydantic принимает как float
        (NaN и бесконечности разрешены). Сериализуется в обычный float.
        """
        from_float_schema = core_schema.no_info_after_validator_function(
            cls, core_schema.float_schema(allow_inf_nan=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_float_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_float_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                float, when_used="always"
            ),
        )


# =============================================================================
# WIDTHS
# =============================================================================


class F32(OrderedFloat):
    """Обёртка над binary32. value округляется до ближайшего binary32."""

    FORMAT: ClassVar[FloatFormat] = BINARY32


class F64(OrderedFloat):
    """Обёртка над binary64 (нативный Python float)."""

    FORMAT: ClassVar[FloatFormat] = BINARY64
