"""
Property-тесты тотального порядка для F32 и F64

Инварианты:
- Ровно одно из <, ==, > для любой пары
- Транзитивность и антисимметричность
- a == b → hash(a) == hash(b)
- NaN — единственный минимум
- Для не-NaN пар порядок совпадает с нативным
- Битово-точный round-trip unwrap → wrap
"""

import math

from hypothesis import given
from hypothesis import strategies as st

from ordered_float.core.domain import F32, F64, total_sorted
from ordered_float.core.math.float_bits import BINARY32, from_bits, to_bits

# NaN binary64: экспонента из единиц, ненулевая мантисса, любой знак
nan_bits_64 = st.builds(
    lambda sign, mantissa: (sign << 63) | (0x7FF << 52) | mantissa,
    st.integers(0, 1),
    st.integers(1, (1 << 52) - 1),
)

# Quiet-NaN binary32 (старший бит мантиссы установлен), любой знак
quiet_nan_bits_32 = st.builds(
    lambda sign, payload: (sign << 31) | (0xFF << 23) | (1 << 22) | payload,
    st.integers(0, 1),
    st.integers(0, (1 << 22) - 1),
)

f64_values = st.one_of(st.floats(), nan_bits_64.map(from_bits)).map(F64)
f32_values = st.one_of(
    st.floats(width=32),
    quiet_nan_bits_32.map(lambda bits: from_bits(bits, BINARY32)),
).map(F32)
wrapped = st.one_of(f64_values, f32_values)


# =============================================================================
# ПОРЯДОК
# =============================================================================


@given(f64_values, f64_values)
def test_f64_exactly_one_relation(a, b):
    assert [a < b, a == b, a > b].count(True) == 1


@given(f32_values, f32_values)
def test_f32_exactly_one_relation(a, b):
    assert [a < b, a == b, a > b].count(True) == 1


@given(f64_values, f64_values)
def test_f64_antisymmetric(a, b):
    assert a.cmp(b) == -b.cmp(a)


@given(f64_values, f64_values, f64_values)
def test_f64_transitive(a, b, c):
    if a <= b and b <= c:
        assert a <= c


@given(f32_values, f32_values, f32_values)
def test_f32_transitive(a, b, c):
    if a <= b and b <= c:
        assert a <= c


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_native_order_preserved(x, y):
    assert (F64(x) < F64(y)) == (x < y)
    assert (F64(x) == F64(y)) == (x == y)
    assert (F64(x) > F64(y)) == (x > y)


@given(nan_bits_64, st.floats(allow_nan=False))
def test_nan_is_minimum(bits, x):
    nan = F64.from_bits(bits)
    assert nan < F64(x)
    assert F64(x) > nan


# =============================================================================
# ХЕШ
# =============================================================================


@given(wrapped, wrapped)
def test_hash_consistent_with_eq(a, b):
    if a == b:
        assert hash(a) == hash(b)


@given(nan_bits_64, nan_bits_64)
def test_all_f64_nans_equal_and_hash_equal(first, second):
    a = F64.from_bits(first)
    b = F64.from_bits(second)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@given(quiet_nan_bits_32, quiet_nan_bits_32)
def test_all_f32_nans_equal_and_hash_equal(first, second):
    a = F32.from_bits(first)
    b = F32.from_bits(second)
    assert a == b
    assert hash(a) == hash(b)


# =============================================================================
# ROUND-TRIP И ОТОБРАЖЕНИЕ
# =============================================================================


@given(st.integers(0, (1 << 64) - 1))
def test_f64_bits_round_trip(bits):
    wrapped_value = F64.from_bits(bits)
    assert wrapped_value.to_bits() == bits
    assert F64(float(wrapped_value)).to_bits() == bits


@given(st.floats(width=32, allow_nan=False))
def test_f32_round_trip(x):
    assert to_bits(float(F32(x))) == to_bits(x)


@given(f32_values)
def test_f32_unwrap_rewrap(value):
    assert F32(float(value)).to_bits() == value.to_bits()


@given(wrapped)
def test_display_passthrough(value):
    assert str(value) == str(float(value))


@given(st.lists(st.floats()))
def test_sorted_is_monotone(values):
    result = [F64(x) for x in total_sorted(values)]
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert len(result) == len(values)
    assert sum(math.isnan(x) for x in values) == sum(v.is_nan() for v in result)
