"""Tests for hermitekit.numeric.adapters."""

from fractions import Fraction

import numpy as np
import pytest

from hermitekit.numeric.adapters import ComplexNumber, RationalNumber, RealNumber
from hermitekit.numeric.contract import POLYNOMIAL_OPS, Numeric


@pytest.mark.parametrize("cls", [RealNumber, ComplexNumber, RationalNumber])
def test_adapters_satisfy_numeric_protocol(cls):
    """Tests that every adapter instance is recognised as Numeric."""
    value = cls(3)
    assert isinstance(value, Numeric)
    for op in POLYNOMIAL_OPS:
        assert callable(getattr(value, op))


def test_real_arithmetic():
    """Tests the basic operations of RealNumber."""
    a, b = RealNumber(6.0), RealNumber(1.5)
    assert a.plus(b) == RealNumber(7.5)
    assert a.minus(b) == RealNumber(4.5)
    assert a.times(b) == RealNumber(9.0)
    assert a.div(b) == RealNumber(4.0)
    assert a.neg() == RealNumber(-6.0)
    assert isinstance(a.value, np.float64)


def test_real_div_accepts_plain_int():
    """Tests that division by a plain int (a factorial) is supported."""
    assert RealNumber(12.0).div(6) == RealNumber(2.0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1.0, 2.0, -1),
        (2.0, 2.0, 0),
        (3.0, 2.0, 1),
    ],
)
def test_real_cmp(a, b, expected):
    """Tests that cmp returns a plain three-way int."""
    result = RealNumber(a).cmp(RealNumber(b))
    assert result == expected
    assert type(result) is int


def test_complex_cmp_is_lexicographic():
    """Tests that complex cmp orders by real part first, then imaginary part."""
    assert ComplexNumber(1 + 5j).cmp(ComplexNumber(2 + 0j)) == -1
    assert ComplexNumber(1 + 1j).cmp(ComplexNumber(1 + 2j)) == -1
    assert ComplexNumber(1 + 2j).cmp(ComplexNumber(1 + 2j)) == 0
    assert ComplexNumber(1 + 3j).cmp(ComplexNumber(1 + 2j)) == 1


def test_complex_arithmetic():
    """Tests the basic operations of ComplexNumber."""
    a, b = ComplexNumber(1 + 2j), ComplexNumber(3 - 1j)
    assert complex(a.plus(b)) == 4 + 1j
    assert complex(a.times(b)) == (1 + 2j) * (3 - 1j)
    assert complex(a.div(2)) == 0.5 + 1j


def test_rational_is_exact():
    """Tests that RationalNumber keeps exact fractions."""
    third = RationalNumber(1).div(3)
    assert third.value == Fraction(1, 3)
    assert third.times(RationalNumber(3)).value == 1
    assert RationalNumber("1/10").plus(RationalNumber("2/10")).value == Fraction(3, 10)


def test_rational_converts_numpy_scalars_to_python_numbers():
    """Tests that NumPy integers do not end up inside the Fraction."""
    value = RationalNumber(np.int64(7)).value
    assert value == Fraction(7)
    assert type(value.numerator) is int


def test_wrap_and_unwrap_many():
    """Tests the array helpers of the adapters."""
    wrapped = RealNumber.wrap_many([1, 2, 3])
    assert wrapped == [RealNumber(1.0), RealNumber(2.0), RealNumber(3.0)]

    out = RealNumber.unwrap_many(wrapped)
    assert out.dtype == np.float64
    np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])

    exact = RationalNumber.unwrap_many(RationalNumber.wrap_many(["1/2", "1/3"]))
    assert exact.dtype == object
    assert exact.tolist() == [Fraction(1, 2), Fraction(1, 3)]

    assert ComplexNumber.unwrap_many([]).shape == (0,)


def test_wrapping_an_adapter_keeps_its_value():
    """Tests that wrapping an adapter instance does not nest adapters."""
    assert RationalNumber(RationalNumber("2/3")).value == Fraction(2, 3)


def test_repr_and_hash():
    """Tests repr and hashing of adapter values."""
    assert repr(RationalNumber(2)) == "RationalNumber(Fraction(2, 1))"
    assert len({RealNumber(1.0), RealNumber(1.0)}) == 1
