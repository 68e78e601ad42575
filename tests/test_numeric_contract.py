"""Tests for hermitekit.numeric.contract."""

import pytest

from hermitekit.numeric.adapters import RealNumber
from hermitekit.numeric.contract import (
    DIVIDED_DIFFERENCE_OPS,
    POLYNOMIAL_OPS,
    Numeric,
    require_numeric,
)


class _DividingOnly:
    """A number type that only supports the divided-difference operations."""

    def cmp(self, other):
        return 0

    def minus(self, other):
        return self

    def div(self, other):
        return self


def test_polynomial_ops_extend_divided_difference_ops():
    """Tests that the monomial path needs a superset of the table operations."""
    assert set(DIVIDED_DIFFERENCE_OPS) == {"cmp", "minus", "div"}
    assert set(POLYNOMIAL_OPS) == {"cmp", "minus", "div", "plus", "times", "neg"}


def test_require_numeric_accepts_adapter():
    """Tests that an adapter passes the full check."""
    require_numeric(RealNumber(1.0), POLYNOMIAL_OPS, where="test")


def test_require_numeric_rejects_plain_float():
    """Tests that a plain float is rejected with the missing operations listed."""
    with pytest.raises(TypeError, match="cmp, minus, div"):
        require_numeric(1.0, DIVIDED_DIFFERENCE_OPS, where="node 0 x")


def test_require_numeric_checks_only_requested_ops():
    """Tests that a partial implementation passes the partial check only."""
    value = _DividingOnly()
    require_numeric(value, DIVIDED_DIFFERENCE_OPS, where="test")
    with pytest.raises(TypeError, match="plus, times, neg"):
        require_numeric(value, POLYNOMIAL_OPS, where="test")
    assert not isinstance(value, Numeric)
