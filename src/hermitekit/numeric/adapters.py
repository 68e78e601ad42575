"""Ready-made implementations of the :class:`~hermitekit.numeric.contract.Numeric` contract.

Examples:
---------
Exact interpolation through ``(0, 1), (1, 2), (2, 5)``::

    >>> from hermitekit.interpolation.hermite_interpolation import HermiteInterpolation
    >>> from hermitekit.numeric.adapters import RationalNumber
    >>> w = RationalNumber.wrap
    >>> engine = HermiteInterpolation([(w(0), w(1)), (w(1), w(2)), (w(2), w(5))])
    >>> RationalNumber.unwrap_many(engine.compute_polynomial_coefficients()).tolist()
    [Fraction(1, 1), Fraction(0, 1), Fraction(1, 1)]
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

__all__ = ["RealNumber", "ComplexNumber", "RationalNumber"]


class _ScalarAdapter:
    """Wraps a scalar and exposes it through the numeric contract.

    Subclasses define how raw values are coerced and which NumPy dtype is
    used when results are unwrapped into an array.
    """

    __slots__ = ("value",)

    dtype: Any = object

    def __init__(self, value: Any) -> None:
        self.value = self._coerce(value.value if isinstance(value, _ScalarAdapter) else value)

    @staticmethod
    def _coerce(value: Any) -> Any:
        raise NotImplementedError

    def _key(self) -> Any:
        return self.value

    def _raw(self, other: Any) -> Any:
        if isinstance(other, _ScalarAdapter):
            return other.value
        return self._coerce(other)

    def _new(self, value: Any) -> _ScalarAdapter:
        return type(self)(value)

    def cmp(self, other: Any) -> int:
        """Three-way comparison returning ``-1``, ``0`` or ``1``."""
        a = self._key()
        b = self._new(other)._key()
        return int(a > b) - int(a < b)

    def minus(self, other: Any) -> _ScalarAdapter:
        """Returns ``self - other``."""
        return self._new(self.value - self._raw(other))

    def plus(self, other: Any) -> _ScalarAdapter:
        """Returns ``self + other``."""
        return self._new(self.value + self._raw(other))

    def times(self, other: Any) -> _ScalarAdapter:
        """Returns ``self * other``."""
        return self._new(self.value * self._raw(other))

    def div(self, other: Any) -> _ScalarAdapter:
        """Returns ``self / other``; ``other`` may be a plain number."""
        return self._new(self.value / self._raw(other))

    def neg(self) -> _ScalarAdapter:
        """Returns ``-self``."""
        return self._new(-self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _ScalarAdapter):
            return bool(self.value == other.value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    @classmethod
    def wrap(cls, value: Any) -> _ScalarAdapter:
        """Wraps a single raw value."""
        return cls(value)

    @classmethod
    def wrap_many(cls, values: Iterable[Any]) -> list[_ScalarAdapter]:
        """Wraps every element of an iterable of raw values."""
        return [cls(v) for v in values]

    @classmethod
    def unwrap_many(cls, values: Iterable[_ScalarAdapter]) -> NDArray:
        """Unwraps adapter values into a one-dimensional NumPy array."""
        raw = [v.value for v in values]
        out = np.empty(len(raw), dtype=cls.dtype)
        out[:] = raw
        return out


class RealNumber(_ScalarAdapter):
    """Real arithmetic over ``numpy.float64``."""

    __slots__ = ()

    dtype = np.float64

    @staticmethod
    def _coerce(value: Any) -> np.float64:
        return np.float64(value)

    def __float__(self) -> float:
        return float(self.value)


class ComplexNumber(_ScalarAdapter):
    """Complex arithmetic over ``numpy.complex128``.

    Complex numbers carry no natural order, so :meth:`cmp` compares the
    ``(real, imag)`` pairs lexicographically. This is enough to group equal
    abscissas and to sort nodes deterministically.
    """

    __slots__ = ()

    dtype = np.complex128

    @staticmethod
    def _coerce(value: Any) -> np.complex128:
        return np.complex128(value)

    def _key(self) -> tuple[float, float]:
        return (float(self.value.real), float(self.value.imag))

    def __complex__(self) -> complex:
        return complex(self.value)


class RationalNumber(_ScalarAdapter):
    """Exact arithmetic over :class:`fractions.Fraction`.

    Floats are converted exactly (``0.1`` becomes its binary value), so pass
    strings such as ``"1/10"`` or integers when exact decimal input matters.
    """

    __slots__ = ()

    dtype = object

    @staticmethod
    def _coerce(value: Any) -> Fraction:
        if isinstance(value, Fraction):
            return value
        # NumPy scalars would leak fixed-width integers into the Fraction.
        if isinstance(value, np.integer):
            value = int(value)
        elif isinstance(value, np.floating):
            value = float(value)
        return Fraction(value)
