"""The numeric capability contract of the interpolation engine.

The engine never assumes a concrete number type. Every abscissa, value
and derivative handed to it must provide the small set of operations
declared by :class:`Numeric`. Division must also accept a plain ``int``
whenever derivatives of order two or higher are supplied, since those are
divided by a factorial.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

__all__ = [
    "Numeric",
    "DIVIDED_DIFFERENCE_OPS",
    "POLYNOMIAL_OPS",
    "require_numeric",
]

DIVIDED_DIFFERENCE_OPS: tuple[str, ...] = ("cmp", "minus", "div")
POLYNOMIAL_OPS: tuple[str, ...] = DIVIDED_DIFFERENCE_OPS + ("plus", "times", "neg")


@runtime_checkable
class Numeric(Protocol):
    """Protocol each value handed to the engine must satisfy.

    It serves only as a structural type check and carries no runtime
    behavior. The adapters in :mod:`hermitekit.numeric.adapters` are
    ready-made implementations for floats, complex numbers and fractions.
    """

    def cmp(self, other: Numeric) -> int:
        """Three-way comparison returning ``-1``, ``0`` or ``1``."""
        ...

    def minus(self, other: Numeric) -> Numeric:
        """Returns ``self - other``."""
        ...

    def div(self, other: Numeric | int) -> Numeric:
        """Returns ``self / other``; ``other`` may be a plain ``int``."""
        ...

    def plus(self, other: Numeric) -> Numeric:
        """Returns ``self + other``."""
        ...

    def times(self, other: Numeric) -> Numeric:
        """Returns ``self * other``."""
        ...

    def neg(self) -> Numeric:
        """Returns ``-self``."""
        ...


def require_numeric(value: Any, ops: Iterable[str], *, where: str) -> None:
    """Raises if ``value`` lacks any of the operations in ``ops``.

    Args:
        value: Value to check.
        ops: Names of the methods the value must provide.
        where: Context string for error messages.

    Raises:
        TypeError: If a required operation is missing or not callable.
    """
    missing = [op for op in ops if not callable(getattr(value, op, None))]
    if missing:
        raise TypeError(
            f"{where}: value {value!r} of type {type(value).__name__} does not "
            f"provide the numeric operation(s) {', '.join(missing)}. Wrap plain "
            "numbers with an adapter from hermitekit.numeric.adapters."
        )
