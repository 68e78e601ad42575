"""Conversion of Newton-form coefficients into the monomial basis.

The Newton form

.. math::

    p(x) = a_0 + a_1 (x - x_0) + a_2 (x - x_0)(x - x_1) + \\ldots

is expanded by keeping the running basis product
:math:`\\prod_{t<i} (x - x_t)` in monomial form and multiplying it by one
more linear factor per term (synthetic expansion).
"""

from __future__ import annotations

from typing import Any, Sequence

from hermitekit.interpolation.context import CallContext

__all__ = ["newton_to_monomial"]


def newton_to_monomial(pre_coefficients: Sequence[Any], ctx: CallContext) -> list[Any]:
    """Expands Newton-form coefficients into monomial coefficients.

    The basis product is monic, so only its lower-degree coefficients are
    stored. Its leading ``1`` multiplied by ``a_i`` is ``a_i`` itself, which
    is why the output starts as a copy of the Newton coefficients.

    Args:
        pre_coefficients: Newton-form coefficients ``a_0, ..., a_{n-1}``.
        ctx: Call context whose ``expanded`` nodes supply the abscissas
            ``x_0, ..., x_{n-2}``.

    Returns:
        Coefficients ``c_0, ..., c_{n-1}`` of ``sum(c_k * x**k)``, lowest
        degree first. Empty input gives an empty list.
    """
    coefficients = list(pre_coefficients)
    basis: list[Any] = []

    for i in range(1, len(coefficients)):
        root = ctx.expanded[i - 1].x.neg()
        weight = pre_coefficients[i]

        # basis * (x + root)
        previous = basis
        basis = [c.times(root) for c in previous]
        basis.append(root)
        for k, c in enumerate(previous):
            basis[k + 1] = basis[k + 1].plus(c)

        for k, c in enumerate(basis):
            coefficients[k] = weight.times(c).plus(coefficients[k])

    ctx.emit("coefficients", tuple(coefficients))
    return coefficients
