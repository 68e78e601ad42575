"""Generalised divided differences with confluent (repeated) abscissas.

The table is the classical triangle

.. code-block:: text

    f[x0]   f[x0,x1]   f[x0,x1,x2]   ...
    f[x1]   f[x1,x2]   ...
    f[x2]   ...

built column by column. Where the two abscissas of a cell coincide the
ratio is undefined and the cell is instead the derivative of the matching
order divided by its factorial,

.. math::

    f[x_i, \\ldots, x_{i+j}] = \\frac{f^{(j)}(x_i)}{j!}
    \\quad \\text{if } x_i = x_{i+j}.

Inside one column every confluent cell has the same order ``j``, and the
columns are visited in increasing ``j``.

The top row is the sequence of Newton-form coefficients.
"""

from __future__ import annotations

from typing import Any, Sequence

from hermitekit.interpolation.context import CallContext
from hermitekit.interpolation.dataset import ExpandedNode
from hermitekit.interpolation.errors import ConfluenceError
from hermitekit.interpolation.events import StepEvent

__all__ = ["confluent_result", "build_divided_differences"]


def confluent_result(node: ExpandedNode, order: int, ctx: CallContext) -> Any:
    """Returns ``f^(order)(x) / order!`` for the node's abscissa.

    Args:
        node: The node at the top of the confluent cell.
        order: Derivative order, at least ``1``.
        ctx: Call context holding the factorial memo.

    Returns:
        ``d[0]`` for ``order == 1``, otherwise ``d[order - 1].div(order!)``.

    Raises:
        ConfluenceError: If the node carries fewer than ``order`` derivatives.
    """
    if order > len(node.d):
        raise ConfluenceError(
            f"Derivative of order {order} is needed at x={node.x!r} (node "
            f"{node.source_index}) but only {len(node.d)} were supplied. "
            "This happens when distinct nodes share an abscissa."
        )
    if order == 1:
        return node.d[0]
    return node.d[order - 1].div(ctx.factorial(order))


def _step(
    expanded: Sequence[ExpandedNode],
    prev_column: Sequence[Any],
    i: int,
    j: int,
    ctx: CallContext,
) -> Any:
    """Computes cell ``(i, j)`` of the table from the previous column."""
    x_i = expanded[i].x
    x_j = expanded[j].x

    if x_i.cmp(x_j) == 0:
        result = confluent_result(expanded[i], j - i, ctx)
    else:
        dividend = prev_column[i + 1].minus(prev_column[i])
        divisor = x_j.minus(x_i)
        result = dividend.div(divisor)

    ctx.emit("step", StepEvent(row=i, col=j, result=result))
    return result


def build_divided_differences(ctx: CallContext) -> list[Any]:
    """Builds the divided-difference table of ``ctx.expanded``.

    Only the previous column is kept while the next one is built, so the
    memory use is linear in the number of expanded nodes and the work is
    quadratic.

    Args:
        ctx: Call context whose ``expanded`` list is non-empty and sorted.

    Returns:
        The Newton-form coefficients ``f[x0], f[x0,x1], ..., f[x0..x_{n-1}]``.
    """
    expanded = ctx.expanded
    n = len(expanded)

    prev_column = [node.y for node in expanded]
    pre_coefficients = [prev_column[0]]

    for j in range(1, n):
        column = [_step(expanded, prev_column, i, i + j, ctx) for i in range(n - j)]
        pre_coefficients.append(column[0])
        prev_column = column

    return pre_coefficients
