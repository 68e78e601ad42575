"""Validation utilities for HermiteKit."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from hermitekit.utils.types import ArrayLike1D, DerivativeSpec

__all__ = [
    "validate_samples",
    "validate_derivatives",
]


def validate_samples(
    x: ArrayLike1D,
    y: ArrayLike1D,
) -> tuple[NDArray, NDArray]:
    """Validates sample abscissas and values.

    Requirements:
      - ``x`` and ``y`` are one-dimensional.
      - ``x`` and ``y`` have the same length.

    Duplicate abscissas are not rejected here; they are reported by the
    engine according to its duplicate policy.

    Args:
        x: 1D array-like of abscissas.
        y: 1D array-like of values with ``len(y) == len(x)``.

    Returns:
        Tuple of (x_array, y_array) as NumPy arrays. The dtype is inferred,
        so integers, floats, complex numbers and ``Fraction`` objects are
        all kept as given.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    x_arr = np.asarray(x)
    y_arr = np.asarray(y)

    if x_arr.ndim != 1:
        raise ValueError(f"x must be 1D; got ndim={x_arr.ndim}.")
    if y_arr.ndim != 1:
        raise ValueError(f"y must be 1D; got ndim={y_arr.ndim}.")
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    return x_arr, y_arr


def validate_derivatives(
    derivatives: Sequence[DerivativeSpec] | None,
    n_nodes: int,
) -> list[tuple[Any, ...]]:
    """Validates per-node derivative specifications.

    Args:
        derivatives: ``None`` for "values only", otherwise one entry per
            node. Each entry is ``None``, a single first derivative, or a
            1D sequence of derivatives ``f', f'', ...`` at that node.
        n_nodes: Number of nodes.

    Returns:
        One tuple of raw derivatives per node (possibly empty).

    Raises:
        ValueError: If the number of entries does not match ``n_nodes`` or
            an entry is not one-dimensional.
    """
    if derivatives is None:
        return [() for _ in range(n_nodes)]

    entries = list(derivatives)
    if len(entries) != n_nodes:
        raise ValueError(
            f"derivatives must have one entry per node; got {len(entries)} for {n_nodes} nodes."
        )

    out = []
    for i, entry in enumerate(entries):
        if entry is None:
            out.append(())
            continue
        arr = np.asarray(entry)
        if arr.ndim > 1:
            raise ValueError(f"derivatives[{i}] must be a scalar or 1D; got ndim={arr.ndim}.")
        out.append(tuple(arr.reshape(-1)))
    return out
