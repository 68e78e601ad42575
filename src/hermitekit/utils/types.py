"""Shared typing aliases for HermiteKit."""

from __future__ import annotations

from typing import Any, Sequence, TypeAlias

from numpy.typing import NDArray

Array: TypeAlias = NDArray[Any]

ArrayLike1D: TypeAlias = Sequence[Any] | NDArray[Any]
DerivativeSpec: TypeAlias = Sequence[Any] | NDArray[Any] | float | complex | None
Dataset: TypeAlias = tuple[ArrayLike1D, ArrayLike1D] | tuple[
    ArrayLike1D, ArrayLike1D, Sequence[DerivativeSpec] | None
]

__all__ = ["Array", "ArrayLike1D", "DerivativeSpec", "Dataset"]
