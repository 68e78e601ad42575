"""Provides the HermiteKit API.

This class is a lightweight front end over the Hermite interpolation
engine. You provide the abscissas, the values and optionally the
derivatives at each abscissa as plain arrays, then choose the arithmetic
by name (e.g., ``"real"``, ``"complex"`` or ``"rational"``). Values are
wrapped into the matching numeric adapter on the way in and unwrapped into
NumPy arrays on the way out.

Adding number types
-------------------
New numeric adapters can be registered without modifying this class by
calling ``register_numeric`` (see example below).

Examples:
    Basic usage:

        >>> from hermitekit.hermite_kit import HermiteKit
        >>> kit = HermiteKit(x=[0.0, 1.0, 2.0], y=[1.0, 2.0, 5.0])
        >>> kit.coefficients().tolist()
        [1.0, 0.0, 1.0]

    Value and first derivative at one node:

        >>> HermiteKit(x=[0.0], y=[1.0], derivatives=[[2.0]]).coefficients().tolist()
        [1.0, 2.0]

    Registering a new number type:

        >>> from hermitekit.hermite_kit import register_numeric
        >>> from mypackage.intervals import IntervalNumber  # doctest: +SKIP
        >>> register_numeric(
        ...     name="interval",
        ...     cls=IntervalNumber,
        ...     aliases=("iv",),
        ... )  # doctest: +SKIP

Notes:
    - Numeric names are case/spacing/punctuation insensitive; aliases like
      ``"float"`` or ``"exact"`` are supported when registered.
    - For available canonical numeric names at runtime, call
      ``available_numerics()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping, Protocol, Sequence, Type

from hermitekit.interpolation.dataset import Node
from hermitekit.interpolation.events import EventHub
from hermitekit.interpolation.hermite_config import HermiteConfig
from hermitekit.interpolation.hermite_interpolation import HermiteInterpolation
from hermitekit.numeric.adapters import ComplexNumber, RationalNumber, RealNumber
from hermitekit.utils.concurrency import parallel_execute
from hermitekit.utils.types import Array, ArrayLike1D, Dataset, DerivativeSpec
from hermitekit.utils.validate import validate_derivatives, validate_samples

__all__ = [
    "NumericAdapter",
    "HermiteKit",
    "register_numeric",
    "available_numerics",
    "batch_coefficients",
]


class NumericAdapter(Protocol):
    """Protocol each registered numeric adapter class must satisfy.

    Besides implementing the numeric contract on its instances, the class
    must be able to wrap raw values and unwrap results into an array.
    """

    @classmethod
    def wrap(cls, value: Any) -> Any:
        """Wraps a single raw value."""
        ...

    @classmethod
    def wrap_many(cls, values: Iterable[Any]) -> list[Any]:
        """Wraps an iterable of raw values."""
        ...

    @classmethod
    def unwrap_many(cls, values: Iterable[Any]) -> Array:
        """Unwraps adapter values into a 1D NumPy array."""
        ...


# These are the built-in number types available in the package by default.
_NUMERIC_SPECS: list[tuple[str, Type[NumericAdapter], list[str]]] = [
    ("real",     RealNumber, ["float", "float64", "double"]),
    ("complex",  ComplexNumber, ["complex128", "cplx"]),
    ("rational", RationalNumber, ["exact", "fraction", "fractions"]),
]


def _norm(s: str) -> str:
    """Normalize a numeric name for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _numeric_maps() -> tuple[Mapping[str, Type[NumericAdapter]], tuple[str, ...]]:
    """Construct and cache lookup tables for numeric adapters.

    Returns:
        A pair ``(numeric_map, canonical_names)`` where ``numeric_map`` maps
        normalized names and aliases to adapter classes and
        ``canonical_names`` lists the sorted canonical names.
    """
    numeric_map: dict[str, Type[NumericAdapter]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _NUMERIC_SPECS:
        k = _norm(name)
        numeric_map[k] = cls
        canonical.add(k)
        for a in aliases:
            numeric_map[_norm(a)] = cls
    return numeric_map, tuple(sorted(canonical))


def register_numeric(
    name: str,
    cls: Type[NumericAdapter],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new numeric adapter.

    Adds a number type that can be referenced by name in :class:`HermiteKit`.
    The internal cache is cleared and rebuilt on the next lookup.

    Args:
        name: Canonical public name of the number type (e.g., "interval").
        cls: Adapter class implementing the NumericAdapter protocol.
        aliases: Additional accepted spellings.
    """
    _NUMERIC_SPECS.append((name, cls, list(aliases)))
    _numeric_maps.cache_clear()


def _resolve(numeric: str | Type[NumericAdapter]) -> Type[NumericAdapter]:
    """Resolve a numeric name or alias to an adapter class.

    Adapter classes are passed through unchanged.

    Args:
        numeric: Numeric name, alias or adapter class.

    Returns:
        Corresponding adapter class.
    """
    if not isinstance(numeric, str):
        return numeric
    numeric_map, canon = _numeric_maps()
    try:
        return numeric_map[_norm(numeric)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown numeric type '{numeric}'. Choose one of {{{opts}}}.") from None


def available_numerics() -> list[str]:
    """List canonical numeric names exposed by this API.

    Returns:
        List of numeric names.
    """
    _, canon = _numeric_maps()
    return list(canon)


class HermiteKit:
    """Array interface for Hermite interpolation.

    Example:
        >>> from hermitekit.hermite_kit import HermiteKit
        >>> kit = HermiteKit([0, 1], [0, 1], derivatives=[[0], [0]], numeric="rational")
        >>> [str(c) for c in kit.coefficients()]
        ['0', '0', '3', '-2']

    Attributes:
        x: Abscissas as a NumPy array.
        y: Values as a NumPy array.
        derivatives: One tuple of raw derivatives per node.
        adapter: The numeric adapter class used for the computation.
        engine: The underlying :class:`HermiteInterpolation`.
    """

    def __init__(
        self,
        x: ArrayLike1D,
        y: ArrayLike1D,
        derivatives: Sequence[DerivativeSpec] | None = None,
        *,
        numeric: str | Type[NumericAdapter] = "real",
        config: HermiteConfig | None = None,
        events: EventHub | None = None,
    ) -> None:
        """Initializes the kit.

        Args:
            x: 1D abscissas.
            y: 1D values, one per abscissa.
            derivatives: ``None`` for values only, otherwise one entry per
                abscissa: ``None``, a single first derivative, or the
                sequence ``f', f'', ...`` at that abscissa.
            numeric: Name, alias or adapter class of the arithmetic.
            config: Engine configuration.
            events: Optional event hub forwarded to the engine.

        Raises:
            ValueError: If the arrays are malformed or ``numeric`` is unknown.
        """
        self.x, self.y = validate_samples(x, y)
        self.derivatives = validate_derivatives(derivatives, self.x.shape[0])
        self.adapter = _resolve(numeric)

        wrap = self.adapter.wrap
        nodes = [
            Node(wrap(xi), wrap(yi), tuple(wrap(dk) for dk in d))
            for xi, yi, d in zip(self.x, self.y, self.derivatives)
        ]
        self.engine = HermiteInterpolation(nodes, config=config, events=events)

    def divided_differences(self) -> Array | None:
        """Computes the Newton-form coefficients.

        Returns:
            The divided differences as a NumPy array, or ``None`` if the kit
            has no nodes.
        """
        pre_coefficients = self.engine.compute_divided_differences()
        if pre_coefficients is None:
            return None
        return self.adapter.unwrap_many(pre_coefficients)

    def coefficients(self) -> Array:
        """Computes the monomial coefficients, lowest degree first.

        Returns:
            The coefficients as a NumPy array; empty if the kit has no nodes.
        """
        return self.adapter.unwrap_many(self.engine.compute_polynomial_coefficients())


def _kit_coefficients(
    dataset: Dataset,
    numeric: str | Type[NumericAdapter],
    config: HermiteConfig | None,
) -> Array:
    """Computes the coefficients of one dataset of a batch."""
    if len(dataset) not in (2, 3):
        raise ValueError(
            f"each dataset must be (x, y) or (x, y, derivatives); got length {len(dataset)}."
        )
    return HermiteKit(*dataset, numeric=numeric, config=config).coefficients()


def batch_coefficients(
    datasets: Sequence[Dataset],
    *,
    numeric: str | Type[NumericAdapter] = "real",
    config: HermiteConfig | None = None,
    n_workers: int = 1,
) -> list[Array]:
    """Computes the monomial coefficients of independent datasets.

    Args:
        datasets: Each entry is ``(x, y)`` or ``(x, y, derivatives)`` as
            accepted by :class:`HermiteKit`.
        numeric: Name, alias or adapter class of the arithmetic.
        config: Engine configuration shared by every dataset.
        n_workers: Number of threads. Values below 1 fall back to serial.

    Returns:
        One coefficient array per dataset, in input order.
    """
    adapter = _resolve(numeric)
    return parallel_execute(
        _kit_coefficients,
        [(dataset, adapter, config) for dataset in datasets],
        n_workers=n_workers,
    )
