"""Generalised Hermite (osculating) polynomial interpolation.

:class:`HermiteInterpolation` interpolates values and, where given,
derivatives at a set of nodes. It works over any number type implementing
:class:`~hermitekit.numeric.contract.Numeric`, so the same engine serves
floating point, complex and exact rational arithmetic.

Examples:
---------
The parabola through ``(0, 1), (1, 2), (2, 5)``::

    >>> from hermitekit.interpolation.hermite_interpolation import HermiteInterpolation
    >>> from hermitekit.numeric.adapters import RationalNumber as Q
    >>> engine = HermiteInterpolation([(Q(0), Q(1)), (Q(1), Q(2)), (Q(2), Q(5))])
    >>> [c.value for c in engine.compute_divided_differences()]
    [Fraction(1, 1), Fraction(1, 1), Fraction(1, 1)]
    >>> [c.value for c in engine.compute_polynomial_coefficients()]
    [Fraction(1, 1), Fraction(0, 1), Fraction(1, 1)]

A single node with value ``1`` and first derivative ``2``::

    >>> engine = HermiteInterpolation([{"x": Q(0), "y": Q(1), "d": [Q(2)]}])
    >>> [c.value for c in engine.compute_polynomial_coefficients()]
    [Fraction(1, 1), Fraction(2, 1)]
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from hermitekit.interpolation.context import CallContext
from hermitekit.interpolation.dataset import (
    Node,
    check_node_values,
    expand_nodes,
    find_duplicates,
    normalize_nodes,
    sort_expanded,
)
from hermitekit.interpolation.divided_differences import build_divided_differences
from hermitekit.interpolation.errors import ObservationUnavailable
from hermitekit.interpolation.events import EventHub
from hermitekit.interpolation.hermite_config import HermiteConfig
from hermitekit.interpolation.monomial import newton_to_monomial
from hermitekit.logger import hermitekit_logger
from hermitekit.numeric.contract import DIVIDED_DIFFERENCE_OPS, POLYNOMIAL_OPS

__all__ = ["HermiteInterpolation"]


class HermiteInterpolation:
    """Hermite interpolation engine over a caller-supplied number type.

    All scratch state lives in a :class:`CallContext` created per call, so
    one instance may serve concurrent or reentrant calls. The instance
    itself only holds the caller's nodes, the configuration and the
    optional event hub.

    Attributes:
        nodes: The interpolation nodes. May be reassigned between calls;
            entries are normalised into :class:`Node` on assignment.
        config: The :class:`HermiteConfig` in use.
        events: The :class:`EventHub` receiving events, or ``None``.
    """

    def __init__(
        self,
        nodes: Iterable[Any] = (),
        *,
        config: HermiteConfig | None = None,
        events: EventHub | None = None,
    ) -> None:
        """Initialises the engine.

        Args:
            nodes: Interpolation nodes. Each entry is a :class:`Node`, a
                mapping with keys ``"x"``, ``"y"`` and optionally ``"d"``, or
                a tuple ``(x, y)`` / ``(x, y, d)``.
            config: Engine configuration. Defaults to ``HermiteConfig()``.
            events: Optional hub receiving diagnostic events.
        """
        self.nodes = nodes
        self.config = config if config is not None else HermiteConfig()
        self.events = events

    @property
    def nodes(self) -> list[Node]:
        return self._nodes

    @nodes.setter
    def nodes(self, entries: Iterable[Any]) -> None:
        self._nodes = normalize_nodes(entries)

    def attach_events(self, events: EventHub | None = None) -> EventHub:
        """Configures an event hub, creating one if none is given."""
        self.events = events if events is not None else EventHub()
        return self.events

    def subscribe(self, event: str, callback: Callable[[Any], None]) -> Callable[[Any], None]:
        """Subscribes ``callback`` to ``event`` on the configured hub.

        Raises:
            ObservationUnavailable: If no event hub has been configured.
            ValueError: If ``event`` is not a known event name.
        """
        if self.events is None:
            raise ObservationUnavailable(
                "HermiteInterpolation has no event hub. Pass events=EventHub() "
                "or call attach_events() before subscribing."
            )
        return self.events.subscribe(event, callback)

    def compute_divided_differences(self) -> list[Any] | None:
        """Computes the Newton-form coefficients.

        Returns:
            ``f[x0], f[x0,x1], ..., f[x0..x_{n-1}]`` over the expanded nodes,
            or ``None`` when there are no nodes (nothing was computed).

        Raises:
            TypeError: If a node value lacks ``cmp``, ``minus`` or ``div``.
            DuplicateError: If abscissas repeat and the policy is ``"raise"``.
            ConfluenceError: If repeated abscissas leave a confluent cell
                without the derivative it needs.
        """
        if not self._nodes:
            return None

        with CallContext(events=self.events) as ctx:
            self._prepare(ctx, DIVIDED_DIFFERENCE_OPS)
            return build_divided_differences(ctx)

    def compute_polynomial_coefficients(self) -> list[Any]:
        """Computes the monomial-basis coefficients, lowest degree first.

        Returns:
            ``[c0, c1, ..., c_{n-1}]`` with ``p(x) = sum(c_k * x**k)``, where
            ``n`` is the number of expanded nodes; an empty list when there
            are no nodes.

        Raises:
            TypeError: If a node value lacks one of the numeric operations.
            DuplicateError: If abscissas repeat and the policy is ``"raise"``.
            ConfluenceError: If repeated abscissas leave a confluent cell
                without the derivative it needs.
        """
        if not self._nodes:
            return []

        with CallContext(events=self.events) as ctx:
            self._prepare(ctx, POLYNOMIAL_OPS)
            pre_coefficients = build_divided_differences(ctx)
            ctx.emit("pre_coefficients", tuple(pre_coefficients))
            coefficients = newton_to_monomial(pre_coefficients, ctx)

        hermitekit_logger.debug(
            f"Computed degree-{len(coefficients) - 1} interpolating polynomial "
            f"from {len(self._nodes)} nodes."
        )
        return coefficients

    def _prepare(self, ctx: CallContext, ops: tuple[str, ...]) -> None:
        """Validates, checks for duplicates, expands and sorts the nodes."""
        nodes = self._nodes
        if self.config.check_numeric:
            check_node_values(nodes, ops)

        duplicates = find_duplicates(nodes)
        for error in duplicates:
            ctx.emit("error", error)
            if not self.config.strict:
                hermitekit_logger.warning(
                    f"{error.message}. Continuing with the duplicated node; "
                    "the result is unlikely to be meaningful."
                )
        if duplicates and self.config.strict:
            raise duplicates[0]

        ctx.expanded = sort_expanded(expand_nodes(nodes))
        hermitekit_logger.debug(
            f"Prepared {len(ctx.expanded)} expanded nodes from {len(nodes)} nodes."
        )
        ctx.emit("data_prepared", tuple(ctx.expanded))
