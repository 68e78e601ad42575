"""Dataset preparation for Hermite interpolation.

Turns the caller's nodes into the working list consumed by the
divided-difference table:

1. every entry is normalised into a :class:`Node`;
2. distinct nodes sharing an abscissa are reported as :class:`DuplicateError`;
3. each node is replicated once per derivative it carries;
4. the replicas are stable-sorted by abscissa.

The sort must be stable: replicas of one node enter the sort in replica
order and have to leave it that way, because the confluent branch of the
table reads the derivative order off the position inside the group.
:func:`sorted` is guaranteed stable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from itertools import combinations
from typing import Any, Iterable

import numpy as np

from hermitekit.interpolation.errors import DuplicateError
from hermitekit.numeric.contract import require_numeric

__all__ = [
    "Node",
    "ExpandedNode",
    "normalize_derivatives",
    "normalize_node",
    "normalize_nodes",
    "check_node_values",
    "find_duplicates",
    "expand_nodes",
    "sort_expanded",
]


def normalize_derivatives(d: Any) -> tuple:
    """Normalises a derivative specification into a tuple.

    ``None`` means "value only", a list, tuple or NumPy array is taken as the
    ordered derivatives, and anything else is a single first derivative.
    """
    if d is None:
        return ()
    if isinstance(d, np.ndarray):
        return tuple(d.ravel())
    if isinstance(d, Sequence) and not isinstance(d, (str, bytes)):
        return tuple(d)
    return (d,)


@dataclass(frozen=True)
class Node:
    """An interpolation node: abscissa, value and raw derivatives.

    ``d[k]`` is the ``(k+1)``-th derivative at ``x``, not yet divided by a
    factorial.
    """

    x: Any
    y: Any
    d: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "d", normalize_derivatives(self.d))

    @property
    def multiplicity(self) -> int:
        """Number of table rows the node occupies."""
        return 1 + len(self.d)


@dataclass(frozen=True)
class ExpandedNode:
    """One replica of a node in the working list.

    ``replica`` is 0 for the value and ``k`` for the ``k``-th derivative;
    ``source_index`` is the node's position in the caller's list.
    """

    x: Any
    y: Any
    d: tuple
    replica: int
    source_index: int


def normalize_node(entry: Any, index: int) -> Node:
    """Converts one caller entry into a :class:`Node`.

    Accepted forms are a :class:`Node`, a mapping with keys ``"x"``, ``"y"``
    and optionally ``"d"``, a tuple ``(x, y)`` or ``(x, y, d)``, or any object
    exposing ``x`` and ``y`` attributes (and optionally ``d``).

    Raises:
        TypeError: If the entry has none of these forms.
        ValueError: If a tuple entry has the wrong length.
    """
    if isinstance(entry, Node):
        return entry
    if isinstance(entry, Mapping):
        try:
            return Node(entry["x"], entry["y"], entry.get("d"))
        except KeyError as exc:
            raise TypeError(f"node {index} is missing the key {exc.args[0]!r}.") from None
    if isinstance(entry, tuple):
        if len(entry) not in (2, 3):
            raise ValueError(
                f"node {index} must be (x, y) or (x, y, d); got a tuple of length {len(entry)}."
            )
        return Node(*entry)
    if hasattr(entry, "x") and hasattr(entry, "y"):
        return Node(entry.x, entry.y, getattr(entry, "d", None))
    raise TypeError(
        f"node {index} must be a Node, a mapping, an (x, y[, d]) tuple or expose "
        f"x and y attributes; got {type(entry).__name__}."
    )


def normalize_nodes(entries: Iterable[Any]) -> list[Node]:
    """Normalises every caller entry; see :func:`normalize_node`."""
    if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
        raise TypeError(f"nodes must be an iterable of nodes; got {type(entries).__name__}.")
    return [normalize_node(entry, i) for i, entry in enumerate(entries)]


def check_node_values(nodes: Sequence[Node], ops: Iterable[str]) -> None:
    """Checks every abscissa, value and derivative against the numeric contract.

    Raises:
        TypeError: If a value lacks one of ``ops``.
    """
    ops = tuple(ops)
    for i, node in enumerate(nodes):
        require_numeric(node.x, ops, where=f"node {i} x")
        require_numeric(node.y, ops, where=f"node {i} y")
        for k, dk in enumerate(node.d):
            require_numeric(dk, ops, where=f"node {i} d[{k}]")


def _compare_x(left: Any, right: Any) -> int:
    return left.x.cmp(right.x)


def find_duplicates(nodes: Sequence[Node]) -> list[DuplicateError]:
    """Finds every pair of distinct nodes with equal abscissas.

    Equality is decided by the numeric type's ``cmp``. One error is
    produced per pair, with ``first_index < second_index``, ordered by
    ``(first_index, second_index)``.
    """
    order = sorted(range(len(nodes)), key=cmp_to_key(lambda a, b: _compare_x(nodes[a], nodes[b])))

    errors = []
    start = 0
    for stop in range(1, len(order) + 1):
        if stop < len(order) and nodes[order[stop]].x.cmp(nodes[order[start]].x) == 0:
            continue
        group = sorted(order[start:stop])
        for first, second in combinations(group, 2):
            errors.append(DuplicateError(nodes[second].x, first, second))
        start = stop

    errors.sort(key=lambda e: (e.first_index, e.second_index))
    return errors


def expand_nodes(nodes: Sequence[Node]) -> list[ExpandedNode]:
    """Replicates each node once for its value and once per derivative."""
    return [
        ExpandedNode(node.x, node.y, node.d, replica, index)
        for index, node in enumerate(nodes)
        for replica in range(node.multiplicity)
    ]


def sort_expanded(expanded: Sequence[ExpandedNode]) -> list[ExpandedNode]:
    """Stable-sorts expanded nodes by abscissa."""
    return sorted(expanded, key=cmp_to_key(_compare_x))
