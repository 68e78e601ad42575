"""Per-call scratch state of the interpolation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hermitekit.interpolation.dataset import ExpandedNode
from hermitekit.interpolation.events import EventHub
from hermitekit.interpolation.factorial import FactorialCache

__all__ = ["CallContext"]


@dataclass
class CallContext:
    """Scratch state owned by exactly one top-level engine call.

    Every call builds its own context, so calls sharing an engine never see
    each other's working nodes or factorials. Used as a context manager the
    scratch state is dropped on every exit path.

    Attributes:
        events: Hub receiving the call's events, or ``None`` to drop them.
        expanded: The expanded and sorted working nodes.
        factorial: Factorial memo for the confluent branch.
    """

    events: EventHub | None = None
    expanded: list[ExpandedNode] = field(default_factory=list)
    factorial: FactorialCache = field(default_factory=FactorialCache)

    def emit(self, event: str, payload: Any) -> None:
        """Forwards an event to the hub; a no-op without one."""
        if self.events is not None:
            self.events.emit(event, payload)

    def close(self) -> None:
        """Discards the scratch state."""
        self.expanded = []
        self.factorial.reset()

    def __enter__(self) -> CallContext:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
