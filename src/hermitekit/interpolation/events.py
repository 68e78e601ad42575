"""Observation hook for the Hermite interpolation engine.

Events are purely diagnostic. Payloads are immutable snapshots, so an
observer cannot change the computation it is watching.

Event names and payloads:

* ``data_prepared``: ``tuple[ExpandedNode, ...]``, the expanded and sorted nodes.
* ``step``: :class:`StepEvent`, one cell of the divided-difference table.
* ``pre_coefficients``: ``tuple`` of Newton-form coefficients (monomial path only).
* ``coefficients``: ``tuple`` of monomial-basis coefficients.
* ``error``: :class:`~hermitekit.interpolation.errors.DuplicateError`.

Example:
    >>> from hermitekit.interpolation.events import EventHub
    >>> hub = EventHub()
    >>> seen = []
    >>> _ = hub.subscribe("step", seen.append)
    >>> hub.emit("step", StepEvent(row=0, col=1, result=2.0))
    >>> seen
    [StepEvent(row=0, col=1, result=2.0)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

__all__ = ["EVENT_NAMES", "StepEvent", "HermiteObserver", "EventHub"]

EVENT_NAMES: tuple[str, ...] = (
    "data_prepared",
    "step",
    "pre_coefficients",
    "coefficients",
    "error",
)


@dataclass(frozen=True)
class StepEvent:
    """One computed cell ``(row, col)`` of the divided-difference table."""

    row: int
    col: int
    result: Any


class HermiteObserver(Protocol):
    """Observer with one optional callback slot per event.

    Any subset of the methods may be defined; :meth:`EventHub.attach`
    subscribes only those present.
    """

    def on_data_prepared(self, nodes: tuple) -> None: ...
    def on_step(self, step: StepEvent) -> None: ...
    def on_pre_coefficients(self, coefficients: tuple) -> None: ...
    def on_coefficients(self, coefficients: tuple) -> None: ...
    def on_error(self, error: Exception) -> None: ...


def _check_event(event: str) -> str:
    if event not in EVENT_NAMES:
        raise ValueError(
            f"Unknown event '{event}'. Choose one of {{{', '.join(EVENT_NAMES)}}}."
        )
    return event


class EventHub:
    """Dispatches engine events to subscribed callbacks.

    Callbacks run synchronously in subscription order. Exceptions raised by
    a callback propagate to the caller of the engine operation.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, list[Callable[[Any], None]]] = {
            name: [] for name in EVENT_NAMES
        }

    def subscribe(self, event: str, callback: Callable[[Any], None]) -> Callable[[Any], None]:
        """Registers ``callback`` for ``event`` and returns it.

        Raises:
            ValueError: If ``event`` is not a known event name.
            TypeError: If ``callback`` is not callable.
        """
        _check_event(event)
        if not callable(callback):
            raise TypeError(f"callback for '{event}' must be callable; got {callback!r}.")
        self._callbacks[event].append(callback)
        return callback

    def unsubscribe(self, event: str, callback: Callable[[Any], None]) -> bool:
        """Removes ``callback`` from ``event``; returns whether it was subscribed."""
        callbacks = self._callbacks[_check_event(event)]
        try:
            callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def attach(self, observer: Any) -> list[str]:
        """Subscribes every ``on_<event>`` method defined by ``observer``.

        Returns:
            The names of the events the observer was subscribed to.
        """
        attached = []
        for name in EVENT_NAMES:
            method = getattr(observer, f"on_{name}", None)
            if callable(method):
                self._callbacks[name].append(method)
                attached.append(name)
        return attached

    def has_subscribers(self, event: str) -> bool:
        """Whether at least one callback listens to ``event``."""
        return bool(self._callbacks[_check_event(event)])

    def emit(self, event: str, payload: Any) -> None:
        """Calls every callback subscribed to ``event`` with ``payload``."""
        for callback in tuple(self._callbacks[_check_event(event)]):
            callback(payload)
