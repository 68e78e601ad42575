"""Errors raised or reported by the Hermite interpolation engine."""

from __future__ import annotations

from typing import Any

__all__ = ["DuplicateError", "ConfluenceError", "ObservationUnavailable"]


class DuplicateError(ValueError):
    """Two distinct input nodes share the same abscissa.

    Under the default ``"report"`` policy this error is not raised. It is
    emitted as the payload of the ``error`` event and the computation
    continues with the duplicated data.

    Attributes:
        duplicate_value: The shared abscissa.
        first_index: Position of the first node in the caller's node list.
        second_index: Position of the second node in the caller's node list.
        message: Human readable description.
    """

    def __init__(self, duplicate_value: Any, first_index: int, second_index: int) -> None:
        self.duplicate_value = duplicate_value
        self.first_index = first_index
        self.second_index = second_index
        self.message = (
            f"Duplicate value at x{first_index} and x{second_index}. "
            f"Value: {duplicate_value!r}"
        )
        super().__init__(self.message)


class ConfluenceError(ValueError):
    """A confluent table cell needs a derivative the node does not carry.

    With pairwise-distinct abscissas every confluent cell is covered by the
    node's own derivatives, so this only happens when duplicate abscissas
    were let through.
    """


class ObservationUnavailable(RuntimeError):
    """Raises when subscribing to an engine that has no event hub."""
