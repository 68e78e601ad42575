"""Memoised factorials for the confluent branch of the divided-difference table."""

from __future__ import annotations

__all__ = ["FactorialCache"]


class FactorialCache:
    """Factorials memoised by order.

    A request for order ``k`` extends the memo one multiplication at a time
    up to ``k``. Smaller orders are looked up by index, so the result never
    depends on the order in which requests arrive.
    """

    def __init__(self) -> None:
        self._values: list[int] = [1, 1]

    @property
    def highest_order(self) -> int:
        """Largest order computed so far."""
        return len(self._values) - 1

    def __call__(self, order: int) -> int:
        """Returns ``order!``.

        Raises:
            ValueError: If ``order`` is negative.
        """
        if order < 0:
            raise ValueError(f"factorial order must be non-negative; got {order}.")
        values = self._values
        while len(values) <= order:
            values.append(values[-1] * len(values))
        return values[order]

    def reset(self) -> None:
        """Drops every memoised value above ``1!``."""
        del self._values[2:]
