"""Configuration for the Hermite interpolation engine.

This config controls how :class:`HermiteInterpolation` treats duplicate
abscissas and whether node values are checked against the numeric
contract before any computation starts.
"""

from __future__ import annotations

__all__ = ["HermiteConfig", "DUPLICATE_POLICIES"]

DUPLICATE_POLICIES: tuple[str, ...] = ("report", "raise")


class HermiteConfig:
    """Configuration for the Hermite interpolation engine.

    This config controls how :class:`HermiteInterpolation` treats duplicate
    abscissas and whether node values are checked against the numeric
    contract before any computation starts.
    """

    def __init__(
        self,
        on_duplicate: str = "report",
        check_numeric: bool = True,
    ):
        """Initialize configuration.

        Args:
            on_duplicate:
                Policy for two distinct nodes sharing an abscissa.

                - ``"report"``: emit a :class:`DuplicateError` on the
                  ``error`` event, log a warning and carry on with the
                  duplicated data. The result is then generally
                  meaningless, and a confluent cell that runs out of
                  derivatives raises :class:`ConfluenceError`.
                - ``"raise"``: raise the first :class:`DuplicateError`
                  before the table is built.

            check_numeric:
                If ``True``, every abscissa, value and derivative is checked
                for the operations the requested computation needs, so a
                plain ``float`` fails with a clear ``TypeError`` up front
                instead of an ``AttributeError`` deep inside the table.

        Raises:
            ValueError: If ``on_duplicate`` is not a known policy.
        """
        policy = str(on_duplicate).strip().lower()
        if policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {DUPLICATE_POLICIES}; got {on_duplicate!r}."
            )

        self.on_duplicate = policy
        self.check_numeric = bool(check_numeric)

    @property
    def strict(self) -> bool:
        """Whether duplicate abscissas are a hard failure."""
        return self.on_duplicate == "raise"

    def __repr__(self) -> str:
        return (
            f"HermiteConfig(on_duplicate={self.on_duplicate!r}, "
            f"check_numeric={self.check_numeric!r})"
        )
