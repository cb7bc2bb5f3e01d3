"""
Container - A single sealed box holding a fixed monetary value.

A container starts closed and can be revealed exactly once.
Equality is tolerance-based so floating point noise in values
does not make two otherwise identical boxes differ.
"""

from __future__ import annotations

from .errors import InvalidInputError

# Smallest value a container may hold; also the equality tolerance.
DELTA = 0.01


class Container:
    """
    A box with a value and a revealed flag.

    The value is fixed at construction. The revealed flag only
    moves from False to True.
    """

    __slots__ = ("_value", "_revealed")

    def __init__(self, value: float):
        if not (value >= DELTA):
            raise InvalidInputError(f"Invalid value {value}: must be at least {DELTA}")
        self._value = float(value)
        self._revealed = False

    @property
    def value(self) -> float:
        return self._value

    def get_value(self) -> float:
        """Get the value, whether or not the box has been revealed."""
        return self._value

    def is_revealed(self) -> bool:
        return self._revealed

    def reveal(self):
        """Open the box. Revealing twice is a no-op."""
        self._revealed = True

    def __eq__(self, other):
        if not isinstance(other, Container):
            return NotImplemented
        return (
            self._revealed == other._revealed
            and abs(self._value - other._value) < DELTA
        )

    # Tolerance equality is not transitive, so no consistent hash exists.
    __hash__ = None

    def __repr__(self):
        return f"Container(value={self._value!r}, revealed={self._revealed!r})"

    def __str__(self):
        return f"Open: {self._revealed} Value: {self._value}"
