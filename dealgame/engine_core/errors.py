"""
Engine errors.

Contract violations (bad input, bad index, wrong phase) surface
immediately to the caller. Persistence errors come from the best-result
store and are handled by the session.
"""


class DealGameError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(DealGameError, ValueError):
    """Bad construction-time arguments, e.g. a short value list or a negative swap count."""


class IndexOutOfRangeError(DealGameError, IndexError):
    """Indexed access outside the container range."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid index {index}: expected 0 <= index < {size}")
        self.index = index
        self.size = size


class GameStateError(DealGameError, RuntimeError):
    """Operation not allowed in the session's current phase."""


class PersistenceError(DealGameError, OSError):
    """Best-result store could not be read or written."""
