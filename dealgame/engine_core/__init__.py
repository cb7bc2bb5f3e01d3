"""
Engine Core - Boxes, the box set and engine errors.

The core is a plain in-memory model:
1. Container holds one value and a revealed flag
2. ContainerSet owns the ordered boxes for a game
3. Errors report contract violations to the caller
"""

from .container import Container, DELTA
from .container_set import ContainerSet
from .errors import (
    DealGameError,
    InvalidInputError,
    IndexOutOfRangeError,
    GameStateError,
    PersistenceError,
)

__all__ = [
    "Container",
    "DELTA",
    "ContainerSet",
    "DealGameError",
    "InvalidInputError",
    "IndexOutOfRangeError",
    "GameStateError",
    "PersistenceError",
]
