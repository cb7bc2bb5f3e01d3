"""
Container Set - The ordered, fixed-size collection of boxes for one game.

The set:
- Is built from a list of monetary values (input order preserved)
- Can be shuffled in place by random pairwise swaps
- Reveals boxes by index
- Computes the average value of the boxes still sealed

The multiset of values never changes after construction; only the
order and the revealed flags do.
"""

from __future__ import annotations
import random
from typing import Iterator, Sequence

from .container import Container
from .errors import IndexOutOfRangeError, InvalidInputError

MIN_CONTAINERS = 2


class ContainerSet:
    """
    Ordered boxes, indexed from 0.

    Usage:
        boxes = ContainerSet([1, 5, 10, 100])
        boxes.shuffle(500)
        boxes.reveal_at(2)
        boxes.average_value_of_unrevealed()
    """

    def __init__(self, values: Sequence[float] | None):
        if values is None:
            raise InvalidInputError("Null monetary values")
        values = list(values)
        if len(values) < MIN_CONTAINERS:
            raise InvalidInputError(
                f"Invalid monetary values: need at least {MIN_CONTAINERS}, got {len(values)}"
            )
        self._containers: list[Container] = [Container(v) for v in values]

    def __len__(self) -> int:
        return len(self._containers)

    def _check_index(self, index: int):
        if index < 0 or index >= len(self._containers):
            raise IndexOutOfRangeError(index, len(self._containers))

    def get_value(self, index: int) -> float:
        self._check_index(index)
        return self._containers[index].get_value()

    def is_revealed_at(self, index: int) -> bool:
        self._check_index(index)
        return self._containers[index].is_revealed()

    def reveal_at(self, index: int):
        """Reveal the box at index."""
        self._check_index(index)
        self._containers[index].reveal()

    def values(self) -> list[float]:
        """All values in slot order."""
        return [c.get_value() for c in self]

    def unrevealed_indices(self) -> list[int]:
        return [i for i, c in enumerate(self._containers) if not c.is_revealed()]

    def unrevealed_values(self) -> list[float]:
        return [c.get_value() for c in self if not c.is_revealed()]

    def revealed_count(self) -> int:
        return sum(1 for c in self if c.is_revealed())

    def average_value_of_unrevealed(self) -> float:
        """
        Mean value of the sealed boxes.

        Returns 0.0 when every box has been revealed.
        """
        sealed = self.unrevealed_values()
        if not sealed:
            return 0.0
        return sum(sealed) / len(sealed)

    def shuffle(self, number_of_swaps: int, rng: random.Random | None = None):
        """
        Shuffle in place by swapping two distinct random slots, number_of_swaps times.

        Not uniform for small swap counts. Use a few hundred swaps for a
        full-size board.

        Args:
            number_of_swaps: How many pairwise swaps to perform (>= 0)
            rng: Random source (a fresh unseeded one if not provided)
        """
        if number_of_swaps < 0:
            raise InvalidInputError(f"Invalid number of swaps: {number_of_swaps}")

        rng = rng or random.Random()
        size = len(self._containers)
        boxes = self._containers
        for _ in range(number_of_swaps):
            first = rng.randrange(size)
            second = rng.randrange(size)
            while second == first:
                second = rng.randrange(size)
            boxes[first], boxes[second] = boxes[second], boxes[first]

    def __iter__(self) -> Iterator[Container]:
        return iter(self._containers)

    def __eq__(self, other):
        if not isinstance(other, ContainerSet):
            return NotImplemented
        return self._containers == other._containers

    __hash__ = None

    def __str__(self):
        return "".join(f"{i}: {c}\n" for i, c in enumerate(self._containers))
