"""
Tests for the container set.

Tests:
- Construction and input validation
- Indexed access and bounds
- Average of sealed boxes
- Shuffling
- Equality
"""

import random

import pytest

from ..engine_core.container_set import ContainerSet
from ..engine_core.errors import IndexOutOfRangeError, InvalidInputError
from ..session.schedule import STANDARD_VALUES


class ScriptedRandom(random.Random):
    """Random source that replays fixed randrange results."""

    def __init__(self, draws):
        super().__init__(0)
        self.draws = list(draws)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return self.draws.pop(0)


class TestContainerSetCreation:
    """Tests for constructing container sets."""

    def test_preserves_input_order(self):
        values = [0.01, 5, 1000, 250000]
        boxes = ContainerSet(values)
        assert len(boxes) == 4
        for i, v in enumerate(values):
            assert boxes.get_value(i) == v

    def test_none_fails(self):
        with pytest.raises(InvalidInputError):
            ContainerSet(None)

    def test_single_value_fails(self):
        with pytest.raises(InvalidInputError):
            ContainerSet([5])

    def test_empty_fails(self):
        with pytest.raises(InvalidInputError):
            ContainerSet([])

    def test_value_below_delta_fails(self):
        """The per-box minimum propagates from Container."""
        with pytest.raises(InvalidInputError):
            ContainerSet([1, 0.001, 3])

    def test_two_values_is_enough(self):
        boxes = ContainerSet([1, 2])
        assert len(boxes) == 2

    def test_all_sealed_initially(self, three_boxes):
        assert three_boxes.unrevealed_indices() == [0, 1, 2]
        assert three_boxes.revealed_count() == 0

    def test_iterates_in_slot_order(self, three_boxes):
        assert [box.get_value() for box in three_boxes] == [1, 2, 3]


class TestContainerSetIndexing:
    """Tests for bounds-checked access."""

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_value_out_of_range(self, three_boxes, index):
        with pytest.raises(IndexOutOfRangeError):
            three_boxes.get_value(index)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_is_revealed_out_of_range(self, three_boxes, index):
        with pytest.raises(IndexOutOfRangeError):
            three_boxes.is_revealed_at(index)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_reveal_out_of_range(self, three_boxes, index):
        with pytest.raises(IndexOutOfRangeError):
            three_boxes.reveal_at(index)

    def test_index_error_is_an_index_error(self, three_boxes):
        with pytest.raises(IndexError):
            three_boxes.get_value(3)

    def test_reveal_at(self, three_boxes):
        three_boxes.reveal_at(1)
        assert three_boxes.is_revealed_at(1)
        assert not three_boxes.is_revealed_at(0)
        assert three_boxes.unrevealed_indices() == [0, 2]
        assert three_boxes.unrevealed_values() == [1, 3]


class TestAverageOfUnrevealed:
    """Tests for the sealed-box average."""

    def test_fresh_set(self, three_boxes):
        assert three_boxes.average_value_of_unrevealed() == 2

    def test_after_reveal(self, three_boxes):
        three_boxes.reveal_at(2)
        assert three_boxes.average_value_of_unrevealed() == pytest.approx(1.5)

    @pytest.mark.parametrize("size", [2, 3, 26])
    def test_all_revealed_is_zero(self, size):
        boxes = ContainerSet([float(i + 1) for i in range(size)])
        for i in range(size):
            boxes.reveal_at(i)
        assert boxes.average_value_of_unrevealed() == 0


class TestShuffle:
    """Tests for shuffling by pairwise swaps."""

    def test_negative_swaps_fails(self, three_boxes):
        with pytest.raises(InvalidInputError):
            three_boxes.shuffle(-1)

    def test_zero_swaps_keeps_order(self):
        boxes = ContainerSet(STANDARD_VALUES)
        boxes.shuffle(0)
        assert boxes.values() == list(STANDARD_VALUES)

    def test_preserves_values(self):
        boxes = ContainerSet(STANDARD_VALUES)
        boxes.shuffle(500, random.Random(42))
        assert sorted(boxes.values()) == sorted(STANDARD_VALUES)

    def test_seeded_shuffle_is_reproducible(self):
        a = ContainerSet(STANDARD_VALUES)
        b = ContainerSet(STANDARD_VALUES)
        a.shuffle(500, random.Random(7))
        b.shuffle(500, random.Random(7))
        assert a.values() == b.values()

    def test_never_swaps_slot_with_itself(self):
        """A repeated second draw is redrawn until it differs."""
        boxes = ContainerSet([1, 2, 3])
        rng = ScriptedRandom([0, 0, 0, 2])
        boxes.shuffle(1, rng)
        assert rng.calls == 4
        assert boxes.values() == [3, 2, 1]

    @pytest.mark.parametrize("swaps,expected", [(1, [2, 1]), (2, [1, 2]), (7, [2, 1])])
    def test_two_boxes_swap_every_time(self, swaps, expected):
        """With two boxes every swap exchanges them, so parity decides the order."""
        boxes = ContainerSet([1, 2])
        boxes.shuffle(swaps, random.Random())
        assert boxes.values() == expected

    def test_revealed_flag_moves_with_box(self):
        boxes = ContainerSet([1, 2])
        boxes.reveal_at(0)
        boxes.shuffle(1)
        assert boxes.is_revealed_at(1)
        assert boxes.get_value(1) == 1


class TestContainerSetEquality:
    """Tests for structural equality."""

    def test_same_values_equal(self):
        assert ContainerSet([1, 2, 3]) == ContainerSet([1, 2, 3.001])

    def test_order_matters(self):
        assert ContainerSet([1, 2, 3]) != ContainerSet([3, 2, 1])

    def test_reveal_state_matters(self):
        a = ContainerSet([1, 2, 3])
        a.reveal_at(0)
        assert a != ContainerSet([1, 2, 3])

    def test_length_matters(self):
        assert ContainerSet([1, 2]) != ContainerSet([1, 2, 3])

    def test_str_lists_every_slot(self, three_boxes):
        lines = str(three_boxes).splitlines()
        assert lines[0] == "0: Open: False Value: 1.0"
        assert len(lines) == 3
