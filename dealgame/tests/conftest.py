"""
Pytest fixtures for DealGame tests.
"""

import pytest

from ..engine_core.container_set import ContainerSet
from ..persistence.best_result import InMemoryBestResultStore
from ..session.game import GameSession
from ..session.schedule import GameSchedule


@pytest.fixture
def store() -> InMemoryBestResultStore:
    """Empty in-memory best result store."""
    return InMemoryBestResultStore()


@pytest.fixture
def small_schedule() -> GameSchedule:
    """Five boxes, two rounds: round 1 opens 2 boxes, round 2 opens 1."""
    return GameSchedule(
        values=[100, 200, 300, 400, 500],
        round_quotas=[0, 2, 1],
        total_rounds=2,
        shuffle_swaps=50,
    )


@pytest.fixture
def standard_session(store: InMemoryBestResultStore) -> GameSession:
    """Unshuffled standard board: box i holds the i-th standard value."""
    return GameSession(randomize=False, best_result_store=store)


@pytest.fixture
def small_session(small_schedule: GameSchedule, store: InMemoryBestResultStore) -> GameSession:
    """Unshuffled small board."""
    return GameSession(randomize=False, best_result_store=store, schedule=small_schedule)


@pytest.fixture
def chosen_small_session(small_session: GameSession) -> GameSession:
    """Small board with the player holding box 0."""
    small_session.choose_slot(0)
    return small_session


@pytest.fixture
def three_boxes() -> ContainerSet:
    """Unshuffled set of values 1, 2, 3."""
    return ContainerSet([1, 2, 3])
