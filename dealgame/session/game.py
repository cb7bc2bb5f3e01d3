"""
Game Session - One play-through of the pick-a-box game.

LIFECYCLE:
1. Session created → board built from the schedule and shuffled,
   best result loaded from the store
2. Player chooses their own box (NOT_CHOSEN → CHOSEN); nothing is revealed
3. Each round the player reveals the round's quota of other boxes
4. When a round is complete the caller reads the banker's offer and
   either stops (deal) or calls start_next_round()
5. The caller reports the final winnings via record_result_if_best()

The session does not detect the end of the game. The caller compares
round to number_of_rounds (or uses is_final_round()).

OFFER:
    offer = average value of sealed boxes * round / total_rounds

Early offers are a small fraction of the fair value and approach it in
the last round.
"""

from __future__ import annotations
import logging
import random

from ..engine_core.container_set import ContainerSet
from ..engine_core.errors import GameStateError, IndexOutOfRangeError, PersistenceError
from ..persistence.best_result import BestResultStore, format_best_result
from .schedule import GameSchedule, STANDARD_SCHEDULE
from .snapshot import BoxInfo, RoundInfo, SessionPhase, SessionSnapshot

logger = logging.getLogger(__name__)


class GameSession:
    """
    State machine over rounds.

    Usage:
        session = GameSession(best_result_store=FileBestResultStore())
        session.choose_slot(7)
        while not session.is_round_complete():
            session.reveal_slot(next_index)
        offer = session.get_current_offer()
        session.start_next_round()
    """

    def __init__(
        self,
        randomize: bool = True,
        best_result_store: BestResultStore | None = None,
        schedule: GameSchedule | None = None,
        random_seed: int | None = None,
    ):
        """
        Args:
            randomize: Shuffle the board (False keeps schedule order, for tests)
            best_result_store: Where the best result lives (none means 0.0, never saved)
            schedule: Values and round quotas (standard board if not provided)
            random_seed: Seed for a reproducible shuffle
        """
        self.schedule = schedule or STANDARD_SCHEDULE
        self._store = best_result_store

        self._containers = ContainerSet(self.schedule.values)
        if randomize:
            self._containers.shuffle(self.schedule.shuffle_swaps, random.Random(random_seed))

        self._best_result = self._load_best_result()

        self._player_slot: int | None = None
        self._round = 1
        self._revealed_this_round = 0
        self._revealed_total = 0

        logger.debug(
            f"Session started: {self.schedule.number_of_boxes} boxes, "
            f"{self.schedule.number_of_rounds} rounds, best {self._best_result:.2f}"
        )

    def _load_best_result(self) -> float:
        if self._store is None:
            return 0.0
        try:
            return self._store.load()
        except PersistenceError as e:
            # A missing or corrupt record just means no prior best.
            logger.warning(f"Could not load best result, starting from 0: {e}")
            return 0.0

    def _check_index(self, index: int):
        if index < 0 or index >= self.schedule.number_of_boxes:
            raise IndexOutOfRangeError(index, self.schedule.number_of_boxes)

    # ------------------------------------------------------------------
    # Phase and counters
    # ------------------------------------------------------------------

    @property
    def phase(self) -> SessionPhase:
        if self._player_slot is None:
            return SessionPhase.NOT_CHOSEN
        return SessionPhase.CHOSEN

    def has_chosen_slot(self) -> bool:
        return self._player_slot is not None

    @property
    def player_slot(self) -> int | None:
        return self._player_slot

    @property
    def round(self) -> int:
        return self._round

    @property
    def revealed_this_round(self) -> int:
        return self._revealed_this_round

    @property
    def revealed_total(self) -> int:
        return self._revealed_total

    @property
    def number_of_rounds(self) -> int:
        return self.schedule.number_of_rounds

    @property
    def number_of_boxes(self) -> int:
        return self.schedule.number_of_boxes

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def choose_slot(self, index: int):
        """
        Pick the player's own box.

        The box stays sealed and does not count toward the round quota.
        """
        self._check_index(index)
        if self._player_slot is not None:
            raise GameStateError(f"Player already chose box {self._player_slot}")
        self._player_slot = index
        logger.debug(f"Player chose box {index}")

    def reveal_slot(self, index: int):
        """
        Open one of the other boxes.

        Raises:
            IndexOutOfRangeError: index outside the board
            GameStateError: no box chosen yet, the box is the player's own
                or already open, or this round's quota is already met
        """
        self._check_index(index)
        if self._player_slot is None:
            raise GameStateError("Choose your own box before revealing others")
        if index == self._player_slot:
            raise GameStateError(f"Box {index} is the player's own box")
        if self._containers.is_revealed_at(index):
            raise GameStateError(f"Box {index} is already open")
        if self.is_round_complete():
            raise GameStateError(f"Round {self._round} is already complete")

        self._containers.reveal_at(index)
        self._revealed_this_round += 1
        self._revealed_total += 1
        logger.debug(
            f"Round {self._round}: opened box {index} "
            f"({self._containers.get_value(index):.2f})"
        )

    def select_or_reveal(self, index: int):
        """Choose the player's box on the first call, reveal a box on every later call."""
        self._check_index(index)
        if self._player_slot is None:
            self.choose_slot(index)
        else:
            self.reveal_slot(index)

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def quota_this_round(self) -> int:
        return self.schedule.quota_for_round(self._round)

    def remaining_to_reveal_this_round(self) -> int:
        return self.quota_this_round() - self._revealed_this_round

    def is_round_complete(self) -> bool:
        return self._revealed_this_round == self.quota_this_round()

    def is_final_round(self) -> bool:
        return self._round == self.schedule.number_of_rounds

    def start_next_round(self):
        if self.is_final_round():
            raise GameStateError(
                f"Round {self._round} is the last of {self.schedule.number_of_rounds}"
            )
        self._round += 1
        self._revealed_this_round = 0
        logger.debug(f"Round {self._round} started, quota {self.quota_this_round()}")

    # ------------------------------------------------------------------
    # Board queries
    # ------------------------------------------------------------------

    def get_player_container_value(self) -> float:
        if self._player_slot is None:
            raise GameStateError("Player has not chosen a box")
        return self._containers.get_value(self._player_slot)

    def is_revealed_at(self, index: int) -> bool:
        self._check_index(index)
        return self._containers.is_revealed_at(index)

    def get_value_at(self, index: int) -> float:
        self._check_index(index)
        return self._containers.get_value(index)

    def sealed_indices(self, include_player: bool = False) -> list[int]:
        """Indices of boxes still closed, optionally including the player's own."""
        return [
            i for i in self._containers.unrevealed_indices()
            if include_player or i != self._player_slot
        ]

    def get_current_offer(self) -> float:
        return (
            self._containers.average_value_of_unrevealed()
            * self._round
            / self.schedule.total_rounds
        )

    # ------------------------------------------------------------------
    # Best result
    # ------------------------------------------------------------------

    def get_best_result(self) -> float:
        return self._best_result

    def record_result_if_best(self, value: float) -> bool:
        """
        Record value if it beats the best result.

        Persists before updating the in-memory best; a PersistenceError
        from the store propagates and leaves the best result unchanged.

        Returns:
            True if value was a new best and was saved
        """
        if value <= self._best_result:
            return False
        if self._store is not None:
            self._store.save(value)
        self._best_result = value
        logger.info(f"New best result: {format_best_result(value)}")
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def snapshot(self, reveal_all: bool = False) -> SessionSnapshot:
        """Board view for display. Sealed values are hidden unless reveal_all."""
        boxes = []
        for i in range(self.schedule.number_of_boxes):
            revealed = self._containers.is_revealed_at(i)
            boxes.append(BoxInfo(
                index=i,
                revealed=revealed,
                is_player_box=(i == self._player_slot),
                value=self._containers.get_value(i) if (revealed or reveal_all) else None,
            ))

        return SessionSnapshot(
            phase=self.phase,
            player_slot=self._player_slot,
            round=RoundInfo(
                round=self._round,
                number_of_rounds=self.schedule.number_of_rounds,
                quota=self.quota_this_round(),
                revealed_this_round=self._revealed_this_round,
                remaining=self.remaining_to_reveal_this_round(),
                is_complete=self.is_round_complete(),
            ),
            boxes=boxes,
            remaining_values=sorted(self._containers.unrevealed_values()),
            revealed_total=self._revealed_total,
            current_offer=self.get_current_offer(),
            best_result=self._best_result,
        )
