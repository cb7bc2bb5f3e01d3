"""
Game Schedule - The box values and round quotas a game is played with.

The standard schedule is the classic board:
- 26 boxes from $0.01 to $1,000,000
- 10 rounds opening 6, 5, 4, 3, 2, 1, 1, 1, 1, 1 boxes
- 500 swaps to shuffle the board at setup

Round numbering starts at 1. Index 0 of round_quotas is a placeholder
with quota 0 and is never the active round.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from ..engine_core.container import DELTA


STANDARD_VALUES: tuple[float, ...] = (
    0.01, 1, 5, 10, 25, 50, 75,
    100, 200, 300, 400, 500,
    750, 1000, 5000, 10000,
    25000, 50000, 75000,
    100000, 200000, 300000,
    400000, 500000, 750000,
    1000000,
)

STANDARD_ROUND_QUOTAS: tuple[int, ...] = (0, 6, 5, 4, 3, 2, 1, 1, 1, 1, 1)

STANDARD_TOTAL_ROUNDS = 10

STANDARD_SHUFFLE_SWAPS = 500


class GameSchedule(BaseModel):
    """Box values, reveal quota per round, offer divisor and shuffle strength."""

    values: tuple[float, ...] = Field(min_length=2, description="Monetary value of each box")
    round_quotas: tuple[int, ...] = Field(
        min_length=2,
        description="Boxes to reveal per round; index 0 is an unused placeholder",
    )
    total_rounds: int = Field(
        ge=1, description="Divisor in the offer formula (average * round / total_rounds)"
    )
    shuffle_swaps: int = Field(ge=0, description="Pairwise swaps performed at setup")

    model_config = {"frozen": True}

    @field_validator("values")
    @classmethod
    def _values_above_delta(cls, values: tuple[float, ...]) -> tuple[float, ...]:
        for v in values:
            if not (v >= DELTA):
                raise ValueError(f"box value {v} is below the minimum {DELTA}")
        return values

    @field_validator("round_quotas")
    @classmethod
    def _quotas_well_formed(cls, quotas: tuple[int, ...]) -> tuple[int, ...]:
        if quotas[0] != 0:
            raise ValueError("round_quotas[0] is a placeholder and must be 0")
        if any(q < 0 for q in quotas):
            raise ValueError("round quotas must be non-negative")
        return quotas

    @model_validator(mode="after")
    def _player_box_never_revealed(self) -> GameSchedule:
        # The player's own box is never opened, so at most n - 1 reveals.
        if sum(self.round_quotas) > len(self.values) - 1:
            raise ValueError(
                f"round quotas reveal {sum(self.round_quotas)} boxes "
                f"but only {len(self.values) - 1} can be opened"
            )
        return self

    @property
    def number_of_boxes(self) -> int:
        return len(self.values)

    @property
    def number_of_rounds(self) -> int:
        return len(self.round_quotas) - 1

    def quota_for_round(self, round_number: int) -> int:
        return self.round_quotas[round_number]

    @classmethod
    def standard(cls) -> GameSchedule:
        """The classic 26-box, 10-round schedule."""
        return cls(
            values=STANDARD_VALUES,
            round_quotas=STANDARD_ROUND_QUOTAS,
            total_rounds=STANDARD_TOTAL_ROUNDS,
            shuffle_swaps=STANDARD_SHUFFLE_SWAPS,
        )


STANDARD_SCHEDULE = GameSchedule.standard()
