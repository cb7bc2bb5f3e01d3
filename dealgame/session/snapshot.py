"""
Pydantic snapshots of a game session, for rendering the board.

These models are read-only views. Sealed box values are withheld
unless the caller asks for them (reveal_all), so a snapshot can be
shown to the player as is.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SessionPhase(str, Enum):
    """Whether the player has picked their own box yet."""
    NOT_CHOSEN = "not_chosen"
    CHOSEN = "chosen"


class BoxInfo(BaseModel):
    """One slot on the board."""
    index: int = Field(ge=0)
    revealed: bool = False
    is_player_box: bool = False
    value: Optional[float] = Field(None, description="Only set for revealed boxes unless reveal_all")


class RoundInfo(BaseModel):
    """Progress through the current round."""
    round: int = Field(ge=1)
    number_of_rounds: int = Field(ge=1)
    quota: int = Field(ge=0)
    revealed_this_round: int = Field(ge=0)
    remaining: int = Field(ge=0)
    is_complete: bool = False


class SessionSnapshot(BaseModel):
    """Full board view at a point in time."""
    phase: SessionPhase
    player_slot: Optional[int] = None
    round: RoundInfo
    boxes: list[BoxInfo] = Field(default_factory=list)
    remaining_values: list[float] = Field(
        default_factory=list,
        description="Values still sealed somewhere on the board, ascending",
    )
    revealed_total: int = 0
    current_offer: float = 0.0
    best_result: float = 0.0
