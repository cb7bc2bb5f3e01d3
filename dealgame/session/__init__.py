"""
Session Module - One game from box choice to final winnings.

A session:
- Is created with a board built from a GameSchedule
- Tracks the player's box, the round and the reveal counters
- Computes the banker's offer
- Reports new best results to an injected store

Sessions are in-memory only. The best result is the only thing persisted.
"""

from .schedule import GameSchedule, STANDARD_SCHEDULE
from .game import GameSession
from .snapshot import SessionPhase, SessionSnapshot, BoxInfo, RoundInfo

__all__ = [
    "GameSchedule",
    "STANDARD_SCHEDULE",
    "GameSession",
    "SessionPhase",
    "SessionSnapshot",
    "BoxInfo",
    "RoundInfo",
]
