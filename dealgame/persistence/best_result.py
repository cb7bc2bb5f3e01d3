"""
Best Result Store - Keeps the highest final winnings across games.

The store:
- Holds a single number under a fixed, well-known name
- Is file-based by default (plain decimal text, two fractional digits)
- Is injected into the game session, so tests use the in-memory store

Design decisions:
- A missing record loads as 0.0
- Unreadable or unparseable records raise PersistenceError; the session
  decides whether that is fatal
"""

from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from pathlib import Path

from ..engine_core.errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_BEST_RESULT_FILE = "highscore.txt"


def format_best_result(value: float) -> str:
    """Persisted text form, e.g. 12345.67."""
    return f"{value:.2f}"


class BestResultStore(ABC):
    """Port for loading and saving the best result."""

    @abstractmethod
    def load(self) -> float:
        """Return the stored best result, or 0.0 if none exists."""
        pass

    @abstractmethod
    def save(self, value: float):
        """Persist value as the new best result."""
        pass


class FileBestResultStore(BestResultStore):
    """
    Best result kept in a one-line text file.

    Usage:
        store = FileBestResultStore("highscore.txt")
        store.load()      # 0.0 when the file does not exist
        store.save(12345.678)   # file now reads "12345.68"
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else Path(DEFAULT_BEST_RESULT_FILE)

    def load(self) -> float:
        if not self.path.exists():
            return 0.0
        try:
            text = self.path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read best result from {self.path}: {e}") from e

        first_line = text.strip().splitlines()[0] if text.strip() else ""
        try:
            value = float(first_line)
        except ValueError as e:
            raise PersistenceError(
                f"Corrupt best result in {self.path}: {first_line!r}"
            ) from e
        if not math.isfinite(value):
            raise PersistenceError(f"Corrupt best result in {self.path}: {first_line!r}")
        return value

    def save(self, value: float):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(format_best_result(value), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write best result to {self.path}: {e}") from e
        logger.info(f"Best result {format_best_result(value)} saved to {self.path}")


class InMemoryBestResultStore(BestResultStore):
    """
    Best result held in memory.

    fail_on_load / fail_on_save make the store raise PersistenceError,
    for exercising the session's error handling.
    """

    def __init__(
        self,
        initial: float = 0.0,
        fail_on_load: bool = False,
        fail_on_save: bool = False,
    ):
        self.value = initial
        self.fail_on_load = fail_on_load
        self.fail_on_save = fail_on_save
        self.save_count = 0

    def load(self) -> float:
        if self.fail_on_load:
            raise PersistenceError("In-memory store configured to fail on load")
        return self.value

    def save(self, value: float):
        if self.fail_on_save:
            raise PersistenceError("In-memory store configured to fail on save")
        self.value = value
        self.save_count += 1
