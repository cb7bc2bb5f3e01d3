"""
Persistence - The only state that outlives a game is the best result.
"""

from .best_result import (
    BestResultStore,
    FileBestResultStore,
    InMemoryBestResultStore,
    DEFAULT_BEST_RESULT_FILE,
    format_best_result,
)

__all__ = [
    "BestResultStore",
    "FileBestResultStore",
    "InMemoryBestResultStore",
    "DEFAULT_BEST_RESULT_FILE",
    "format_best_result",
]
