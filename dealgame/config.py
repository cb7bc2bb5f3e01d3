"""
Environment configuration.

    DEALGAME_BEST_RESULT_FILE   Where the best result is kept (default: highscore.txt)
    DEALGAME_LOG_LEVEL          Logging level for the CLI (default: WARNING)
"""

import os

from .persistence.best_result import DEFAULT_BEST_RESULT_FILE

BEST_RESULT_FILE = os.getenv("DEALGAME_BEST_RESULT_FILE", DEFAULT_BEST_RESULT_FILE)
LOG_LEVEL = os.getenv("DEALGAME_LOG_LEVEL", "WARNING").upper()
