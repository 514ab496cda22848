"""
Solver settings.

Defaults mirror the classic game: five letters, six attempts.
"""

from dataclasses import dataclass
from typing import Optional


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_WORD_SIZE = 5
DEFAULT_MAX_ATTEMPTS = 6
DEFAULT_WORD_FILE = "words.txt"

# Guesses per scoring task submitted to the worker pool
DEFAULT_CHUNK_SIZE = 100

# Hint pattern codes are base-3 int64, so 3^32 is comfortably in range
MAX_WORD_SIZE = 32


# ============================================================================
# SETTINGS
# ============================================================================

@dataclass
class SolverConfig:
    """
    Settings for a solver session.

    Args:
        word_size: Number of letters per word
        chunk_size: Guesses per parallel scoring chunk
        max_workers: Scoring threads (None uses every CPU)
        show_progress: Print scoring status and a progress bar
        hard_mode: Only rank guesses that are still possible answers
    """
    word_size: int = DEFAULT_WORD_SIZE
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_workers: Optional[int] = None
    show_progress: bool = True
    hard_mode: bool = False

    def validate(self) -> "SolverConfig":
        if not 1 <= self.word_size <= MAX_WORD_SIZE:
            raise ValueError(f"Word size must be between 1 and {MAX_WORD_SIZE}, got {self.word_size}")
        if self.chunk_size < 1:
            raise ValueError(f"Chunk size must be positive, got {self.chunk_size}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"Worker count must be positive, got {self.max_workers}")
        return self
