"""
Wordle Assistant - Entropy-Ranked Guess Suggestions
===================================================

Interactive helper for letter-deduction word puzzles. Enter each guess and the
feedback it received; the assistant narrows the possible answers and ranks
every legal guess by how well it would split them.
"""

__version__ = "1.0.0"

from .config import SolverConfig
from .errors import (EmptyHistory, FileUnreadable, InvalidCharacter, InvalidHintSyntax,
                     InvalidLength, LengthMismatch, SessionClosed, WordleError, WordNotFound)
from .feedback import Hint, LetterHint, hint_from_guess_and_answer, hint_from_string
from .scoring import ScoreEntry, score_guesses
from .session import SolverSession
from .words import Word, load_words, parse_word
