"""
Hint computation
================

Compares a guess with a candidate answer and produces one ``LetterHint`` per
position, using the duplicate-letter rules of the game:

1. Letters in the right place are Correct, and that answer letter is used up.
2. Left to right, any other guess letter that still occurs among the unused
   answer letters is Misplaced and uses up the first such occurrence.
3. Everything else is Incorrect.

So a guess with two E's against an answer with one E never marks both.

Hints are also encoded as integer pattern codes (base 3, position 0 is the
least significant digit) so the scoring kernels can bucket them cheaply.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np
from numba import jit

from .errors import InvalidHintSyntax, LengthMismatch
from .words import Word, words_to_chars


# ============================================================================
# CONSTANTS
# ============================================================================

INCORRECT = 0
MISPLACED = 1
CORRECT = 2

# Marks an answer letter that has already been matched
USED = -1

MISPLACED_CHAR = '*'
INCORRECT_CHAR = '_'


# ============================================================================
# HINT TYPES
# ============================================================================

class LetterHint(IntEnum):
    """Outcome for a single letter position."""
    INCORRECT = INCORRECT
    MISPLACED = MISPLACED
    CORRECT = CORRECT


@dataclass(frozen=True)
class Hint:
    """Per-position feedback for one guess."""
    letters: Tuple[LetterHint, ...]

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self):
        return iter(self.letters)

    @property
    def code(self) -> int:
        """Base-3 pattern code, matching ``compute_feedback``."""
        code = 0
        for h in reversed(self.letters):
            code = code * 3 + int(h)
        return code

    @classmethod
    def from_code(cls, code: int, width: int) -> "Hint":
        letters = []
        for _ in range(width):
            letters.append(LetterHint(code % 3))
            code //= 3
        return cls(tuple(letters))

    @classmethod
    def all_correct(cls, width: int) -> "Hint":
        return cls((LetterHint.CORRECT,) * width)

    def is_solved(self) -> bool:
        return all(h is LetterHint.CORRECT for h in self.letters)


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, nogil=True, cache=True)
def fill_feedback(guess: np.ndarray, answer: np.ndarray,
                  scratch: np.ndarray, feedback: np.ndarray) -> int:
    """
    Compute the feedback pattern code for one guess/answer pair.

    ``scratch`` and ``feedback`` are caller-owned work buffers of the word
    width, so tight loops do not allocate.

    Args:
        guess: letter codes of the guess
        answer: letter codes of the answer
        scratch: work buffer, overwritten with the answer's unused letters
        feedback: work buffer, overwritten with per-position hint values

    Returns:
        Integer pattern code (0 to 3^width - 1)
    """
    n = guess.shape[0]
    for i in range(n):
        scratch[i] = answer[i]
        feedback[i] = INCORRECT

    # First pass: exact matches
    for i in range(n):
        if guess[i] == answer[i]:
            feedback[i] = CORRECT
            scratch[i] = USED

    # Second pass: consume the first unused occurrence
    for i in range(n):
        if feedback[i] == CORRECT:
            continue
        for j in range(n):
            if scratch[j] == guess[i]:
                feedback[i] = MISPLACED
                scratch[j] = USED
                break

    code = 0
    multiplier = 1
    for i in range(n):
        code += feedback[i] * multiplier
        multiplier *= 3
    return code


@jit(nopython=True, nogil=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """Pattern code for a single guess/answer pair."""
    n = guess.shape[0]
    scratch = np.empty(n, dtype=np.int32)
    feedback = np.empty(n, dtype=np.int64)
    return fill_feedback(guess, answer, scratch, feedback)


@jit(nopython=True, nogil=True, cache=True)
def compute_feedback_row(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Pattern codes of one guess against every answer row."""
    n_answers = answer_chars.shape[0]
    n = guess.shape[0]
    scratch = np.empty(n, dtype=np.int32)
    feedback = np.empty(n, dtype=np.int64)
    result = np.empty(n_answers, dtype=np.int64)
    for j in range(n_answers):
        result[j] = fill_feedback(guess, answer_chars[j], scratch, feedback)
    return result


# ============================================================================
# PUBLIC API
# ============================================================================

def hint_from_guess_and_answer(guess: Word, answer: Word) -> Hint:
    """
    Feedback the game would give for ``guess`` if the secret were ``answer``.

    Raises:
        LengthMismatch: if the words differ in length
    """
    if len(guess) != len(answer):
        raise LengthMismatch(
            f"Guess {guess} and answer {answer} must have the same length")
    width = len(guess)
    chars = words_to_chars([guess, answer], width)
    return Hint.from_code(int(compute_feedback(chars[0], chars[1])), width)


def feedback_row(guess: Word, answer_chars: np.ndarray) -> np.ndarray:
    """
    Pattern codes of ``guess`` against a (n_answers, width) letter-code array.

    Raises:
        LengthMismatch: if the guess width differs from the array's
    """
    if answer_chars.shape[1] != len(guess):
        raise LengthMismatch(
            f"Guess {guess} has {len(guess)} letters, answers have {answer_chars.shape[1]}")
    guess_chars = words_to_chars([guess], len(guess))[0]
    return compute_feedback_row(guess_chars, answer_chars)


def hint_from_string(text: str, guess: Word) -> Hint:
    """
    Parse typed feedback for ``guess``.

    Each character is the guessed letter itself (any case) for Correct,
    ``*`` for Misplaced or ``_`` for Incorrect. For example ``h*ll_`` for
    the guess HELLO.

    Raises:
        InvalidHintSyntax: on a length mismatch or any other character
    """
    if len(text) != len(guess):
        raise InvalidHintSyntax(
            f"Hint '{text}' has {len(text)} characters, guess {guess} has {len(guess)}")

    letters = []
    for c, g in zip(text, guess):
        if c.upper() == g:
            letters.append(LetterHint.CORRECT)
        elif c == MISPLACED_CHAR:
            letters.append(LetterHint.MISPLACED)
        elif c == INCORRECT_CHAR:
            letters.append(LetterHint.INCORRECT)
        else:
            raise InvalidHintSyntax(f"Invalid hint character '{c}' for letter {g}")
    return Hint(tuple(letters))
