"""
Words and word lists
====================

A ``Word`` is an immutable run of uppercase ASCII letters. Raw text goes
through ``parse_word`` (interactive input) or ``load_words`` (word list files);
both normalise to uppercase and reject anything that is not a letter.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set

import numpy as np

from .errors import FileUnreadable, InvalidCharacter, InvalidLength


# ============================================================================
# WORD TYPE
# ============================================================================

@dataclass(frozen=True, order=True)
class Word:
    """Fixed sequence of uppercase letters. Compares and hashes by its letters."""
    letters: str

    def __str__(self) -> str:
        return self.letters

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> str:
        return self.letters[i]


def is_alphabetic(text: str) -> bool:
    """True if every character is an ASCII letter."""
    return text.isascii() and text.isalpha()


def parse_word(text: str, width: Optional[int] = None) -> Word:
    """
    Validate and normalise raw text into a Word.

    Args:
        text: Raw input, any case
        width: Required number of letters (None skips the length check)

    Returns:
        The uppercase Word

    Raises:
        InvalidLength: if ``width`` is given and does not match
        InvalidCharacter: if any character is not a letter
    """
    if width is not None and len(text) != width:
        raise InvalidLength(f"'{text}' has {len(text)} letters, expected {width}")
    if not is_alphabetic(text):
        raise InvalidCharacter(f"'{text}' must contain only alphabetic characters")
    return Word(text.upper())


def is_valid_word(text: str, width: int) -> bool:
    """Word list filter: right length and letters only."""
    return len(text) == width and is_alphabetic(text)


def load_words(filepath: str, width: int) -> Set[Word]:
    """
    Load the unique valid words of a word list file.

    Lines of the wrong length or with non-letters are skipped silently.

    Raises:
        FileUnreadable: if the file cannot be opened
    """
    try:
        with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
            return {Word(line.upper()) for line in (raw.rstrip('\r\n') for raw in f)
                    if is_valid_word(line, width)}
    except OSError as e:
        raise FileUnreadable(f"Cannot read word list '{filepath}': {e.strerror or e}") from e


def words_to_chars(words: Iterable[Word], width: int) -> np.ndarray:
    """Convert words to a (n_words, width) array of letter codes (A=0)."""
    words = list(words)
    arr = np.zeros((len(words), width), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w.letters):
            arr[i, j] = ord(c) - ord('A')
    return arr
