"""
Solver Session
==============

Interactive solving state: the guesses not yet played, the answers still
consistent with every hint, and one cached score table per depth.

Each applied hint pushes exactly what is needed to reverse it (the answers it
removed and whether it removed the guess), so ``undo`` restores the previous
state exactly without rescoring.
"""

from dataclasses import dataclass
from typing import Collection, FrozenSet, List, Optional, Tuple

from .config import SolverConfig
from .errors import EmptyHistory, LengthMismatch, SessionClosed, WordNotFound
from .feedback import Hint, feedback_row
from .scoring import ScoreEntry, score_guesses, strict_filter
from .words import Word, words_to_chars


@dataclass(frozen=True)
class HistoryEntry:
    """One applied hint and the state it removed."""
    guess: Word
    hint: Hint
    removed_answers: FrozenSet[Word]
    removed_guess: bool


@dataclass(frozen=True)
class HistoryReport:
    """Reduction statistics for one applied hint."""
    guess: Word
    hint: Hint
    removed: int
    total: int
    remaining: int

    @property
    def percent_removed(self) -> float:
        return 100.0 * self.removed / self.total if self.total else 0.0


class SolverSession:
    """
    Solver state machine driven by the REPL.

    The session is Active until ``exit`` is called; afterwards every
    operation raises ``SessionClosed``.
    """

    def __init__(self, words: Collection[Word], config: Optional[SolverConfig] = None):
        """
        Start a session over a validated word list.

        Args:
            words: every legal guess; also the initial possible answers
            config: solver settings (defaults if None)
        """
        self.config = (config or SolverConfig()).validate()
        width = self.config.word_size
        for w in words:
            if len(w) != width:
                raise LengthMismatch(f"Word {w} does not have {width} letters")

        self.remaining_guesses = set(words)
        self.remaining_answers = set(words)
        self.history: List[HistoryEntry] = []
        self.score_cache: List[List[ScoreEntry]] = [self._compute_scores(self.remaining_guesses, self.remaining_answers)]
        self.active = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self.history)

    def _compute_scores(self, guesses, answers) -> List[ScoreEntry]:
        return score_guesses(guesses, answers,
                             self.config.word_size,
                             chunk_size=self.config.chunk_size,
                             max_workers=self.config.max_workers,
                             progress=self.config.show_progress)

    def _check_active(self):
        if not self.active:
            raise SessionClosed("Session has ended")

    def _check_invariants(self):
        if len(self.score_cache) != len(self.history) + 1:
            raise RuntimeError(
                f"Score cache has {len(self.score_cache)} tables for depth "
                f"{len(self.history)} - bug in session")

    def _current_scores(self) -> List[ScoreEntry]:
        self._check_invariants()
        return self.score_cache[self.depth]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def top(self, n: int, strict: bool = False) -> List[ScoreEntry]:
        """
        Best ``n`` guesses for the current state.

        With ``strict`` (always on in hard mode) only words that could still
        be the answer are listed.
        """
        self._check_active()
        scores = self._current_scores()
        if strict or self.config.hard_mode:
            scores = strict_filter(scores, self.remaining_answers)
        return scores[:n]

    def score(self, word: Word) -> Tuple[int, ScoreEntry]:
        """
        Rank (1-based) and scores of ``word`` in the full table.

        Words that are legal guesses but no longer possible answers are
        still ranked.

        Raises:
            WordNotFound: if the word is not a remaining guess
        """
        self._check_active()
        for i, entry in enumerate(self._current_scores()):
            if entry.word == word:
                return i + 1, entry
        raise WordNotFound(f"{word} not found in word list")

    def history_report(self) -> List[HistoryReport]:
        """Per-hint reduction statistics, oldest first."""
        self._check_active()
        n_words = self.starting_size()
        reports = []
        for entry in self.history:
            removed = len(entry.removed_answers)
            reports.append(HistoryReport(entry.guess, entry.hint, removed,
                                         n_words, n_words - removed))
            n_words -= removed
        return reports

    def starting_size(self) -> int:
        """Number of possible answers before any hint."""
        return len(self.remaining_answers) + sum(
            len(entry.removed_answers) for entry in self.history)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def hint(self, guess: Word, hint: Hint) -> HistoryEntry:
        """
        Apply a played guess and its feedback.

        Keeps only the answers that would have produced exactly this hint,
        removes the guess from the remaining guesses and rescores. An
        inconsistent hint may leave no possible answers; the session carries
        on in that state.

        Raises:
            LengthMismatch: if the guess or hint is not the configured width
        """
        self._check_active()
        width = self.config.word_size
        if len(guess) != width or len(hint) != width:
            raise LengthMismatch(f"Guess and hint must both have a size of {width}")

        answers = sorted(self.remaining_answers)
        codes = feedback_row(guess, words_to_chars(answers, width))
        target = hint.code
        kept = {a for a, code in zip(answers, codes) if code == target}
        removed = frozenset(a for a, code in zip(answers, codes) if code != target)

        guesses = self.remaining_guesses - {guess}
        scores = self._compute_scores(guesses, kept)
        entry = HistoryEntry(guess, hint, removed, guess in self.remaining_guesses)

        self.remaining_guesses = guesses
        self.remaining_answers = kept
        self.history.append(entry)
        self.score_cache.append(scores)
        return entry

    def undo(self) -> HistoryEntry:
        """
        Revert the last applied hint.

        Raises:
            EmptyHistory: if no hint has been applied
        """
        self._check_active()
        if not self.history:
            raise EmptyHistory("Nothing to undo")
        self._check_invariants()

        entry = self.history.pop()
        self.score_cache.pop()
        self.remaining_answers |= entry.removed_answers
        if entry.removed_guess:
            self.remaining_guesses.add(entry.guess)
        return entry

    def exit(self):
        """End the session."""
        self._check_active()
        self.active = False
