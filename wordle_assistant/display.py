"""Terminal rendering of hints and score tables."""

from typing import List

from rich.console import Console
from rich.text import Text

from .feedback import Hint, LetterHint
from .scoring import ScoreEntry
from .session import HistoryReport
from .words import Word


HINT_STYLES = {
    LetterHint.CORRECT: "green",
    LetterHint.MISPLACED: "yellow",
    LetterHint.INCORRECT: "white",
}


def hint_text(hint: Hint, guess: Word) -> Text:
    """Guess letters coloured by their hint."""
    text = Text()
    for letter, h in zip(guess, hint):
        text.append(letter, style=HINT_STYLES[h])
    return text


def print_hint(console: Console, hint: Hint, guess: Word, prefix: str = "", suffix: str = ""):
    console.print(Text(prefix) + hint_text(hint, guess) + Text(suffix))


def print_scores(console: Console, scores: List[ScoreEntry]):
    console.print("Rank | Word  | Expected | Worst-Case ", markup=False)
    console.print("-----|-------|----------|------------", markup=False)
    for i, entry in enumerate(scores):
        console.print(f"{i + 1:>4} | {entry.word} | {entry.expected:>7.3f}% | {entry.worst_case:>9.3f}%",
                      markup=False, highlight=False)


def print_score(console: Console, rank: int, entry: ScoreEntry):
    console.print(f"Rank: {rank}", highlight=False)
    console.print(f"Expected: {entry.expected:.3f}%", highlight=False)
    console.print(f"Worst-Case: {entry.worst_case:.3f}%", highlight=False)


def print_history(console: Console, starting_size: int, reports: List[HistoryReport]):
    console.print(f"Starting with {starting_size} words", highlight=False)
    for i, report in enumerate(reports):
        print_hint(console, report.hint, report.guess,
                   prefix=f"{i + 1}: ",
                   suffix=(f" - Removed {report.removed} of {report.total} "
                           f"({report.percent_removed:.2f}%). {report.remaining} Remaining."))
