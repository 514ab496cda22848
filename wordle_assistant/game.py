"""
Play mode
=========

Single-player game against a random secret word from the word list.
"""

import random
from typing import Callable, Collection, List, Tuple

from rich.console import Console

from .config import DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_SIZE
from .display import print_hint
from .feedback import Hint, hint_from_guess_and_answer
from .words import Word, is_alphabetic


def is_consistent(guess: Word, played: List[Tuple[Word, Hint]]) -> bool:
    """True if ``guess`` could still be the answer given every played hint."""
    return all(hint_from_guess_and_answer(g, guess) == h for g, h in played)


def play(words: Collection[Word], console: Console = None,
         word_size: int = DEFAULT_WORD_SIZE,
         max_attempts: int = DEFAULT_MAX_ATTEMPTS,
         hard_mode: bool = False,
         rng: random.Random = None,
         read_line: Callable[[str], str] = input) -> bool:
    """
    Play one game on the console.

    Invalid guesses are rejected without using up an attempt. In hard mode a
    guess must also be consistent with every hint received so far.

    Returns:
        True if the secret word was guessed
    """
    if not words:
        raise ValueError("Word list is empty")
    console = console or Console()
    rng = rng or random.Random()
    secret = rng.choice(sorted(words))

    console.print(f"Welcome to Wordle! Guess the {word_size}-letter word. "
                  f"You have {max_attempts} attempts.\n", highlight=False)
    console.print("Letters are marked grey if they don't appear in the word.")
    console.print("Letters are marked [yellow]yellow[/yellow] if they are in the wrong position.")
    console.print("Letters are marked [green]green[/green] if they are in the correct position.\n")

    played: List[Tuple[Word, Hint]] = []
    attempts = 0
    while attempts < max_attempts:
        console.print(f"You have {max_attempts - attempts} attempts left.", highlight=False)
        try:
            text = read_line("Enter your guess: ").strip()
        except EOFError:
            console.print()
            return False

        if len(text) != word_size:
            console.print(f"Please enter a {word_size}-letter word.\n", highlight=False)
            continue
        if not is_alphabetic(text):
            console.print("Please enter a word containing only alphabetic characters.\n")
            continue

        guess = Word(text.upper())
        if guess not in words:
            console.print("Invalid word. Please try again.\n")
            continue
        if hard_mode and not is_consistent(guess, played):
            console.print("Hard mode: your guess must use every hint so far.\n")
            continue

        if guess == secret:
            console.print("[green]Congratulations! You guessed the word![/green]")
            return True

        hint = hint_from_guess_and_answer(guess, secret)
        played.append((guess, hint))
        print_hint(console, hint, guess, suffix="\n")
        attempts += 1

    console.print(f"[red]Game Over![/red] The correct word was: [green]{secret}[/green]")
    return False
