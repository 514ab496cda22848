"""Command-line entry point: play a game or run the solver REPL."""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .config import (DEFAULT_CHUNK_SIZE, DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_FILE,
                     DEFAULT_WORD_SIZE, SolverConfig)
from .errors import FileUnreadable
from .game import play
from .repl import SolverRepl
from .session import SolverSession
from .words import load_words


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-assistant",
                                 description="Play Wordle or get help solving it.")
    ap.add_argument("-t", "--task", choices=["play", "solve"], required=True,
                    help="Whether to solve the wordle or play it.")
    ap.add_argument("-m", "--mode", choices=["easy", "hard"], default="easy",
                    help="In hard mode only words still possible as the answer may be played.")
    ap.add_argument("-f", "--file", default=DEFAULT_WORD_FILE,
                    help="Word list, one word per line.")
    ap.add_argument("--word-size", type=int, default=DEFAULT_WORD_SIZE,
                    help="Number of letters per word.")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="Attempts allowed in play mode.")
    ap.add_argument("--workers", type=int, default=None,
                    help="Scoring threads (default: all CPUs).")
    ap.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
                    help="Guesses per scoring chunk.")
    ap.add_argument("--no-progress", action="store_true",
                    help="Do not show the scoring progress bar.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    config = SolverConfig(word_size=args.word_size,
                          chunk_size=args.chunk_size,
                          max_workers=args.workers,
                          show_progress=not args.no_progress,
                          hard_mode=args.mode == "hard")
    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        words = load_words(args.file, config.word_size)
    except FileUnreadable as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    console.print(f"Loaded {len(words)} unique words", highlight=False)

    if args.task == "play":
        if not words:
            print("Error: word list is empty", file=sys.stderr)
            return 1
        play(words, console, word_size=config.word_size,
             max_attempts=args.max_attempts, hard_mode=config.hard_mode)
    else:
        SolverRepl(SolverSession(words, config), console).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
