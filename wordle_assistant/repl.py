"""
Solver REPL
===========

Line-oriented front end for a ``SolverSession``. Each line is one command;
errors are reported and leave the session untouched.
"""

from typing import Callable, List

from rich.console import Console

from .display import print_hint, print_history, print_score, print_scores
from .errors import EmptyHistory, WordleError
from .feedback import hint_from_string
from .session import SolverSession
from .words import parse_word


HELP_MESSAGE = """\
top <n> [strict]     Print the top n best guesses with their scores, given the
                     remaining possible answers. Scores are the percentage by
                     which a guessed word reduces the list of possible remaining
                     answers. If 'strict' is provided, only score words that are
                     still in the list of possible answers.

score <word>         Print the scores of a word, given the remaining possible
                     answers. Scores are the percentage by which a guessed word
                     reduces the list of possible remaining answers.

hint <word> <hint>   Add a word and its hint to reduce the possible answers.
                     For <word> retype the guessed word.
                     Here is how to type <hint>:
                     - If a letter is green/guessed correctly, retype the letter
                     - If a letter is yellow/misplaced, type '*' in its position
                     - If a letter is grey/incorrect, type '_' in its position
                     Example: 'hint hello h*ll_'

history              Print the history of guesses and feedback

undo                 Undo the last guess and restore the word list

help                 Print the help message, listing the available commands.

exit                 Exit the REPL"""

BAD_COMMAND = "Bad command. Type 'help' for commands."
PROMPT = "> "


class SolverRepl:
    """Parses command lines and drives a session."""

    def __init__(self, session: SolverSession, console: Console = None):
        self.session = session
        self.console = console or Console()
        self.commands = {
            'top': self.cmd_top,
            'score': self.cmd_score,
            'hint': self.cmd_hint,
            'history': self.cmd_history,
            'undo': self.cmd_undo,
            'exit': self.cmd_exit,
            'help': self.cmd_help,
        }

    def run(self, read_line: Callable[[str], str] = input):
        """Read and execute commands until ``exit`` or end of input."""
        self.console.print("Starting Wordle Solver REPL. Type 'help' for commands.")
        while self.session.active:
            try:
                line = read_line(PROMPT)
            except EOFError:
                self.cmd_exit([])
                break
            self.execute(line)

    def execute(self, line: str):
        """Run one command line."""
        tokens = line.split()
        if not tokens:
            return
        command = self.commands.get(tokens[0])
        if command is None:
            self.console.print(BAD_COMMAND, markup=False)
            return
        try:
            command(tokens[1:])
        except EmptyHistory:
            self.console.print("Nothing to undo.")
        except WordleError as e:
            self.console.print(f"Error: {e}", markup=False, highlight=False)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def cmd_help(self, args: List[str]):
        if args:
            self.console.print(BAD_COMMAND, markup=False)
            return
        self.console.print(HELP_MESSAGE, markup=False, highlight=False)

    def cmd_top(self, args: List[str]):
        if not 1 <= len(args) <= 2 or not (args[0].isascii() and args[0].isdigit()):
            self.console.print(BAD_COMMAND, markup=False)
            return
        if len(args) == 2 and args[1] != 'strict':
            self.console.print(BAD_COMMAND, markup=False)
            return
        scores = self.session.top(int(args[0]), strict=len(args) == 2)
        print_scores(self.console, scores)

    def cmd_score(self, args: List[str]):
        if len(args) != 1:
            self.console.print(BAD_COMMAND, markup=False)
            return
        word = parse_word(args[0], self.session.config.word_size)
        rank, entry = self.session.score(word)
        print_score(self.console, rank, entry)

    def cmd_hint(self, args: List[str]):
        if len(args) != 2:
            self.console.print(BAD_COMMAND, markup=False)
            return
        guess = parse_word(args[0])
        hint = hint_from_string(args[1], guess)
        entry = self.session.hint(guess, hint)
        print_hint(self.console, hint, guess)
        self.console.print(f"Removed {len(entry.removed_answers)} words.", highlight=False)
        self.console.print(f"{len(self.session.remaining_answers)} possible answers remaining.",
                           highlight=False)

    def cmd_history(self, args: List[str]):
        if args:
            self.console.print(BAD_COMMAND, markup=False)
            return
        print_history(self.console, self.session.starting_size(), self.session.history_report())

    def cmd_undo(self, args: List[str]):
        if args:
            self.console.print(BAD_COMMAND, markup=False)
            return
        entry = self.session.undo()
        print_hint(self.console, entry.hint, entry.guess, prefix="Undoing last guess: ")
        self.console.print(f"Restored word list to {len(self.session.remaining_answers)} words.",
                           highlight=False)

    def cmd_exit(self, args: List[str]):
        if args:
            self.console.print(BAD_COMMAND, markup=False)
            return
        self.console.print("Exiting solver...")
        self.session.exit()
