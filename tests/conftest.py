import pytest

from wordle_assistant.config import SolverConfig
from wordle_assistant.session import SolverSession
from wordle_assistant.words import Word


WORDS = ["ABACK", "ARISE", "CRANE", "EAGER", "EERIE",
         "HELLO", "LEMON", "SLATE", "SPEED", "TRACE"]


def feeder(lines):
    """read_line replacement that replays ``lines`` then signals end of input."""
    it = iter(lines)

    def read_line(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


@pytest.fixture
def words():
    return {Word(w) for w in WORDS}


@pytest.fixture
def config():
    return SolverConfig(show_progress=False, max_workers=2, chunk_size=3)


@pytest.fixture
def session(words, config):
    return SolverSession(words, config)
