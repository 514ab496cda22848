"""
Error types raised by the solver.

Everything a user can trigger from the REPL derives from ``WordleError`` so the
command loop can report it and carry on. ``FileUnreadable`` is only raised at
startup, before a session exists.
"""


class WordleError(ValueError):
    """Base class for recoverable solver errors."""


class InvalidLength(WordleError):
    """A word does not have the configured number of letters."""


class InvalidCharacter(WordleError):
    """A word contains a non-alphabetic character."""


class LengthMismatch(WordleError):
    """Two sequences that must line up have different lengths."""


class InvalidHintSyntax(WordleError):
    """A hint string could not be parsed against its guess."""


class WordNotFound(WordleError):
    """A word is not in the current score table."""


class EmptyHistory(WordleError):
    """There is no applied hint to undo."""


class SessionClosed(WordleError):
    """The session has already been exited."""


class FileUnreadable(WordleError):
    """The word list file could not be opened."""
