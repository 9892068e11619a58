"""
Exception taxonomy.

Fatal (the CLI exits before any game state exists):
  - DictionaryLoadError : the dictionary file cannot be opened or read
  - NoWordsOfLength     : nothing in the dictionary has the requested length

Recoverable (reported to the player, the turn is replayed):
  - ValidationError and its subclasses WrongLength, NonAlphabetic,
    NotInDictionary

Running out of input is not an error; it ends the session with its own
outcome (see termwordle.game.core.Outcome).
"""

from __future__ import annotations


class TermWordleError(Exception):
    """Base class for every error raised by termwordle."""


class DictionaryLoadError(TermWordleError):
    """The dictionary source could not be opened or read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f'dictionary file "{self.path}" cannot be opened')


class NoWordsOfLength(TermWordleError):
    """pick_random() was asked for a length the dictionary has no words of."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"dictionary contains no {length} letter words")


class ValidationError(TermWordleError):
    """A guess was rejected. The message is meant for the player."""


class WrongLength(ValidationError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Words must be {expected} letters long - try again.")


class NonAlphabetic(ValidationError):
    def __init__(self, guess: str):
        self.guess = guess
        super().__init__("Words must contain only letters - try again.")


class NotInDictionary(ValidationError):
    def __init__(self, guess: str):
        self.guess = guess
        super().__init__("Word not found in the dictionary - try again.")
