"""
Guess validation.

Answers the question "may this raw line be scored?". Checks run in a fixed
order and stop at the first failure, so the player always sees the most
fundamental problem first:

  1. one trailing line terminator is stripped (absent is fine)
  2. length must equal the session word length      -> WrongLength
  3. every character must be an ASCII letter         -> NonAlphabetic
  4. the word is lower-cased
  5. it must be in the dictionary                    -> NotInDictionary

A rejected guess never costs the player an attempt; the game loop reports
the error message and asks again.
"""

from __future__ import annotations

import string
from typing import Container

from termwordle.errors import NonAlphabetic, NotInDictionary, WrongLength

LETTERS = frozenset(string.ascii_letters)
_TERMINATORS = ("\r\n", "\n", "\r")


def strip_terminator(raw: str) -> str:
    """Remove a single trailing line terminator, if present."""
    for t in _TERMINATORS:
        if raw.endswith(t):
            return raw[: -len(t)]
    return raw


def is_word(text: str) -> bool:
    """True if `text` is non-empty and made only of ASCII letters."""
    return bool(text) and all(c in LETTERS for c in text)


def validate_guess(raw: str, N: int, dictionary: Container[str]) -> str:
    """
    Return the normalised guess, or raise a ValidationError subclass.

    Args:
      raw        : the line as read from input (may end with a newline)
      N          : required word length
      dictionary : anything supporting `word in dictionary` (usually a
                   termwordle.datasets.Dictionary)
    """
    w = strip_terminator(raw)

    if len(w) != N:
        raise WrongLength(N, len(w))

    if not is_word(w):
        raise NonAlphabetic(w)

    w = w.lower()

    if w not in dictionary:
        raise NotInDictionary(w)

    return w
