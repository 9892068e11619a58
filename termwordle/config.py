"""
Game configuration.

Single source of truth for the word-length bounds, the defaults used by the
CLI and the process exit codes. `GameConfig` bundles one session's settings
and rejects values outside the playable range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 9
DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_GUESSES = 6
DEFAULT_DICTIONARY = "/usr/share/dict/words"

# Process exit codes
EXIT_WON = 0
EXIT_END_OF_INPUT = 1
EXIT_USAGE = 1
EXIT_DICTIONARY = 2
EXIT_EXHAUSTED = 3


def check_range(name: str, value: int) -> int:
    """Return `value` if it lies in [MIN_WORD_LENGTH, MAX_WORD_LENGTH], else raise ValueError."""
    if not MIN_WORD_LENGTH <= value <= MAX_WORD_LENGTH:
        raise ValueError(
            f"{name} must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}; got {value}")
    return value


@dataclass(frozen=True)
class GameConfig:
    """Settings for one session."""
    word_length: int = DEFAULT_WORD_LENGTH
    max_guesses: int = DEFAULT_MAX_GUESSES
    dictionary: str = DEFAULT_DICTIONARY
    seed: Optional[int] = None   # None -> answer differs every run
    color: bool = True

    def __post_init__(self):
        check_range("word_length", self.word_length)
        check_range("max_guesses", self.max_guesses)
