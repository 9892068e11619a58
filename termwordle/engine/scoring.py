"""
Guess evaluation (feedback) for a single (guess, answer) pair.

Conventions:
  - Verdict.CORRECT ('G') : right letter in the right position
  - Verdict.PRESENT ('Y') : right letter in the wrong position
  - Verdict.ABSENT  ('-') : letter not present (or present fewer times than guessed)

Algorithm (two-pass):
  1) First pass marks every exact match and counts the answer letters that
     were NOT matched exactly.
  2) Second pass walks the remaining guess positions left to right and marks
     PRESENT only while that letter still has a remaining count.

Exact matches always consume their letter before any PRESENT is handed out,
so a repeated guess letter never earns more feedback than the answer holds.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List, Sequence


class Verdict(str, Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"


def evaluate(guess: str, answer: str, length: int) -> List[Verdict]:
    """
    Compute the per-position verdicts for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer) == length
      - both are normalised (lowercase) words

    Examples:
      evaluate("crane", "crate", 5) -> [CORRECT, CORRECT, CORRECT, ABSENT, CORRECT]
    """
    assert len(guess) == length and len(answer) == length, \
        "Guess and answer must both have the session word length"

    verdicts = [Verdict.ABSENT] * length

    # Pass 1: exact matches; everything else in the answer stays available.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            verdicts[i] = Verdict.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: PRESENT only while the letter has unconsumed occurrences.
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if remaining[g] > 0:
            verdicts[i] = Verdict.PRESENT
            remaining[g] -= 1

    return verdicts


def to_pattern(verdicts: Sequence[Verdict]) -> str:
    """Join verdicts into the compact form, e.g. "GG-YG"."""
    return "".join(v.value for v in verdicts)


def score(guess: str, answer: str) -> str:
    """
    Compact feedback pattern for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return to_pattern(evaluate(guess, answer, len(answer)))


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(c == Verdict.CORRECT.value for c in pattern)
