"""
Game loop primitives.

- GameSession: the state of one play-through (answer, attempts left,
  history, outcome) and the only place that state changes.
- play: drive a session from a line-oriented input stream until it ends.

Outcomes:
  IN_PROGRESS -> WON                      a valid guess equals the answer
  IN_PROGRESS -> LOST_EXHAUSTED           the last attempt was used up
  IN_PROGRESS -> LOST_EARLY_TERMINATION   the input stream ran dry

Invalid guesses are reported and the turn is replayed without using an
attempt. The outcome changes exactly once.

These functions take their streams as arguments so they can be reused by the
CLI or driven from tests with io.StringIO.
"""

from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO, Tuple

from termwordle.config import DEFAULT_MAX_GUESSES, DEFAULT_WORD_LENGTH
from termwordle.datasets import Dictionary
from termwordle.engine import Verdict, evaluate, is_solved, to_pattern, validate_guess
from termwordle.errors import ValidationError
from .render import render_guess, render_reveal, render_win

logger = logging.getLogger(__name__)

WELCOME = "Welcome to Terminal Wordle!"


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST_EXHAUSTED = "lost_exhausted"
    LOST_EARLY_TERMINATION = "lost_early_termination"


@dataclass
class GameSession:
    """Mutable state of one session. Only submit() and end_of_input() change it."""
    answer: str
    word_length: int = DEFAULT_WORD_LENGTH
    max_guesses: int = DEFAULT_MAX_GUESSES
    guesses_remaining: int = field(init=False)
    outcome: Outcome = field(init=False, default=Outcome.IN_PROGRESS)
    # (guess, pattern) for every scored guess, winning guess included
    history: List[Tuple[str, str]] = field(init=False, default_factory=list)

    def __post_init__(self):
        if len(self.answer) != self.word_length:
            raise ValueError(
                f"answer {self.answer!r} does not have {self.word_length} letters")
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {self.max_guesses}")
        self.guesses_remaining = self.max_guesses

    @classmethod
    def new(
            cls,
            dictionary: Dictionary,
            *,
            word_length: int = DEFAULT_WORD_LENGTH,
            max_guesses: int = DEFAULT_MAX_GUESSES,
            rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Start a session with an answer drawn from `dictionary` (may raise NoWordsOfLength)."""
        answer = dictionary.pick_random(word_length, rng)
        return cls(answer=answer, word_length=word_length, max_guesses=max_guesses)

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def guesses_used(self) -> int:
        return self.max_guesses - self.guesses_remaining

    def _finish(self, outcome: Outcome) -> None:
        self.outcome = outcome
        logger.debug("Session over: %s after %d guess(es)", outcome.value, self.guesses_used)

    def _check_open(self) -> None:
        if self.finished:
            raise RuntimeError(f"session already finished ({self.outcome.value})")

    def submit(self, guess: str) -> List[Verdict]:
        """
        Score an already-validated guess and advance the state.

        A correct guess wins without using an attempt; any other guess uses
        one, and using the last one loses the game.
        """
        self._check_open()
        verdicts = evaluate(guess, self.answer, self.word_length)
        pattern = to_pattern(verdicts)
        self.history.append((guess, pattern))
        logger.debug("Guess %r scored %s", guess, pattern)

        if is_solved(pattern):
            self._finish(Outcome.WON)
            return verdicts

        self.guesses_remaining -= 1
        if self.guesses_remaining == 0:
            self._finish(Outcome.LOST_EXHAUSTED)
        return verdicts

    def end_of_input(self) -> None:
        """The player has no more input: end the session early."""
        self._check_open()
        self._finish(Outcome.LOST_EARLY_TERMINATION)


def prompt_for(session: GameSession) -> str:
    if session.guesses_remaining == 1:
        return f"Enter a {session.word_length} letter word (last attempt):"
    return (f"Enter a {session.word_length} letter word "
            f"({session.guesses_remaining} attempts remaining):")


def play(
        session: GameSession,
        dictionary: Dictionary,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        color: bool = True,
) -> Outcome:
    """
    Run `session` to completion, one line of input per turn.

    Args:
        session:    a fresh GameSession
        dictionary: valid guesses
        stdin:      line source; readline() returning "" means end of input
        stdout:     prompts, validation messages, feedback, the win message
        stderr:     the answer reveal after a loss
        color:      ANSI colours in feedback

    Returns:
        The terminal Outcome.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    print(WELCOME, file=stdout)
    while not session.finished:
        print(prompt_for(session), file=stdout)
        stdout.flush()

        raw = stdin.readline()
        if raw == "":
            session.end_of_input()
            break

        try:
            guess = validate_guess(raw, session.word_length, dictionary)
        except ValidationError as e:
            logger.debug("Rejected %r: %s", raw, type(e).__name__)
            print(e, file=stdout)
            continue

        verdicts = session.submit(guess)
        if session.outcome is not Outcome.WON:
            print(render_guess(guess, verdicts, color=color), file=stdout)

    if session.outcome is Outcome.WON:
        print(render_win(color=color), file=stdout)
    else:
        print(render_reveal(session.answer, color=color), file=stderr)
    return session.outcome
