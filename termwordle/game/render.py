"""
Terminal rendering of feedback.

Presentation only: turns a guess and its verdicts into a line of text.
  - CORRECT -> the letter upper-cased, in green
  - PRESENT -> the letter lower-cased, in yellow
  - ABSENT  -> a '-' placeholder

With color=False the same characters are produced without ANSI codes, so
"crane" vs "crate" renders as "CRA-E".
"""

from __future__ import annotations

from typing import Sequence

from colorama import Fore, Style

from termwordle.engine import Verdict

PLACEHOLDER = "-"


def paint(text: str, colour: str, *, color: bool = True) -> str:
    """Wrap `text` in a colorama foreground colour (no-op when color=False)."""
    if not color:
        return text
    return f"{colour}{text}{Style.RESET_ALL}"


def render_guess(guess: str, verdicts: Sequence[Verdict], *, color: bool = True) -> str:
    out = []
    for ch, v in zip(guess, verdicts):
        if v is Verdict.CORRECT:
            out.append(paint(ch.upper(), Fore.GREEN, color=color))
        elif v is Verdict.PRESENT:
            out.append(paint(ch.lower(), Fore.YELLOW, color=color))
        else:
            out.append(PLACEHOLDER)
    return "".join(out)


def render_win(*, color: bool = True) -> str:
    return paint("Correct!", Fore.GREEN, color=color)


def render_reveal(answer: str, *, color: bool = True) -> str:
    return paint(f'Bad luck - the word is "{answer}".', Fore.RED, color=color)
