# apps/cli/play.py
"""
CLI entry point for playing termwordle.

This script:
  1) Parses -len / -max / dictionary (plus --seed, --no-color, -v).
  2) Loads the dictionary and draws an answer of the requested length.
  3) Plays one session on stdin/stdout and exits with the outcome's code:
       0 won, 1 end of input, 2 dictionary unusable, 3 guesses exhausted.
Usage errors print the usage message to stderr and exit 1.
"""

from __future__ import annotations

import argparse
import io
import logging
import random
import string
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from termwordle.config import (
    DEFAULT_DICTIONARY, DEFAULT_MAX_GUESSES, DEFAULT_WORD_LENGTH,
    EXIT_DICTIONARY, EXIT_END_OF_INPUT, EXIT_EXHAUSTED, EXIT_USAGE, EXIT_WON,
    GameConfig, check_range,
)
from termwordle.datasets import Dictionary
from termwordle.errors import DictionaryLoadError, NoWordsOfLength
from termwordle.game import GameSession, Outcome, play

PROG = "termwordle"

EXIT_CODES = {
    Outcome.WON: EXIT_WON,
    Outcome.LOST_EARLY_TERMINATION: EXIT_END_OF_INPUT,
    Outcome.LOST_EXHAUSTED: EXIT_EXHAUSTED,
}

logger = logging.getLogger(__name__)


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EXIT_USAGE instead of argparse's 2 (2 means a bad dictionary)."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


class StoreOnce(argparse.Action):
    """Store a value, rejecting a second occurrence of the same flag."""

    def __call__(self, parser, namespace, values, option_string=None):
        # defaults are None so that an explicit "-len 5" still counts as given
        if getattr(namespace, self.dest) is not None:
            parser.error(f"{option_string} given more than once")
        setattr(namespace, self.dest, values)


def _bounded_int(text: str) -> int:
    # a single digit only: "05", "+5" and " 5" are rejected
    if len(text) != 1 or text not in string.digits:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    value = int(text)
    try:
        return check_range("value", value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    ap = UsageParser(
        prog=PROG,
        description="termwordle: guess the hidden word",
        allow_abbrev=False,
    )
    ap.add_argument("-len", dest="length", type=_bounded_int, action=StoreOnce, default=None,
                    metavar="word-length", help=f"word length, 3-9 (default {DEFAULT_WORD_LENGTH})")
    ap.add_argument("-max", dest="max_guesses", type=_bounded_int, action=StoreOnce, default=None,
                    metavar="max-guesses", help=f"number of guesses, 3-9 (default {DEFAULT_MAX_GUESSES})")
    ap.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY,
                    help=f"word list, one word per line (default {DEFAULT_DICTIONARY})")
    ap.add_argument("--seed", type=int, help="RNG seed for choosing the answer (for reproducibility)")
    ap.add_argument("--no-color", action="store_true", help="plain feedback without ANSI colours")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        word_length=DEFAULT_WORD_LENGTH if args.length is None else args.length,
        max_guesses=DEFAULT_MAX_GUESSES if args.max_guesses is None else args.max_guesses,
        dictionary=args.dictionary,
        seed=args.seed,
        color=not args.no_color,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse args, load the dictionary, play one session and return the exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    just_fix_windows_console()
    # undecodable guess bytes become U+FFFD and are rejected as non-letters
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    cfg = config_from_args(args)
    logger.debug("Config: %s", cfg)

    # 1) Dictionary + answer; both failures are fatal before any game starts
    try:
        dictionary = Dictionary.load(cfg.dictionary)
        session = GameSession.new(
            dictionary,
            word_length=cfg.word_length,
            max_guesses=cfg.max_guesses,
            rng=random.Random(cfg.seed),
        )
    except DictionaryLoadError as e:
        logger.debug("Load failed: %s", e.reason)
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_DICTIONARY
    except NoWordsOfLength as e:
        print(f"{PROG}: {e} ({cfg.dictionary})", file=sys.stderr)
        return EXIT_DICTIONARY

    # 2) Play
    outcome = play(session, dictionary, color=cfg.color)
    return EXIT_CODES[outcome]


if __name__ == "__main__":
    sys.exit(main())
