"""
Dictionary store.

Holds the valid words for a session, loaded once and read-only afterwards:
  - membership lookup for guesses (`word in dictionary`)
  - uniform random choice of an answer with a given length

Randomness is always supplied by the caller as a `random.Random`, so a
seeded session picks the same answer every time.
"""

from __future__ import annotations

import logging
import os
import random
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from termwordle.errors import DictionaryLoadError, NoWordsOfLength
from .io import normalize_entry, read_lines

logger = logging.getLogger(__name__)


class Dictionary:
    """An ordered, immutable collection of lowercase words."""

    def __init__(self, words: Iterable[str]):
        # dict.fromkeys dedupes while keeping first-seen order
        ordered = tuple(dict.fromkeys(words))
        self._words: Tuple[str, ...] = ordered
        self._lookup = frozenset(ordered)
        by_length: Dict[int, List[str]] = defaultdict(list)
        for w in ordered:
            by_length[len(w)].append(w)
        self._by_length: Dict[int, Tuple[str, ...]] = {n: tuple(ws) for n, ws in by_length.items()}

    @classmethod
    def from_words(cls, entries: Iterable[str]) -> "Dictionary":
        """Build from raw entries, applying the same normalisation as load()."""
        words = []
        skipped = 0
        for raw in entries:
            w = normalize_entry(raw)
            if w is None:
                skipped += 1
                continue
            words.append(w)
        if skipped:
            logger.debug("Skipped %d entries that are not plain words", skipped)
        return cls(words)

    @classmethod
    def load(cls, source: Union[str, os.PathLike]) -> "Dictionary":
        """
        Read a one-word-per-line file.

        Raises:
          DictionaryLoadError if the file can't be opened or read.
        """
        try:
            lines = read_lines(source)
        except OSError as e:
            raise DictionaryLoadError(source, reason=str(e)) from e

        d = cls.from_words(lines)
        logger.info("Loaded %d words from %s", len(d), source)
        return d

    def contains(self, word: str) -> bool:
        return word in self._lookup

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        return self._by_length.get(length, ())

    def count_by_length(self) -> Dict[int, int]:
        """Number of words per length, sorted by length."""
        return {n: len(self._by_length[n]) for n in sorted(self._by_length)}

    def pick_random(self, length: int, rng: Optional[random.Random] = None) -> str:
        """
        Uniformly choose a word with exactly `length` letters.

        Raises:
          NoWordsOfLength if there isn't one; callers should check
          words_of_length() first when the length comes from the user.
        """
        pool = self.words_of_length(length)
        if not pool:
            raise NoWordsOfLength(length)
        rng = rng or random.Random()
        return pool[rng.randrange(len(pool))]
