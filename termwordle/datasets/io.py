from __future__ import annotations

from pathlib import Path
from typing import List, Optional


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Undecodable bytes are replaced rather than raising.
    Raises FileNotFoundError if the path doesn't exist (other OSErrors, such
    as a directory or a permission problem, propagate from the read).
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8", errors="replace").splitlines()


def normalize_entry(raw: str) -> Optional[str]:
    """
    Turn one dictionary line into a Word, or None if it isn't one.

    Lower-cases and drops apostrophes, so a possessive such as "Cat's"
    becomes "cats". Anything left that is not pure ASCII letters (blank
    lines, hyphens, accented letters) is not a Word.
    """
    w = raw.strip().lower().replace("'", "")
    if w and w.isascii() and w.isalpha():
        return w
    return None
