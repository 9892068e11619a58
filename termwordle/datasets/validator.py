"""
Dictionary audit for termwordle.

What this module does:
- Scan a dictionary file line by line (with an optional tqdm progress bar,
  useful for the ~100k-line system word list).
- Apply the same normalisation the game uses (lowercase, apostrophes removed,
  ASCII letters only) and count what survives per word length.
- Flag lines that are not playable words, duplicate entries and playable
  lengths (3..9) that have no words at all.
- Return a machine-readable dict and a pretty one-line summary.

Typical use:
    from termwordle.datasets import audit_dictionary, pretty_summary
    rep = audit_dictionary("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from tqdm import tqdm

from termwordle.config import MIN_WORD_LENGTH, MAX_WORD_LENGTH
from .io import normalize_entry


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class AuditReport:
    """Diagnostics for a single dictionary file."""
    path: str                       # file path (as given)
    exists: bool                    # could the file be opened?
    sha256: str                     # SHA-256 of raw file bytes ("" if unreadable)
    lines: int                      # raw lines read
    words: int                      # lines that normalise to a word
    unique_words: int               # distinct words after normalisation
    skipped_lines: int              # blank / non-alphabetic lines
    counts_by_length: Dict[int, int] = field(default_factory=dict)  # playable lengths only
    missing_lengths: List[int] = field(default_factory=list)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def audit_dictionary(path: str, *, progress: bool = False) -> Dict:
    """
    Audit a one-word-per-line dictionary file.

    Parameters
    ----------
    path : str
        Dictionary file to scan.
    progress : bool
        Show a tqdm progress bar on stderr while scanning.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see AuditReport). `passed` is True
        when the file is readable and every length in 3..9 has at least one
        word, i.e. every -len the CLI accepts can start a game.
    """
    p = Path(path)
    playable = range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1)

    try:
        sha = _sha256_file(p)
    except OSError as e:
        rep = AuditReport(path=str(path), exists=False, sha256="", lines=0, words=0,
                          unique_words=0, skipped_lines=0,
                          missing_lengths=list(playable),
                          issues=[f"dictionary file cannot be opened: {e}"])
        return asdict(rep)

    lines = 0
    skipped = 0
    words: List[str] = []
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for raw in tqdm(f, desc="Auditing", unit="line", ncols=80, disable=not progress):
            lines += 1
            w = normalize_entry(raw)
            if w is None:
                skipped += 1
                continue
            words.append(w)

    unique = set(words)
    counts = {n: 0 for n in playable}
    for w in unique:
        if len(w) in counts:
            counts[len(w)] += 1
    missing = [n for n, c in counts.items() if c == 0]

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 usable words")
    if missing:
        issues.append(f"no words of length {missing}")
    if skipped:
        issues.append(f"{skipped} line(s) skipped (blank or not letters only)")
    if len(words) != len(unique):
        issues.append(f"{len(words) - len(unique)} duplicate word(s) after normalisation")

    rep = AuditReport(
        path=str(p),
        exists=True,
        sha256=sha,
        lines=lines,
        words=len(words),
        unique_words=len(unique),
        skipped_lines=skipped,
        counts_by_length=counts,
        missing_lengths=missing,
        passed=not missing,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        /usr/share/dict/words | words=102401 (uniq=99171, skipped=3) | 3:1135 4:4181 ... 9:13925 | sha=abc123... | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"{report['path']} | unreadable | {status}"
    per_len = " ".join(f"{n}:{c}" for n, c in report["counts_by_length"].items())
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['words']} "
        f"(uniq={report['unique_words']}, skipped={report['skipped_lines']}) "
        f"| {per_len} | sha={sha} | {status}"
    )
