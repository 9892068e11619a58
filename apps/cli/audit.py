# apps/cli/audit.py
"""
Audit a dictionary file before playing with it.

Prints a one-line summary (word counts per playable length, skipped lines,
duplicates, SHA-256) and any issues found. Exit status: 0 if every length
3..9 can start a game, 1 if some length has no words, 2 if the file can't be
opened.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from termwordle.config import DEFAULT_DICTIONARY, EXIT_DICTIONARY
from termwordle.datasets import audit_dictionary, pretty_summary


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="termwordle-audit",
                                 description="termwordle: audit a dictionary file")
    ap.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY,
                    help=f"word list to audit (default {DEFAULT_DICTIONARY})")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show scan progress (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    rep = audit_dictionary(args.dictionary, progress=(mode == "bar"))

    if args.json:
        print(json.dumps(rep, indent=2))
    else:
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")

    if not rep["exists"]:
        return EXIT_DICTIONARY
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
