from pathlib import Path
from termwordle.datasets import audit_dictionary, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


ALL_LENGTHS = ["cat", "crab", "crane", "planet", "kittens", "strength", "abandoned"]


def test_audit_dictionary_happy_path(tmp_path: Path):
    words = tmp_path / "words"
    _write(words, ALL_LENGTHS + ["level"])

    rep = audit_dictionary(str(words))
    assert rep["passed"] is True
    assert rep["exists"] is True
    assert rep["words"] == 8
    assert rep["counts_by_length"][5] == 2
    assert rep["missing_lengths"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=8" in s and "5:2" in s and s.endswith("OK")


def test_audit_dictionary_flags_missing_lengths(tmp_path: Path):
    words = tmp_path / "words"
    _write(words, ["crane", "stare", "cat"])

    rep = audit_dictionary(str(words))
    assert rep["passed"] is False
    assert 4 in rep["missing_lengths"] and 5 not in rep["missing_lengths"]
    assert any("no words of length" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_audit_dictionary_counts_skipped_and_duplicates(tmp_path: Path):
    words = tmp_path / "words"
    # "Cat's" normalises to "cats", duplicating "cats"; the rest are not words
    _write(words, ALL_LENGTHS + ["cats", "Cat's", "", "e-mail", "café"])

    rep = audit_dictionary(str(words))
    assert rep["skipped_lines"] == 3
    assert rep["words"] == 9
    assert rep["unique_words"] == 8
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("skipped" in msg for msg in rep["issues"])
    # still playable at every length
    assert rep["passed"] is True


def test_audit_dictionary_unreadable(tmp_path: Path):
    rep = audit_dictionary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert "unreadable" in pretty_summary(rep)
