import io
import random

import pytest
from termwordle.datasets import Dictionary
from termwordle.game import GameSession, Outcome, play, render_guess
from termwordle.engine import Verdict


WORDS = ["crate", "crane", "stare", "raise", "trace", "cat"]


@pytest.fixture
def dictionary():
    return Dictionary.from_words(WORDS)


def _play(dictionary, lines, *, answer="crate", max_guesses=6):
    session = GameSession(answer=answer, word_length=len(answer), max_guesses=max_guesses)
    out, err = io.StringIO(), io.StringIO()
    outcome = play(session, dictionary, stdin=io.StringIO(lines), stdout=out, stderr=err,
                   color=False)
    return session, outcome, out.getvalue(), err.getvalue()


def test_win_on_first_guess(dictionary):
    session, outcome, out, err = _play(dictionary, "crate\n")
    assert outcome is Outcome.WON
    assert session.guesses_remaining == 6
    assert session.history == [("crate", "GGGGG")]
    assert out.startswith("Welcome to Terminal Wordle!")
    assert "Correct!" in out
    assert err == ""


def test_feedback_then_win(dictionary):
    session, outcome, out, _ = _play(dictionary, "crane\nCRATE\n")
    assert outcome is Outcome.WON
    assert session.guesses_remaining == 5
    assert "CRA-E" in out
    assert "(5 attempts remaining)" in out


def test_invalid_guesses_do_not_use_attempts(dictionary):
    session, outcome, out, _ = _play(dictionary, "cat\n12345\nzzzzz\ncrate\n")
    assert outcome is Outcome.WON
    assert session.guesses_remaining == 6
    assert "Words must be 5 letters long - try again." in out
    assert "Words must contain only letters - try again." in out
    assert "Word not found in the dictionary - try again." in out
    assert out.count("Enter a 5 letter word (6 attempts remaining):") == 4


def test_single_guess_exhausted(dictionary):
    session, outcome, out, err = _play(dictionary, "crane\n", max_guesses=1)
    assert outcome is Outcome.LOST_EXHAUSTED
    assert session.guesses_remaining == 0
    assert "(last attempt)" in out
    assert 'Bad luck - the word is "crate".' in err


def test_exhausted_after_all_guesses(dictionary):
    session, outcome, out, err = _play(dictionary, "crane\nstare\ntrace\ncrate\n", max_guesses=3)
    assert outcome is Outcome.LOST_EXHAUSTED
    assert [g for g, _ in session.history] == ["crane", "stare", "trace"]
    assert "crate" in err


def test_end_of_input_on_first_turn(dictionary):
    session, outcome, out, err = _play(dictionary, "")
    assert outcome is Outcome.LOST_EARLY_TERMINATION
    assert session.guesses_remaining == session.max_guesses
    assert session.history == []
    assert 'the word is "crate"' in err


def test_end_of_input_after_partial_line(dictionary):
    session, outcome, out, _ = _play(dictionary, "crane\ncra")
    assert outcome is Outcome.LOST_EARLY_TERMINATION
    assert session.guesses_remaining == 5
    assert "Words must be 5 letters long" in out


def test_submit_after_finish_raises(dictionary):
    session, outcome, _, _ = _play(dictionary, "crate\n")
    with pytest.raises(RuntimeError):
        session.submit("crane")
    with pytest.raises(RuntimeError):
        session.end_of_input()


def test_session_rejects_answer_of_wrong_length():
    with pytest.raises(ValueError):
        GameSession(answer="cat", word_length=5)


def test_new_session_draws_answer_of_length(dictionary):
    s1 = GameSession.new(dictionary, word_length=5, max_guesses=4, rng=random.Random(9))
    s2 = GameSession.new(dictionary, word_length=5, max_guesses=4, rng=random.Random(9))
    assert s1.answer == s2.answer
    assert len(s1.answer) == 5 and s1.answer in dictionary
    assert s1.guesses_remaining == 4 and s1.outcome is Outcome.IN_PROGRESS


def test_render_guess_plain_and_coloured():
    v = [Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT]
    assert render_guess("eel", v, color=False) == "Ee-"
    coloured = render_guess("eel", v)
    assert "\x1b[32mE" in coloured and "\x1b[33me" in coloured
    assert coloured.endswith("-")


def test_submit_wins_only_on_all_correct_pattern():
    session = GameSession(answer="crate", word_length=5, max_guesses=3)
    session.submit("crane")
    assert session.outcome is Outcome.IN_PROGRESS
    session.submit("crate")
    assert session.outcome is Outcome.WON
    assert session.history[-1] == ("crate", "GGGGG")
    assert session.guesses_remaining == 2
