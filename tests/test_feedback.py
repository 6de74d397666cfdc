from collections import Counter
from itertools import product

import pytest

from puzzles.feedback import (
    ABSENT,
    CORRECT,
    PRESENT,
    letter_states,
    pattern_to_int,
    score_guess,
)

C, P, A = CORRECT, PRESENT, ABSENT


def test_exact_match_is_all_correct():
    assert score_guess("APPLE", "APPLE") == (C, C, C, C, C)


def test_anagram_without_exact_hits_is_all_present():
    row = score_guess("ALERT", "LATER")
    assert row[0] == P and row[1] == P and row[2] == P
    assert row == (P, P, P, P, P)


@pytest.mark.parametrize(
    "guess, answer, expected",
    [
        ("ALLOT", "TOTAL", (P, P, A, P, P)),
        ("ABBEY", "CABIN", (P, A, C, A, A)),
        ("PRESS", "SPREE", (P, P, P, P, A)),
        ("SPEED", "ABIDE", (A, A, P, A, P)),
    ],
)
def test_duplicate_letters(guess, answer, expected):
    assert score_guess(guess, answer) == expected


def test_any_word_length():
    assert score_guess("AB", "BA") == (P, P)
    assert score_guess("TRAINS", "STRAIN") == (P, P, P, P, P, P)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        score_guess("APPLE", "APPLES")


def test_multiset_conservation_on_small_alphabet():
    # Every 4-letter word over {A, B, C} against every other
    words = ["".join(p) for p in product("ABC", repeat=4)]
    for guess in words:
        for answer in words:
            row = score_guess(guess, answer)
            hits = Counter(g for g, s in zip(guess, row) if s != ABSENT)
            available = Counter(answer)
            for letter, n in hits.items():
                assert n <= available[letter], (guess, answer, row)


def test_pattern_to_int_bounds():
    assert pattern_to_int((A, A, A, A, A)) == 0
    assert pattern_to_int((C, C, C, C, C)) == 242
    with pytest.raises(ValueError):
        pattern_to_int(("green",))


def test_letter_states_only_upgrade():
    answer = "APPLE"
    guesses = ["PAPER", "ALLEY"]
    rows = [score_guess(g, answer) for g in guesses]
    states = letter_states(guesses, rows)
    assert states == {
        "P": C,  # present at 0, correct at 2 in the same row
        "A": C,  # present first, then correct
        "E": P,
        "R": A,
        "L": P,  # second L is absent but never downgrades
        "Y": A,
    }


def test_letter_states_keeps_correct_after_absent_evidence():
    answer = "APPLE"
    guesses = ["PAPER", "PUPPY"]
    rows = [score_guess(g, answer) for g in guesses]
    assert letter_states(guesses, rows)["P"] == C
