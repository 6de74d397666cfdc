"""
constraints.py

Letter templates and history-derived constraints.

A pattern is a tuple with one slot per position: either an uppercase letter
that the word must carry there, or the wildcard ``"_"``.
"""

from typing import List, Sequence, Tuple

from puzzles.feedback import CORRECT, score_guess
from puzzles.game_settings import WILDCARD

Pattern = Tuple[str, ...]


def matches_pattern(word: str, pattern: Sequence[str]) -> bool:
    """True iff `word` has the pattern's length and agrees with every fixed slot."""
    if len(word) != len(pattern):
        return False
    for ch, slot in zip(word, pattern):
        if slot != WILDCARD and ch != slot:
            return False
    return True


def pattern_string(pattern: Sequence[str]) -> str:
    return "".join(pattern)


def locked_pattern(
    guesses: Sequence[str], rows: Sequence[Sequence[str]], length: int
) -> Pattern:
    """
    Pin every slot that some guess scored ``correct`` in `rows`.

    `rows` must be the feedback of `guesses` against a single answer, so all
    correct hits at a slot agree on the letter.
    """
    pattern = [WILDCARD] * length
    for guess, row in zip(guesses, rows):
        for i, status in enumerate(row):
            if status == CORRECT:
                pattern[i] = guess[i]
    return tuple(pattern)


def consistent_with(word: str, guess: str, row: Sequence[str]) -> bool:
    """True if `word`, taken as the answer, would have produced `row` for `guess`."""
    return score_guess(guess, word) == tuple(row)


def filter_candidates(
    words: Sequence[str], history: Sequence[Tuple[str, Sequence[str]]]
) -> List[str]:
    """
    Keep only candidates that match *all* (guess, row) pairs in history.
    Uses score_guess for correctness.
    """
    candidates = []
    for w in words:
        ok = True
        for guess, row in history:
            if not consistent_with(w, guess, row):
                ok = False
                break
        if ok:
            candidates.append(w)
    return candidates
