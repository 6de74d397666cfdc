"""
Feedback utilities shared by every guessing mode.

A guess is scored position by position as ``"correct"``, ``"present"`` or
``"absent"``. Duplicate letters follow the two-pass rule: exact matches are
removed from the answer first, and a misplaced guess letter is ``present``
only while uncounted copies of it remain in the answer.
"""

from collections import Counter
from typing import Dict, Iterable, Literal, Sequence, Tuple

Score = Literal["correct", "present", "absent"]
FeedbackRow = Tuple[Score, ...]

CORRECT: Score = "correct"
PRESENT: Score = "present"
ABSENT: Score = "absent"

# Integer codes, also the keyboard-hint precedence (higher wins)
SCORE_CODES: Dict[str, int] = {ABSENT: 0, PRESENT: 1, CORRECT: 2}


def score_guess(guess: str, answer: str) -> FeedbackRow:
    """
    Compute the feedback row for `guess` against `answer`.

    Returns
    -------
    tuple[str, ...]
        One entry per position, each in {"correct", "present", "absent"}.

    Raises
    ------
    TypeError
        If either argument is not a string.
    ValueError
        If the lengths differ.

    Examples
    --------
    - 'APPLE' vs 'APPLE'  -> all correct
    - 'ALLOT' vs 'TOTAL'  -> present, present, absent, present, present
    - 'ABBEY' vs 'CABIN'  -> present, absent, correct, absent, absent
    """
    if not isinstance(guess, str) or not isinstance(answer, str):
        raise TypeError("guess and answer must be strings")
    if len(guess) != len(answer):
        raise ValueError(
            f"guess length ({len(guess)}) != answer length ({len(answer)})"
        )

    row: list = [ABSENT] * len(answer)
    remaining: Counter = Counter()

    # Pass 1: exact matches; tally the answer letters left over
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            row[i] = CORRECT
        else:
            remaining[a] += 1

    # Pass 2: misplaced letters while the leftover counts allow
    for i, g in enumerate(guess):
        if row[i] == CORRECT:
            continue
        if remaining[g] > 0:
            row[i] = PRESENT
            remaining[g] -= 1

    return tuple(row)


def pattern_to_int(row: Sequence[str]) -> int:
    """
    Encode a feedback row as a base-3 integer (absent=0, present=1, correct=2).

    A 5-letter row maps into [0, 242].
    """
    value = 0
    for s in row:
        try:
            code = SCORE_CODES[s]
        except KeyError:
            raise ValueError(f"unknown score: {s!r}") from None
        value = value * 3 + code
    return value


def is_solved(row: Sequence[str]) -> bool:
    return len(row) > 0 and all(s == CORRECT for s in row)


def letter_states(
    guesses: Iterable[str], rows: Iterable[Sequence[str]]
) -> Dict[str, Score]:
    """
    Aggregate keyboard hints over every guess so far.

    Precedence is correct > present > absent: evidence only ever upgrades a
    letter, so a letter once shown ``correct`` stays ``correct`` and a
    ``present`` letter is never knocked back to ``absent``.
    """
    states: Dict[str, Score] = {}
    for guess, row in zip(guesses, rows):
        for letter, status in zip(guess, row):
            prev = states.get(letter)
            if prev is None or SCORE_CODES[status] > SCORE_CODES[prev]:
                states[letter] = status
    return states
