"""
Types shared by the per-mode sessions.

Every session exposes a frozen state snapshot and a single ``submit``
transition. A submit either returns the next snapshot or a :class:`Rejection`
describing why the guess was refused; a rejected guess never changes state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Container, Optional


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def done(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class RejectReason(str, Enum):
    GAME_OVER = "game_over"
    WRONG_LENGTH = "wrong_length"
    NOT_IN_WORD_LIST = "not_in_word_list"
    NO_GUESSES_LEFT = "no_guesses_left"
    LOCKED_POSITION = "locked_position"
    PATTERN_MISMATCH = "pattern_mismatch"
    ALREADY_FOUND = "already_found"
    TOO_SHORT = "too_short"
    MISSING_CENTER = "missing_center"
    OUTSIDE_HIVE = "outside_hive"


@dataclass(frozen=True)
class Rejection:
    reason: RejectReason
    message: str

    def __str__(self) -> str:
        return self.message


def normalize_guess(raw: str) -> str:
    """Trim and uppercase user input the way every mode expects it."""
    if not isinstance(raw, str):
        raise TypeError("guess must be a string")
    return raw.strip().upper()


def check_guess(
    guess: str,
    *,
    status: GameStatus,
    length: int,
    corpus: Container[str],
    used: int,
    max_guesses: int,
) -> Optional[Rejection]:
    """
    Validation common to the fixed-length guessing modes.

    Checked in order: game over, wrong length, unknown word, budget spent.
    Returns None when the guess may be played.
    """
    if status.done:
        return Rejection(RejectReason.GAME_OVER, "The game is over. Start a new game.")
    if len(guess) != length:
        return Rejection(RejectReason.WRONG_LENGTH, f"Your guess must be {length} letters.")
    if guess not in corpus:
        return Rejection(RejectReason.NOT_IN_WORD_LIST, "That word is not in the allowed word list.")
    if used >= max_guesses:
        return Rejection(RejectReason.NO_GUESSES_LEFT, "No guesses left. Start a new game.")
    return None
