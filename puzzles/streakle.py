"""
streakle.py

Three targets solved in sequence with one shared guess budget.

The round opens with an auto-played start word. Every guess is scored against
all three targets, so later targets benefit from earlier guesses. While a
target is active, letters already shown ``correct`` for it are locked in
place: a guess that moves them is refused without spending a turn. Locks are
derived from the active target's own feedback, so they reset whenever the
active target changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Container, Dict, Optional, Sequence, Tuple, Union

from puzzles import game_settings as gs
from puzzles.constraints import Pattern, locked_pattern, matches_pattern, pattern_string
from puzzles.feedback import FeedbackRow, Score, letter_states, score_guess
from puzzles.sampler import WordSampler
from puzzles.session import (
    GameStatus,
    Rejection,
    RejectReason,
    check_guess,
    normalize_guess,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakleState:
    targets: Tuple[str, ...]
    start_word: str
    guesses: Tuple[str, ...]
    boards: Tuple[Tuple[FeedbackRow, ...], ...]
    solved: Tuple[bool, ...]
    active: int
    status: GameStatus = GameStatus.IN_PROGRESS
    max_guesses: int = gs.STREAKLE_MAX_GUESSES

    @property
    def remaining(self) -> int:
        return max(self.max_guesses - len(self.guesses), 0)

    @property
    def done(self) -> bool:
        return self.status.done

    @property
    def solved_count(self) -> int:
        return sum(self.solved)

    @property
    def active_target(self) -> str:
        return self.targets[self.active]

    @property
    def locked(self) -> Pattern:
        """Slots proven correct for the active target."""
        return locked_pattern(self.guesses, self.boards[self.active], len(self.active_target))

    @property
    def letter_states(self) -> Dict[str, Score]:
        """Keyboard hints against the active target only."""
        return letter_states(self.guesses, self.boards[self.active])


def _status(solved: Sequence[bool], used: int, max_guesses: int) -> GameStatus:
    if all(solved):
        return GameStatus.WON
    if used >= max_guesses:
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS


def _first_unsolved(solved: Sequence[bool]) -> Optional[int]:
    for i, done in enumerate(solved):
        if not done:
            return i
    return None


def start_state(
    start_word: str,
    targets: Sequence[str],
    max_guesses: int = gs.STREAKLE_MAX_GUESSES,
) -> StreakleState:
    """Auto-play `start_word` as guess #1 and pick the first unsolved target."""
    targets = tuple(targets)
    guesses = (start_word,)
    boards = tuple((score_guess(start_word, t),) for t in targets)
    solved = tuple(t == start_word for t in targets)
    first = _first_unsolved(solved)
    return StreakleState(
        targets=targets,
        start_word=start_word,
        guesses=guesses,
        boards=boards,
        solved=solved,
        active=0 if first is None else first,
        status=_status(solved, len(guesses), max_guesses),
        max_guesses=max_guesses,
    )


def apply_guess(
    state: StreakleState, guess: str, corpus: Container[str]
) -> Union[StreakleState, Rejection]:
    rejection = check_guess(
        guess,
        status=state.status,
        length=len(state.active_target),
        corpus=corpus,
        used=len(state.guesses),
        max_guesses=state.max_guesses,
    )
    if rejection is not None:
        return rejection

    locked = state.locked
    if not matches_pattern(guess, locked):
        return Rejection(
            RejectReason.LOCKED_POSITION,
            f"Keep green letters locked: {pattern_string(locked)}",
        )

    guesses = state.guesses + (guess,)
    boards = tuple(
        rows + (score_guess(guess, target),)
        for rows, target in zip(state.boards, state.targets)
    )
    solved = tuple(t in guesses for t in state.targets)

    active = state.active
    if solved[active]:
        nxt = _first_unsolved(solved)
        if nxt is not None:
            active = nxt

    return replace(
        state,
        guesses=guesses,
        boards=boards,
        solved=solved,
        active=active,
        status=_status(solved, len(guesses), state.max_guesses),
    )


class StreakleSession:
    """
    Streakle round over a corpus.

    Parameters
    ----------
    corpus : Sequence[str]
        Allowed guesses; the start word and targets are drawn from it too.
    sampler : WordSampler | None
        Random source for the start word and targets.
    start_word, targets : optional
        Fix the first round (targets distinct, none equal to the start word).
    """

    def __init__(
        self,
        corpus: Sequence[str],
        sampler: Optional[WordSampler] = None,
        *,
        start_word: Optional[str] = None,
        targets: Optional[Sequence[str]] = None,
        target_count: int = gs.STREAKLE_TARGETS,
        max_guesses: int = gs.STREAKLE_MAX_GUESSES,
    ) -> None:
        if len(corpus) == 0:
            raise ValueError("empty corpus")
        self.corpus = corpus
        self.sampler = sampler if sampler is not None else WordSampler()
        self.target_count = int(target_count)
        self.max_guesses = int(max_guesses)
        self._state = self.new_round(start_word, targets)

    @property
    def state(self) -> StreakleState:
        return self._state

    def new_round(
        self, start_word: Optional[str] = None, targets: Optional[Sequence[str]] = None
    ) -> StreakleState:
        if start_word is None:
            start_word = self.sampler.choice(self.corpus)
        elif start_word not in self.corpus:
            raise ValueError(f"start word {start_word!r} is not in the corpus")

        if targets is None:
            targets = self.sampler.distinct(self.corpus, self.target_count, exclude=(start_word,))
        else:
            targets = list(targets)
            if len(targets) != self.target_count:
                raise ValueError(f"expected {self.target_count} targets, got {len(targets)}")
            if len(set(targets)) != len(targets) or start_word in targets:
                raise ValueError("targets must be distinct from each other and the start word")
            missing = [t for t in targets if t not in self.corpus]
            if missing:
                raise ValueError(f"targets not in corpus: {missing}")

        self._state = start_state(start_word, targets, self.max_guesses)
        log.info(
            "streakle round started: %s auto-played, %d guesses left",
            start_word,
            self._state.remaining,
        )
        return self._state

    def submit(self, raw: str) -> Union[StreakleState, Rejection]:
        result = apply_guess(self._state, normalize_guess(raw), self.corpus)
        if isinstance(result, Rejection):
            log.debug("streakle rejected %r: %s", raw, result.reason.value)
            return result
        if result.active != self._state.active:
            log.debug("streakle target %d solved; now on target %d", self._state.active, result.active)
        self._state = result
        return result
