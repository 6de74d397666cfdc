"""
quordle.py

Four Wordle boards played with one shared guess list.

Each guess is scored against every board. A board's win flag is sticky: it is
set the moment that board's answer is guessed and never cleared. The round is
won when every flag is set and lost when the shared budget runs out first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Container, Dict, Optional, Sequence, Tuple, Union

from puzzles import game_settings as gs
from puzzles.feedback import FeedbackRow, Score, letter_states, score_guess
from puzzles.sampler import WordSampler
from puzzles.session import GameStatus, Rejection, check_guess, normalize_guess

log = logging.getLogger(__name__)

BoardHints = Tuple[Optional[Score], ...]


@dataclass(frozen=True)
class QuordleState:
    answers: Tuple[str, ...]
    guesses: Tuple[str, ...] = ()
    boards: Tuple[Tuple[FeedbackRow, ...], ...] = ()
    wins: Tuple[bool, ...] = ()
    status: GameStatus = GameStatus.IN_PROGRESS
    max_guesses: int = gs.QUORDLE_MAX_GUESSES

    def __post_init__(self) -> None:
        # Fill per-board defaults from the answer count
        n = len(self.answers)
        if not self.boards:
            object.__setattr__(self, "boards", tuple(() for _ in range(n)))
        if not self.wins:
            object.__setattr__(self, "wins", tuple(False for _ in range(n)))

    @property
    def remaining(self) -> int:
        return max(self.max_guesses - len(self.guesses), 0)

    @property
    def done(self) -> bool:
        return self.status.done

    @property
    def solved_count(self) -> int:
        return sum(self.wins)

    @property
    def letter_states(self) -> Dict[str, BoardHints]:
        """Per letter, one keyboard hint per board (None where unseen)."""
        per_board = [letter_states(self.guesses, rows) for rows in self.boards]
        letters = {ch for g in self.guesses for ch in g}
        return {ch: tuple(board.get(ch) for board in per_board) for ch in sorted(letters)}


def apply_guess(
    state: QuordleState, guess: str, corpus: Container[str]
) -> Union[QuordleState, Rejection]:
    rejection = check_guess(
        guess,
        status=state.status,
        length=len(state.answers[0]),
        corpus=corpus,
        used=len(state.guesses),
        max_guesses=state.max_guesses,
    )
    if rejection is not None:
        return rejection

    guesses = state.guesses + (guess,)
    boards = tuple(
        rows + (score_guess(guess, answer),)
        for rows, answer in zip(state.boards, state.answers)
    )
    wins = tuple(won or guess == answer for won, answer in zip(state.wins, state.answers))

    if all(wins):
        status = GameStatus.WON
    elif len(guesses) >= state.max_guesses:
        status = GameStatus.LOST
    else:
        status = GameStatus.IN_PROGRESS

    return replace(state, guesses=guesses, boards=boards, wins=wins, status=status)


class QuordleSession:
    """
    Quordle round over a corpus.

    Parameters
    ----------
    corpus : Sequence[str]
        Allowed guesses; answers are drawn from it too.
    sampler : WordSampler | None
        Random source for answers.
    answers : sequence of str | None
        Fix the first round's answers (distinct, all in the corpus).
    boards : int
        Number of simultaneous boards.
    max_guesses : int
        Shared guess budget.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        sampler: Optional[WordSampler] = None,
        *,
        answers: Optional[Sequence[str]] = None,
        boards: int = gs.QUORDLE_BOARDS,
        max_guesses: int = gs.QUORDLE_MAX_GUESSES,
    ) -> None:
        self.corpus = corpus
        self.sampler = sampler if sampler is not None else WordSampler()
        self.board_count = int(boards)
        self.max_guesses = int(max_guesses)
        self._state = self.new_round(answers)

    @property
    def state(self) -> QuordleState:
        return self._state

    def new_round(self, answers: Optional[Sequence[str]] = None) -> QuordleState:
        if answers is None:
            answers = self.sampler.distinct(self.corpus, self.board_count)
        else:
            answers = list(answers)
            if len(answers) != self.board_count:
                raise ValueError(f"expected {self.board_count} answers, got {len(answers)}")
            if len(set(answers)) != len(answers):
                raise ValueError("answers must be distinct")
            missing = [a for a in answers if a not in self.corpus]
            if missing:
                raise ValueError(f"answers not in corpus: {missing}")
            if len({len(a) for a in answers}) != 1:
                raise ValueError("answers must share one length")

        self._state = QuordleState(answers=tuple(answers), max_guesses=self.max_guesses)
        log.info("quordle round started (%d boards, %d guesses)", self.board_count, self.max_guesses)
        return self._state

    def submit(self, raw: str) -> Union[QuordleState, Rejection]:
        result = apply_guess(self._state, normalize_guess(raw), self.corpus)
        if isinstance(result, Rejection):
            log.debug("quordle rejected %r: %s", raw, result.reason.value)
            return result
        self._state = result
        return result
