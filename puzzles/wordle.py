"""
wordle.py

Single-board Wordle: one hidden answer, a fixed guess budget.

State machine: IN_PROGRESS -> WON | LOST. The state is a frozen snapshot;
:func:`apply_guess` returns either the next snapshot or a Rejection.
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


@dataclass(frozen=True)
class WordleState:
    answer: str
    guesses: Tuple[str, ...] = ()
    rows: Tuple[FeedbackRow, ...] = ()
    status: GameStatus = GameStatus.IN_PROGRESS
    max_guesses: int = gs.WORDLE_MAX_GUESSES

    @property
    def remaining(self) -> int:
        return max(self.max_guesses - len(self.guesses), 0)

    @property
    def done(self) -> bool:
        return self.status.done

    @property
    def letter_states(self) -> Dict[str, Score]:
        return letter_states(self.guesses, self.rows)


def apply_guess(
    state: WordleState, guess: str, corpus: Container[str]
) -> Union[WordleState, Rejection]:
    rejection = check_guess(
        guess,
        status=state.status,
        length=len(state.answer),
        corpus=corpus,
        used=len(state.guesses),
        max_guesses=state.max_guesses,
    )
    if rejection is not None:
        return rejection

    guesses = state.guesses + (guess,)
    rows = state.rows + (score_guess(guess, state.answer),)

    if guess == state.answer:
        status = GameStatus.WON
    elif len(guesses) >= state.max_guesses:
        status = GameStatus.LOST
    else:
        status = GameStatus.IN_PROGRESS

    return replace(state, guesses=guesses, rows=rows, status=status)


class WordleSession:
    """
    Wordle round over a corpus.

    Parameters
    ----------
    corpus : Sequence[str]
        Allowed guesses; answers are drawn from it too.
    sampler : WordSampler | None
        Random source for answers.
    answer : str | None
        Fix the first round's answer (must be in the corpus).
    max_guesses : int
        Guess budget per round.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        sampler: Optional[WordSampler] = None,
        *,
        answer: Optional[str] = None,
        max_guesses: int = gs.WORDLE_MAX_GUESSES,
    ) -> None:
        if len(corpus) == 0:
            raise ValueError("empty corpus")
        self.corpus = corpus
        self.sampler = sampler if sampler is not None else WordSampler()
        self.max_guesses = int(max_guesses)
        self._state = self.new_round(answer)

    @property
    def state(self) -> WordleState:
        return self._state

    def new_round(self, answer: Optional[str] = None) -> WordleState:
        """Start a new round. Random answer if *answer* is None."""
        if answer is None:
            answer = self.sampler.choice(self.corpus)
        elif answer not in self.corpus:
            raise ValueError(f"answer {answer!r} is not in the corpus")
        self._state = WordleState(answer=answer, max_guesses=self.max_guesses)
        log.info("wordle round started (%d guesses)", self.max_guesses)
        return self._state

    def submit(self, raw: str) -> Union[WordleState, Rejection]:
        result = apply_guess(self._state, normalize_guess(raw), self.corpus)
        if isinstance(result, Rejection):
            log.debug("wordle rejected %r: %s", raw, result.reason.value)
            return result
        self._state = result
        return result
