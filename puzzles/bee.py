"""
bee.py

Spelling Bee collection game over a :class:`~puzzles.hive.HivePuzzle`.

There is no losing state: the player keeps submitting words, and finding them
all is an observable condition rather than a terminal one.

Scoring: a 4-letter word is worth 1 point, longer words score their length,
and a pangram earns a 7-point bonus on top.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from puzzles import game_settings as gs
from puzzles.hive import HiveBuilder, HivePuzzle
from puzzles.sampler import WordSampler
from puzzles.session import Rejection, RejectReason, normalize_guess

log = logging.getLogger(__name__)


def word_score(word: str, puzzle: HivePuzzle) -> int:
    points = 1 if len(word) <= gs.BEE_MIN_WORD_LENGTH else len(word)
    if word in puzzle.pangrams:
        points += gs.PANGRAM_BONUS
    return points


@dataclass(frozen=True)
class BeeState:
    puzzle: HivePuzzle
    found: Tuple[str, ...] = ()

    @property
    def found_count(self) -> int:
        return len(self.found)

    @property
    def total(self) -> int:
        return self.puzzle.total_words

    @property
    def remaining(self) -> int:
        return max(self.total - self.found_count, 0)

    @property
    def pangrams_found(self) -> int:
        return sum(1 for w in self.found if w in self.puzzle.pangrams)

    @property
    def pangram_total(self) -> int:
        return len(self.puzzle.pangrams)

    @property
    def complete(self) -> bool:
        return self.total > 0 and self.remaining == 0

    @property
    def score(self) -> int:
        return sum(word_score(w, self.puzzle) for w in self.found)

    @property
    def max_score(self) -> int:
        return sum(word_score(w, self.puzzle) for w in self.puzzle.valid_words)


def apply_word(
    state: BeeState, word: str, min_len: int = gs.BEE_MIN_WORD_LENGTH
) -> Union[BeeState, Rejection]:
    puzzle = state.puzzle
    if len(word) < min_len:
        return Rejection(RejectReason.TOO_SHORT, f"Words must be at least {min_len} letters.")
    if puzzle.center not in word:
        return Rejection(RejectReason.MISSING_CENTER, "Every word must include the center letter.")
    if any(ch not in puzzle.letters for ch in word):
        return Rejection(
            RejectReason.OUTSIDE_HIVE, f"Use only the {len(puzzle.letters)} hive letters."
        )
    if word not in puzzle.valid_words:
        return Rejection(
            RejectReason.NOT_IN_WORD_LIST, "That word is not in the dictionary for this hive."
        )
    if word in state.found:
        return Rejection(RejectReason.ALREADY_FOUND, "Already found that one!")
    return replace(state, found=state.found + (word,))


class BeeSession:
    """
    Spelling Bee round.

    Pass `puzzle` to play a known hive, or `dictionary` to have one built.
    Building can fail on a thin dictionary, in which case ``state`` is None
    and :meth:`new_round` may be retried.
    """

    def __init__(
        self,
        puzzle: Optional[HivePuzzle] = None,
        *,
        dictionary: Optional[Sequence[str]] = None,
        sampler: Optional[WordSampler] = None,
        builder: Optional[HiveBuilder] = None,
    ) -> None:
        if puzzle is None and dictionary is None:
            raise ValueError("need a puzzle or a dictionary")
        self.sampler = sampler if sampler is not None else WordSampler()
        self.builder = builder if builder is not None else HiveBuilder(self.sampler)
        self.dictionary = dictionary
        self._state: Optional[BeeState] = None
        if puzzle is not None:
            self._state = BeeState(puzzle)
        else:
            self.new_round()

    @property
    def state(self) -> Optional[BeeState]:
        return self._state

    def new_round(self) -> Optional[BeeState]:
        """Build a fresh hive from the dictionary; None if none could be built."""
        if self.dictionary is None:
            raise ValueError("no dictionary to build a hive from")
        puzzle = self.builder.build(self.dictionary)
        if puzzle is None:
            log.warning("could not build a spelling bee puzzle")
            self._state = None
            return None
        self._state = BeeState(puzzle)
        log.info(
            "bee round started: center %s, %d words, %d pangrams",
            puzzle.center,
            puzzle.total_words,
            len(puzzle.pangrams),
        )
        return self._state

    def submit(self, raw: str) -> Union[BeeState, Rejection]:
        if self._state is None:
            raise RuntimeError("no puzzle loaded; call new_round() first")
        result = apply_word(self._state, normalize_guess(raw), self.builder.min_len)
        if isinstance(result, Rejection):
            log.debug("bee rejected %r: %s", raw, result.reason.value)
            return result
        self._state = result
        return result

    def shuffle_letters(self) -> List[str]:
        """Display order: center first, outer letters reshuffled."""
        if self._state is None:
            raise RuntimeError("no puzzle loaded; call new_round() first")
        puzzle = self._state.puzzle
        return [puzzle.center] + self.sampler.shuffled(puzzle.outer_letters)
