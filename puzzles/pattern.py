"""
pattern.py

Pattern Hunt: generate a two-letter template over a corpus and let the player
collect every word that fits it.

The generator draws a base word and two non-adjacent positions, fixes those
slots to the base word's letters, and counts how many corpus words fit. It
keeps trying until the count lands inside the target band, falling back to the
closest pattern seen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Container, List, Optional, Sequence, Tuple, Union

from puzzles import game_settings as gs
from puzzles.constraints import Pattern, matches_pattern, pattern_string
from puzzles.sampler import WordSampler
from puzzles.search import bounded_search
from puzzles.session import Rejection, RejectReason, normalize_guess

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternPuzzle:
    """A template and every corpus word that fits it (in corpus order)."""

    pattern: Pattern = ()
    matches: Tuple[str, ...] = ()

    @property
    def fixed_positions(self) -> Tuple[int, ...]:
        return tuple(i for i, slot in enumerate(self.pattern) if slot != gs.WILDCARD)

    @property
    def empty(self) -> bool:
        return not self.pattern

    def __str__(self) -> str:
        return pattern_string(self.pattern)


class PatternGenerator:
    """
    Bounded randomized search for a Pattern Hunt puzzle.

    Parameters
    ----------
    sampler : WordSampler | None
        Random source; a fresh unseeded one if omitted.
    min_matches, max_matches : int
        Accept a pattern as soon as its match count falls in this band.
    max_attempts : int
        Hard cap on random draws.
    min_fallback_matches : int
        Patterns with fewer matches never become the fallback.
    """

    def __init__(
        self,
        sampler: Optional[WordSampler] = None,
        *,
        min_matches: int = gs.PATTERN_MIN_MATCHES,
        max_matches: int = gs.PATTERN_MAX_MATCHES,
        max_attempts: int = gs.PATTERN_MAX_ATTEMPTS,
        min_fallback_matches: int = gs.PATTERN_MIN_FALLBACK_MATCHES,
    ) -> None:
        if min_matches > max_matches:
            raise ValueError("min_matches must not exceed max_matches")
        self.sampler = sampler if sampler is not None else WordSampler()
        self.min_matches = int(min_matches)
        self.max_matches = int(max_matches)
        self.max_attempts = int(max_attempts)
        self.min_fallback_matches = int(min_fallback_matches)

    @property
    def target_matches(self) -> float:
        return (self.min_matches + self.max_matches) / 2

    def generate(self, words: Sequence[str]) -> PatternPuzzle:
        """Build a puzzle from `words`; an empty corpus yields an empty puzzle."""
        words = list(words)
        if not words:
            log.debug("pattern generation skipped: empty corpus")
            return PatternPuzzle()

        word_len = len(words[0])
        if any(len(w) != word_len for w in words):
            raise ValueError("all corpus words must have the same length")

        outcome = bounded_search(
            lambda: self._propose(words, word_len),
            max_attempts=self.max_attempts,
            accept=lambda p: self.min_matches <= len(p.matches) <= self.max_matches,
            better=lambda new, best: self._distance(new) < self._distance(best),
            eligible=lambda p: len(p.matches) >= self.min_fallback_matches,
        )
        if outcome.accepted:
            log.debug("pattern %s accepted after %d attempts", outcome.result, outcome.attempts)
            return outcome.result
        if outcome.result is not None:
            log.debug(
                "pattern search exhausted; using fallback %s with %d matches",
                outcome.result,
                len(outcome.result.matches),
            )
            return outcome.result

        log.debug("pattern search found no fallback; deriving from %s", words[0])
        return self._last_resort(words, word_len)

    def _propose(self, words: List[str], word_len: int) -> Optional[PatternPuzzle]:
        base = self.sampler.choice(words)
        first = self.sampler.index(word_len)
        seconds = [i for i in range(word_len) if abs(i - first) > 1]
        if not seconds:
            return None
        second = self.sampler.choice(seconds)

        slots = [gs.WILDCARD] * word_len
        slots[first] = base[first]
        slots[second] = base[second]
        pattern = tuple(slots)
        return PatternPuzzle(pattern, tuple(w for w in words if matches_pattern(w, pattern)))

    def _distance(self, puzzle: PatternPuzzle) -> float:
        return abs(len(puzzle.matches) - self.target_matches)

    @staticmethod
    def _last_resort(words: List[str], word_len: int) -> PatternPuzzle:
        # First and last letter of the first word
        base = words[0]
        slots = [gs.WILDCARD] * word_len
        slots[0] = base[0]
        if word_len > 2:
            slots[-1] = base[-1]
        pattern = tuple(slots)
        return PatternPuzzle(pattern, tuple(w for w in words if matches_pattern(w, pattern)))


def generate_pattern(words: Sequence[str], sampler: Optional[WordSampler] = None) -> PatternPuzzle:
    return PatternGenerator(sampler).generate(words)


# -------------------------
# Pattern Hunt session
# -------------------------

@dataclass(frozen=True)
class PatternHuntState:
    puzzle: PatternPuzzle
    found: Tuple[str, ...] = field(default=())

    @property
    def total(self) -> int:
        return len(self.puzzle.matches)

    @property
    def remaining(self) -> int:
        return max(self.total - len(self.found), 0)

    @property
    def complete(self) -> bool:
        return self.total > 0 and self.remaining == 0


def apply_pattern_guess(
    state: PatternHuntState, word: str, corpus: Container[str]
) -> Union[PatternHuntState, Rejection]:
    pattern = state.puzzle.pattern
    if len(word) != len(pattern):
        return Rejection(
            RejectReason.WRONG_LENGTH, f"Your guess must be {len(pattern)} letters long."
        )
    if not matches_pattern(word, pattern):
        return Rejection(RejectReason.PATTERN_MISMATCH, "That word does not match the pattern.")
    if word not in corpus:
        return Rejection(RejectReason.NOT_IN_WORD_LIST, "That word is not in the allowed word list.")
    if word in state.found:
        return Rejection(RejectReason.ALREADY_FOUND, "You already found that word.")
    return replace(state, found=tuple(sorted(state.found + (word,))))


class PatternHuntSession:
    """Collect every corpus word matching a generated pattern."""

    def __init__(
        self,
        corpus: Sequence[str],
        sampler: Optional[WordSampler] = None,
        *,
        generator: Optional[PatternGenerator] = None,
        puzzle: Optional[PatternPuzzle] = None,
    ) -> None:
        self.corpus = corpus
        self.generator = generator if generator is not None else PatternGenerator(sampler)
        self._state = PatternHuntState(puzzle if puzzle is not None else PatternPuzzle())
        if puzzle is None:
            self.new_round()

    @property
    def state(self) -> PatternHuntState:
        return self._state

    def new_round(self) -> PatternHuntState:
        puzzle = self.generator.generate(self.corpus)
        self._state = PatternHuntState(puzzle)
        log.info("pattern hunt round: %s (%d matches)", puzzle, len(puzzle.matches))
        return self._state

    def submit(self, raw: str) -> Union[PatternHuntState, Rejection]:
        result = apply_pattern_guess(self._state, normalize_guess(raw), self.corpus)
        if isinstance(result, Rejection):
            log.debug("pattern hunt rejected %r: %s", raw, result.reason.value)
            return result
        self._state = result
        return result
