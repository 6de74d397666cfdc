"""
hive.py

Spelling Bee puzzle construction.

A hive is seven distinct letters with one mandatory center letter. A word is
valid for the hive when it is long enough, contains the center, and uses only
hive letters (repeats allowed). A pangram uses all seven.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from puzzles import game_settings as gs
from puzzles.sampler import WordSampler
from puzzles.search import bounded_search

log = logging.getLogger(__name__)


def unique_letters(word: str) -> List[str]:
    """Distinct letters of `word` in first-seen order."""
    seen = set()
    order: List[str] = []
    for ch in word:
        if ch not in seen:
            seen.add(ch)
            order.append(ch)
    return order


def is_hive_word(
    word: str, letters: Iterable[str], center: str, min_len: int = gs.BEE_MIN_WORD_LENGTH
) -> bool:
    letter_set = letters if isinstance(letters, (set, frozenset)) else set(letters)
    if len(word) < min_len:
        return False
    if center not in word:
        return False
    return all(ch in letter_set for ch in word)


def is_pangram(word: str, letters: Iterable[str]) -> bool:
    return all(letter in word for letter in letters)


@dataclass(frozen=True)
class HivePuzzle:
    letters: Tuple[str, ...]
    center: str
    valid_words: Tuple[str, ...]
    pangrams: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(set(self.letters)) != len(self.letters):
            raise ValueError("hive letters must be distinct")
        if self.center not in self.letters:
            raise ValueError(f"center {self.center!r} is not one of the hive letters")

    @classmethod
    def from_letters(
        cls,
        letters: Sequence[str],
        center: str,
        dictionary: Iterable[str],
        *,
        min_len: int = gs.BEE_MIN_WORD_LENGTH,
    ) -> "HivePuzzle":
        """Compute the valid words and pangrams of a known hive."""
        letters = tuple(letters)
        letter_set = frozenset(letters)
        valid = tuple(w for w in dictionary if is_hive_word(w, letter_set, center, min_len))
        pangrams = tuple(w for w in valid if is_pangram(w, letters))
        return cls(letters, center, valid, pangrams)

    @property
    def outer_letters(self) -> Tuple[str, ...]:
        return tuple(l for l in self.letters if l != self.center)

    @property
    def total_words(self) -> int:
        return len(self.valid_words)


class HiveBuilder:
    """
    Bounded randomized search for a playable hive.

    Each attempt picks a base word with exactly `hive_size` distinct letters,
    shuffles them, and picks a center. Hives with more than `max_words` valid
    words are discarded as too easy. The first hive with at least `min_words`
    valid words and a pangram wins; otherwise the largest non-dense hive seen
    is returned. That fallback may lack a pangram.
    """

    def __init__(
        self,
        sampler: Optional[WordSampler] = None,
        *,
        hive_size: int = gs.HIVE_SIZE,
        min_len: int = gs.BEE_MIN_WORD_LENGTH,
        min_words: int = gs.HIVE_MIN_WORDS,
        max_words: int = gs.BEE_MAX_WORDS,
        max_attempts: int = gs.HIVE_MAX_ATTEMPTS,
    ) -> None:
        self.sampler = sampler if sampler is not None else WordSampler()
        self.hive_size = int(hive_size)
        self.min_len = int(min_len)
        self.min_words = int(min_words)
        self.max_words = int(max_words)
        self.max_attempts = int(max_attempts)

    def base_candidates(self, dictionary: Iterable[str]) -> List[str]:
        return [
            w for w in dictionary
            if len(unique_letters(w)) == self.hive_size and len(w) >= self.hive_size
        ]

    def build(self, dictionary: Sequence[str]) -> Optional[HivePuzzle]:
        """Return a hive, or None if the dictionary cannot support one."""
        dictionary = list(dictionary)
        bases = self.base_candidates(dictionary)
        if not bases:
            log.debug("hive build skipped: no base word with %d distinct letters", self.hive_size)
            return None

        outcome = bounded_search(
            lambda: self._propose(bases, dictionary),
            max_attempts=self.max_attempts,
            accept=lambda h: h.total_words >= self.min_words and len(h.pangrams) > 0,
            better=lambda new, best: new.total_words > best.total_words,
        )
        if outcome.result is None:
            log.debug("hive search exhausted; every attempt exceeded %d words", self.max_words)
        elif not outcome.accepted:
            log.debug(
                "hive search exhausted; using fallback with %d words and %d pangrams",
                outcome.result.total_words,
                len(outcome.result.pangrams),
            )
        return outcome.result

    def _propose(self, bases: List[str], dictionary: List[str]) -> Optional[HivePuzzle]:
        base = self.sampler.choice(bases)
        letters = self.sampler.shuffled(unique_letters(base)[: self.hive_size])
        center = self.sampler.choice(letters)
        puzzle = HivePuzzle.from_letters(letters, center, dictionary, min_len=self.min_len)
        if puzzle.total_words > self.max_words:
            return None
        return puzzle


def build_hive(dictionary: Sequence[str], sampler: Optional[WordSampler] = None) -> Optional[HivePuzzle]:
    return HiveBuilder(sampler).build(dictionary)
