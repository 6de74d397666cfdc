from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class WordSampler:
    """Seeded random source injected into every generator and session."""

    def __init__(self, seed: Optional[int] = None) -> None:
        # Create RNG (deterministic if seed provided)
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: Optional[int]) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    def index(self, n: int) -> int:
        if not isinstance(n, int) or n <= 0:
            raise ValueError("n must be a positive integer")
        return self._rng.randrange(n)

    def choice(self, items: Sequence[T]) -> T:
        if len(items) == 0:
            raise ValueError("cannot choose from an empty sequence")
        return items[self._rng.randrange(len(items))]

    def shuffled(self, items: Iterable[T]) -> List[T]:
        """Return a shuffled copy; the input is left untouched."""
        copy = list(items)
        self._rng.shuffle(copy)
        return copy

    def distinct(self, items: Sequence[T], k: int, exclude: Iterable[T] = ()) -> List[T]:
        """
        Draw `k` distinct items, none of which appear in `exclude`.

        Raises ValueError if fewer than `k` eligible items exist.
        """
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        banned = set(exclude)
        pool: List[T] = []
        seen = set()
        for item in items:
            if item in banned or item in seen:
                continue
            seen.add(item)
            pool.append(item)
        if len(pool) < k:
            raise ValueError(f"need {k} distinct words, only {len(pool)} available")
        return self._rng.sample(pool, k)
