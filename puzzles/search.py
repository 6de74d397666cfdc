"""
search.py

Bounded randomized search with a best-so-far fallback.

Both puzzle generators follow the same shape: propose a random candidate,
accept it outright if it meets the target, otherwise remember the best one
seen, and give up after a fixed number of attempts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SearchOutcome(Generic[T]):
    """Result of :func:`bounded_search`.

    ``result`` is the accepted candidate, else the best fallback, else None.
    """

    result: Optional[T]
    accepted: bool
    attempts: int


def bounded_search(
    propose: Callable[[], Optional[T]],
    *,
    max_attempts: int,
    accept: Callable[[T], bool],
    better: Callable[[T, T], bool],
    eligible: Callable[[T], bool] = lambda _: True,
) -> SearchOutcome[T]:
    """
    Run up to `max_attempts` proposals.

    Parameters
    ----------
    propose : () -> T | None
        Draw one candidate. Returning None discards the attempt.
    accept : T -> bool
        Stop immediately and return the candidate when this holds.
    better : (new, best) -> bool
        True if `new` should replace the current fallback. Must be strict so
        ties keep the first candidate found.
    eligible : T -> bool
        Only eligible candidates may become the fallback.
    """
    if max_attempts < 0:
        raise ValueError("max_attempts must be non-negative")

    best: Optional[T] = None
    for attempt in range(1, max_attempts + 1):
        candidate = propose()
        if candidate is None:
            continue
        if accept(candidate):
            return SearchOutcome(candidate, True, attempt)
        if eligible(candidate) and (best is None or better(candidate, best)):
            best = candidate

    return SearchOutcome(best, False, max_attempts)
