from puzzles.search import bounded_search


def _feeder(values):
    it = iter(values)
    return lambda: next(it)


def test_accepts_first_match_and_stops():
    calls = []

    def propose():
        calls.append(1)
        return len(calls)

    outcome = bounded_search(
        propose, max_attempts=100, accept=lambda x: x == 3, better=lambda a, b: a > b
    )
    assert outcome.accepted
    assert outcome.result == 3
    assert outcome.attempts == 3
    assert len(calls) == 3


def test_fallback_is_best_eligible_and_ties_keep_first():
    values = [("a", 1), ("b", 5), ("c", 7), ("d", 5), ("e", 9)]
    outcome = bounded_search(
        _feeder(values),
        max_attempts=len(values),
        accept=lambda v: False,
        better=lambda new, best: abs(new[1] - 6) < abs(best[1] - 6),
        eligible=lambda v: v[1] >= 2,
    )
    assert not outcome.accepted
    # b and c and d are all distance 1 from 6; b was found first
    assert outcome.result == ("b", 5)


def test_none_proposals_are_skipped():
    outcome = bounded_search(
        _feeder([None, None, None]),
        max_attempts=3,
        accept=lambda v: True,
        better=lambda a, b: True,
    )
    assert outcome.result is None
    assert not outcome.accepted
    assert outcome.attempts == 3


def test_no_eligible_candidate_gives_none():
    outcome = bounded_search(
        _feeder([1, 1, 1]),
        max_attempts=3,
        accept=lambda v: False,
        better=lambda a, b: True,
        eligible=lambda v: v >= 2,
    )
    assert outcome.result is None
