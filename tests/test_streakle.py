import pytest

from puzzles.constraints import matches_pattern
from puzzles.sampler import WordSampler
from puzzles.session import GameStatus, Rejection, RejectReason
from puzzles.streakle import StreakleSession, start_state
from puzzles.vocab import Corpus

TARGETS = ["CRATE", "SLATE", "PLANT"]
FILLER = ["CRANE", "BUMPY", "FJORD", "WHISK", "NYMPH", "BOXED", "DIZZY", "GUMBO", "QUICK"]


@pytest.fixture
def corpus():
    return Corpus(TARGETS + FILLER)


@pytest.fixture
def session(corpus):
    return StreakleSession(corpus, WordSampler(0), start_word="CRANE", targets=TARGETS)


def test_start_word_is_auto_played(session):
    state = session.state
    assert state.guesses == ("CRANE",)
    assert all(len(rows) == 1 for rows in state.boards)
    assert state.solved == (False, False, False)
    assert state.active == 0
    assert state.remaining == 7
    assert "".join(state.locked) == "CRA_E"


def test_locked_position_violation_costs_nothing(session):
    before = session.state
    result = session.submit("SLATE")
    assert isinstance(result, Rejection)
    assert result.reason is RejectReason.LOCKED_POSITION
    assert "CRA_E" in result.message
    assert session.state is before


def test_solving_active_target_advances_and_resets_locks(session):
    state = session.submit("CRATE")
    assert state.solved == (True, False, False)
    assert state.active == 1
    # Locks now come from SLATE's feedback: the C at slot 0 is no longer enforced
    assert "".join(state.locked) == "__ATE"

    state = session.submit("SLATE")
    assert state.active == 2
    assert "".join(state.locked) == "_LAN_"

    state = session.submit("PLANT")
    assert state.status is GameStatus.WON
    assert state.solved_count == 3
    assert len(state.guesses) == 4


def test_guesses_are_scored_against_every_target(session):
    session.submit("CRATE")
    state = session.state
    assert all(len(rows) == len(state.guesses) for rows in state.boards)


def test_lock_invariant_holds_while_target_active(session):
    locked = session.state.locked
    for w in ["SLATE", "PLANT", "BUMPY", "CRANE"]:
        result = session.submit(w)
        if not isinstance(result, Rejection):
            assert matches_pattern(w, locked)


def test_loss_with_partial_credit(corpus):
    session = StreakleSession(corpus, start_word="BUMPY", targets=TARGETS)
    assert session.state.locked == ("_",) * 5
    # None of these share a slot with CRATE, so no locks ever appear
    for w in ["FJORD", "WHISK", "NYMPH", "BOXED", "DIZZY", "QUICK"]:
        state = session.submit(w)
        assert not isinstance(state, Rejection), w
    assert state.status is GameStatus.IN_PROGRESS
    state = session.submit("CRATE")
    assert len(state.guesses) == 8
    assert state.status is GameStatus.LOST
    assert state.solved_count == 1

    result = session.submit("GUMBO")
    assert result.reason is RejectReason.GAME_OVER
    assert len(session.state.guesses) == 8


def test_solving_a_later_target_keeps_active_one(corpus):
    session = StreakleSession(corpus, start_word="BUMPY", targets=TARGETS)
    state = session.submit("PLANT")
    assert state.solved == (False, False, True)
    assert state.active == 0


def test_length_and_membership_checked_first(session):
    assert session.submit("CRATES").reason is RejectReason.WRONG_LENGTH
    assert session.submit("CRAZE").reason is RejectReason.NOT_IN_WORD_LIST


def test_start_state_with_start_word_as_target():
    state = start_state("CRATE", ["CRATE", "SLATE", "PLANT"])
    assert state.solved == (True, False, False)
    assert state.active == 1


def test_random_round_draws_distinct_targets(corpus):
    state = StreakleSession(corpus, WordSampler(2)).state
    assert len(set(state.targets)) == 3
    assert state.start_word not in state.targets
    assert state.guesses == (state.start_word,)


def test_fixed_targets_validated(corpus):
    with pytest.raises(ValueError):
        StreakleSession(corpus, start_word="CRATE", targets=TARGETS)


def test_keyboard_hints_follow_active_target(session):
    # Against CRATE the start word's C and R are green
    assert session.state.letter_states["C"] == "correct"
    state = session.submit("CRATE")
    assert state.active_target == "SLATE"
    hints = state.letter_states
    # Against SLATE, CRANE and CRATE only share the A, T and E
    assert hints["C"] == "absent"
    assert hints["R"] == "absent"
    assert hints["N"] == "absent"
    assert hints["A"] == "correct"
    assert hints["T"] == "correct"
    assert hints["E"] == "correct"
