import pytest

from puzzles.feedback import CORRECT
from puzzles.quordle import QuordleSession
from puzzles.sampler import WordSampler
from puzzles.session import GameStatus, Rejection, RejectReason
from puzzles.vocab import Corpus

ANSWERS = ["CRATE", "SLATE", "PLANT", "BUMPY"]
MISSES = ["FJORD", "WHISK", "NYMPH", "BOXED", "DIZZY", "GUMBO", "QUICK", "VIVID", "JOLLY"]


@pytest.fixture
def corpus():
    return Corpus(ANSWERS + MISSES)


@pytest.fixture
def session(corpus):
    return QuordleSession(corpus, WordSampler(0), answers=ANSWERS)


def test_guess_scores_every_board(session):
    state = session.submit("SLATE")
    assert len(state.boards) == 4
    assert all(len(rows) == 1 for rows in state.boards)
    assert state.boards[1][0] == (CORRECT,) * 5


def test_win_flag_only_for_matching_board(session):
    state = session.submit("SLATE")
    assert state.wins == (False, True, False, False)
    assert state.status is GameStatus.IN_PROGRESS


def test_boards_stay_independent_through_a_loss(session):
    session.submit("SLATE")
    for w in MISSES[:8]:
        state = session.submit(w)
    assert len(state.guesses) == 9
    assert state.status is GameStatus.LOST
    assert state.wins == (False, True, False, False)
    assert state.solved_count == 1


def test_win_flags_are_sticky_and_all_four_win(session):
    session.submit("PLANT")
    session.submit("FJORD")
    session.submit("BUMPY")
    session.submit("CRATE")
    state = session.submit("SLATE")
    assert state.wins == (True, True, True, True)
    assert state.status is GameStatus.WON
    result = session.submit("QUICK")
    assert isinstance(result, Rejection)
    assert result.reason is RejectReason.GAME_OVER
    assert len(session.state.guesses) == 5


def test_rejections(session):
    assert session.submit("CRATES").reason is RejectReason.WRONG_LENGTH
    assert session.submit("ZZZZZ").reason is RejectReason.NOT_IN_WORD_LIST
    assert session.state.guesses == ()


def test_letter_states_per_board(session):
    state = session.submit("SLATE")
    hints = state.letter_states
    # S is correct on SLATE, absent on CRATE/PLANT/BUMPY
    assert hints["S"] == ("absent", "correct", "absent", "absent")
    # E ends CRATE and SLATE
    assert hints["E"] == ("correct", "correct", "absent", "absent")


def test_random_answers_are_distinct(corpus):
    state = QuordleSession(corpus, WordSampler(11)).state
    assert len(set(state.answers)) == 4
    assert all(a in corpus for a in state.answers)


def test_fixed_answers_validated(corpus):
    with pytest.raises(ValueError):
        QuordleSession(corpus, answers=["CRATE", "CRATE", "SLATE", "PLANT"])
    with pytest.raises(ValueError):
        QuordleSession(corpus, answers=["CRATE", "SLATE", "PLANT"])
