"""
play/cli.py

Play any of the five puzzle modes in the terminal.
- Feedback rows print as g/y/b (green/yellow/black), one letter per position.
- Rejected guesses print the reason and do not use up a turn.

Run:
  python -m play.cli --mode wordle --csv word_list.csv
  python -m play.cli --mode bee --dict bee-dict.txt --seed 7

Shortcuts:
  quit / q / exit  -> exit
  new              -> start a new round
  reveal           -> print the answers for the current round
  shuffle          -> reorder the outer hive letters (bee only)
"""

from __future__ import annotations

import argparse
from typing import Callable, Dict, List, Optional, Sequence

from puzzles.bee import BeeSession
from puzzles.data_utils import load_corpus, load_dictionary, load_word_lines
from puzzles.feedback import SCORE_CODES
from puzzles.game_logger import setup_logging
from puzzles.pattern import PatternHuntSession
from puzzles.quordle import QuordleSession
from puzzles.sampler import WordSampler
from puzzles.session import Rejection
from puzzles.streakle import StreakleSession
from puzzles.vocab import Corpus
from puzzles.wordle import WordleSession

MODES = ("pattern", "wordle", "quordle", "streakle", "bee")
QUIT = {"q", "quit", "exit"}
ROW_LETTERS = {0: "b", 1: "y", 2: "g"}


def render_row(row: Sequence[str]) -> str:
    return "".join(ROW_LETTERS[SCORE_CODES[s]] for s in row)


def guesses_left_message(remaining: int) -> str:
    return f"{remaining} guess{'' if remaining == 1 else 'es'} left."


def _load_words(args: argparse.Namespace) -> Corpus:
    if args.csv.endswith(".csv"):
        return load_corpus(args.csv, args.column, word_len=args.length, answers_only=args.answers_only)
    return load_word_lines(args.csv, word_len=args.length)


# ---------------------------
# Per-mode status lines
# ---------------------------

def _show_pattern(session: PatternHuntSession) -> None:
    st = session.state
    print(f"Pattern: {st.puzzle}   found {len(st.found)}/{st.total}")
    if st.found:
        print("  " + ", ".join(st.found))


def _show_wordle(session: WordleSession) -> None:
    st = session.state
    for guess, row in zip(st.guesses, st.rows):
        print(f"  {guess}  {render_row(row)}")
    if st.done:
        print(f"{st.status.value.upper()}: the word was {st.answer}.")
    else:
        print(guesses_left_message(st.remaining))


def _show_quordle(session: QuordleSession) -> None:
    st = session.state
    for i, guess in enumerate(st.guesses):
        cells = [render_row(rows[i]) for rows in st.boards]
        print(f"  {guess}  " + "  ".join(cells))
    print("  boards solved: " + " ".join("x" if w else "." for w in st.wins))
    if st.done:
        print(f"{st.status.value.upper()}: the words were {', '.join(st.answers)}.")
    else:
        print(guesses_left_message(st.remaining))


def _show_streakle(session: StreakleSession) -> None:
    st = session.state
    rows = st.boards[st.active]
    for guess, row in zip(st.guesses, rows):
        print(f"  {guess}  {render_row(row)}")
    if st.done:
        print(f"{st.status.value.upper()}: solved {st.solved_count}/{len(st.targets)} "
              f"({', '.join(st.targets)}).")
    else:
        print(f"Target {st.active + 1}/{len(st.targets)}  locked: {''.join(st.locked)}  "
              + guesses_left_message(st.remaining))


class BeeBoard:
    """Bee session plus the hive order on screen; the order only changes on shuffle or a new round."""

    def __init__(self, session: BeeSession):
        self.session = session
        self.order: List[str] = []
        self._reset_order()

    def _reset_order(self) -> None:
        st = self.session.state
        self.order = [] if st is None else [st.puzzle.center] + list(st.puzzle.outer_letters)

    def new_round(self) -> None:
        self.session.new_round()
        self._reset_order()

    def shuffle(self) -> None:
        if self.session.state is None:
            print("No puzzle to shuffle.")
            return
        self.order = self.session.shuffle_letters()
        self.show()

    def show(self) -> None:
        st = self.session.state
        if st is None:
            print("Could not build a Spelling Bee puzzle. Type 'new' to try again.")
            return
        print(f"Hive: [{self.order[0]}] {' '.join(self.order[1:])}")
        print(f"Found {st.found_count}/{st.total} words, {st.pangrams_found}/{st.pangram_total} "
              f"pangrams, score {st.score}/{st.max_score}.")

    def reveal(self) -> None:
        st = self.session.state
        if st is None:
            print("Nothing to reveal.")
            return
        print(f"Words ({st.total}): {', '.join(st.puzzle.valid_words)}")
        print(f"Pangrams: {', '.join(st.puzzle.pangrams)}")


# ---------------------------
# Answer reveal
# ---------------------------

def _reveal_pattern(session: PatternHuntSession) -> None:
    matches = session.state.puzzle.matches
    print(f"Matches ({len(matches)}): {', '.join(matches) if matches else '(none)'}")


def _reveal_wordle(session: WordleSession) -> None:
    print(f"Answer: {session.state.answer}")


def _reveal_quordle(session: QuordleSession) -> None:
    print(f"Answers: {', '.join(session.state.answers)}")


def _reveal_streakle(session: StreakleSession) -> None:
    print(f"Targets: {', '.join(session.state.targets)}")


def _play(submit: Callable[[str], object], show: Callable[[], None],
          new_round: Callable[[], object], is_done: Callable[[], bool],
          reveal: Callable[[], None],
          commands: Optional[Dict[str, Callable[[], None]]] = None) -> None:
    commands = dict(commands or {})
    commands["reveal"] = reveal
    show()
    while True:
        raw = input("> ").strip()
        if raw.lower() in QUIT:
            print("bye!")
            return
        if raw.lower() == "new":
            new_round()
            show()
            continue
        if raw.lower() in commands:
            commands[raw.lower()]()
            continue
        if is_done():
            print("Round over. Type 'new' for another or 'quit' to exit.")
            continue
        result = submit(raw)
        if isinstance(result, Rejection):
            print(result.message)
            continue
        show()


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Word puzzle modes in the terminal")
    ap.add_argument("--mode", choices=MODES, default="wordle")
    ap.add_argument("--csv", default="word_list.csv", help="Word list (.csv or one word per line)")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--length", type=int, default=5, help="Word length (pattern mode may use others)")
    ap.add_argument("--answers-only", action="store_true", help="Keep only rows with a 'day' value")
    ap.add_argument("--dict", default="bee-dict.txt", help="Spelling Bee dictionary (free text)")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    sampler = WordSampler(args.seed)

    if args.mode == "bee":
        board = BeeBoard(BeeSession(dictionary=load_dictionary(args.dict), sampler=sampler))
        _play(board.session.submit, board.show, board.new_round,
              lambda: board.session.state is None, board.reveal,
              {"shuffle": board.shuffle})
        return

    corpus = _load_words(args)
    if args.mode == "pattern":
        hunt = PatternHuntSession(corpus, sampler)
        _play(hunt.submit, lambda: _show_pattern(hunt), hunt.new_round,
              lambda: hunt.state.puzzle.empty, lambda: _reveal_pattern(hunt))
    elif args.mode == "wordle":
        wordle = WordleSession(corpus, sampler)
        _play(wordle.submit, lambda: _show_wordle(wordle), wordle.new_round,
              lambda: wordle.state.done, lambda: _reveal_wordle(wordle))
    elif args.mode == "quordle":
        quordle = QuordleSession(corpus, sampler)
        _play(quordle.submit, lambda: _show_quordle(quordle), quordle.new_round,
              lambda: quordle.state.done, lambda: _reveal_quordle(quordle))
    else:
        streak = StreakleSession(corpus, sampler)
        _play(streak.submit, lambda: _show_streakle(streak), streak.new_round,
              lambda: streak.state.done, lambda: _reveal_streakle(streak))


if __name__ == "__main__":
    main()
