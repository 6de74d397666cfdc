import re
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from puzzles.game_settings import BEE_MIN_WORD_LENGTH, WORD_LENGTH
from puzzles.vocab import Corpus

PathLike = Union[str, Path]


def load_corpus(
    csv_path: PathLike,
    column: str = "word",
    *,
    word_len: Optional[int] = WORD_LENGTH,
    answers_only: bool = False,
) -> Corpus:
    """
    Load a guessing corpus from a CSV.

    Words are uppercased, kept only if alphabetic and `word_len` long, and
    deduplicated by first occurrence. With `answers_only`, keeps rows where
    'day' is not null (past official answers).
    """
    df = pd.read_csv(csv_path)
    if column not in df.columns:
        raise KeyError(f"column '{column}' not found in {csv_path}")
    if answers_only:
        if "day" not in df.columns:
            raise KeyError(f"column 'day' not found in {csv_path}")
        df = df[df["day"].notna()]
    return Corpus.from_words(df[column].tolist(), word_len=word_len)


def load_word_lines(path: PathLike, *, word_len: Optional[int] = None) -> Corpus:
    """Load a plain-text word list, one word per line."""
    text = Path(path).read_text(encoding="utf-8")
    return Corpus.from_words(text.splitlines(), word_len=word_len)


def extract_dictionary_words(text: str, min_len: int = BEE_MIN_WORD_LENGTH) -> List[str]:
    """Every run of `min_len`+ ASCII letters in `text`, uppercased, first occurrence kept."""
    seen = set()
    words: List[str] = []
    for match in re.findall(rf"[A-Za-z]{{{min_len},}}", text):
        w = match.upper()
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words


def load_dictionary(path: PathLike, min_len: int = BEE_MIN_WORD_LENGTH) -> Corpus:
    """Load a Spelling Bee dictionary from free text."""
    text = Path(path).read_text(encoding="utf-8", errors="ignore")
    return Corpus(extract_dictionary_words(text, min_len))
