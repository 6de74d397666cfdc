from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


class Corpus:
    """
    Deduplicated, ordered word list with O(1) membership.

    Words are expected to be pre-normalized (uppercase, alphabetic). The core
    treats a Corpus as read-only; use :meth:`from_words` to normalize raw input.
    """

    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy is handled by from_words)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to Corpus must be deduplicated")

        self._words: List[str] = list(words)
        self._index = {w: i for i, w in enumerate(self._words)}

        lengths = {len(w) for w in self._words}
        self._word_length: Optional[int] = lengths.pop() if len(lengths) == 1 else None

    # ---------- Construction helpers ----------

    @classmethod
    def from_words(
        cls,
        raw: Iterable[object],
        *,
        word_len: Optional[int] = None,
        min_len: int = 1,
        uppercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "Corpus":
        """
        Normalize raw values into a Corpus.

        Parameters
        ----------
        raw : iterable
            Values to clean; non-strings are converted with ``str``.
        word_len : int | None
            If set, keep only words of exactly this length.
        min_len : int, default=1
            Drop words shorter than this.
        uppercase : bool, default=True
            Uppercase (and strip) words before validation.
        dedupe : bool, default=True
            Keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            Keep only alphabetic words (str.isalpha()).

        Raises
        ------
        ValueError
            If nothing survives filtering.
        """
        clean: List[str] = []
        seen = set()

        for val in raw:
            if not isinstance(val, str):
                val = str(val) if val is not None else ""
            w = val.strip().upper() if uppercase else val.strip()

            if word_len is not None and len(w) != word_len:
                continue
            if len(w) < min_len:
                continue
            if alpha_only and not w.isalpha():
                continue

            if dedupe:
                if w in seen:
                    continue
                seen.add(w)

            clean.append(w)

        if not clean:
            raise ValueError("no valid words after filtering")

        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, idx: int) -> str:
        return self._words[idx]

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __repr__(self) -> str:
        return f"Corpus({len(self._words)} words)"

    @property
    def word_length(self) -> Optional[int]:
        """Common word length, or None if lengths are mixed."""
        return self._word_length

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the corpus (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
