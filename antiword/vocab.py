from __future__ import annotations
from typing import Iterable, List
import pandas as pd


WORD_LENGTH = 5


class WordVocab:
    """Ordered, deduplicated list of uppercase words of a fixed length."""

    def __init__(self, words: List[str], *, word_len: int = WORD_LENGTH) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        for w in words:
            if len(w) != word_len or not (w.isascii() and w.isalpha() and w.isupper()):
                raise ValueError(f"word must be {word_len} uppercase letters: {w!r}")

        # Enforce uniqueness (normalising input is the job of from_words / from_csv)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self.word_len = word_len
        self._words: List[str] = list(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        *,
        word_len: int = WORD_LENGTH,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Uppercase and deduplicate `words`, keeping the first occurrence.

        Entries of the wrong length (or non-alphabetic, with `alpha_only`) are dropped.
        """
        clean: List[str] = []
        seen = set()
        for val in words:
            if not isinstance(val, str):
                val = str(val) if val is not None else ""
            w = val.strip().upper()

            if len(w) != word_len:
                continue
            if alpha_only and not (w.isascii() and w.isalpha()):
                continue
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)

        if not clean:
            raise ValueError("no valid words after filtering")
        return cls(clean, word_len=word_len)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = WORD_LENGTH,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.
        alpha_only : bool, default=True
            If True, keep only ASCII alphabetic words.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls.from_words(df[column].tolist(), word_len=word_len, alpha_only=alpha_only)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return self.contains(word)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-insensitive)."""
        return isinstance(word, str) and word.upper() in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word.upper()]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
