"""
enforcement.py

Tracks which letters are still legal in each column of the guess grid.
"""

from __future__ import annotations

from typing import List

import numpy as np

from antiword.claims import _li, _valid_letter


class EnforcementMap:
    def __init__(self, word_length: int = 5, alphabet_size: int = 26):
        # column-level allowance: True means the letter may still be typed there
        self.word_length = word_length
        self.alphabet_size = alphabet_size
        self.allowed = np.ones((word_length, alphabet_size), dtype=bool)

    def reset(self):
        self.allowed = np.ones((self.word_length, self.alphabet_size), dtype=bool)

    def _check_column(self, column: int) -> None:
        if column < 0 or column >= self.word_length:
            raise IndexError(f"column out of range: {column}")

    def collapse_column_to(self, column: int, letter: str) -> None:
        """Exact match found: only `letter` stays legal in `column`."""
        self._check_column(column)
        li = _li(letter)
        self.allowed[column, :] = False
        self.allowed[column, li] = True

    def forbid(self, column: int, letter: str) -> None:
        self._check_column(column)
        self.allowed[column, _li(letter)] = False

    def is_legal(self, column: int, letter: str) -> bool:
        if column < 0 or column >= self.word_length or not _valid_letter(letter):
            return False
        return bool(self.allowed[column, _li(letter)])

    def legal_letters(self, column: int) -> List[str]:
        self._check_column(column)
        return [chr(65 + li) for li in np.nonzero(self.allowed[column])[0]]

    def as_array(self) -> np.ndarray:
        """Copy of the (word_length, 26) boolean grid."""
        return self.allowed.copy()
