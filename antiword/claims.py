"""
claims.py

Per-letter bookkeeping of where each letter sits in the secret word.

Every position of the secret gets one occurrence record under its letter.
An exact match *claims* the record for good; a misplaced guess letter *binds*
one free record for the length of a single evaluation, so the same secret
letter can never back two guessed letters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


def _li(c: str) -> int:
    """Map an uppercase letter to 0..25."""
    return ord(c) - 65


def _valid_letter(c: object) -> bool:
    return isinstance(c, str) and len(c) == 1 and "A" <= c <= "Z"


@dataclass
class Occurrence:
    pos: int
    claimed: bool = False
    bound: bool = False


class WordClaimIndex:
    def __init__(self, secret: str, alphabet_size: int = 26) -> None:
        if not isinstance(secret, str) or not secret:
            raise ValueError("secret must be a non-empty string")
        if not all(_valid_letter(c) for c in secret):
            raise ValueError("secret must be uppercase alphabetic")

        self._secret = secret
        self._slots: List[List[Occurrence]] = [[] for _ in range(alphabet_size)]
        for i, ch in enumerate(secret):
            self._slots[_li(ch)].append(Occurrence(pos=i))

    @property
    def secret(self) -> str:
        return self._secret

    def _records(self, letter: str) -> List[Occurrence]:
        if not _valid_letter(letter):
            return []
        return self._slots[_li(letter)]

    def contains_letter(self, letter: str) -> bool:
        return bool(self._records(letter))

    def count(self, letter: str) -> int:
        return len(self._records(letter))

    def occurrences(self, letter: str) -> Tuple[Occurrence, ...]:
        """Snapshot of the records for `letter` (copies, safe to keep)."""
        return tuple(Occurrence(o.pos, o.claimed, o.bound) for o in self._records(letter))

    def claim_at(self, letter: str, position: int) -> bool:
        """
        Claim the occurrence of `letter` at `position`.

        Succeeds whenever the secret has `letter` there, including when an
        earlier guess already claimed it.
        """
        for occ in self._records(letter):
            if occ.pos == position:
                occ.claimed = True
                return True
        return False

    def bind_one(self, letter: str) -> bool:
        """Bind the first occurrence of `letter` that is neither claimed nor bound."""
        for occ in self._records(letter):
            if not occ.claimed and not occ.bound:
                occ.bound = True
                return True
        return False

    def reset_bindings(self) -> None:
        for records in self._slots:
            for occ in records:
                occ.bound = False
