"""
Feedback utilities for Antiword.

Guess evaluation runs in two passes so duplicate letters are scored correctly:

1) EXACT PASS:
   - For each column i, if the secret has guess[i] at i, claim that occurrence.
     The cell is RIGHT_PLACE, the key becomes RIGHT_PLACE and the column
     collapses to that letter in the enforcement map.

2) PLACEMENT PASS (after clearing last evaluation's bindings):
   - For each unresolved column i, bind one free occurrence of guess[i].
     Success -> WRONG_PLACE, failure -> ABSENT. Either way guess[i] is
     forbidden in column i. Keys only move out of UNKNOWN here.

Examples
--------
- 'REACT' vs 'CRANE' -> [WRONG, WRONG, RIGHT, WRONG, ABSENT]
- 'PAPER' vs 'APPLE' -> [WRONG, WRONG, RIGHT, WRONG, ABSENT]
- 'LLAMA' vs 'ALLOW' -> [WRONG, RIGHT, WRONG, ABSENT, ABSENT]
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, List, Set

from antiword.claims import WordClaimIndex, _li, _valid_letter
from antiword.enforcement import EnforcementMap

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Classification(IntEnum):
    UNKNOWN = 0
    WRONG_PLACE = 1
    RIGHT_PLACE = 2
    ABSENT = 3


class KeyboardHints:
    """Per-letter hint shown on the on-screen keyboard."""

    def __init__(self) -> None:
        self._hints: List[Classification] = [Classification.UNKNOWN] * len(ALPHABET)

    def get(self, letter: str) -> Classification:
        if not _valid_letter(letter):
            return Classification.UNKNOWN
        return self._hints[_li(letter)]

    def mark_right_place(self, letter: str) -> None:
        self._hints[_li(letter)] = Classification.RIGHT_PLACE

    def mark_if_unknown(self, letter: str, state: Classification) -> None:
        li = _li(letter)
        if self._hints[li] == Classification.UNKNOWN:
            self._hints[li] = state

    def as_dict(self) -> Dict[str, Classification]:
        return {ch: self._hints[i] for i, ch in enumerate(ALPHABET)}

    def as_list(self) -> List[int]:
        return [int(h) for h in self._hints]


def evaluate_guess(
    guess: str,
    claims: WordClaimIndex,
    enforcement: EnforcementMap,
    keyboard: KeyboardHints,
) -> List[Classification]:
    """
    Classify each letter of `guess` and update claims, enforcement and keyboard.

    `guess` must be uppercase alphabetic with one letter per enforcement column.
    """
    if not isinstance(guess, str):
        raise TypeError("guess must be a string")
    if len(guess) != enforcement.word_length:
        raise ValueError(f"guess must be length {enforcement.word_length}")
    if not all(_valid_letter(c) for c in guess):
        raise ValueError("guess must be uppercase alphabetic")

    result = [Classification.UNKNOWN] * len(guess)
    resolved: Set[int] = set()

    # Pass 1: exact matches
    for i, ch in enumerate(guess):
        if claims.contains_letter(ch) and claims.claim_at(ch, i):
            result[i] = Classification.RIGHT_PLACE
            keyboard.mark_right_place(ch)
            resolved.add(i)
            enforcement.collapse_column_to(i, ch)

    # Pass 2: present elsewhere, capped by the free occurrences
    claims.reset_bindings()
    for i, ch in enumerate(guess):
        if i in resolved:
            continue
        if claims.bind_one(ch):
            result[i] = Classification.WRONG_PLACE
        else:
            result[i] = Classification.ABSENT
        keyboard.mark_if_unknown(ch, result[i])
        enforcement.forbid(i, ch)

    return result


def score_guess(guess: str, secret: str) -> List[Classification]:
    """Evaluate `guess` against `secret` with fresh state on both sides."""
    guess, secret = guess.upper(), secret.upper()
    if len(guess) != len(secret):
        raise ValueError("guess and secret must be the same length")
    return evaluate_guess(
        guess, WordClaimIndex(secret), EnforcementMap(word_length=len(secret)), KeyboardHints()
    )


def absent_letters(guess: str, claims: WordClaimIndex) -> Set[str]:
    """Letters of `guess` that do not occur anywhere in the secret."""
    return {ch for ch in guess if not claims.contains_letter(ch)}


def prune_candidates(candidates: Set[str], guess: str, claims: WordClaimIndex) -> Set[str]:
    """
    Remove from `candidates` (in place) every word that uses a letter the guess
    proved absent. Returns the removed words.
    """
    dead = absent_letters(guess, claims)
    if not dead:
        return set()
    removed = {w for w in candidates if not dead.isdisjoint(w)}
    candidates.difference_update(removed)
    return removed


def count_by_state(pattern: Iterable[Classification]) -> Dict[Classification, int]:
    counts = {state: 0 for state in Classification}
    for p in pattern:
        counts[Classification(p)] += 1
    return counts
