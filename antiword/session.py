"""
session.py

A single Antiword game driven by discrete input events.
- Events: enter_letter, backspace, submit
- Output: render_model() snapshot for whatever draws the board
- The secret word comes from an injected WordSampler so tests can fix it
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from antiword.vocab import WordVocab, WORD_LENGTH
from antiword.sampler import WordSampler
from antiword.claims import WordClaimIndex
from antiword.enforcement import EnforcementMap
from antiword.feedback import (
    Classification,
    KeyboardHints,
    evaluate_guess,
    prune_candidates,
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    ENTERING = "entering"
    WON = "won"


class SubmitStatus(Enum):
    ACCEPTED = "accepted"
    WON = "won"
    INCOMPLETE = "incomplete"
    UNRECOGNIZED = "unrecognized"
    GAME_OVER = "game_over"


@dataclass
class Cell:
    row: int
    column: int
    letter: Optional[str] = None
    state: Classification = Classification.UNKNOWN


@dataclass(frozen=True)
class RenderModel:
    rows: Tuple[Tuple[Cell, ...], ...]
    entry_row: int
    entry_column: int
    keyboard: Dict[str, Classification]
    state: SessionState
    score: Optional[int]


class GameSession:
    """
    Antiword game session.

    API
    ---
    reset(scripted_guesses: Optional[Iterable[str]] = None) -> None
        Starts a new game. With scripted guesses the first dictionary word is
        the secret and each guess is typed straight into the grid and submitted.

    enter_letter(letter) -> bool / backspace() -> bool
        Edit the current row. Return False when the event was ignored.

    submit() -> SubmitStatus
        Evaluate the current row.
    """

    def __init__(
        self,
        vocab: WordVocab,
        sampler: Optional[WordSampler] = None,
        *,
        word_length: int = WORD_LENGTH,
    ) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if sampler is not None and not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")
        if word_length != WORD_LENGTH or vocab.word_len != word_length:
            raise ValueError(f"word length is fixed at {WORD_LENGTH}")

        self.vocab = vocab
        self.sampler = sampler if sampler is not None else WordSampler(vocab)
        self.word_length = word_length

        self._secret: str = ""
        self._claims: Optional[WordClaimIndex] = None
        self.enforcement = EnforcementMap(word_length=word_length)
        self.keyboard = KeyboardHints()
        self._candidates: set[str] = set()
        self._grid: List[List[Cell]] = []
        self._entry_row = 0
        self._entry_column = 0
        self._state = SessionState.ENTERING

        self.reset()

    # -------------------------
    # Lifecycle
    # -------------------------
    def reset(self, scripted_guesses: Optional[Iterable[str]] = None) -> None:
        """Start a new game, optionally replaying `scripted_guesses`."""
        script = None
        if scripted_guesses is not None:
            script = [self._normalize_scripted(g) for g in scripted_guesses]

        if script is None:
            self._secret = self.sampler.choice_word()
        else:
            self._secret = self.vocab.word_at(0)
            logger.debug("Word: %s", self._secret)

        self._claims = WordClaimIndex(self._secret)
        self.enforcement = EnforcementMap(word_length=self.word_length)
        self.keyboard = KeyboardHints()
        self._candidates = set(self.vocab.words())
        self._grid = [self._new_row(0)]
        self._entry_row = 0
        self._entry_column = 0
        self._state = SessionState.ENTERING
        logger.info("New game started with %d dictionary words", len(self.vocab))

        if script is None:
            return
        for guess in script:
            if self._state is SessionState.WON:
                break
            row = self._grid[self._entry_row]
            for cell, ch in zip(row, guess):
                cell.letter = ch
            self._entry_column = self.word_length
            self.submit()

    def _normalize_scripted(self, guess: str) -> str:
        if not isinstance(guess, str):
            raise TypeError("scripted guesses must be strings")
        g = guess.strip().upper()
        if len(g) != self.word_length or not (g.isascii() and g.isalpha()):
            raise ValueError(f"scripted guess must be {self.word_length} letters: {guess!r}")
        return g

    def _new_row(self, row: int) -> List[Cell]:
        return [Cell(row=row, column=c) for c in range(self.word_length)]

    # -------------------------
    # Input events
    # -------------------------
    def can_enter(self, letter: str) -> bool:
        """True iff enter_letter(letter) would be applied right now."""
        if not isinstance(letter, str) or len(letter) != 1:
            return False
        letter = letter.upper()
        if self._state is not SessionState.ENTERING:
            return False
        if self._entry_column >= self.word_length:
            return False
        if self.keyboard.get(letter) == Classification.ABSENT:
            return False
        return self.enforcement.is_legal(self._entry_column, letter)

    def enter_letter(self, letter: str) -> bool:
        if not self.can_enter(letter):
            return False
        self._grid[self._entry_row][self._entry_column].letter = letter.upper()
        self._entry_column += 1
        return True

    def backspace(self) -> bool:
        if self._state is not SessionState.ENTERING or self._entry_column == 0:
            return False
        self._entry_column -= 1
        self._grid[self._entry_row][self._entry_column].letter = None
        return True

    def current_word(self) -> Optional[str]:
        """The current row as a word, or None while any cell is empty."""
        letters = [cell.letter for cell in self._grid[self._entry_row]]
        if any(ch is None for ch in letters):
            return None
        return "".join(letters)

    def submit(self) -> SubmitStatus:
        if self._state is SessionState.WON:
            return SubmitStatus.GAME_OVER

        word = self.current_word()
        if word is None:
            return SubmitStatus.INCOMPLETE

        if not self.vocab.contains(word):
            logger.info("Word %s not found in dictionary.", word)
            return SubmitStatus.UNRECOGNIZED

        row = self._grid[self._entry_row]
        pattern = evaluate_guess(word, self._claims, self.enforcement, self.keyboard)
        for cell, state in zip(row, pattern):
            cell.state = state

        if word == self._secret:
            self._state = SessionState.WON
            logger.info("Game over!  Score: %d", self.score)
            return SubmitStatus.WON

        self._candidates.discard(word)
        removed = prune_candidates(self._candidates, word, self._claims)
        logger.debug(
            "Guess %s pruned %d candidates, %d remain", word, len(removed), len(self._candidates)
        )

        self._grid.append(self._new_row(self._entry_row + 1))
        self._entry_row += 1
        self._entry_column = 0
        return SubmitStatus.ACCEPTED

    # -------------------------
    # Render model
    # -------------------------
    def render_model(self) -> RenderModel:
        rows = tuple(
            tuple(Cell(c.row, c.column, c.letter, c.state) for c in row) for row in self._grid
        )
        return RenderModel(
            rows=rows,
            entry_row=self._entry_row,
            entry_column=self._entry_column,
            keyboard=self.keyboard.as_dict(),
            state=self._state,
            score=self.score if self._state is SessionState.WON else None,
        )

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def score(self) -> int:
        """Rows used so far; the final score once the game is won."""
        return len(self._grid)

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def entry_position(self) -> Tuple[int, int]:
        return self._entry_row, self._entry_column

    @property
    def candidates(self) -> List[str]:
        """Remaining candidate words in dictionary order."""
        return [w for w in self.vocab.words() if w in self._candidates]

    @property
    def remaining_candidates(self) -> int:
        return len(self._candidates)

    @property
    def submitted_rows(self) -> int:
        return self._entry_row + (1 if self._state is SessionState.WON else 0)
