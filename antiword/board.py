"""
board.py

Plain-text drawing of a RenderModel, shared by the terminal front end and
the gymnasium adapter's render().
"""

from __future__ import annotations

from typing import List

from antiword.feedback import ALPHABET, Classification
from antiword.session import RenderModel, SessionState

# one-character marks per classification
MARKS = {
    Classification.UNKNOWN: " ",
    Classification.WRONG_PLACE: "?",
    Classification.RIGHT_PLACE: "=",
    Classification.ABSENT: "x",
}

KEYS_PER_ROW = 9


def format_row(model: RenderModel, row: int) -> str:
    cells = []
    for cell in model.rows[row]:
        letter = cell.letter or "_"
        cells.append(f"[{letter}{MARKS[cell.state]}]")
    line = " ".join(cells)
    if row == model.entry_row and model.state is SessionState.ENTERING:
        line += "  <"
    return line


def format_keyboard(model: RenderModel) -> str:
    lines: List[str] = []
    for start in range(0, len(ALPHABET), KEYS_PER_ROW):
        keys = ALPHABET[start:start + KEYS_PER_ROW]
        lines.append(" ".join(f"{k}{MARKS[model.keyboard[k]]}" for k in keys))
    return "\n".join(lines)


def format_board(model: RenderModel) -> str:
    lines = [format_row(model, r) for r in range(len(model.rows))]
    lines.append("")
    lines.append(format_keyboard(model))
    lines.append("")
    lines.append(f"Score: {len(model.rows)}.")
    return "\n".join(lines)
