"""
play/play_cli.py

Play Antiword in the terminal.
- Type letters to fill the current row; letters that are not legal in the
  current column (or already known to be absent) are ignored.
- '<' erases the last letter, an empty line submits the row.
- --script replays guesses against the first dictionary word (deterministic).

Run:
  python -m play.play_cli --csv word_list.csv
  python -m play.play_cli --script crane allow llama

Shortcuts:
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from antiword.board import format_board
from antiword.data_utils import DEFAULT_WORD_LIST, load_dictionary
from antiword.sampler import WordSampler
from antiword.session import GameSession, SessionState, SubmitStatus

BACKSPACE_KEYS = {"<", "-"}


def apply_line(session: GameSession, line: str) -> List[str]:
    """Feed one input line to the session as key events; return the ignored keys."""
    ignored: List[str] = []
    for ch in line.strip():
        if ch in BACKSPACE_KEYS:
            if not session.backspace():
                ignored.append(ch)
        elif ch.isalpha():
            if not session.enter_letter(ch.upper()):
                ignored.append(ch.upper())
        elif not ch.isspace():
            ignored.append(ch)
    return ignored


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Antiword: a five-letter word guessing game")
    ap.add_argument("--csv", default=str(DEFAULT_WORD_LIST), help="Path to word_list.csv")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--seed", type=int, default=None, help="Seed for picking the secret word")
    ap.add_argument("--script", nargs="+", metavar="WORD", help="Replay these guesses and exit")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")

    vocab = load_dictionary(args.csv, column=args.column)
    session = GameSession(vocab, WordSampler(vocab, seed=args.seed))

    if args.script:
        session.reset(args.script)
        print(format_board(session.render_model()))
        if session.state is SessionState.WON:
            print("Game over!  Score:", session.score)
        return 0

    print("\nAntiword: guess the five-letter word.")
    print("Type letters, '<' to erase, an empty line to submit, 'quit' to exit.\n")

    while session.state is SessionState.ENTERING:
        print(format_board(session.render_model()))
        line = input("> ")
        if line.strip().lower() in {"q", "quit", "exit"}:
            print("bye!")
            return 0

        if line.strip():
            ignored = apply_line(session, line)
            if ignored:
                print("Ignored:", " ".join(ignored))
            continue

        status = session.submit()
        if status is SubmitStatus.INCOMPLETE:
            print("Fill every letter before submitting.")
        elif status is SubmitStatus.UNRECOGNIZED:
            print(f"Word {session.current_word()} not found in dictionary.")

    print(format_board(session.render_model()))
    print("Game over!  Score:", session.score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
