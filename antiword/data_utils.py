from __future__ import annotations

from pathlib import Path

from antiword.vocab import WordVocab

DEFAULT_WORD_LIST = Path(__file__).resolve().parent.parent / "word_list.csv"


def load_dictionary(csv_path: str | Path = DEFAULT_WORD_LIST, column: str = "word") -> WordVocab:
    """
    Load the playable dictionary from a CSV.
    Words keep their file order; they are uppercased and deduplicated, and
    entries that are not five letters are skipped.
    """
    return WordVocab.from_csv(str(csv_path), column=column)
