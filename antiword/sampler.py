from __future__ import annotations

import random
from antiword.vocab import WordVocab


class WordSampler:
    """Seedable source of secret words; pass `rng` to share a generator."""

    def __init__(self, vocab: WordVocab, seed: int | None = None, *, rng: random.Random | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if len(vocab) == 0:
            raise ValueError("vocab is empty")

        self._vocab = vocab
        self._rng = rng if rng is not None else random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def set_seed(self, seed: int | None) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    def choice_index(self) -> int:
        return self._rng.randrange(len(self._vocab))

    def choice_word(self) -> str:
        return self._vocab.word_at(self.choice_index())
