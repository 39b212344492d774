"""
WordCorpus: the normalized dictionary of five-letter words.

Normalization (applied line by line, in file order):
  - trim surrounding whitespace and lowercase
  - keep only tokens of exactly WORD_LENGTH letters a-z
  - collapse duplicates, first occurrence wins (order preserved)

The corpus is loaded once and never mutated; solver sessions copy it into
their own CandidateSet on reset, so a single instance can back any number of
sessions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Tuple

from wordlesolver.config import DEFAULT_CORPUS_PATH, WORD_LENGTH
from wordlesolver.engine.errors import CorpusError
from wordlesolver.engine.validation import is_word

from .io import read_lines

logger = logging.getLogger(__name__)


def normalize_words(lines: Iterable[str], N: int = WORD_LENGTH) -> Tuple[str, ...]:
    seen = set()
    out = []
    for raw in lines:
        w = raw.strip().lower()
        if not is_word(w, N) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)


@dataclass(frozen=True)
class WordCorpus:
    words: Tuple[str, ...]
    _index: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "words", tuple(self.words))
        object.__setattr__(self, "_index", frozenset(self.words))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WordCorpus":
        """Build a corpus from raw lines; raises CorpusError if nothing usable remains."""
        words = normalize_words(lines)
        if not words:
            raise CorpusError(f"word list contains no valid {WORD_LENGTH}-letter words")
        return cls(words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._index


def load_corpus(path: Path | str = DEFAULT_CORPUS_PATH) -> WordCorpus:
    """
    Load and normalize the word list at `path`.

    Raises CorpusError when the file is missing or holds no usable word.
    """
    try:
        lines = read_lines(path)
    except FileNotFoundError as e:
        raise CorpusError(f"Word list not found at path: {path}") from e
    try:
        corpus = WordCorpus.from_lines(lines)
    except CorpusError as e:
        raise CorpusError(f"{e} ({path})") from e
    logger.debug("loaded %d words from %s (%d raw lines)", len(corpus), path, len(lines))
    return corpus
