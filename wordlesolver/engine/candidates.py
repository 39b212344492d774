"""
CandidateSet: the words still consistent with all feedback seen so far.

Order is the corpus insertion order and is never rearranged; the first member
is always the next fallback pick. The set only shrinks: filtering returns a
new, smaller set and `remove` drops a single word.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List

from .errors import ExhaustedCandidatesError


class CandidateSet:
    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        # dict keeps insertion order and gives O(1) membership/removal
        self._words: Dict[str, None] = dict.fromkeys(words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        head = ", ".join(list(self._words)[:5])
        more = ", ..." if len(self._words) > 5 else ""
        return f"CandidateSet([{head}{more}], size={len(self._words)})"

    def first(self) -> str:
        """First word in iteration order; ExhaustedCandidatesError if empty."""
        for w in self._words:
            return w
        raise ExhaustedCandidatesError("no candidates remain")

    def remove(self, word: str) -> None:
        """Drop `word`; KeyError if it is not a member."""
        del self._words[word]

    def filtered(self, keep: Callable[[str], bool]) -> "CandidateSet":
        """New set with the members for which `keep(word)` is true; self is untouched."""
        return CandidateSet(w for w in self._words if keep(w))

    def to_list(self) -> List[str]:
        return list(self._words)
