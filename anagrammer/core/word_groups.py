"""Grouping of dictionary words by shared letter profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List

from .letter_profile import LetterProfile, fits_inside, profile_of, profile_weight


@dataclass
class WordGroup:
    """All dictionary words that reduce to one exact letter profile."""

    signature: LetterProfile
    words: List[str] = field(default_factory=list)
    weight: int = 0

    def __post_init__(self) -> None:
        if not self.weight:
            self.weight = profile_weight(self.signature)

    def add_word(self, word: str) -> bool:
        """Append ``word`` unless the same spelling is already present."""

        if word in self.words:
            return False
        self.words.append(word)
        return True


class GroupIndex:
    """Word groups able to take part in an anagram of one target profile.

    Groups are ordered by descending weight. Groups of equal weight keep the
    order in which their signature first appeared in the dictionary, so the
    traversal order of the search is fully deterministic.
    """

    def __init__(self, groups: Iterable[WordGroup]) -> None:
        ordered = list(groups)
        ordered.sort(key=lambda group: group.weight, reverse=True)
        self._groups: List[WordGroup] = ordered

    @classmethod
    def build(cls, words: Iterable[str], target: LetterProfile) -> "GroupIndex":
        """Group ``words`` by signature, keeping only words that fit ``target``."""

        by_signature: Dict[LetterProfile, WordGroup] = {}
        for word in words:
            signature = profile_of(word)
            if not any(signature):
                continue
            if not fits_inside(target, signature):
                continue

            group = by_signature.get(signature)
            if group is None:
                group = by_signature[signature] = WordGroup(signature)
            group.add_word(word)

        return cls(by_signature.values())

    @property
    def groups(self) -> List[WordGroup]:
        return self._groups

    @property
    def word_count(self) -> int:
        return sum(len(group.words) for group in self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[WordGroup]:
        return iter(self._groups)

    def __getitem__(self, position: int) -> WordGroup:
        return self._groups[position]


__all__ = ["GroupIndex", "WordGroup"]
