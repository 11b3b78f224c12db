"""Text rendering for word group listings."""

from __future__ import annotations

from typing import List

from anagrammer.core import GroupIndex, WordGroup, profile_letters


class GroupListingFormatter:
    """Render word groups as ``letters: word, word`` lines."""

    def __init__(self, separator: str = ", ") -> None:
        self.separator = separator

    def format_group(self, group: WordGroup) -> str:
        return f"{profile_letters(group.signature)}: {self.separator.join(group.words)}"

    def format_index(self, index: GroupIndex) -> str:
        """One line per group in search order; empty string for an empty index."""

        lines: List[str] = [self.format_group(group) for group in index]
        return "\n".join(lines)


__all__ = ["GroupListingFormatter"]
