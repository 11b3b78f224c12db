"""Backtracking search for letter-exact covers of a target profile."""

from __future__ import annotations

import sys
from typing import Callable, List

from .letter_profile import (
    LetterProfile,
    MutableProfile,
    add_in_place,
    fits_inside,
    profile_weight,
    subtract_in_place,
)
from .word_groups import GroupIndex

# Each entry is ``[group_position, repetitions]``.
Combination = List[List[int]]
SolutionHandler = Callable[[Combination], None]


class CombinationSearch:
    """Enumerate every multiset of word groups whose profiles sum to ``target``.

    Groups are referenced by their position in the :class:`GroupIndex`.
    Along any search path positions never decrease, which is what makes each
    multiset of groups reachable through exactly one path. The next frontier
    starts at the position just chosen (inclusive) so a group may repeat.

    ``on_solution`` receives the live partial combination. It is mutated as
    soon as the handler returns, so handlers must copy anything they keep.
    """

    def __init__(
        self,
        index: GroupIndex,
        target: LetterProfile,
        on_solution: SolutionHandler,
    ) -> None:
        self.index = index
        self.on_solution = on_solution
        self._target: MutableProfile = list(target)
        self._weight = profile_weight(target)
        self._combination: Combination = []
        # one reusable frontier per depth; every pick consumes at least one letter
        self._frontiers: List[List[int]] = [[] for _ in range(self._weight + 1)]
        self.solutions_found = 0

    def run(self) -> int:
        """Search the whole space and return the number of solutions found."""

        self.solutions_found = 0
        if self._weight == 0:
            # an empty target has no sentence to report
            return 0

        root = self._frontiers[0]
        root.clear()
        root.extend(range(len(self.index)))

        # one frame per pick, at most one pick per letter
        previous_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(previous_limit + self._weight)
        try:
            self._search(0, self._weight)
        finally:
            sys.setrecursionlimit(previous_limit)
        return self.solutions_found

    def target_snapshot(self) -> LetterProfile:
        return tuple(self._target)

    def combination_snapshot(self) -> List[tuple]:
        return [tuple(entry) for entry in self._combination]

    def _search(self, depth: int, remaining: int) -> None:
        if remaining == 0:
            self.solutions_found += 1
            self.on_solution(self._combination)
            return

        groups = self.index.groups
        target = self._target
        combination = self._combination
        frontier = self._frontiers[depth]
        next_frontier = self._frontiers[depth + 1]

        for i, position in enumerate(frontier):
            group = groups[position]
            subtract_in_place(target, group.signature)

            if combination and combination[-1][0] == position:
                combination[-1][1] += 1
            else:
                combination.append([position, 1])

            next_frontier.clear()
            for offset in range(i, len(frontier)):
                candidate = frontier[offset]
                if fits_inside(target, groups[candidate].signature):
                    next_frontier.append(candidate)

            self._search(depth + 1, remaining - group.weight)

            if combination[-1][1] > 1:
                combination[-1][1] -= 1
            else:
                combination.pop()

            add_in_place(target, group.signature)


__all__ = ["Combination", "CombinationSearch", "SolutionHandler"]
