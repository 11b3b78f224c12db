"""Turn abstract group combinations into concrete sentences."""

from __future__ import annotations

from typing import Callable, List

from .search import Combination
from .word_groups import GroupIndex

SentenceSink = Callable[[str], None]


class SolutionExpander:
    """Emit every sentence realising a combination of word groups.

    Each picked word occupies one slot. Repeated picks from one group are
    expanded as combinations with repetition: word positions never decrease
    across the slots of one group, so a multiset of same-signature words is
    emitted once instead of once per ordering. Slots are advanced like an
    odometer (last slot fastest), which keeps the stack depth constant.
    """

    def __init__(self, index: GroupIndex, emit: SentenceSink) -> None:
        self.index = index
        self.emit = emit
        self._buffer: List[str] = []
        self._slot_words: List[List[str]] = []
        self._continues_group: List[bool] = []
        self._positions: List[int] = []
        self.sentences_emitted = 0

    def expand(self, combination: Combination) -> None:
        slot_words = self._slot_words
        continues_group = self._continues_group
        positions = self._positions
        buffer = self._buffer
        slot_words.clear()
        continues_group.clear()

        for group_position, repetitions in combination:
            words = self.index[group_position].words
            for repeat in range(repetitions):
                slot_words.append(words)
                continues_group.append(repeat > 0)
        if not slot_words:
            return

        slots = len(slot_words)
        positions[:] = [0] * slots
        buffer[:] = [words[0] for words in slot_words]

        while True:
            self.sentences_emitted += 1
            self.emit(" ".join(buffer))

            slot = slots - 1
            while slot >= 0 and positions[slot] == len(slot_words[slot]) - 1:
                slot -= 1
            if slot < 0:
                return

            positions[slot] += 1
            buffer[slot] = slot_words[slot][positions[slot]]
            for later in range(slot + 1, slots):
                start = positions[later - 1] if continues_group[later] else 0
                positions[later] = start
                buffer[later] = slot_words[later][start]


__all__ = ["SentenceSink", "SolutionExpander"]
