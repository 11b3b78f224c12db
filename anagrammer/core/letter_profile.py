"""Letter-frequency profiles used to compare words against a target phrase."""

from __future__ import annotations

from typing import List, Tuple

ALPHABET_SIZE = 26

LetterProfile = Tuple[int, ...]
MutableProfile = List[int]

EMPTY_PROFILE: LetterProfile = (0,) * ALPHABET_SIZE

_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")


def profile_of(word: str) -> LetterProfile:
    """Return the per-letter counts of ``word``.

    Only the ASCII letters ``a``-``z`` are counted, case-insensitively. Any
    other character is ignored, so ``"Don't"`` and ``"dont"`` share a profile.
    """

    counts = [0] * ALPHABET_SIZE
    for char in word:
        code = ord(char)
        if _LOWER_A <= code <= _LOWER_Z:
            counts[code - _LOWER_A] += 1
        elif _UPPER_A <= code <= _UPPER_Z:
            counts[code - _UPPER_A] += 1
    return tuple(counts)


def profile_weight(profile: LetterProfile | MutableProfile) -> int:
    """Total number of letters described by ``profile``."""

    return sum(profile)


def fits_inside(container: LetterProfile | MutableProfile, candidate: LetterProfile) -> bool:
    """Return ``True`` when every count of ``candidate`` is covered by ``container``."""

    for available, needed in zip(container, candidate):
        if needed > available:
            return False
    return True


def subtract_in_place(target: MutableProfile, profile: LetterProfile) -> None:
    """Remove ``profile`` from ``target``; ``profile`` must fit inside ``target``."""

    assert fits_inside(target, profile), "profile does not fit inside target"
    for index, count in enumerate(profile):
        if count:
            target[index] -= count


def add_in_place(target: MutableProfile, profile: LetterProfile) -> None:
    """Give the letters of ``profile`` back to ``target``."""

    for index, count in enumerate(profile):
        if count:
            target[index] += count


def profile_letters(profile: LetterProfile | MutableProfile) -> str:
    """Render ``profile`` as its letters in alphabetical order."""

    return "".join(
        chr(_LOWER_A + index) * count for index, count in enumerate(profile) if count
    )


__all__ = [
    "ALPHABET_SIZE",
    "EMPTY_PROFILE",
    "LetterProfile",
    "MutableProfile",
    "add_in_place",
    "fits_inside",
    "profile_letters",
    "profile_of",
    "profile_weight",
    "subtract_in_place",
]
