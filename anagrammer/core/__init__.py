"""Core anagram search engine for anagrammer."""

from .dictionary_loader import DICTIONARY_ENV_VAR, DictionaryLoader
from .expander import SentenceSink, SolutionExpander
from .letter_profile import (
    ALPHABET_SIZE,
    EMPTY_PROFILE,
    LetterProfile,
    MutableProfile,
    add_in_place,
    fits_inside,
    profile_letters,
    profile_of,
    profile_weight,
    subtract_in_place,
)
from .search import Combination, CombinationSearch
from .word_groups import GroupIndex, WordGroup

__all__ = [
    "ALPHABET_SIZE",
    "DICTIONARY_ENV_VAR",
    "EMPTY_PROFILE",
    "Combination",
    "CombinationSearch",
    "DictionaryLoader",
    "GroupIndex",
    "LetterProfile",
    "MutableProfile",
    "SentenceSink",
    "SolutionExpander",
    "WordGroup",
    "add_in_place",
    "fits_inside",
    "profile_letters",
    "profile_of",
    "profile_weight",
    "subtract_in_place",
]
