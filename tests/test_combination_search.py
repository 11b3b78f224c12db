import sys
from collections import Counter
from itertools import combinations_with_replacement
from typing import List, Tuple

from conftest import run_anagrams

from anagrammer.core import (
    EMPTY_PROFILE,
    CombinationSearch,
    GroupIndex,
    profile_of,
    profile_weight,
)


def _letters(sentence: str) -> Counter:
    return Counter(char for char in sentence.lower() if "a" <= char <= "z")


def _brute_force(words: List[str], phrase: str) -> List[Tuple[str, ...]]:
    """Every multiset of distinct dictionary words whose letters match ``phrase``."""

    target = _letters(phrase)
    total = sum(target.values())
    unique = list(dict.fromkeys(words))
    found = []
    for size in range(1, total + 1):
        for picks in combinations_with_replacement(unique, size):
            if _letters("".join(picks)) == target:
                found.append(tuple(sorted(picks)))
    return sorted(found)


def test_scenario_single_signature_group():
    results = run_anagrams(["eat", "ate", "tea", "at", "eta"], "eat")

    assert results == ["eat", "ate", "tea", "eta"]


def test_identical_dictionary_entries_are_not_double_counted():
    assert run_anagrams(["a", "a"], "aa") == ["a a"]


def test_empty_phrase_emits_nothing():
    assert run_anagrams(["a", "eat", "b"], "") == []
    assert run_anagrams(["a", "eat", "b"], " ,.!? 42") == []


def test_empty_or_filtered_dictionary_emits_nothing():
    assert run_anagrams([], "listen") == []
    assert run_anagrams(["xyz", "quiz"], "listen") == []


def test_output_follows_group_then_word_order():
    results = run_anagrams(["b", "ab", "abb", "ba"], "abb")

    assert results == ["abb", "ab b", "ba b"]


def test_a_group_can_be_chosen_repeatedly():
    assert run_anagrams(["ab", "ba"], "abab") == ["ab ab", "ab ba", "ba ba"]
    assert run_anagrams(["a"], "aaaa") == ["a a a a"]


def test_matches_brute_force_enumeration_without_duplicates():
    words = ["a", "an", "na", "nab", "ban", "bana", "banana", "n", "b", "ana", "nan"]
    phrase = "Banana!"

    results = run_anagrams(words, phrase)

    assert len(results) == len(set(results))
    for sentence in results:
        assert _letters(sentence) == _letters(phrase)
    assert sorted(tuple(sorted(s.split())) for s in results) == _brute_force(words, phrase)


def test_target_and_combination_are_restored_after_run():
    target = profile_of("dormitory")
    index = GroupIndex.build(
        ["dirty", "room", "dormitory", "or", "mid", "toy", "dry", "motor", "i"],
        target,
    )
    seen = []

    def on_solution(combination):
        seen.append([tuple(entry) for entry in combination])
        # every letter is consumed when a solution is reported
        assert search.target_snapshot() == EMPTY_PROFILE
        used = sum(index[position].weight * count for position, count in combination)
        assert used == profile_weight(target)

    search = CombinationSearch(index, target, on_solution)
    found = search.run()

    assert found == len(seen) > 0
    assert search.target_snapshot() == target
    assert search.combination_snapshot() == []


def test_repeated_group_is_merged_into_one_entry():
    target = profile_of("abab")
    index = GroupIndex.build(["ab"], target)
    combinations = []

    search = CombinationSearch(
        index, target, lambda combination: combinations.append([tuple(e) for e in combination])
    )
    search.run()

    assert combinations == [[(0, 2)]]


def test_each_group_multiset_is_reported_once():
    target = profile_of("aabb")
    index = GroupIndex.build(["a", "b", "ab", "aab", "abb"], target)
    combinations = []

    CombinationSearch(
        index, target, lambda combination: combinations.append(tuple(map(tuple, combination)))
    ).run()

    assert len(combinations) == len(set(combinations))
    for combination in combinations:
        positions = [position for position, _ in combination]
        assert positions == sorted(positions)
        assert len(positions) == len(set(positions))
    # aab+b, abb+a, ab+ab, ab+a+b, a+a+b+b
    assert len(combinations) == 5


def test_long_phrases_do_not_exhaust_the_stack():
    limit = sys.getrecursionlimit()

    results = run_anagrams(["a"], "a" * 600)

    assert results == [" ".join(["a"] * 600)]
    assert sys.getrecursionlimit() == limit


def test_empty_target_reports_no_solution():
    calls = []
    search = CombinationSearch(GroupIndex.build(["a"], EMPTY_PROFILE), EMPTY_PROFILE, calls.append)

    assert search.run() == 0
    assert search.solutions_found == 0
    assert calls == []
