from anagrammer.core import GroupIndex, WordGroup, profile_of


def test_word_group_caches_weight_and_skips_repeated_spelling():
    group = WordGroup(profile_of("eat"))

    assert group.weight == 3
    assert group.add_word("eat") is True
    assert group.add_word("tea") is True
    assert group.add_word("eat") is False
    assert group.words == ["eat", "tea"]


def test_build_groups_words_sharing_a_signature_in_dictionary_order():
    index = GroupIndex.build(["eat", "at", "ate", "tea", "eta"], profile_of("eat"))

    assert [group.words for group in index] == [["eat", "ate", "tea", "eta"], ["at"]]
    assert index.word_count == 5


def test_build_excludes_words_that_do_not_fit_the_target():
    index = GroupIndex.build(["eat", "seat", "tee", "cat"], profile_of("eat"))

    assert [group.words for group in index] == [["eat"]]


def test_build_excludes_words_without_letters():
    index = GroupIndex.build(["123", "--", "a"], profile_of("a"))

    assert [group.words for group in index] == [["a"]]


def test_groups_are_ordered_by_descending_weight_with_stable_ties():
    index = GroupIndex.build(["a", "on", "b", "no", "bon", "ab"], profile_of("abon"))

    assert [group.weight for group in index] == [3, 2, 2, 1, 1]
    assert [group.words for group in index] == [
        ["bon"],
        ["on", "no"],
        ["ab"],
        ["a"],
        ["b"],
    ]
    assert index[1].words == ["on", "no"]
    assert len(index) == 5


def test_empty_inputs_produce_an_empty_index():
    assert len(GroupIndex.build([], profile_of("abc"))) == 0
    assert len(GroupIndex.build(["abc"], profile_of(""))) == 0
