from algocollection.searching import (
    find_substring,
    ternary_search_iterative,
    ternary_search_recursive,
)

import pytest

SOURCE_ARRAY = [1] * 17 + [2, 3, 4, 10]
STEP_VALUES = list(range(0, 300, 3))
MISSING_TARGETS = (-5, 1, 151, 299, 1000)


def test_source_example_iterative():
    assert ternary_search_iterative(SOURCE_ARRAY, 10) == 20


def test_source_example_recursive():
    assert ternary_search_recursive(SOURCE_ARRAY, 10) == 20


def test_iterative_finds_every_present_value():
    for target in STEP_VALUES:
        index = ternary_search_iterative(STEP_VALUES, target)
        assert STEP_VALUES[index] == target


def test_recursive_finds_every_present_value():
    for target in STEP_VALUES:
        index = ternary_search_recursive(STEP_VALUES, target)
        assert STEP_VALUES[index] == target


@pytest.mark.parametrize("target", MISSING_TARGETS)
def test_iterative_missing_values(target):
    assert ternary_search_iterative(STEP_VALUES, target) is None


@pytest.mark.parametrize("target", MISSING_TARGETS)
def test_recursive_missing_values(target):
    assert ternary_search_recursive(STEP_VALUES, target) is None


def test_empty_sequence():
    assert ternary_search_iterative([], 4) is None
    assert ternary_search_recursive([], 4) is None


def test_short_sequence_scanned():
    values = [2, 4, 6]
    assert [ternary_search_iterative(values, v) for v in values] == [0, 1, 2]
    assert [ternary_search_recursive(values, v) for v in values] == [0, 1, 2]


def test_both_methods_agree():
    values = list(range(0, 500, 7))
    for target in range(-3, 510):
        assert ternary_search_iterative(values, target) == ternary_search_recursive(
            values, target
        )


def test_find_substring_position_holds_word():
    paragraph = "the quick brown fox jumps over the lazy dog"
    word = "the lazy"
    index = find_substring(paragraph, word)
    assert paragraph[index : index + len(word)] == word


def test_find_substring_first_occurrence():
    paragraph = "abcabcabc"
    word = "bca"
    index = find_substring(paragraph, word)
    assert paragraph[index : index + len(word)] == word
    assert word not in paragraph[: index + len(word) - 1]


def test_find_substring_missing():
    assert find_substring("hello there", "world") is None


def test_find_substring_empty_paragraph():
    with pytest.raises(ValueError):
        find_substring("", "word")