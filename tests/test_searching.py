import pytest

from practicealgos.searching import (
    binary_search,
    closest_value,
    count_occurrences,
    jump_search,
    largest_window,
    step_search,
)

BSEARCH_VALUES = [1, 2, 3, 4, 5, 6, 10]
STEP_VALUES = [3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
JUMP_VALUES = [1, 2, 3, 4, 5, 6, 7, 8, 9, 99]


def test_binary_search_source_example():
    assert binary_search(BSEARCH_VALUES, 2) == 1


@pytest.mark.parametrize("target", BSEARCH_VALUES)
def test_binary_search_finds_every_value(target):
    assert BSEARCH_VALUES[binary_search(BSEARCH_VALUES, target)] == target


@pytest.mark.parametrize("target", [0, 7, 11])
def test_binary_search_missing(target):
    with pytest.raises(ValueError):
        binary_search(BSEARCH_VALUES, target)


def test_binary_search_empty():
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_step_search_source_example():
    assert STEP_VALUES[step_search(STEP_VALUES, 6)] == 6


@pytest.mark.parametrize("target", STEP_VALUES)
def test_step_search_finds_every_value(target):
    assert STEP_VALUES[step_search(STEP_VALUES, target)] == target


def test_step_search_single_element():
    assert step_search([5], 5) == 0


@pytest.mark.parametrize("target", [2, 13])
def test_step_search_missing(target):
    with pytest.raises(ValueError):
        step_search(STEP_VALUES, target)


def test_jump_search_source_example():
    assert JUMP_VALUES[jump_search(JUMP_VALUES, 6)] == 6


@pytest.mark.parametrize("target", JUMP_VALUES)
def test_jump_search_finds_every_value(target):
    assert JUMP_VALUES[jump_search(JUMP_VALUES, target)] == target


def test_jump_search_reaches_unsampled_tail():
    values = list(range(1, 12))
    assert values[jump_search(values, 11)] == 11


@pytest.mark.parametrize("target", [0, 50, 100])
def test_jump_search_missing(target):
    with pytest.raises(ValueError):
        jump_search(JUMP_VALUES, target)


def test_jump_search_empty():
    with pytest.raises(ValueError):
        jump_search([], 3)


def test_closest_value_tie_prefers_larger():
    assert closest_value({4, 2, 1, 5, 8, 9}, 3) == 4


def test_closest_value_below_all():
    assert closest_value([4, 2, 1, 5, 8, 9], 0) == 1


def test_closest_value_above_all():
    assert closest_value([4, 2, 1, 5, 8, 9], 100) == 9


def test_closest_value_exact():
    assert closest_value([4, 2, 1, 5, 8, 9], 5) == 5


def test_closest_value_nearer_smaller():
    assert closest_value([2, 9], 4) == 2


def test_closest_value_empty():
    with pytest.raises(ValueError):
        closest_value([], 1)


def test_count_occurrences_source_example():
    assert count_occurrences([1, 2, 4, 4, 4, 6, 7, 8, 9, 10], 4) == 3


@pytest.mark.parametrize("target", [1, 4, 5, 10])
def test_count_occurrences_matches_list_count(target):
    values = [1, 2, 4, 4, 4, 6, 7, 8, 9, 10]
    assert count_occurrences(iter(values), target) == values.count(target)


def test_largest_window_source_example():
    assert largest_window([1, 4, 3, 2, 5, 9, 10], 2) == [9, 10]


def test_largest_window_is_a_window():
    values = [3, 1, 3, 2, 3, 1]
    result = largest_window(values, 3)
    windows = [values[i:i + 3] for i in range(len(values) - 2)]
    assert result in windows
    assert all(result >= window for window in windows)


def test_largest_window_whole_sequence():
    assert largest_window([5, 1, 2], 3) == [5, 1, 2]


@pytest.mark.parametrize("n", [0, 8])
def test_largest_window_bad_length(n):
    with pytest.raises(ValueError):
        largest_window([1, 4, 3, 2, 5, 9, 10], n)