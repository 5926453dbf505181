import random

import pytest

from dsakit.searching import binary_search, linear_search


def test_binary_search_finds_every_element():
    data = [1, 4, 9, 16, 25]
    for index, value in enumerate(data):
        assert binary_search(data, value) == index


def test_binary_search_missing_returns_none():
    assert binary_search([1, 4, 9, 16, 25], 10) is None
    assert binary_search([1, 4, 9, 16, 25], 0) is None
    assert binary_search([1, 4, 9, 16, 25], 30) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_with_duplicates_hits_matching_value():
    data = [2, 2, 2, 3, 3]
    index = binary_search(data, 3)
    assert data[index] == 3


def test_binary_search_unsorted_raises():
    with pytest.raises(ValueError):
        binary_search([3, 1, 2], 1)


def test_binary_search_agrees_with_membership():
    rng = random.Random(17)
    for _ in range(50):
        data = sorted(rng.randint(-30, 30) for _ in range(rng.randint(0, 15)))
        key = rng.randint(-35, 35)
        index = binary_search(data, key)
        if key in data:
            assert data[index] == key
        else:
            assert index is None


def test_linear_search_first_occurrence():
    data = [7, 3, 9, 3, 1]
    assert linear_search(data, 3) == data.index(3)


def test_linear_search_missing_returns_none():
    assert linear_search([7, 3, 9], 4) is None


def test_linear_search_agrees_with_list_index():
    rng = random.Random(23)
    for _ in range(50):
        data = [rng.randint(0, 9) for _ in range(10)]
        key = rng.randint(0, 12)
        expected = data.index(key) if key in data else None
        assert linear_search(data, key) == expected