import random

import pytest

from dsakit.arrays import (
    find_pair_with_sum,
    majority_element,
    max_subarray_sum,
    second_minimum,
)


SAMPLE = [24, 20, 27, 35, 48, 87, 154, 55, 14, 88]


def test_second_minimum_worked_example():
    assert second_minimum(SAMPLE) == 20


def test_second_minimum_ignores_duplicates_of_minimum():
    assert second_minimum([14, 14, 14, 20, 99]) == 20


def test_second_minimum_matches_sorted_distinct():
    rng = random.Random(7)
    for _ in range(50):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(2, 20))]
        if len(set(data)) < 2:
            continue
        assert second_minimum(data) == sorted(set(data))[1]


def test_second_minimum_empty_raises():
    with pytest.raises(ValueError):
        second_minimum([])


def test_second_minimum_single_distinct_raises():
    with pytest.raises(ValueError):
        second_minimum([5, 5, 5])


@pytest.mark.parametrize(
    "data, expected",
    [
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6),
        ([1, 2, 3, 4, 5], 15),
        ([-2, -3, 4, -1, -2, 1, 5, -3], 7),
    ],
)
def test_max_subarray_sum_worked_examples(data, expected):
    assert max_subarray_sum(data) == expected


def test_max_subarray_sum_all_negative_is_largest_element():
    data = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(data) == max(data)


def test_max_subarray_sum_against_all_slices():
    rng = random.Random(11)
    for _ in range(30):
        data = [rng.randint(-20, 20) for _ in range(rng.randint(1, 12))]
        best = max(
            sum(data[i:j]) for i in range(len(data)) for j in range(i + 1, len(data) + 1)
        )
        assert max_subarray_sum(data) == best


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_majority_element_worked_example():
    assert majority_element([2, 2, 1, 1, 2, 2, 2]) == 2


def test_majority_element_none_when_absent():
    assert majority_element([1, 2, 3, 4, 5]) is None


def test_majority_element_exactly_half_is_not_majority():
    assert majority_element([1, 1, 2, 2]) is None


def test_majority_element_empty():
    assert majority_element([]) is None


def test_majority_element_invariant():
    rng = random.Random(3)
    for _ in range(50):
        data = [rng.randint(0, 2) for _ in range(rng.randint(1, 9))]
        result = majority_element(data)
        majorities = [v for v in set(data) if data.count(v) * 2 > len(data)]
        assert result == (majorities[0] if majorities else None)


def test_find_pair_worked_example():
    assert find_pair_with_sum([2, 3, 5, 6, 1, 4, 0, 9, 8, 7], 7) == (2, 5)


def test_find_pair_none_when_absent():
    assert find_pair_with_sum([1, 2, 3], 100) is None


def test_find_pair_does_not_reuse_an_element():
    assert find_pair_with_sum([5, 1], 10) is None


def test_find_pair_result_sums_to_target():
    rng = random.Random(5)
    for _ in range(30):
        data = [rng.randint(0, 10) for _ in range(10)]
        target = rng.randint(0, 20)
        pair = find_pair_with_sum(data, target)
        has_pair = any(
            data[i] + data[j] == target for i in range(10) for j in range(i + 1, 10)
        )
        assert (pair is not None) == has_pair
        if pair is not None:
            assert sum(pair) == target