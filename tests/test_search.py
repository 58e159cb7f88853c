import pytest

from searchlab.search import (
    binary_search,
    binary_search_par,
    exponential_search,
    ternary_search,
)

THREAD_COUNTS = [1, 2, 3, 10]


@pytest.mark.parametrize("threads", THREAD_COUNTS)
def test_empty_sequence_gives_minus_one(threads):
    assert binary_search([], 5) == -1
    assert ternary_search([], 5) == -1
    assert exponential_search([], 5) == -1
    assert binary_search_par([], 5, threads) == -1


@pytest.mark.parametrize("threads", THREAD_COUNTS)
@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 100, 1000])
def test_finds_every_element_of_a_range(threads, size):
    nums = list(range(size))
    for value in nums:
        assert binary_search(nums, value) == value
        assert ternary_search(nums, value) == value
        assert exponential_search(nums, value) == value
        assert binary_search_par(nums, value, threads) == value


@pytest.mark.parametrize("threads", THREAD_COUNTS)
def test_missing_values_give_minus_one(threads):
    nums = list(range(0, 200, 2))
    for value in [*range(1, 200, 2), -5, 500]:
        assert binary_search(nums, value) == -1
        assert ternary_search(nums, value) == -1
        assert exponential_search(nums, value) == -1
        assert binary_search_par(nums, value, threads) == -1


@pytest.mark.parametrize("threads", THREAD_COUNTS)
def test_found_index_points_at_value_with_duplicates(threads):
    nums = sorted([3, 3, 3, 7, 7, 9, 9, 9, 9, 12, 15, 15])
    for value in set(nums):
        assert nums[binary_search(nums, value)] == value
        assert nums[ternary_search(nums, value)] == value
        assert nums[exponential_search(nums, value)] == value
        assert nums[binary_search_par(nums, value, threads)] == value


@pytest.mark.parametrize("threads", THREAD_COUNTS)
def test_single_element(threads):
    assert binary_search([42], 42) == 0
    assert binary_search([42], 41) == -1
    assert ternary_search([42], 42) == 0
    assert ternary_search([42], 41) == -1
    assert exponential_search([42], 42) == 0
    assert exponential_search([42], 41) == -1
    assert binary_search_par([42], 42, threads) == 0
    assert binary_search_par([42], 41, threads) == -1


@pytest.mark.parametrize("threads", THREAD_COUNTS)
def test_works_on_strings(threads):
    words = sorted(["apple", "banana", "cherry", "date", "fig", "grape"])
    for position, word in enumerate(words):
        assert binary_search(words, word) == position
        assert ternary_search(words, word) == position
        assert exponential_search(words, word) == position
        assert binary_search_par(words, word, threads) == position
    assert binary_search(words, "kiwi") == -1
    assert ternary_search(words, "kiwi") == -1
    assert exponential_search(words, "kiwi") == -1
    assert binary_search_par(words, "kiwi", threads) == -1


@pytest.mark.parametrize("threads", [1, 2, 5, 10, 50])
def test_parallel_agrees_with_sequential_on_unique_values(threads):
    nums = list(range(0, 3000, 3))
    for value in range(0, 3000, 7):
        assert binary_search_par(nums, value, threads) == binary_search(nums, value)


def test_parallel_more_threads_than_items():
    nums = [10, 20, 30]
    assert binary_search_par(nums, 30, 10) == 2
    assert binary_search_par(nums, 10, 10) == 0
    assert binary_search_par(nums, 25, 10) == -1


def test_parallel_returns_first_chunk_with_match():
    nums = [5] * 20
    index = binary_search_par(nums, 5, 4)
    assert 0 <= index < 5


def test_parallel_default_thread_count():
    nums = list(range(500))
    assert binary_search_par(nums, 123) == 123


@pytest.mark.parametrize("threads", [0, -3])
def test_parallel_rejects_non_positive_thread_count(threads):
    with pytest.raises(ValueError):
        binary_search_par([1, 2, 3], 2, threads)


def test_exponential_search_large_range():
    nums = list(range(1 << 15))
    for value in (0, 1, 100, 1 << 10, (1 << 15) - 1):
        assert exponential_search(nums, value) == value


def test_ternary_search_large_range():
    nums = list(range(10001))
    for value in (0, 3333, 5000, 6667, 10000):
        assert ternary_search(nums, value) == value