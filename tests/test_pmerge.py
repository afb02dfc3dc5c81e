from collections import Counter, deque
import random

import pytest

from minitools.pmerge import (
    ford_johnson_sort,
    format_sequence,
    jacobsthal_insertion_order,
    make_pairs,
    sort_deque,
    sort_list,
)


def test_insertion_order_empty():
    assert jacobsthal_insertion_order(0) == []


def test_insertion_order_single():
    assert jacobsthal_insertion_order(1) == [0]


def test_insertion_order_five():
    assert jacobsthal_insertion_order(5) == [0, 2, 1, 4, 3]


@pytest.mark.parametrize("n", range(0, 60))
def test_insertion_order_is_permutation(n):
    assert sorted(jacobsthal_insertion_order(n)) == list(range(n))


def test_make_pairs_with_straggler():
    pairs, straggler = make_pairs([5, 3, 1, 2, 4])
    assert pairs == [(5, 3), (2, 1)]
    assert straggler == 4


def test_make_pairs_even_length_has_no_straggler():
    pairs, straggler = make_pairs([1, 2, 4, 3])
    assert pairs == [(2, 1), (4, 3)]
    assert straggler is None


def test_make_pairs_larger_first():
    pairs, _ = make_pairs(random.Random(3).sample(range(1000), 40))
    assert all(high >= low for high, low in pairs)


@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_inputs_unchanged(values):
    assert sort_list(values) == values
    assert list(sort_deque(values)) == values


@pytest.mark.parametrize(
    "values",
    [[3, 1, 2], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 2, 1], [1, 2, 3], [2, 1]],
)
def test_small_inputs_sorted(values):
    assert sort_list(values) == sorted(values)


@pytest.mark.parametrize("size", [2, 5, 10, 33, 100])
def test_sorted_input_stays_sorted(size):
    values = list(range(0, size * 3, 3))
    assert sort_list(values) == values
    assert list(sort_deque(values)) == values


@pytest.mark.parametrize("seed", range(8))
def test_result_is_permutation(seed):
    rng = random.Random(seed)
    values = rng.sample(range(10000), rng.randint(2, 200))
    result = sort_list(values)
    assert Counter(result) == Counter(values)


@pytest.mark.parametrize("seed", range(8))
def test_list_and_deque_agree(seed):
    rng = random.Random(seed)
    values = rng.sample(range(10000), rng.randint(2, 150))
    assert list(sort_deque(values)) == sort_list(values)


def test_container_types():
    listed = sort_list([3, 1, 2])
    assert isinstance(listed, list)
    assert listed == [1, 2, 3]
    queued = sort_deque([3, 1, 2])
    assert isinstance(queued, deque)
    assert queued == deque([1, 2, 3])
    generic = ford_johnson_sort(deque([3, 1, 2]))
    assert isinstance(generic, deque)
    assert generic == deque([1, 2, 3])


def test_input_not_modified():
    values = [9, 4, 7, 1, 8]
    sort_list(values)
    assert values == [9, 4, 7, 1, 8]


def test_format_sequence():
    assert format_sequence([1, 2, 3]) == "1 2 3 "
    assert format_sequence([]) == ""