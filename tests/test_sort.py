import itertools
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sort import (
    choose_algorithm,
    find_min_index,
    index_values,
    int_sqrt,
    is_sorted,
    ksort,
    max_position,
    push_back_to_a,
    sort_2,
    sort_3,
    sort_5,
    sort_10,
)
from pushswap.stacks import PushSwap


def replay(values, ops):
    machine = PushSwap(values)
    for op in ops:
        getattr(machine, op)()
    return machine


def test_is_sorted_cases():
    assert is_sorted([]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1]) is False


def test_find_min_index_points_at_minimum():
    values = [5, 3, 9, -4, 7]
    assert values[find_min_index(values)] == min(values)


def test_find_min_index_empty_raises():
    with pytest.raises(ValueError):
        find_min_index([])


def test_max_position_empty():
    assert max_position([]) == -1


@given(st.lists(st.integers(), min_size=1))
def test_max_position_first_maximum(values):
    pos = max_position(values)
    assert values[pos] == max(values)
    assert all(v < values[pos] for v in values[:pos])


@given(st.integers(min_value=-100, max_value=10**6))
def test_int_sqrt_bounds(n):
    r = int_sqrt(n)
    if n < 1:
        assert r == 0
    else:
        assert r * r <= n < (r + 1) * (r + 1)


@given(st.lists(st.integers(), min_size=2, unique=True))
def test_index_values_are_ranks(values):
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    for (v1, r1), (v2, r2) in itertools.combinations(zip(values, ranks), 2):
        assert (v1 < v2) == (r1 < r2)


def test_index_values_single_unchanged():
    assert index_values([42]) == [42]


def test_sort_2_swaps_when_needed():
    machine = PushSwap([2, 1])
    sort_2(machine)
    assert list(machine.a) == [1, 2]
    assert machine.ops == ["sa"]


def test_sort_2_leaves_sorted():
    machine = PushSwap([1, 2])
    sort_2(machine)
    assert machine.ops == []


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_3_all_permutations(values):
    machine = PushSwap(values)
    sort_3(machine)
    assert list(machine.a) == [1, 2, 3]
    assert len(machine.ops) <= 2


def test_sort_3_too_short_raises():
    with pytest.raises(ValueError):
        sort_3(PushSwap([1, 2]))


@pytest.mark.parametrize("size", [4, 5, 7, 10])
def test_sort_5_and_sort_10(size):
    rng = random.Random(size)
    values = rng.sample(range(-50, 50), size)
    for sorter in (sort_5, sort_10):
        machine = PushSwap(values)
        sorter(machine)
        assert list(machine.a) == sorted(values)
        assert not machine.b
        assert list(replay(values, machine.ops).a) == sorted(values)


def test_sort_5_empty_does_nothing():
    machine = PushSwap([])
    sort_5(machine)
    assert machine.ops == []


def test_push_back_to_a_orders_ascending():
    machine = PushSwap([])
    machine.b.extend([3, 8, 1, 6, 2])
    push_back_to_a(machine)
    assert list(machine.a) == [1, 2, 3, 6, 8]
    assert not machine.b


def test_ksort_replaces_values_with_ranks():
    values = random.Random(1).sample(range(-1000, 1000), 100)
    machine = PushSwap(values)
    ksort(machine)
    assert list(machine.a) == list(range(100))
    assert list(replay(values, machine.ops).a) == sorted(values)


@settings(max_examples=50)
@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, max_size=40))
def test_choose_algorithm_sorts(values):
    machine = PushSwap(values)
    choose_algorithm(machine)
    replayed = replay(values, machine.ops)
    assert list(replayed.a) == sorted(values)
    assert not replayed.b


def test_choose_algorithm_single_no_ops():
    machine = PushSwap([7])
    choose_algorithm(machine)
    assert machine.ops == []