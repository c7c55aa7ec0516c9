"""Sorting strategies that drive a PushSwap machine."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from math import isqrt

from pushswap.stacks import PushSwap


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from top to bottom."""
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def find_min_index(values: Iterable[int]) -> int:
    """Return the position of the first smallest value."""
    items = list(values)
    if not items:
        raise ValueError("no values to search")
    return min(range(len(items)), key=items.__getitem__)


def max_position(values: Iterable[int]) -> int:
    """Return the position of the first largest value, or -1 if there is none."""
    items = list(values)
    if not items:
        return -1
    return max(range(len(items)), key=items.__getitem__)


def int_sqrt(n: int) -> int:
    """Return the integer square root of ``n``; 0 for anything below 1."""
    return isqrt(n) if n > 0 else 0


def index_values(values: Iterable[int]) -> list[int]:
    """Replace each value by its rank among all values.

    Fewer than two values are returned unchanged.
    """
    items = list(values)
    if len(items) < 2:
        return items
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(items)):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in items]


def sort_2(machine: PushSwap) -> None:
    """Swap the top two elements of ``a`` if they are out of order."""
    a = machine.a
    if len(a) >= 2 and a[0] > a[1]:
        machine.sa()


def sort_3(machine: PushSwap) -> None:
    """Order the top three elements of ``a`` with at most two instructions."""
    if len(machine.a) < 3:
        raise ValueError("sort_3 needs at least three elements")
    x, y, z = machine.a[0], machine.a[1], machine.a[2]
    if x < y < z:
        return
    if x < z < y:
        machine.sa()
        machine.ra()
    elif y < x < z:
        machine.sa()
    elif y < z < x:
        machine.ra()
    elif z < x < y:
        machine.rra()
    elif z < y < x:
        machine.sa()
        machine.rra()


def _push_min_to_b(machine: PushSwap) -> None:
    min_index = find_min_index(machine.a)
    size = len(machine.a)
    if min_index <= size // 2:
        for _ in range(min_index):
            machine.ra()
    else:
        for _ in range(size - min_index):
            machine.rra()
    machine.pb()


def sort_5(machine: PushSwap) -> None:
    """Push the smallest values to ``b`` until three remain, sort, push back."""
    if not machine.a:
        return
    while len(machine.a) > 3:
        _push_min_to_b(machine)
    sort_3(machine)
    while machine.b:
        machine.pa()


def sort_10(machine: PushSwap) -> None:
    """Same strategy as sort_5, pushing a fixed count of minima to ``b``."""
    for _ in range(len(machine.a) - 3):
        _push_min_to_b(machine)
    sort_3(machine)
    while machine.b:
        machine.pa()


def push_back_to_a(machine: PushSwap) -> None:
    """Move everything from ``b`` to ``a``, always bringing the largest first."""
    while machine.b:
        size = len(machine.b)
        pos = max_position(machine.b)
        up, down = pos, size - pos
        if up <= down:
            for _ in range(up):
                machine.rb()
        else:
            for _ in range(down):
                machine.rrb()
        machine.pa()


def ksort(machine: PushSwap) -> None:
    """Chunk sort for larger inputs.

    The values of ``a`` are replaced by their ranks before sorting.
    """
    size = len(machine.a)
    window = int_sqrt(size) * 14 // 10
    machine.a = deque(index_values(machine.a))
    pushed = 0
    while machine.a:
        top = machine.a[0]
        if top <= pushed:
            machine.pb()
            machine.rb()
            pushed += 1
        elif top <= pushed + window:
            machine.pb()
            pushed += 1
        else:
            machine.ra()
    push_back_to_a(machine)


def choose_algorithm(machine: PushSwap) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(machine.a)
    if size < 2:
        return
    if size == 2:
        sort_2(machine)
    elif size == 3:
        sort_3(machine)
    elif size <= 10:
        sort_5(machine)
    else:
        ksort(machine)


def _values(values: Sequence[int]) -> list[int]:
    return list(values)