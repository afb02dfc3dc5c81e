"""Merge-insertion sorting with a Jacobsthal-ordered insertion of pending items."""

from __future__ import annotations

import bisect
from collections import deque
from typing import Callable, Iterable, MutableSequence, Sequence


def jacobsthal_insertion_order(n: int) -> list[int]:
    """Return the indices ``0..n-1`` in the order their items are inserted."""
    if n <= 0:
        return []

    bounds: list[int] = []
    previous, current = 0, 1
    while current < n:
        bounds.append(current)
        following = current + 2 * previous
        if following > n:
            break
        previous, current = current, following
    if not bounds or bounds[-1] < n:
        bounds.append(n)

    order: list[int] = []
    lower = 0
    for bound in bounds:
        order.extend(range(bound - 1, lower - 1, -1))
        lower = bound
    return order


def make_pairs(values: Iterable[int]) -> tuple[list[tuple[int, int]], int | None]:
    """Split values into ``(larger, smaller)`` pairs plus an unpaired last item."""
    items = list(values)
    pairs = [(max(a, b), min(a, b)) for a, b in zip(items[0::2], items[1::2])]
    straggler = items[-1] if len(items) % 2 else None
    return pairs, straggler


def _merge_insert(
    values: Sequence[int], factory: Callable[[Iterable[int]], MutableSequence[int]]
) -> MutableSequence[int]:
    if len(values) <= 1:
        return factory(values)

    pairs, straggler = make_pairs(values)
    larger = factory(high for high, _ in pairs)
    smaller = [low for _, low in pairs]
    if len(larger) > 1:
        larger = _merge_insert(larger, factory)

    chain = factory(smaller[:1])
    chain.extend(larger)

    pending = smaller[1:]
    for index in jacobsthal_insertion_order(len(pending)):
        bisect.insort_left(chain, pending[index])

    if straggler is not None:
        bisect.insort_left(chain, straggler)
    return chain


def ford_johnson_sort(values: Iterable[int]) -> MutableSequence[int]:
    """Sort by merge-insertion; a deque comes back as a deque, anything else as a list."""
    if isinstance(values, deque):
        return _merge_insert(values, deque)
    return _merge_insert(list(values), list)


def sort_list(values: Iterable[int]) -> list[int]:
    """Return the values sorted by merge-insertion, held in a list."""
    return ford_johnson_sort(list(values))  # type: ignore[return-value]


def sort_deque(values: Iterable[int]) -> deque[int]:
    """Return the values sorted by merge-insertion, held in a deque."""
    return ford_johnson_sort(deque(values))  # type: ignore[return-value]


def format_sequence(values: Iterable[int]) -> str:
    """Render values as they are printed: each followed by a single space."""
    return "".join(f"{value} " for value in values)