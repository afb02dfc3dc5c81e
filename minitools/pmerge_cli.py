"""Command line front end that validates, sorts and times an integer sequence."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, Sequence, TextIO

from minitools.pmerge import format_sequence, sort_deque, sort_list

_DIGITS = "0123456789"
_ITERATIONS = 100


class SequenceError(ValueError):
    """The command line arguments do not form a valid positive sequence."""


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when no item is greater than the one after it."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))


def find_duplicate(values: Iterable[int]) -> int | None:
    """Return the smallest value that occurs more than once, if any."""
    ordered = sorted(values)
    for previous, current in zip(ordered, ordered[1:]):
        if previous == current:
            return current
    return None


def _to_int(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    digits = text[1:] if text[:1] in ("+", "-") else text
    return sign * int(digits) if digits else 0


def validate_sequence(args: Iterable[str]) -> list[int]:
    """Turn arguments into non-negative, distinct integers or raise SequenceError."""
    sequence: list[int] = []
    for arg in args:
        body = arg[1:] if arg[:1] in ("+", "-") else arg
        if any(char not in _DIGITS for char in body):
            raise SequenceError(f"Error: invalid input in sequence: {arg}")
        number = _to_int(arg)
        if number < 0:
            raise SequenceError(f"Error: invalid input in sequence, negative: {number}")
        sequence.append(number)

    duplicate = find_duplicate(sequence)
    if duplicate is not None:
        raise SequenceError(
            f"Error: invalid input in sequence, duplicated: {duplicate}"
        )
    return sequence


def _timed(sorter: Callable[[Sequence[int]], Iterable[int]], values: Sequence[int]):
    start = time.process_time()
    result = sorter(values)
    return result, (time.process_time() - start) * 1_000_000


def measure_sort_time(
    sorter: Callable[[Sequence[int]], Iterable[int]],
    values: Sequence[int],
    iterations: int = _ITERATIONS,
    out: TextIO | None = None,
    label: str = "list",
) -> float:
    """Sort ``values`` repeatedly, report each run, return the mean in microseconds."""
    stream = sys.stdout if out is None else out
    total = 0.0
    for _ in range(iterations):
        _, elapsed = _timed(sorter, list(values))
        total += elapsed
        stream.write(f"Time to process with {label}: {round(elapsed)} us\n")
    return total / iterations if iterations else 0.0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Error: needed a positive integer sequence.", file=sys.stderr)
        return 1

    try:
        sequence = validate_sequence(args)
    except SequenceError as exc:
        print(exc, file=sys.stderr)
        return 1

    out = sys.stdout
    runs = (("list", "Before (list):  ", sort_list), ("deque", "Before (deque): ", sort_deque))
    for label, heading, sorter in runs:
        out.write(heading + format_sequence(sequence) + "\n")
        result, elapsed = _timed(sorter, sequence)
        out.write("After:          " + format_sequence(result) + "\n")
        out.write(f"Time to process with {label}: {elapsed:g} us\n\n")

    average_list = measure_sort_time(sort_list, sequence, _ITERATIONS, out, "list")
    out.write(f"Average time to process with list: {average_list:g} us\n\n")
    average_deque = measure_sort_time(sort_deque, sequence, _ITERATIONS, out, "deque")
    out.write(f"Average time to process with deque: {average_deque:g} us\n\n")

    out.write(f"Average time to process with list: {average_list:g} us\n")
    out.write(f"Average time to process with deque: {average_deque:g} us\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())