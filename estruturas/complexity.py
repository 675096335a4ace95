"""Operation counters for studying the growth of simple loop nests."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Sequence


def _doublings(n: int) -> Iterator[int]:
    """Yield 1, 2, 4, ... while the value stays below ``n``."""
    i = 1
    while i < n:
        yield i
        i += i


def ops_single_loop(n: int) -> int:
    """One operation per step of a single loop over ``n``."""
    return sum(1 for _ in range(n))


def ops_square(n: int) -> int:
    """Two full nested loops over ``n``."""
    return sum(1 for _ in range(n) for _ in range(n))


def ops_upper_triangle(n: int) -> int:
    """Inner loop runs from ``i + 1`` to ``n``."""
    return sum(1 for i in range(n) for _ in range(i + 1, n))


def ops_double_triangle(n: int) -> int:
    """Inner loop runs up to ``2 * i``."""
    return sum(1 for i in range(n) for _ in range(2 * i))


def ops_bounded_inner(n: int) -> int:
    """Three nested loops whose inner bounds are constant in size."""
    return sum(
        1
        for i in range(n)
        for j in range(i, i + 3)
        for _ in range(i, j)
    )


def ops_binary_recursion(n: int) -> int:
    """Operations of a function that calls itself twice on ``n - 1``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return 1 + ops_binary_recursion(n - 1) + ops_binary_recursion(n - 1)


def ops_six_per_step(n: int) -> int:
    """Three nested loops doing six operations for every outer step."""
    return sum(
        1
        for i in range(n)
        for j in range(i, i + 3)
        for _ in range(j, j + 2)
    )


def ops_upper_half(n: int) -> int:
    """Inner loop runs from ``i`` up to ``2 * i``."""
    return sum(1 for i in range(n) for _ in range(i, 2 * i))


def ops_doubling(n: int) -> int:
    """A loop whose counter doubles until it reaches ``n``."""
    return sum(1 for _ in _doublings(n))


def ops_linear_log(n: int) -> int:
    """A linear loop around a doubling loop."""
    return sum(1 for _ in range(1, n) for _ in _doublings(n))


def ops_cubic(n: int) -> int:
    """Three full nested loops over ``n``."""
    return sum(1 for _ in range(n) for _ in range(n) for _ in range(n))


def ops_two_linear(n: int) -> int:
    """Two inner passes of a full loop for every outer step."""
    return sum(
        1
        for i in range(n)
        for _ in range(i, i + 2)
        for _ in range(n)
    )


def ops_nested_range(n: int) -> int:
    """Innermost loop runs from ``i`` to ``j`` with ``j`` below ``2 * i``."""
    return sum(
        1
        for i in range(n)
        for j in range(2 * i)
        for _ in range(i, j)
    )


def _consecutive(v: int) -> tuple[int, int]:
    """Return (sequences summing to v, inner steps taken)."""
    sequences = 0
    steps = 0
    for i in range(1, v + 1):
        partial = i
        j = i + 1
        while partial <= v:
            if partial == v:
                sequences += 1
            partial += j
            steps += 1
            j += 1
    return sequences, steps


def consecutive_sum_steps(v: int) -> int:
    """Steps taken while searching runs of consecutive integers summing to ``v``."""
    return _consecutive(v)[1]


def consecutive_sums(v: int) -> int:
    """Number of runs of consecutive positive integers whose sum is ``v``."""
    return _consecutive(v)[0]


def maximum(data: Sequence):
    """Largest element, scanning left to right."""
    if not data:
        raise ValueError("maximum of an empty sequence")
    best = data[0]
    for item in data[1:]:
        if item > best:
            best = item
    return best


def linear_search(data: Sequence, value) -> int:
    """Index of the first occurrence of ``value`` or -1."""
    for index, item in enumerate(data):
        if item == value:
            return index
    return -1


def table(
    counter: Callable[[int], int], limit: int, start: int = 1
) -> Iterator[tuple[int, int]]:
    """Yield ``(n, counter(n))`` for ``n`` from ``start`` to ``limit``."""
    for n in range(start, limit + 1):
        yield n, counter(n)


COUNTERS: dict[str, Callable[[int], int]] = {
    "single_loop": ops_single_loop,
    "square": ops_square,
    "upper_triangle": ops_upper_triangle,
    "double_triangle": ops_double_triangle,
    "bounded_inner": ops_bounded_inner,
    "binary_recursion": ops_binary_recursion,
    "six_per_step": ops_six_per_step,
    "upper_half": ops_upper_half,
    "doubling": ops_doubling,
    "linear_log": ops_linear_log,
    "cubic": ops_cubic,
    "two_linear": ops_two_linear,
    "nested_range": ops_nested_range,
    "consecutive_sum_steps": consecutive_sum_steps,
    "consecutive_sums": consecutive_sums,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print a table of ``n`` and the operation count of a counter."""
    parser = argparse.ArgumentParser(description="Count operations of loop nests.")
    parser.add_argument("counter", choices=sorted(COUNTERS))
    parser.add_argument("--limit", type=int, default=1000)
    parser.add_argument("--start", type=int, default=1)
    args = parser.parse_args(argv)
    for n, ops in table(COUNTERS[args.counter], args.limit, args.start):
        print(f"{n} {ops}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())