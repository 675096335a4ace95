"""Timing experiments for searching and sorting algorithms."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any

from estruturas.complexity import linear_search, maximum
from estruturas.sorting import (
    bubble_sort,
    bubble_sort_full,
    insertion_sort,
    is_sorted,
    merge_sort,
    quick_sort,
    quick_sort_lomuto,
    selection_sort,
)


class BenchmarkError(Exception):
    """Raised when a timed run produces a wrong result."""


def _elapsed_us(call: Callable[[], Any]) -> tuple[int, Any]:
    before = time.perf_counter_ns()
    result = call()
    after = time.perf_counter_ns()
    return (after - before) // 1000, result


def _check_repeats(repeats: int) -> None:
    if repeats < 1:
        raise ValueError("repeats must be at least 1")


def min_time_us(
    run: Callable[..., Any],
    prepare: Callable[[], Any] | None = None,
    repeats: int = 10,
) -> int:
    """Smallest time in microseconds over ``repeats`` runs.

    When ``prepare`` is given, it is called before every run, untimed, and
    its value is passed to ``run``.
    """
    _check_repeats(repeats)
    best = None
    for _ in range(repeats):
        if prepare is None:
            elapsed, _ = _elapsed_us(run)
        else:
            data = prepare()
            elapsed, _ = _elapsed_us(lambda: run(data))
        if best is None or elapsed < best:
            best = elapsed
    return best


def growth(
    sizes: Iterable[int],
    prepare: Callable[[int], Any],
    run: Callable[[Any], Any],
    check: Callable[[Any, Any], bool],
    repeats: int = 10,
) -> Iterator[tuple[int, int]]:
    """Yield ``(size, best microseconds)`` for each size.

    ``prepare(size)`` builds fresh input for every run, ``run(data)`` is
    timed, and ``check(data, result)`` must hold or BenchmarkError is raised.
    """
    _check_repeats(repeats)
    for size in sizes:
        best = None
        for _ in range(repeats):
            data = prepare(size)
            elapsed, result = _elapsed_us(lambda: run(data))
            if not check(data, result):
                raise BenchmarkError(f"wrong result for size {size}")
            if best is None or elapsed < best:
                best = elapsed
        yield size, best


SORTS: dict[str, Callable[[MutableSequence], None]] = {
    "bubble": bubble_sort,
    "bubble-full": bubble_sort_full,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "quick-lomuto": quick_sort_lomuto,
}


def sort_report(
    sort: Callable[[MutableSequence], None], size: int = 10000, seed: int | None = None
) -> list[tuple[str, int | None]]:
    """Time ``sort`` on sorted, reversed and random input.

    Each entry is ``(label, microseconds)``; microseconds is None when the
    output was not sorted.
    """
    rng = random.Random(seed)
    cases = [
        ("Ordenado", list(range(size))),
        ("Invertido", [size - i for i in range(size)]),
        ("Aleatório", [rng.randrange(size) for _ in range(size)]),
    ]
    report = []
    for label, data in cases:
        elapsed, _ = _elapsed_us(lambda: sort(data))
        report.append((label, elapsed if is_sorted(data) else None))
    return report


def _experiments(end: int) -> dict[str, tuple]:
    """Experiment name -> (prepare, run, check, default start, end, step)."""

    def descending(size: int) -> list[int]:
        return [size - pos for pos in range(size)]

    def best_first(size: int) -> list[int]:
        data = list(range(size))
        if data:
            data[0] = end
        return data

    return {
        "bubble": (
            descending, bubble_sort, lambda d, _: is_sorted(d), 1000, 10000, 10,
        ),
        "bubble-full": (
            descending, bubble_sort_full, lambda d, _: is_sorted(d), 1000, 10000, 10,
        ),
        "max-worst": (
            lambda size: list(range(size)),
            maximum,
            lambda d, r: r == len(d) - 1,
            10000, 100000, 100,
        ),
        "max-best": (
            best_first, maximum, lambda d, r: r == end, 10000, 100000, 100,
        ),
        "linear-search": (
            lambda size: list(range(size)),
            lambda d: linear_search(d, len(d)),
            lambda d, r: r == -1,
            1000000, 8000000, 10000,
        ),
    }


EXPERIMENTS = ("bubble", "bubble-full", "max-worst", "max-best", "linear-search")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a growth experiment or time a sort on three kinds of input."""
    parser = argparse.ArgumentParser(description="Timing experiments.")
    commands = parser.add_subparsers(dest="command", required=True)

    grow = commands.add_parser("growth", help="time an algorithm over growing sizes")
    grow.add_argument("experiment", choices=EXPERIMENTS)
    grow.add_argument("--start", type=int)
    grow.add_argument("--end", type=int)
    grow.add_argument("--step", type=int)
    grow.add_argument("--repeats", type=int, default=10)

    sort = commands.add_parser("sort", help="time a sort on sorted/reversed/random data")
    sort.add_argument("algorithm", choices=sorted(SORTS))
    sort.add_argument("--size", type=int, default=10000)
    sort.add_argument("--seed", type=int)

    args = parser.parse_args(argv)

    if args.command == "sort":
        for label, elapsed in sort_report(SORTS[args.algorithm], args.size, args.seed):
            value = f"{elapsed} us" if elapsed is not None else "FALHOU"
            print(f"> {label + ':':<11}{value}")
        return 0

    defaults = _experiments(0)[args.experiment]
    end = args.end if args.end is not None else defaults[4]
    prepare, run, check, start, _, step = _experiments(end)[args.experiment]
    if args.start is not None:
        start = args.start
    if args.step is not None:
        step = args.step
    try:
        for size, best in growth(range(start, end + 1, step), prepare, run, check, args.repeats):
            print(f"{size} {best}")
    except BenchmarkError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())