"""Iterative and recursive versions of classic small algorithms."""

from __future__ import annotations

import argparse
from collections.abc import MutableSequence, Sequence


def count_up(n: int) -> list[int]:
    """Numbers from 1 to ``n``."""
    return list(range(1, n + 1))


def count_up_rec(n: int) -> list[int]:
    """Numbers from 1 to ``n``, built recursively."""
    if n <= 0:
        return []
    return count_up_rec(n - 1) + [n]


def count_down(n: int) -> list[int]:
    """Numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def count_down_rec(n: int) -> list[int]:
    """Numbers from ``n`` down to 1, built recursively."""
    if n <= 0:
        return []
    return [n] + count_down_rec(n - 1)


def matrix_indices(rows: int, cols: int) -> list[tuple[int, int]]:
    """Every (row, col) pair in row-major order."""
    return [(i, j) for i in range(rows) for j in range(cols)]


def matrix_indices_rec(rows: int, cols: int) -> list[tuple[int, int]]:
    """Row-major pairs, recursing over the rows."""
    if rows < 1:
        return []
    last = rows - 1
    return matrix_indices_rec(last, cols) + [(last, j) for j in range(cols)]


def matrix_indices_rec2(rows: int, cols: int) -> list[tuple[int, int]]:
    """Pairs produced by recursing over both rows and columns.

    Earlier rows are visited again for every column, so pairs repeat.
    """
    if rows < 1:
        return []
    result = matrix_indices_rec2(rows - 1, cols)
    if cols < 1:
        return result
    result += matrix_indices_rec2(rows, cols - 1)
    result.append((rows - 1, cols - 1))
    return result


def _check_natural(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def factorial(n: int) -> int:
    """``n!`` computed with a loop."""
    _check_natural(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_rec(n: int) -> int:
    """``n!`` computed recursively."""
    _check_natural(n)
    if n <= 1:
        return 1
    return n * factorial_rec(n - 1)


def euler_rec(n: int) -> float:
    """Partial sum of 1/k! for k from 0 to ``n``."""
    _check_natural(n)
    if n == 0:
        return 1.0
    return 1.0 / factorial(n) + euler_rec(n - 1)


def reverse(data: MutableSequence, start: int, end: int) -> None:
    """Reverse ``data[start..end]`` in place."""
    while start < end:
        data[start], data[end] = data[end], data[start]
        start += 1
        end -= 1


def reverse_rec(data: MutableSequence, start: int, end: int) -> None:
    """Reverse ``data[start..end]`` in place, recursively."""
    if start >= end:
        return
    data[start], data[end] = data[end], data[start]
    reverse_rec(data, start + 1, end - 1)


def _char_at(word: str, index: int) -> str:
    if not 0 <= index < len(word):
        raise IndexError(f"position {index} out of range")
    return word[index]


def is_palindrome(word: str, start: int = 0, end: int | None = None) -> bool:
    """Whether ``word[start..end]`` reads the same both ways."""
    if end is None:
        end = len(word) - 1
    while start < end:
        if _char_at(word, start) != _char_at(word, end):
            return False
        start += 1
        end -= 1
    return True


def is_palindrome_rec(word: str, start: int = 0, end: int | None = None) -> bool:
    """Whether ``word[start..end]`` reads the same both ways, recursively."""
    if end is None:
        end = len(word) - 1
    if start >= end:
        return True
    if _char_at(word, start) != _char_at(word, end):
        return False
    return is_palindrome_rec(word, start + 1, end - 1)


def binary_search(
    data: Sequence, start: int = 0, end: int | None = None, value=None
) -> int:
    """Index of ``value`` in sorted ``data[start..end]`` or -1."""
    if end is None:
        end = len(data) - 1
    while start <= end:
        middle = (start + end) // 2
        if value == data[middle]:
            return middle
        if value < data[middle]:
            end = middle - 1
        else:
            start = middle + 1
    return -1


def binary_search_rec(
    data: Sequence, start: int = 0, end: int | None = None, value=None
) -> int:
    """Index of ``value`` in sorted ``data[start..end]`` or -1, recursively."""
    if end is None:
        end = len(data) - 1
    if start > end:
        return -1
    middle = (start + end) // 2
    if value == data[middle]:
        return middle
    if value < data[middle]:
        return binary_search_rec(data, start, middle - 1, value)
    return binary_search_rec(data, middle + 1, end, value)


def linear_search(data: Sequence, size: int | None = None, value=None) -> int:
    """First index of ``value`` among the first ``size`` items or -1."""
    if size is None:
        size = len(data)
    for index, item in enumerate(data[:size]):
        if item == value:
            return index
    return -1


def linear_search_rec(data: Sequence, size: int | None = None, value=None) -> int:
    """Last index of ``value`` among the first ``size`` items or -1."""
    if size is None:
        size = len(data)
    if size == 0:
        return -1
    size -= 1
    if data[size] == value:
        return size
    return linear_search_rec(data, size, value)


def total(data: Sequence, size: int | None = None):
    """Sum of the first ``size`` items."""
    if size is None:
        size = len(data)
    result = 0
    for item in data[:size]:
        result += item
    return result


def total_rec(data: Sequence, size: int | None = None):
    """Sum of the first ``size`` items, recursively."""
    if size is None:
        size = len(data)
    if size == 0:
        return 0
    size -= 1
    return data[size] + total_rec(data, size)


def bubble_sort_rec(data: MutableSequence, size: int | None = None) -> None:
    """Sort the first ``size`` items in place with a recursive bubble sort."""
    if size is None:
        size = len(data)
    last = size - 1
    swapped = False
    for i in range(last):
        if data[i] > data[i + 1]:
            data[i], data[i + 1] = data[i + 1], data[i]
            swapped = True
    if swapped:
        bubble_sort_rec(data, last)


def _is_sorted(data: Sequence) -> bool:
    return all(a <= b for a, b in zip(data, data[1:]))


PALINDROME_CASES = [
    ("socorrammesubinoonibusemmarrocos", True),
    ("reviver", True),
    ("anilina", True),
    ("anilinas", False),
    ("amor a roma", True),
    ("lava esse aval", True),
    ("lava esse lava", False),
    ("01234543210", True),
    ("012345A3210", False),
    ("ooooooovooooooo", True),
    ("ooooooovoooooooo", False),
]

_SAMPLE = [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]


def _demo(name: str, size: int) -> int:
    if name == "count":
        for n in count_up(10) + count_up_rec(10):
            print(n)
    elif name == "countdown":
        for n in count_down(10) + count_down_rec(10):
            print(n)
    elif name == "factorial":
        for i in range(10):
            print(f"{i} {factorial(i)} {factorial_rec(i)}")
    elif name == "euler":
        for i in range(10):
            print(f"{i} {euler_rec(i):.20f}")
    elif name == "matrix":
        for i, j in matrix_indices(3, 5):
            print(f"{i},{j}")
        print("---")
        for i, j in matrix_indices_rec(3, 5):
            print(f"{i},{j}")
    elif name == "reverse":
        for k in range(1, 100):
            data = list(range(k))
            reverse(data, 0, k - 1)
            reverse_rec(data, 0, k - 1)
            if data != list(range(k)):
                print("> FALHOU")
                return 1
        print("> OK")
    elif name == "palindrome":
        for word, expected in PALINDROME_CASES:
            if is_palindrome(word) != expected or is_palindrome_rec(word) != expected:
                print("> FALHOU")
        print("> OK")
    elif name in ("binary", "linear"):
        for i in range(1, 2 * len(_SAMPLE) + 2):
            if name == "binary":
                a = binary_search(_SAMPLE, 0, len(_SAMPLE) - 1, i)
                b = binary_search_rec(_SAMPLE, 0, len(_SAMPLE) - 1, i)
            else:
                a = linear_search(_SAMPLE, len(_SAMPLE), i)
                b = linear_search_rec(_SAMPLE, len(_SAMPLE), i)
            print(f"{i} {a} {b}")
    elif name == "sum":
        data = list(range(1, 11))
        for i in range(1, len(data) + 1):
            print(f"{i} {total(data, i)} {total_rec(data, i)}")
    elif name == "bubble":
        data = [size - i for i in range(size)]
        bubble_sort_rec(data, size)
        print("> OK" if _is_sorted(data) else "> FALHOU")
    return 0


DEMOS = (
    "count", "countdown", "factorial", "euler", "matrix", "reverse",
    "palindrome", "binary", "linear", "sum", "bubble",
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the recursion demonstrations."""
    parser = argparse.ArgumentParser(description="Recursion demonstrations.")
    parser.add_argument("demo", choices=DEMOS)
    parser.add_argument("--size", type=int, default=500, help="size for the bubble demo")
    args = parser.parse_args(argv)
    return _demo(args.demo, args.size)


if __name__ == "__main__":
    raise SystemExit(main())