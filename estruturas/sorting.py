"""Elementary and divide-and-conquer sorting algorithms, all in place."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass


@dataclass
class Person:
    """A person described by name, height and weight."""

    name: str
    height: float
    weight: float


def is_sorted(data: Sequence) -> bool:
    """Whether no element is greater than the one after it."""
    return all(a <= b for a, b in zip(data, data[1:]))


def bubble_sort_full(data: MutableSequence) -> None:
    """Bubble sort that always scans the whole sequence on every pass."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(data) - 1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True


def _bubble_passes(
    data: MutableSequence, key: Callable = lambda item: item
) -> Iterator[None]:
    """Run a shrinking bubble sort, yielding after every pass."""
    size = len(data)
    swapped = True
    while swapped:
        swapped = False
        size -= 1
        for i in range(size):
            if key(data[i]) > key(data[i + 1]):
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        yield


def bubble_sort(data: MutableSequence) -> None:
    """Bubble sort that leaves the settled tail out of later passes."""
    for _ in _bubble_passes(data):
        pass


def bubble_sort_by(data: MutableSequence, key: Callable) -> None:
    """Shrinking bubble sort ordering the items by ``key(item)``."""
    for _ in _bubble_passes(data, key):
        pass


def _selection_passes(data: MutableSequence) -> Iterator[None]:
    size = len(data)
    for i in range(size - 1):
        smallest = i
        for j in range(i + 1, size):
            if data[j] < data[smallest]:
                smallest = j
        if smallest != i:
            data[smallest], data[i] = data[i], data[smallest]
        yield


def selection_sort(data: MutableSequence) -> None:
    """Selection sort: move the smallest remaining item to the front."""
    for _ in _selection_passes(data):
        pass


def _insertion_passes(data: MutableSequence) -> Iterator[None]:
    for i in range(1, len(data)):
        base = data[i]
        j = i - 1
        while j >= 0 and base < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = base
        yield


def insertion_sort(data: MutableSequence) -> None:
    """Insertion sort: grow a sorted prefix one item at a time."""
    for _ in _insertion_passes(data):
        pass


def merge(data: MutableSequence, start: int, middle: int, end: int) -> None:
    """Merge the sorted runs ``data[start..middle]`` and ``data[middle+1..end]``."""
    p, q = start, middle + 1
    merged = []
    for _ in range(start, end + 1):
        if p > middle:
            merged.append(data[q])
            q += 1
        elif q > end:
            merged.append(data[p])
            p += 1
        elif data[p] < data[q]:
            merged.append(data[p])
            p += 1
        else:
            merged.append(data[q])
            q += 1
    data[start:start + len(merged)] = merged


def merge_sort(data: MutableSequence, start: int = 0, end: int | None = None) -> None:
    """Sort ``data[start..end]`` with a top-down merge sort."""
    if end is None:
        end = len(data) - 1
    if start >= end:
        return
    middle = (start + end) // 2
    merge_sort(data, start, middle)
    merge_sort(data, middle + 1, end)
    merge(data, start, middle, end)


def quick_sort(data: MutableSequence, start: int = 0, end: int | None = None) -> None:
    """Quick sort of ``data[start..end]`` around the middle element."""
    if end is None:
        end = len(data) - 1
    while start < end:
        i, j = start, end
        pivot = data[(start + end) // 2]
        while i <= j:
            while data[i] < pivot:
                i += 1
            while data[j] > pivot:
                j -= 1
            if i <= j:
                data[i], data[j] = data[j], data[i]
                i += 1
                j -= 1
        # Recurse into the smaller part and keep looping over the larger one.
        if j - start < end - i:
            if start < j:
                quick_sort(data, start, j)
            start = i
        else:
            if i < end:
                quick_sort(data, i, end)
            end = j


def partition(data: MutableSequence, start: int, end: int) -> int:
    """Partition ``data[start..end]`` around its last element; return its index."""
    pivot = data[end]
    i = start - 1
    for j in range(start, end):
        if data[j] < pivot:
            i += 1
            data[i], data[j] = data[j], data[i]
    if pivot < data[i + 1]:
        data[i + 1], data[end] = data[end], data[i + 1]
    return i + 1


def quick_sort_lomuto(
    data: MutableSequence, start: int = 0, end: int | None = None
) -> None:
    """Quick sort of ``data[start..end]`` using the last element as pivot."""
    if end is None:
        end = len(data) - 1
    while start < end:
        pivot = partition(data, start, end)
        if pivot - start < end - pivot:
            quick_sort_lomuto(data, start, pivot - 1)
            start = pivot + 1
        else:
            quick_sort_lomuto(data, pivot + 1, end)
            end = pivot - 1


def bubble_sort_steps(data: MutableSequence) -> Iterator[list]:
    """Bubble sort ``data`` in place, yielding a snapshot after every pass."""
    for _ in _bubble_passes(data):
        yield list(data)


def selection_sort_steps(data: MutableSequence) -> Iterator[list]:
    """Selection sort ``data`` in place, yielding a snapshot after every pass."""
    for _ in _selection_passes(data):
        yield list(data)


def insertion_sort_steps(data: MutableSequence) -> Iterator[list]:
    """Insertion sort ``data`` in place, yielding a snapshot after every pass."""
    for _ in _insertion_passes(data):
        yield list(data)


def latex_row(data: Sequence) -> str:
    """One table row with each item in its own boxed cell."""
    if not data:
        raise ValueError("cannot format an empty row")
    cells = " & ".join(f"\\multicolumn{{1}}{{|C|}}{{{item}}}" for item in data)
    return cells + "\\\\"


def comparison_report(data: Sequence) -> str:
    """Rows tracing bubble, selection and insertion sort on copies of ``data``."""
    lines: list[str] = []

    work = list(data)
    lines.append(latex_row(work))
    lines.extend(latex_row(step) for step in bubble_sort_steps(work))
    lines.append("")

    work = list(data)
    lines.append(latex_row(work))
    lines.extend(latex_row(step) for step in selection_sort_steps(work))
    lines.append(latex_row(work))
    lines.append("")

    work = list(data)
    lines.append(latex_row(work))
    lines.extend(latex_row(step) for step in insertion_sort_steps(work))
    lines.append("")

    return "\n".join(lines) + "\n"


SAMPLE_PEOPLE = (
    ("Alberto", 1.9, 98.0),
    ("Beatriz", 1.7, 75.0),
    ("Claudio", 1.7, 70.0),
    ("Doneide", 1.6, 50.0),
    ("Everton", 1.8, 85.0),
)

SAMPLE_NUMBERS = (5, 7, 8, 1, 10, 9, 4, 6, 3, 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the sample people by height or print the sorting trace table."""
    parser = argparse.ArgumentParser(description="Sorting demonstrations.")
    parser.add_argument("demo", choices=("people", "comparison"))
    args = parser.parse_args(argv)
    if args.demo == "people":
        people = [Person(*row) for row in SAMPLE_PEOPLE]
        bubble_sort_by(people, key=lambda person: person.height)
        for person in people:
            print(f"{person.name} / {person.height:g} / {person.weight:g}")
    else:
        print(comparison_report(SAMPLE_NUMBERS), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())