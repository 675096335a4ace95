# estruturas

Classic algorithms and data structures for studying algorithm analysis
and data structures. Plain Python, no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `estruturas.complexity` | Operation counters for loop nests and a doubly recursive function (`ops_square`, `ops_doubling`, `ops_binary_recursion`, ...), `consecutive_sums` / `consecutive_sum_steps`, `maximum`, `linear_search`, and `table` to tabulate a counter against `n` |
| `estruturas.recursion` | Iterative and recursive pairs: `count_up`, `count_down`, `matrix_indices`, `factorial`, `euler_rec`, `reverse`, `is_palindrome`, `binary_search`, `linear_search`, `total`, and `bubble_sort_rec` |
| `estruturas.sorting` | In-place `bubble_sort`, `bubble_sort_full`, `bubble_sort_by`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` (middle pivot) and `quick_sort_lomuto` (last-element pivot); `*_steps` generators yielding a snapshot after each pass; `latex_row` and `comparison_report`; the `Person` dataclass |
| `estruturas.benchmark` | `min_time_us`, `growth` (raises `BenchmarkError` on a wrong result) and `sort_report` for sorted, reversed and random input |
| `estruturas.array_stack` | `BoundedStack`, a fixed-capacity stack |
| `estruturas.array_queue` | `CircularQueue`, a fixed-capacity ring-buffer queue |
| `estruturas.linked` | `LinkedStack`, `LinkedQueue` and `LinkedDeque` on linked nodes |
| `estruturas.array_list` | `BoundedList`, a fixed-capacity list with positional insert and removal |
| `estruturas.stack_exercises` | `reverse_words`, `copy_stack`, `stacks_equal`, `is_palindrome`, `exam_question` |
| `estruturas.linked_lists` | `SinglyLinkedList` and `DoublyLinkedList` (insertion by position or in order, node swapping, reversal, link diagrams) and `deque_exercise` |
| `estruturas.round_robin` | `RoundRobin`, a round-robin CPU scheduler |
| `estruturas.console` | Command loops `run_stack`, `run_queue`, `run_deque`, `run_list` driven by single-character commands |
| `estruturas.tree` | `Tree`, a general tree with metrics, traversals, GraphViz text and a box-drawing `render`; `build` for quick construction |
| `estruturas.binary_tree` | `BinaryNode`, a binary tree node with metrics and traversals; `node_report` tabulates node properties |
| `estruturas.bst` | `BST`, a binary search tree (equal items go right) |

Capacity-bounded structures take a `max_size`; a value below 1 falls back
to 10. Adding to a full structure raises `OverflowError`; removing from
or peeking at an empty one raises `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sorting in place:

```python
from estruturas.sorting import merge_sort

data = [5, 7, 8, 1, 10, 9, 4, 6, 3, 2]
merge_sort(data, 0, len(data) - 1)
print(data)   # [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
```

Round-robin scheduling with a time slice of 3:

```python
from estruturas.round_robin import RoundRobin

scheduler = RoundRobin(3)
for cpu_time in (12, 8, 15, 5):
    scheduler.add(cpu_time)
print(scheduler.run())   # one process letter per time unit
```

A general tree:

```python
from estruturas.tree import Tree

root = Tree("A")
b = Tree("B")
root.add_subtree(b)
root.add_subtree(Tree("C"))
b.add_subtree(Tree("D"))
print(root.size(), root.height())   # 4 2
print(list(root.preorder()))        # ['A', 'B', 'D', 'C']
print(root.graphviz("Arvore"))
```

A binary search tree:

```python
from estruturas.bst import BST

tree = BST([8, 2, 10, 6, 5, 15, 7, 3, 20, 11])
print(6 in tree, 4 in tree)   # True False
print(list(tree))             # items in ascending order
```

## Command-line programs

```
estruturas-complexity COUNTER [--limit N] [--start N]
```
Prints `n` and the operation count of `COUNTER` for each `n` from
`--start` (default 1) to `--limit` (default 1000). Counters:
`single_loop`, `square`, `upper_triangle`, `double_triangle`,
`bounded_inner`, `binary_recursion`, `six_per_step`, `upper_half`,
`doubling`, `linear_log`, `cubic`, `two_linear`, `nested_range`,
`consecutive_sum_steps`, `consecutive_sums`.

```
estruturas-recursion DEMO [--size N]
```
Runs one demonstration: `count`, `countdown`, `factorial`, `euler`,
`matrix`, `reverse`, `palindrome`, `binary`, `linear`, `sum` or `bubble`
(`--size` sets the array size for `bubble`, default 500).

```
estruturas-sorting {people,comparison}
```
`people` sorts sample people by height; `comparison` prints LaTeX rows
tracing bubble, selection and insertion sort.

```
estruturas-benchmark growth EXPERIMENT [--start N] [--end N] [--step N] [--repeats N]
estruturas-benchmark sort ALGORITHM [--size N] [--seed N]
```
`growth` prints the best time in microseconds per input size for
`bubble`, `bubble-full`, `max-worst`, `max-best` or `linear-search`.
`sort` times `bubble`, `bubble-full`, `selection`, `insertion`, `merge`,
`quick` or `quick-lomuto` on sorted, reversed and random input.

```
estruturas-round-robin [CPU_TIME ...] [--slice N]
```
Schedules the given processes (default `12 8 15 5` with slice 3) and
prints the ready queue and the execution trace.

```
estruturas-console {stack,queue,deque,list}
```
Reads commands from standard input and prints the structure after each:
stack and queue use `+c` and `-`; deque uses `<c`, `>c`, `{`, `}`;
list uses `<c`, `>c`, `+c n`, `{`, `}`, `-n`. `.` quits.

## Limits

Timings measure these Python implementations, not the algorithms in
general. Tree output is GraphViz text or a character drawing; nothing is
rendered to an image. The structures live in memory only; nothing is
saved.