"""Exercises solved only with stack operations."""

from __future__ import annotations

from estruturas.array_stack import BoundedStack

_SEPARATORS = ".  "


def reverse_words(sentence: str) -> str:
    """Reverse every word in place, keeping spaces and full stops where they are."""
    stack = BoundedStack(len(sentence))
    pieces: list[str] = []

    def flush() -> None:
        while not stack.is_empty():
            pieces.append(stack.pop())

    for char in sentence:
        if char in (".", " "):
            flush()
            pieces.append(char)
        else:
            stack.push(char)
    flush()
    return "".join(pieces)


def copy_stack(stack: BoundedStack) -> BoundedStack:
    """A new stack with the same capacity and items; ``stack`` is left as it was."""
    result = BoundedStack(stack.max_size())
    aux = BoundedStack(len(stack))
    while not stack.is_empty():
        aux.push(stack.pop())
    while not aux.is_empty():
        item = aux.pop()
        stack.push(item)
        result.push(item)
    return result


def stacks_equal(first: BoundedStack, second: BoundedStack) -> bool:
    """Whether both stacks hold the same items in the same order.

    Both stacks are restored before returning.
    """
    size = len(first)
    if size != len(second):
        return False
    aux = BoundedStack(size)
    equal = True
    for _ in range(size):
        a, b = first.pop(), second.pop()
        if a != b:
            first.push(a)
            second.push(b)
            equal = False
            break
        aux.push(a)
    while not aux.is_empty():
        item = aux.pop()
        first.push(item)
        second.push(item)
    return equal


def is_palindrome(text: str) -> bool:
    """Whether ``text`` equals itself read back from a stack."""
    stack = BoundedStack(len(text))
    for char in text:
        stack.push(char)
    backwards = []
    while not stack.is_empty():
        backwards.append(stack.pop())
    return text == "".join(backwards)


def exam_question(a, b):
    """Push ``pop(a) + pop(a) - pop(b) + top(b)`` onto ``b`` and return it.

    The two pops from ``a`` and the pop and top of ``b`` happen in that order.
    """
    a_first = a.pop()
    a_second = a.pop()
    b_popped = b.pop()
    b_top = b.top()
    value = a_first + a_second - b_popped + b_top
    b.push(value)
    return value