"""Interactive command loops driving a stack, a queue, a deque and a list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from estruturas.linked import LinkedDeque, LinkedQueue, LinkedStack
from estruturas.linked_lists import SinglyLinkedList


def tokens(stream: Iterable[str]) -> Iterator[str]:
    """Every character of ``stream``, which may yield lines or single characters."""
    for chunk in stream:
        yield from chunk


class _Reader:
    """Reads whitespace-separated characters and numbers from characters."""

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars = iter(chars)
        self._pending: str | None = None

    def _next(self) -> str | None:
        if self._pending is not None:
            char, self._pending = self._pending, None
            return char
        return next(self._chars, None)

    def _skip_space(self) -> str | None:
        char = self._next()
        while char is not None and char.isspace():
            char = self._next()
        return char

    def char(self) -> str | None:
        """The next non-blank character, or None at the end."""
        return self._skip_space()

    def number(self) -> int | None:
        """The next unsigned number, or None at the end."""
        char = self._skip_space()
        if char is None:
            return None
        digits = []
        while char is not None and char.isdigit():
            digits.append(char)
            char = self._next()
        self._pending = char
        if not digits:
            raise ValueError("expected a position")
        return int(digits[0:] and "".join(digits))


def run_stack(tokens: Iterable[str]) -> list[str]:
    """'+c' pushes, '-' pops, '.' quits; returns the lines shown."""
    reader = _Reader(tokens)
    stack = LinkedStack()
    lines = []
    while True:
        lines.append(str(stack))
        command = reader.char()
        if command is None or command == ".":
            return lines
        if command == "-":
            if not stack.is_empty():
                lines.append(f"> '{stack.pop()}' removido...")
        elif command == "+":
            item = reader.char()
            if item is None:
                return lines
            stack.push(item)


def run_queue(tokens: Iterable[str]) -> list[str]:
    """'+c' enqueues, '-' dequeues, '.' quits; returns the lines shown."""
    reader = _Reader(tokens)
    queue = LinkedQueue()
    lines = []
    while True:
        lines.append(str(queue))
        command = reader.char()
        if command is None or command == ".":
            return lines
        if command == "-":
            if not queue.is_empty():
                lines.append(f"> '{queue.dequeue()}' removido...")
        elif command == "+":
            item = reader.char()
            if item is None:
                return lines
            queue.enqueue(item)


def run_deque(tokens: Iterable[str]) -> list[str]:
    """'<c' adds first, '>c' adds last, '{' and '}' remove; '.' quits."""
    reader = _Reader(tokens)
    deque = LinkedDeque()
    lines = []
    while True:
        lines.append(str(deque))
        command = reader.char()
        if command is None or command == ".":
            return lines
        if command == "{":
            if not deque.is_empty():
                deque.remove_first()
        elif command == "}":
            if not deque.is_empty():
                deque.remove_last()
        elif command in "<>":
            item = reader.char()
            if item is None:
                return lines
            if command == "<":
                deque.add_first(item)
            else:
                deque.add_last(item)


def run_list(tokens: Iterable[str]) -> list[str]:
    """List commands: '<c' '>c' '+c n' '{' '}' '-n' '.'; errors show ERRO."""
    reader = _Reader(tokens)
    items = SinglyLinkedList()
    lines = []
    while True:
        lines.append(str(items))
        command = reader.char()
        if command is None or command == ".":
            return lines
        if command in "<>":
            item = reader.char()
            if item is None:
                return lines
            if command == "<":
                items.push_front(item)
            else:
                items.push_back(item)
        elif command == "+":
            item = reader.char()
            position = reader.number() if item is not None else None
            if position is None:
                return lines
            items.insert(item, position)
        elif command in "{}":
            if len(items) == 0:
                lines.append("ERRO")
            elif command == "{":
                items.pop_front()
            else:
                items.pop_back()
        elif command == "-":
            position = reader.number()
            if position is None:
                return lines
            try:
                items.remove(position)
            except IndexError:
                lines.append("ERRO")


_RUNNERS = {
    "stack": (run_stack, "Pilha ['+' = PUSH / '-' = POP / '.' = QUIT]"),
    "queue": (run_queue, "Fila ['+' = ENQUEUE / '-' = DEQUEUE / '.' = QUIT]"),
    "deque": (
        run_deque,
        "Deque ['<' = ADDFIRST / '>' = ADDLAST / '{' = REMOVEFIRST / "
        "'}' = REMOVELAST / '.' = QUIT]",
    ),
    "list": (run_list, None),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Drive one structure with commands read from standard input."""
    parser = argparse.ArgumentParser(description="Command loops for linear structures.")
    parser.add_argument("structure", choices=sorted(_RUNNERS))
    args = parser.parse_args(argv)
    runner, header = _RUNNERS[args.structure]
    if header is not None:
        print(header)
    for line in runner(tokens(sys.stdin)):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())