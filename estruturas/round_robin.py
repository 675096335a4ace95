"""Round-robin scheduling of processes over a circular ready queue."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class _Process:
    ident: str
    cpu_time: int


class RoundRobin:
    """Scheduler giving each process at most ``time_slice`` units per turn."""

    def __init__(self, time_slice: int = 1) -> None:
        if time_slice < 1:
            raise ValueError("time slice must be at least 1")
        self._slice = time_slice
        self._ready: deque[_Process] = deque()
        self._next_id = "A"

    def add(self, cpu_time: int) -> None:
        """Queue a process needing ``cpu_time`` units, naming it with the next letter."""
        if cpu_time < 0:
            raise ValueError("cpu time must not be negative")
        self._ready.append(_Process(self._next_id, cpu_time))
        self._next_id = chr(ord(self._next_id) + 1)

    def run(self) -> str:
        """Run every process to completion; one id character per time unit."""
        pieces = []
        while self._ready:
            process = self._ready[0]
            if process.cpu_time <= self._slice:
                used = process.cpu_time
                self._ready.popleft()
            else:
                used = self._slice
                process.cpu_time -= self._slice
                self._ready.rotate(-1)
            pieces.append(process.ident * used)
        self._next_id = "A"
        return "".join(pieces)

    def clear(self) -> None:
        """Drop every queued process."""
        self._ready.clear()

    def __len__(self) -> int:
        return len(self._ready)

    def __str__(self) -> str:
        if not self._ready:
            return ""
        cells = "".join(f"  ||{p.ident}|{p.cpu_time}||" for p in self._ready)
        return "readyQueue -->" + cells


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule processes and print the queue and the execution trace."""
    parser = argparse.ArgumentParser(description="Round-robin scheduling.")
    parser.add_argument("cpu_times", type=int, nargs="*", default=[12, 8, 15, 5])
    parser.add_argument("--slice", type=int, default=3, dest="time_slice")
    args = parser.parse_args(argv)
    scheduler = RoundRobin(args.time_slice)
    for cpu_time in args.cpu_times:
        scheduler.add(cpu_time)
    print(scheduler)
    print(scheduler.run())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())