"""A counter that many threads can increment safely."""

from __future__ import annotations

import argparse
import threading
import time


class SafeCounter:
    """An integer whose read-modify-write increment is guarded by a lock."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The current count."""
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add one and return the new count."""
        with self._lock:
            value = self._value
            time.sleep(0)  # let other threads run inside the critical section
            self._value = value + 1
            return self._value


def run_incrementers(workers: int = 2, rounds: int = 2) -> int:
    """Have *workers* threads each increment a shared counter *rounds* times."""
    if workers < 0 or rounds < 0:
        raise ValueError("workers and rounds must not be negative")
    counter = SafeCounter()

    def increment_counter() -> None:
        for _ in range(rounds):
            counter.increment()
            time.sleep(0)

    threads = [threading.Thread(target=increment_counter) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


def main(argv: list[str] | None = None) -> int:
    """Increment a shared counter from two threads and print the total."""
    parser = argparse.ArgumentParser(
        prog="counters", description="Increment a counter from several threads."
    )
    parser.add_argument("--workers", type=int, default=2)
    parser.add_argument("--rounds", type=int, default=2)
    args = parser.parse_args(argv)

    try:
        total = run_incrementers(args.workers, args.rounds)
    except ValueError as exc:
        print(exc)
        return 1
    print(f"Final Counter: {total}")
    return 0