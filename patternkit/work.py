"""A fixed pool of threads that run submitted work."""

from __future__ import annotations

import argparse
import logging
import threading
import time
import queue
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

NAMES = ("steve", "bob", "mary", "therese", "jason")

_STOP = object()


class Worker(Protocol):
    def task(self) -> None: ...


class WorkPool:
    """Runs submitted workers on a fixed number of threads."""

    def __init__(self, max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._threads = [
            threading.Thread(target=self._serve, daemon=True)
            for _ in range(max_workers)
        ]
        for thread in self._threads:
            thread.start()

    def _serve(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            worker, received = item  # type: ignore[misc]
            received.set()
            try:
                worker.task()
            except Exception:
                logger.exception("work : task failed")

    def run(self, worker: Worker) -> None:
        """Submit *worker*; return once a pool thread has taken it."""
        received = threading.Event()
        with self._lock:
            if self._closed:
                raise RuntimeError("work pool has been shut down")
            self._queue.put((worker, received))
        received.wait()

    def shutdown(self) -> None:
        """Stop accepting work and wait for every thread to finish."""
        with self._lock:
            if self._closed:
                raise RuntimeError("work pool has been shut down")
            self._closed = True
            for _ in self._threads:
                self._queue.put(_STOP)
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "WorkPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


@dataclass
class NamePrinter:
    """A worker that logs a name and then pauses."""

    name: str
    delay: float = 1.0

    def task(self) -> None:
        logger.info("%s", self.name)
        time.sleep(self.delay)


def main(argv: list[str] | None = None) -> int:
    """Print a list of names many times using a small pool of threads."""
    parser = argparse.ArgumentParser(
        prog="work", description="Run name printers on a pool of threads."
    )
    parser.add_argument("--workers", type=int, default=2)
    parser.add_argument("--rounds", type=int, default=100)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    pool = WorkPool(args.workers)
    submitters = [
        threading.Thread(target=pool.run, args=(NamePrinter(name, args.delay),))
        for _ in range(args.rounds)
        for name in NAMES
    ]
    for thread in submitters:
        thread.start()
    for thread in submitters:
        thread.join()

    pool.shutdown()
    return 0