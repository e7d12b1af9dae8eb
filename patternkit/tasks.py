"""A fixed number of worker threads draining a queue of tasks."""

from __future__ import annotations

import argparse
import logging
import queue
import random
import threading
import time
from typing import Iterable

logger = logging.getLogger(__name__)

NUMBER_WORKERS = 4
TASK_LOAD = 10

_CLOSED = object()


def process_tasks(
    tasks: Iterable[str] | None = None,
    workers: int = NUMBER_WORKERS,
    max_sleep: float = 0.1,
) -> list[str]:
    """Work through *tasks* on *workers* threads and return the events in order."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if max_sleep < 0:
        raise ValueError("max_sleep must not be negative")
    if tasks is None:
        tasks = [f"Task : {post}" for post in range(1, TASK_LOAD + 1)]

    pending: "queue.Queue[object]" = queue.Queue()
    events: list[str] = []
    lock = threading.Lock()

    def record(line: str) -> None:
        with lock:
            events.append(line)
        logger.info("%s", line)

    def worker(number: int) -> None:
        while (task := pending.get()) is not _CLOSED:
            record(f"Worker: {number} : Started {task}")
            time.sleep(random.random() * max_sleep)
            record(f"Worker: {number} : Completed {task}")
        record(f"Worker: {number} : Shutting Down")

    threads = [
        threading.Thread(target=worker, args=(number,), daemon=True)
        for number in range(1, workers + 1)
    ]
    for thread in threads:
        thread.start()

    for task in tasks:
        pending.put(task)
    for _ in threads:
        pending.put(_CLOSED)

    for thread in threads:
        thread.join()
    return events


def main(argv: list[str] | None = None) -> int:
    """Process ten tasks with four workers."""
    parser = argparse.ArgumentParser(
        prog="tasks", description="Process a batch of tasks with worker threads."
    )
    parser.add_argument("--workers", type=int, default=NUMBER_WORKERS)
    parser.add_argument("--tasks", type=int, default=TASK_LOAD)
    parser.add_argument("--max-sleep", type=float, default=0.1)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    tasks = [f"Task : {post}" for post in range(1, args.tasks + 1)]
    try:
        process_tasks(tasks, args.workers, args.max_sleep)
    except ValueError as exc:
        print(exc)
        return 1
    return 0