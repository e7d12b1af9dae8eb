"""A relay race in which each runner is a thread handing the baton to the next."""

from __future__ import annotations

import argparse
import logging
import queue
import threading
import time

logger = logging.getLogger(__name__)


def run_race(runners: int = 4, leg_time: float = 0.1) -> list[str]:
    """Run the race and return its events in order."""
    if runners < 1:
        raise ValueError("a race needs at least one runner")
    if leg_time < 0:
        raise ValueError("leg_time must not be negative")

    baton: "queue.Queue[int]" = queue.Queue()
    finished = threading.Event()
    events: list[str] = []
    threads: list[threading.Thread] = []
    lock = threading.Lock()

    def record(line: str) -> None:
        with lock:
            events.append(line)
        logger.info("%s", line)

    def launch() -> None:
        thread = threading.Thread(target=runner, daemon=True)
        with lock:
            threads.append(thread)
        thread.start()

    def runner() -> None:
        number = baton.get()
        record(f"Runner {number} Running With Baton")
        next_runner = number + 1
        if number != runners:
            record(f"Runner {next_runner} To The Line")
            launch()

        time.sleep(leg_time)

        if number == runners:
            record(f"Runner {number} Finished, Race Over")
            finished.set()
            return

        record(f"Runner {number} Exchange With Runner {next_runner}")
        baton.put(next_runner)

    launch()
    baton.put(1)
    finished.wait()
    with lock:
        started = list(threads)
    for thread in started:
        thread.join()
    return events


def main(argv: list[str] | None = None) -> int:
    """Run a four-runner relay race."""
    parser = argparse.ArgumentParser(
        prog="relay", description="Simulate a relay race between threads."
    )
    parser.add_argument("--runners", type=int, default=4)
    parser.add_argument("--leg-time", type=float, default=0.1)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        run_race(args.runners, args.leg_time)
    except ValueError as exc:
        print(exc)
        return 1
    return 0