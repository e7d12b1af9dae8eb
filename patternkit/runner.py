"""Run a list of tasks within a time limit, stopping early on interrupt."""

from __future__ import annotations

import argparse
import contextlib
import logging
import queue
import signal
import threading
import time
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

Task = Callable[[int], object]


class RunnerError(Exception):
    """Base class for the ways a run can end early."""


class RunnerTimeout(RunnerError):
    """Raised when the tasks do not finish in time."""

    def __init__(self) -> None:
        super().__init__("received timeout")


class RunnerInterrupted(RunnerError):
    """Raised when an interrupt arrives before all tasks have run."""

    def __init__(self) -> None:
        super().__init__("received interrupt")


class Runner:
    """Runs tasks in order; the time limit counts from construction."""

    def __init__(self, timeout: float) -> None:
        self._deadline = time.monotonic() + timeout
        self._tasks: list[Task] = []
        self._interrupted = threading.Event()

    def add(self, *tasks: Task) -> None:
        """Append tasks; each is called with its position as its id."""
        self._tasks.extend(tasks)

    def interrupt(self) -> None:
        """Ask the run to stop before the next task."""
        self._interrupted.set()

    def start(self) -> None:
        """Run every task, raising RunnerTimeout or RunnerInterrupted."""
        outcome: "queue.Queue[BaseException | None]" = queue.Queue(maxsize=1)
        with self._sigint_handler():
            worker = threading.Thread(
                target=self._complete, args=(outcome,), daemon=True
            )
            worker.start()
            remaining = max(0.0, self._deadline - time.monotonic())
            try:
                error = outcome.get(timeout=remaining)
            except queue.Empty:
                raise RunnerTimeout() from None
        if error is not None:
            raise error

    def _complete(self, outcome: "queue.Queue[BaseException | None]") -> None:
        try:
            self._run()
        except Exception as exc:
            outcome.put(exc)
        else:
            outcome.put(None)

    def _run(self) -> None:
        for task_id, task in enumerate(self._tasks):
            if self._interrupted.is_set():
                self._interrupted.clear()
                raise RunnerInterrupted()
            task(task_id)

    @contextlib.contextmanager
    def _sigint_handler(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        previous = signal.signal(signal.SIGINT, lambda signum, frame: self.interrupt())
        try:
            yield
        finally:
            signal.signal(
                signal.SIGINT, previous if previous is not None else signal.SIG_DFL
            )


def create_task(seconds_per_id: float = 1.0) -> Task:
    """Return a task that sleeps for its id times *seconds_per_id*."""

    def task(task_id: int) -> None:
        logger.info("Processor - Task #%d.", task_id)
        time.sleep(task_id * seconds_per_id)

    return task


def main(argv: list[str] | None = None) -> int:
    """Run three sleeping tasks under a time limit."""
    parser = argparse.ArgumentParser(
        prog="runner", description="Run tasks under a time limit."
    )
    parser.add_argument("--timeout", type=float, default=3.0)
    parser.add_argument("--task-seconds", type=float, default=1.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.info("Starting work.")

    runner = Runner(args.timeout)
    runner.add(*(create_task(args.task_seconds) for _ in range(3)))

    try:
        runner.start()
    except RunnerTimeout:
        logger.info("Terminating due to timeout.")
        return 1
    except RunnerInterrupted:
        logger.info("Terminating due to interrupt.")
        return 2

    logger.info("Process ended.")
    return 0