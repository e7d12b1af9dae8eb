"""A counting semaphore and a many-readers, one-writer lock built on it."""

from __future__ import annotations

import argparse
import logging
import random
import threading
import time

logger = logging.getLogger(__name__)


class Semaphore:
    """Holds up to *capacity* units; acquiring blocks when full, releasing when empty."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._in_use = 0
        self._cond = threading.Condition()

    @property
    def in_use(self) -> int:
        """The number of units currently held."""
        with self._cond:
            return self._in_use

    def acquire(self, count: int = 1) -> None:
        """Take *count* units one at a time, waiting whenever none is free."""
        if count < 0:
            raise ValueError("count must not be negative")
        for _ in range(count):
            with self._cond:
                self._cond.wait_for(lambda: self._in_use < self.capacity)
                self._in_use += 1
                self._cond.notify_all()

    def release(self, count: int = 1) -> None:
        """Give back *count* units one at a time, waiting whenever none is held."""
        if count < 0:
            raise ValueError("count must not be negative")
        for _ in range(count):
            with self._cond:
                self._cond.wait_for(lambda: self._in_use > 0)
                self._in_use -= 1
                self._cond.notify_all()


class ReaderWriter:
    """Lets up to *max_reads* readers in at once, or a single writer alone."""

    max_delay = 1.0

    def __init__(self, name: str, max_reads: int, max_readers: int) -> None:
        if max_readers < 0:
            raise ValueError("max_readers must not be negative")
        self.name = name
        self.max_reads = max_reads
        self.max_readers = max_readers
        self._reader_control = Semaphore(max_reads)
        self._writers = 0
        self._write_cond = threading.Condition()
        self._counter_lock = threading.Lock()
        self._current_reads = 0
        self._shutdown = threading.Event()
        self._threads: list[threading.Thread] = []

    @property
    def current_reads(self) -> int:
        """The number of reads in progress."""
        with self._counter_lock:
            return self._current_reads

    @property
    def is_running(self) -> bool:
        """True while any reader or writer thread is alive."""
        return any(thread.is_alive() for thread in self._threads)

    def read_lock(self) -> None:
        """Wait for any pending write, then take one read slot."""
        with self._write_cond:
            self._write_cond.wait_for(lambda: self._writers == 0)
        self._reader_control.acquire(1)

    def read_unlock(self) -> None:
        """Give the read slot back."""
        self._reader_control.release(1)

    def write_lock(self) -> None:
        """Block new readers and take every read slot."""
        with self._write_cond:
            self._writers += 1
        self._reader_control.acquire(self.max_reads)

    def write_unlock(self) -> None:
        """Return every read slot and let readers in again."""
        self._reader_control.release(self.max_reads)
        with self._write_cond:
            self._writers -= 1
            self._write_cond.notify_all()

    def _pause(self) -> None:
        self._shutdown.wait(random.randrange(1000) / 1000 * self.max_delay)

    def _change_reads(self, delta: int) -> int:
        with self._counter_lock:
            self._current_reads += delta
            return self._current_reads

    def _perform_read(self, reader: int) -> None:
        self.read_lock()
        try:
            count = self._change_reads(1)
            logger.info("%s\t: [%d] Start\t- [%d] Reads", self.name, reader, count)
            self._pause()
            count = self._change_reads(-1)
            logger.info("%s\t: [%d] Finish\t- [%d] Reads", self.name, reader, count)
        finally:
            self.read_unlock()

    def _perform_write(self) -> None:
        self._pause()
        logger.info("%s\t: *****> Writing Pending", self.name)
        self.write_lock()
        try:
            logger.info("%s\t: *****> Writing Start", self.name)
            self._pause()
            logger.info("%s\t: *****> Writing Finish", self.name)
        finally:
            self.write_unlock()

    def _reader(self, reader: int) -> None:
        while not self._shutdown.is_set():
            self._perform_read(reader)
        logger.info("%s\t: #> Reader Shutdown", self.name)

    def _writer(self) -> None:
        while not self._shutdown.is_set():
            self._perform_write()
        logger.info("%s\t: #> Writer Shutdown", self.name)

    def _launch(self) -> None:
        self._threads = [
            threading.Thread(target=self._reader, args=(reader,), daemon=True)
            for reader in range(self.max_readers)
        ]
        self._threads.append(threading.Thread(target=self._writer, daemon=True))
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Signal every thread to finish and wait until they have."""
        logger.info("%s\t: #####> Stop", self.name)
        self._shutdown.set()
        for thread in self._threads:
            thread.join()
        logger.info("%s\t: #####> Stopped", self.name)


def start(name: str, max_reads: int, max_readers: int) -> ReaderWriter:
    """Create a ReaderWriter and launch its readers and its single writer."""
    rw = ReaderWriter(name, max_reads, max_readers)
    rw._launch()
    return rw


def shutdown(*reader_writers: ReaderWriter) -> None:
    """Stop all the given ReaderWriters concurrently."""
    stoppers = [threading.Thread(target=rw.stop) for rw in reader_writers]
    for thread in stoppers:
        thread.start()
    for thread in stoppers:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    """Run two reader/writer groups for a while, then shut them down."""
    parser = argparse.ArgumentParser(
        prog="semaphore", description="Demonstrate many readers and one writer."
    )
    parser.add_argument("--seconds", type=float, default=2.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.info("Starting Process")

    first = start("First", 3, 6)
    second = start("Second", 2, 2)
    time.sleep(args.seconds)
    shutdown(first, second)

    logger.info("Process Ended")
    return 0