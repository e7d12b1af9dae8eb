"""Find primes by trial division on several threads at once."""

from __future__ import annotations

import argparse
import logging
import threading
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5000


def primes_below(limit: int) -> Iterator[int]:
    """Yield every prime from 2 up to, but not including, *limit*."""
    for outer in range(2, limit):
        if all(outer % inner for inner in range(2, outer)):
            yield outer


def print_primes(
    prefixes: Iterable[str] = ("A", "B"), limit: int = DEFAULT_LIMIT
) -> dict[str, list[int]]:
    """Log the primes below *limit* once per prefix, each on its own thread."""
    found: dict[str, list[int]] = {}
    lock = threading.Lock()

    def worker(prefix: str) -> None:
        primes = []
        for prime in primes_below(limit):
            logger.info("%s:%d", prefix, prime)
            primes.append(prime)
        logger.info("Completed %s", prefix)
        with lock:
            found[prefix] = primes

    threads = [threading.Thread(target=worker, args=(p,)) for p in prefixes]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return found


def main(argv: list[str] | None = None) -> int:
    """Print the primes below 5000 from two threads."""
    parser = argparse.ArgumentParser(
        prog="primes", description="Print primes from several threads."
    )
    parser.add_argument("prefixes", nargs="*", default=["A", "B"])
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print("Create Goroutines")
    print_primes(args.prefixes, args.limit)
    print("Terminating Program")
    return 0