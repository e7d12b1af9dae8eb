"""A pool of shared resources, with a demonstration using fake connections."""

from __future__ import annotations

import argparse
import itertools
import logging
import random
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Closer(Protocol):
    def close(self) -> object: ...


R = TypeVar("R", bound=Closer)


class PoolClosedError(RuntimeError):
    """Raised when a resource is acquired from a closed pool."""


class Pool(Generic[R]):
    """Keeps up to *size* released resources for reuse by many threads."""

    def __init__(self, factory: Callable[[], R], size: int) -> None:
        if size <= 0:
            raise ValueError("Size value too small.")
        self._factory = factory
        self._size = size
        self._resources: Deque[R] = deque()
        self._lock = threading.Lock()
        self._closed = False

    def acquire(self) -> R:
        """Return a pooled resource, or a new one when none is free."""
        with self._lock:
            if self._resources:
                logger.info("Acquire: Shared Resource")
                return self._resources.popleft()
            if self._closed:
                logger.info("Acquire: Shared Resource")
                raise PoolClosedError("Pool has been closed.")
        logger.info("Acquire: New Resource")
        return self._factory()

    def release(self, resource: R) -> None:
        """Put *resource* back into the pool, closing it if there is no room."""
        with self._lock:
            if self._closed:
                resource.close()
                return
            if len(self._resources) < self._size:
                self._resources.append(resource)
                logger.info("Release: In Queue")
                return
            logger.info("Release: Closing")
            resource.close()

    def close(self) -> None:
        """Shut the pool down and close every resource it holds."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            while self._resources:
                self._resources.popleft().close()

    def __enter__(self) -> "Pool[R]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class DbConnection:
    """A simulated database connection."""

    id: int
    closed: bool = field(default=False, compare=False)

    def close(self) -> None:
        """Mark the connection closed."""
        self.closed = True
        logger.info("Close: Connection %d", self.id)


def _perform_query(query: int, pool: Pool[DbConnection], max_delay: float) -> None:
    try:
        conn = pool.acquire()
    except PoolClosedError as exc:
        logger.info("%s", exc)
        return
    try:
        time.sleep(random.random() * max_delay)
        logger.info("Query: QID[%d] CID[%d]", query, conn.id)
    finally:
        pool.release(conn)


def main(argv: list[str] | None = None) -> int:
    """Run concurrent simulated queries through a small connection pool."""
    parser = argparse.ArgumentParser(
        prog="pool", description="Share simulated connections between threads."
    )
    parser.add_argument("--queries", type=int, default=25)
    parser.add_argument("--resources", type=int, default=2)
    parser.add_argument("--max-delay", type=float, default=1.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    ids = itertools.count(1)
    id_lock = threading.Lock()

    def create_connection() -> DbConnection:
        with id_lock:
            conn_id = next(ids)
        logger.info("Create: New Connection %d", conn_id)
        return DbConnection(conn_id)

    try:
        pool = Pool(create_connection, args.resources)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    threads = [
        threading.Thread(target=_perform_query, args=(query, pool, args.max_delay))
        for query in range(args.queries)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    logger.info("Shutdown Program.")
    pool.close()
    return 0