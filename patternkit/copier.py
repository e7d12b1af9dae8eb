"""Copy data in batches from a system that produces it to one that stores it."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence


@dataclass
class Data:
    """One record being copied."""

    line: str = ""


class EndOfData(Exception):
    """Raised by a puller when it has no more data to give."""

    def __init__(self, message: str = "EOF") -> None:
        super().__init__(message)


class Puller(Protocol):
    def pull(self, data: Data) -> None: ...


class Storer(Protocol):
    def store(self, data: Data) -> None: ...


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Xenia:
    """A source that fills records until it randomly runs dry or fails."""

    rng: _Rng = field(default_factory=random.Random)

    def pull(self, data: Data) -> None:
        """Fill *data*, or raise EndOfData or RuntimeError."""
        roll = self.rng.randrange(10)
        if roll in (1, 9):
            raise EndOfData()
        if roll == 5:
            raise RuntimeError("Error reading data from Xenia")
        data.line = "Data"
        print("In:", data.line)


@dataclass
class Pillar:
    """A destination that prints every record it stores."""

    def store(self, data: Data) -> None:
        """Store *data*."""
        print("Out:", data.line)


@dataclass
class System:
    """A puller and a storer joined into one system."""

    puller: Puller = field(default_factory=Xenia)
    storer: Storer = field(default_factory=Pillar)


def pull(puller: Puller, data: Sequence[Data]) -> int:
    """Fill every record in *data* from *puller* and return how many were filled.

    If the puller raises, the exception propagates with a ``pulled``
    attribute giving the number of records filled before the failure.
    """
    for count, item in enumerate(data):
        try:
            puller.pull(item)
        except Exception as exc:
            exc.pulled = count  # type: ignore[attr-defined]
            raise
    return len(data)


def store(storer: Storer, data: Sequence[Data]) -> int:
    """Store every record in *data* and return how many were stored."""
    for item in data:
        storer.store(item)
    return len(data)


def copy(system: System, batch: int) -> int:
    """Copy records in batches until the source runs dry; return the number copied.

    Records pulled before a failure are stored first; then the failure is
    raised, unless it is EndOfData, which ends the copy normally.
    """
    if batch < 1:
        raise ValueError("batch must be at least 1")
    data = [Data() for _ in range(batch)]
    total = 0
    while True:
        failure: Exception | None = None
        try:
            count = pull(system.puller, data)
        except Exception as exc:
            failure = exc
            count = getattr(exc, "pulled", 0)
        if count > 0:
            total += store(system.storer, data[:count])
        if isinstance(failure, EndOfData):
            return total
        if failure is not None:
            raise failure


def main(argv: list[str] | None = None) -> int:
    """Copy records from Xenia to Pillar in batches."""
    parser = argparse.ArgumentParser(
        prog="copier", description="Copy data from one system to another."
    )
    parser.add_argument("--batch", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    system = System(puller=Xenia(random.Random(args.seed)), storer=Pillar())
    try:
        copy(system, args.batch)
    except (RuntimeError, ValueError) as exc:
        print(exc)
        return 1
    return 0