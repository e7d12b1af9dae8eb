"""Two or more players hit a ball back and forth until one of them misses."""

from __future__ import annotations

import argparse
import logging
import random
import threading
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = ("Nadal", "Djokovic")


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


class _Court:
    """Passes the ball to any player other than the one who hit it, until closed."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._ball: int | None = None
        self._hitter: int | None = None
        self._closed = False

    def hit(self, ball: int, hitter: int | None) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._ball is None or self._closed)
            if self._closed:
                return
            self._ball = ball
            self._hitter = hitter
            self._cond.notify_all()

    def receive(self, player: int) -> int | None:
        """Wait for the ball; return None once the court is closed."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._closed
                or (self._ball is not None and self._hitter != player)
            )
            if self._ball is not None and self._hitter != player:
                ball, self._ball, self._hitter = self._ball, None, None
                self._cond.notify_all()
                return ball
            return None

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()


def play(
    names: Sequence[str] = DEFAULT_PLAYERS, rng: _Rng | None = None
) -> list[str]:
    """Play one game and return what happened, one line per event, in order."""
    players = list(names)
    if len(players) < 2:
        raise ValueError("a game needs at least two players")
    chooser: _Rng = rng if rng is not None else random.Random()

    court = _Court()
    events: list[str] = []
    errors: list[BaseException] = []
    lock = threading.Lock()

    def record(line: str) -> None:
        with lock:
            events.append(line)
        logger.info("%s", line)

    def player(index: int, name: str) -> None:
        try:
            while True:
                ball = court.receive(index)
                if ball is None:
                    record(f"Player {name} Won")
                    return
                if chooser.randrange(100) % 13 == 0:
                    record(f"Player {name} Missed")
                    court.close()
                    return
                record(f"Player {name} Hit {ball}")
                court.hit(ball + 1, index)
        except BaseException as exc:
            with lock:
                errors.append(exc)
            court.close()

    threads = [
        threading.Thread(target=player, args=(index, name), daemon=True)
        for index, name in enumerate(players)
    ]
    for thread in threads:
        thread.start()
    court.hit(1, None)
    for thread in threads:
        thread.join()

    if errors:
        raise errors[0]
    return events


def main(argv: list[str] | None = None) -> int:
    """Play a game of tennis between two threads."""
    parser = argparse.ArgumentParser(
        prog="tennis", description="Simulate a game of tennis between threads."
    )
    parser.add_argument("names", nargs="*", default=list(DEFAULT_PLAYERS))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        play(args.names, random.Random(args.seed))
    except ValueError as exc:
        print(exc)
        return 1
    return 0