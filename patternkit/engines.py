"""Query several simulated search engines at once, keeping all or the first answer."""

from __future__ import annotations

import argparse
import logging
import queue
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """One search hit returned by an engine."""

    engine: str
    title: str
    description: str
    link: str


@dataclass
class Searcher:
    """A simulated engine that answers every query with fixed results after a delay."""

    engine: str
    results: tuple[Result, ...] = ()
    max_delay: float = 0.9

    def search(self, term: str) -> list[Result]:
        """Return this engine's results for *term* after a random pause."""
        logger.info("%s : Search : Started : search term [%s]", self.engine, term)
        time.sleep(random.random() * self.max_delay)
        found = list(self.results)
        logger.info("%s : Search : Completed : Found[%d]", self.engine, len(found))
        return found


@dataclass
class SearchSession:
    """The searchers and options chosen for one call to submit."""

    searchers: dict[str, Searcher] = field(default_factory=dict)
    first: bool = False


Option = Callable[[SearchSession], object]

_GOOGLE = Searcher(
    "Google",
    (
        Result(
            engine="Google",
            title="Programming Language Home",
            description="Programming Language Home",
            link="https://www.example.com/",
        ),
    ),
)

_BING = Searcher(
    "Bing",
    (
        Result(
            engine="Bing",
            title="A Language Tour",
            description="Welcome to a tour of the programming language.",
            link="http://tour.example.com/",
        ),
    ),
)

_YAHOO = Searcher(
    "Yahoo",
    (
        Result(
            engine="Yahoo",
            title="Code Playground",
            description="The Playground is a web service that runs code on remote servers",
            link="http://play.example.com/",
        ),
    ),
)


def google(session: SearchSession) -> None:
    """Add the Google searcher to *session*."""
    logger.info("search : Submit : Info : Adding Google")
    session.searchers["google"] = _GOOGLE


def bing(session: SearchSession) -> None:
    """Add the Bing searcher to *session*."""
    logger.info("search : Submit : Info : Adding Bing")
    session.searchers["bing"] = _BING


def yahoo(session: SearchSession) -> None:
    """Add the Yahoo searcher to *session*."""
    logger.info("search : Submit : Info : Adding Yahoo")
    session.searchers["yahoo"] = _YAHOO


def only_first(session: SearchSession) -> None:
    """Restrict *session* to the first answer that arrives."""
    session.first = True


def _run_searcher(
    searcher: Searcher, query: str, outcomes: "queue.Queue[list[Result]]"
) -> None:
    try:
        found = searcher.search(query)
    except Exception:
        logger.exception("search : Submit : Error : %s failed", searcher.engine)
        found = []
    outcomes.put(found)


def _discard(outcomes: "queue.Queue[list[Result]]") -> None:
    found = outcomes.get()
    logger.info("search : Submit : Info : Results Discarded : Results[%d]", len(found))


def submit(query: str, *options: Option) -> list[Result]:
    """Search every engine chosen by *options* concurrently and gather the results."""
    session = SearchSession()
    for option in options:
        option(session)

    outcomes: "queue.Queue[list[Result]]" = queue.Queue()
    for searcher in session.searchers.values():
        threading.Thread(
            target=_run_searcher, args=(searcher, query, outcomes), daemon=True
        ).start()

    results: list[Result] = []
    for answered in range(len(session.searchers)):
        if session.first and answered > 0:
            threading.Thread(target=_discard, args=(outcomes,), daemon=True).start()
            continue
        logger.info("search : Submit : Info : Waiting For Results...")
        found = outcomes.get()
        logger.info("search : Submit : Info : Results Used : Results[%d]", len(found))
        results.extend(found)

    logger.info("search : Submit : Completed : Found [%d] Results", len(results))
    return results


def main(argv: list[str] | None = None) -> int:
    """Search once keeping only the first answer, then once keeping all."""
    parser = argparse.ArgumentParser(
        prog="engines", description="Query simulated search engines concurrently."
    )
    parser.add_argument("query", nargs="?", default="language")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    for result in submit(args.query, only_first, google, bing, yahoo):
        logger.info("main : Results : Info : %s", result)

    for result in submit(args.query, google, bing, yahoo):
        logger.info("main : Results : Info : %s", result)
    return 0