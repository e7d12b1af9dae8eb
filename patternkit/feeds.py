"""Search a list of feeds concurrently with matchers registered per feed type."""

from __future__ import annotations

import json
import logging
import queue
import re
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

DATA_FILE = "data/data.json"


@dataclass(frozen=True)
class Feed:
    """Where a feed lives and which matcher understands it."""

    name: str
    uri: str
    type: str

    @classmethod
    def from_json(cls, obj: dict) -> "Feed":
        """Build a feed from its JSON object form."""
        return cls(
            name=str(obj.get("site", "")),
            uri=str(obj.get("link", "")),
            type=str(obj.get("type", "")),
        )

    def to_json(self) -> dict:
        """Return the JSON object form of this feed."""
        return {"site": self.name, "link": self.uri, "type": self.type}


@dataclass(frozen=True)
class Result:
    """One piece of a feed that matched the search term."""

    field: str
    content: str


class Matcher(ABC):
    """Searches one kind of feed for a term."""

    @abstractmethod
    def search(self, feed: Feed, search_term: str) -> list[Result]:
        """Return the parts of *feed* that match *search_term*."""


class DefaultMatcher(Matcher):
    """The matcher used for feed types nobody registered.

    It checks that the search term is a valid pattern and finds nothing,
    since it does not know how to read the feed.
    """

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        re.compile(search_term)
        logger.debug("No matcher for feed type [%s] at [%s]", feed.type, feed.uri)
        return []


class MatcherAlreadyRegistered(KeyError):
    """Raised when a second matcher is registered for the same feed type."""


_matchers: dict[str, Matcher] = {}
_registry_lock = threading.Lock()


def register(feed_type: str, matcher: Matcher) -> None:
    """Make *matcher* the one used for feeds of *feed_type*."""
    with _registry_lock:
        if feed_type in _matchers:
            raise MatcherAlreadyRegistered(f"{feed_type} Matcher already registered")
        logger.info("Register %s matcher", feed_type)
        _matchers[feed_type] = matcher


def _matcher_for(feed_type: str) -> Matcher:
    with _registry_lock:
        return _matchers.get(feed_type) or _matchers["default"]


def retrieve_feeds(path: str = DATA_FILE) -> list[Feed]:
    """Read the list of feeds from the JSON file at *path*."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("feed data must be a JSON array")
    return [Feed.from_json(obj) for obj in data]


def match(matcher: Matcher, feed: Feed, search_term: str) -> list[Result]:
    """Search *feed* with *matcher*; a failing search is logged and yields nothing."""
    try:
        return list(matcher.search(feed, search_term))
    except Exception as exc:
        logger.info("%s", exc)
        return []


def display(results: Iterable[Result]) -> None:
    """Log every result as it arrives."""
    for result in results:
        logger.info("%s:\n%s\n\n", result.field, result.content)


_DONE = object()


def run(search_term: str, data_file: str = DATA_FILE) -> list[Result]:
    """Search every feed in *data_file* concurrently, displaying and returning the results."""
    feeds = retrieve_feeds(data_file)
    outcomes: "queue.Queue[object]" = queue.Queue()

    def search_feed(feed: Feed) -> None:
        for result in match(_matcher_for(feed.type), feed, search_term):
            outcomes.put(result)

    workers = [
        threading.Thread(target=search_feed, args=(feed,), daemon=True)
        for feed in feeds
    ]
    for worker in workers:
        worker.start()

    def wait_all() -> None:
        for worker in workers:
            worker.join()
        outcomes.put(_DONE)

    threading.Thread(target=wait_all, daemon=True).start()

    collected: list[Result] = []

    def stream() -> Iterable[Result]:
        while (item := outcomes.get()) is not _DONE:
            collected.append(item)  # type: ignore[arg-type]
            yield item  # type: ignore[misc]

    display(stream())
    return collected


register("default", DefaultMatcher())