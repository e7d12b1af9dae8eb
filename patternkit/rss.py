"""The RSS matcher and the command that searches the configured feeds."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import urllib.error
import urllib.request
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from patternkit.feeds import DATA_FILE, Feed, Matcher, Result, register, run

logger = logging.getLogger(__name__)


class FeedRetrievalError(Exception):
    """Raised when an RSS feed cannot be fetched."""


@dataclass(frozen=True)
class RssItem:
    pub_date: str = ""
    title: str = ""
    description: str = ""
    link: str = ""
    guid: str = ""
    georss_point: str = ""


@dataclass(frozen=True)
class RssImage:
    url: str = ""
    title: str = ""
    link: str = ""


@dataclass(frozen=True)
class RssChannel:
    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""
    last_build_date: str = ""
    ttl: str = ""
    language: str = ""
    managing_editor: str = ""
    web_master: str = ""
    image: RssImage = field(default_factory=RssImage)
    items: tuple[RssItem, ...] = ()


@dataclass(frozen=True)
class RssDocument:
    channel: RssChannel = field(default_factory=RssChannel)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(element: ET.Element | None, name: str) -> str:
    if element is None:
        return ""
    for child in element:
        if _local(child.tag) == name:
            return child.text or ""
    return ""


def _child(element: ET.Element, name: str) -> ET.Element | None:
    return next((c for c in element if _local(c.tag) == name), None)


def _item(element: ET.Element) -> RssItem:
    return RssItem(
        pub_date=_text(element, "pubDate"),
        title=_text(element, "title"),
        description=_text(element, "description"),
        link=_text(element, "link"),
        guid=_text(element, "guid"),
        georss_point=_text(element, "point"),
    )


def parse_rss(data: bytes | str) -> RssDocument:
    """Decode an RSS document; raise ValueError if it is not one."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"malformed rss document: {exc}") from exc
    if _local(root.tag) != "rss":
        raise ValueError(
            f"expected element type <rss> but have <{_local(root.tag)}>"
        )
    channel = _child(root, "channel")
    if channel is None:
        return RssDocument()
    image = _child(channel, "image")
    return RssDocument(
        channel=RssChannel(
            title=_text(channel, "title"),
            description=_text(channel, "description"),
            link=_text(channel, "link"),
            pub_date=_text(channel, "pubDate"),
            last_build_date=_text(channel, "lastBuildDate"),
            ttl=_text(channel, "ttl"),
            language=_text(channel, "language"),
            managing_editor=_text(channel, "managingEditor"),
            web_master=_text(channel, "webMaster"),
            image=RssImage(
                url=_text(image, "url"),
                title=_text(image, "title"),
                link=_text(image, "link"),
            ),
            items=tuple(_item(c) for c in channel if _local(c.tag) == "item"),
        )
    )


@dataclass
class RssMatcher(Matcher):
    """Fetches an RSS feed and matches item titles and descriptions."""

    timeout: float = 10.0

    def retrieve(self, feed: Feed) -> RssDocument:
        """Download and decode the document at the feed's URI."""
        if not feed.uri:
            raise FeedRetrievalError("No rss feed uri provided")
        try:
            with urllib.request.urlopen(feed.uri, timeout=self.timeout) as response:
                status = response.status
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise FeedRetrievalError(f"HTTP Response Error {exc.code}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise FeedRetrievalError(str(exc)) from exc
        if status != 200:
            raise FeedRetrievalError(f"HTTP Response Error {status}")
        return parse_rss(body)

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        logger.info(
            "Search Feed Type[%s] Site[%s] For URI[%s]", feed.type, feed.name, feed.uri
        )
        document = self.retrieve(feed)
        pattern = re.compile(search_term)
        results: list[Result] = []
        for item in document.channel.items:
            if pattern.search(item.title):
                results.append(Result(field="Title", content=item.title))
            if pattern.search(item.description):
                results.append(Result(field="Description", content=item.description))
        return results


register("rss", RssMatcher())


def main(argv: list[str] | None = None) -> int:
    """Search the configured feeds for a term and log what matches."""
    parser = argparse.ArgumentParser(
        prog="feedsearch", description="Search RSS feeds for a term."
    )
    parser.add_argument("term", nargs="?", default="president")
    parser.add_argument("--data", default=DATA_FILE, help="JSON list of feeds")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, stream=sys.stdout, format="%(asctime)s %(message)s"
    )
    try:
        run(args.term, args.data)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0