import json
import logging

import pytest

from patternkit.feeds import (
    DefaultMatcher,
    Feed,
    Matcher,
    MatcherAlreadyRegistered,
    Result,
    display,
    match,
    register,
    retrieve_feeds,
    run,
)


class NameMatcher(Matcher):
    def search(self, feed, search_term):
        if search_term in feed.name:
            return [Result(field="Title", content=feed.name)]
        return []


class FailingMatcher(Matcher):
    def search(self, feed, search_term):
        raise RuntimeError("cannot search")


register("name-test", NameMatcher())


def write_feeds(path, feeds):
    path.write_text(json.dumps([feed.to_json() for feed in feeds]), encoding="utf-8")
    return str(path)


def test_feed_json_round_trip(tmp_path):
    feeds = [
        Feed(name="first", uri="http://example.com/a", type="rss"),
        Feed(name="second", uri="http://example.com/b", type="name-test"),
    ]
    assert retrieve_feeds(write_feeds(tmp_path / "data.json", feeds)) == feeds


def test_feed_json_keys():
    feed = Feed.from_json({"site": "s", "link": "l", "type": "t"})
    assert (feed.name, feed.uri, feed.type) == ("s", "l", "t")
    assert feed.to_json() == {"site": "s", "link": "l", "type": "t"}


def test_retrieve_feeds_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        retrieve_feeds(str(tmp_path / "absent.json"))


def test_retrieve_feeds_rejects_non_list(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"site": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        retrieve_feeds(str(path))


def test_default_matcher_finds_nothing():
    feed = Feed(name="anything", uri="", type="unknown")
    assert DefaultMatcher().search(feed, "anything") == []


def test_register_twice_raises():
    with pytest.raises(MatcherAlreadyRegistered):
        register("name-test", NameMatcher())
    with pytest.raises(MatcherAlreadyRegistered):
        register("default", DefaultMatcher())


def test_match_returns_results():
    feed = Feed(name="alpha news", uri="", type="name-test")
    assert match(NameMatcher(), feed, "alpha") == [
        Result(field="Title", content="alpha news")
    ]


def test_match_swallows_errors(caplog):
    feed = Feed(name="alpha", uri="", type="x")
    with caplog.at_level(logging.INFO, logger="patternkit.feeds"):
        assert match(FailingMatcher(), feed, "alpha") == []
    assert any("cannot search" in r.getMessage() for r in caplog.records)


def test_display_logs_each_result(caplog):
    results = [Result("Title", "hello"), Result("Description", "world")]
    with caplog.at_level(logging.INFO, logger="patternkit.feeds"):
        display(results)
    messages = [r.getMessage() for r in caplog.records]
    assert "Title:\nhello\n\n" in messages
    assert "Description:\nworld\n\n" in messages


def test_run_uses_registered_and_default_matchers(tmp_path):
    feeds = [
        Feed(name="alpha one", uri="", type="name-test"),
        Feed(name="beta", uri="", type="name-test"),
        Feed(name="alpha two", uri="", type="name-test"),
        Feed(name="alpha unknown", uri="", type="no-such-type"),
    ]
    path = write_feeds(tmp_path / "data.json", feeds)
    results = run("alpha", path)
    assert sorted(r.content for r in results) == ["alpha one", "alpha two"]
    assert {r.field for r in results} == {"Title"}


def test_run_with_no_feeds(tmp_path):
    assert run("alpha", write_feeds(tmp_path / "data.json", [])) == []


def test_run_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run("alpha", str(tmp_path / "absent.json"))