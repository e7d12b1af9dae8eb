import threading

import pytest

from patternkit.engines import (
    Result,
    SearchSession,
    Searcher,
    bing,
    google,
    main,
    only_first,
    submit,
    yahoo,
)


def _fast(name: str) -> Searcher:
    return Searcher(
        name,
        (Result(engine=name, title=f"{name} title", description="d", link="l"),),
        max_delay=0.0,
    )


class _BlockingSearcher(Searcher):
    def __init__(self, gate: threading.Event) -> None:
        super().__init__("Slow", (Result("Slow", "t", "d", "l"),), max_delay=0.0)
        self.gate = gate

    def search(self, term):
        self.gate.wait(5)
        return super().search(term)


def test_searcher_returns_its_results():
    searcher = _fast("Alpha")
    assert searcher.search("anything") == list(searcher.results)


def test_options_configure_session():
    session = SearchSession()
    google(session)
    bing(session)
    yahoo(session)
    only_first(session)
    assert set(session.searchers) == {"google", "bing", "yahoo"}
    assert session.first is True


def test_google_result_content():
    session = SearchSession()
    google(session)
    (result,) = session.searchers["google"].results
    assert result.engine == "Google"
    assert result.title == "Programming Language Home"
    assert result.link == "https://www.example.com/"


def test_submit_without_searchers_is_empty():
    assert submit("language") == []


def test_submit_collects_all_results():
    results = submit("language", google, bing, yahoo)
    assert len(results) == 3
    assert {r.engine for r in results} == {"Google", "Bing", "Yahoo"}


def test_submit_custom_searchers():
    def add_alpha(session):
        session.searchers["alpha"] = _fast("Alpha")

    def add_beta(session):
        session.searchers["beta"] = _fast("Beta")

    results = submit("q", add_alpha, add_beta)
    assert sorted(r.engine for r in results) == ["Alpha", "Beta"]


def test_only_first_does_not_wait_for_slow_engines():
    gate = threading.Event()

    def add_slow(session):
        session.searchers["slow"] = _BlockingSearcher(gate)

    def add_fast(session):
        session.searchers["fast"] = _fast("Fast")

    try:
        results = submit("q", only_first, add_slow, add_fast)
    finally:
        gate.set()
    assert [r.engine for r in results] == ["Fast"]


def test_failing_searcher_contributes_nothing():
    class Broken(Searcher):
        def search(self, term):
            raise RuntimeError("boom")

    def add_broken(session):
        session.searchers["broken"] = Broken("Broken")

    def add_fast(session):
        session.searchers["fast"] = _fast("Fast")

    results = submit("q", add_broken, add_fast)
    assert [r.engine for r in results] == ["Fast"]


@pytest.mark.parametrize("query", ["language", "python"])
def test_main_returns_zero(query):
    assert main([query]) == 0