"""Tests for detect/engine.py - rule matching, ranking, line numbers."""

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from evangeliser.catalog import PatternCatalog
from evangeliser.detect import Detector, Match, detect


def _ids(matches):
    return [m.pattern_id for m in matches]


class TestKnownSnippets:

    def test_null_check(self):
        matches = detect("if (user !== null && user !== undefined) { console.log(user.name); }")
        hit = [m for m in matches if m.pattern_id == "null-check-basic"]
        assert len(hit) == 1
        assert hit[0].confidence == 0.9

    def test_array_map(self):
        matches = detect("const doubled = numbers.map(n => n * 2);")
        hit = [m for m in matches if m.pattern_id == "array-map"]
        assert len(hit) == 1
        assert hit[0].confidence == 0.95

    def test_map_before_filter_on_tie(self):
        text = "const ids = items.map(x => x.id);\nconst ok = items.filter(x => x.ok);"
        ids = _ids(detect(text))
        assert "array-map" in ids
        assert "array-filter" in ids
        assert ids.index("array-map") < ids.index("array-filter")

    def test_nothing_recognised(self):
        assert detect("SELECT * FROM users") == []

    def test_empty_text(self):
        assert detect("") == []

    def test_not_a_string(self):
        assert detect(None) == []
        assert detect(b"x.map(n => n)") == []

    def test_one_match_per_pattern(self):
        text = "a.map(x => x);\nb.map(y => y);\nc.map(z => z);"
        ids = _ids(detect(text))
        assert ids.count("array-map") == 1

    def test_first_occurrence_reported(self):
        text = "a.map(x => x);\nb.map(y => y);"
        m = next(m for m in detect(text) if m.pattern_id == "array-map")
        assert m.start_line == 1
        assert m.matched_text.startswith(".map")


class TestRanking:

    def test_sorted_by_confidence(self, catalog):
        text = ("try { const r = await Promise.all([a(), b()]); } catch (e) {}\n"
                "const port = config.port || 3000;")
        matches = Detector(catalog).detect(text)
        confs = [m.confidence for m in matches]
        assert confs == sorted(confs, reverse=True)

    def test_catalog_order_breaks_ties(self, tiny_catalog):
        matches = Detector(tiny_catalog).detect("foo bar")
        assert _ids(matches) == ["high", "tie", "low"]

    def test_deterministic(self, catalog):
        text = "const { a } = obj;\nconst xs = ys.map(y => y).filter(y => y);\nconst s = `${a}`;"
        first = _ids(Detector(catalog).detect(text))
        for _ in range(5):
            assert _ids(Detector(catalog).detect(text)) == first

    def test_confidence_is_pattern_confidence(self, catalog):
        for m in Detector(catalog).detect("const doubled = numbers.map(n => n * 2);"):
            assert m.confidence == m.pattern.confidence


class TestLines:

    def test_second_line(self):
        m = next(m for m in detect("const a = 1;\nconst b = xs.map(n => n);")
                 if m.pattern_id == "array-map")
        assert m.start_line == 2
        assert m.end_line == 2

    def test_match_spanning_lines(self):
        text = "if (a !== null &&\n    a !== undefined) {}"
        m = next(m for m in detect(text) if m.pattern_id == "null-check-basic")
        assert m.start_line == 1
        assert m.end_line == 2

    def test_offsets(self):
        text = "x; y.map(n => n)"
        m = next(m for m in detect(text) if m.pattern_id == "array-map")
        assert text[m.start_offset:m.end_offset] == m.matched_text


class TestDetectorOptions:

    def test_bad_rule_skipped(self, make_pattern):
        cat = PatternCatalog([make_pattern("bad", rule="(oops"), make_pattern("good", rule="foo")])
        d = Detector(cat)
        assert d.skipped == ("bad",)
        assert _ids(d.detect("foo (oops")) == ["good"]

    def test_min_confidence(self, tiny_catalog):
        matches = Detector(tiny_catalog, min_confidence=0.8).detect("foo bar")
        assert _ids(matches) == ["high", "tie"]

    def test_expired_budget_truncates(self, tiny_catalog):
        result = Detector(tiny_catalog, time_budget=-1).run("foo bar")
        assert result.matches == ()
        assert result.truncated is True

    def test_generous_budget(self, tiny_catalog):
        result = Detector(tiny_catalog, time_budget=60).run("foo bar")
        assert len(result) == 3
        assert result.truncated is False

    def test_run_matches_detect(self, catalog):
        d = Detector(catalog)
        text = "const doubled = numbers.map(n => n * 2);"
        assert list(d.run(text)) == d.detect(text)

    def test_run_not_a_string(self, tiny_catalog):
        result = Detector(tiny_catalog).run(None)
        assert result.matches == ()
        assert result.truncated is False

    def test_truncation_is_per_call(self, tiny_catalog):
        d = Detector(tiny_catalog, time_budget=60)
        first = d.run("foo bar")
        d.time_budget = -1
        second = d.run("foo bar")
        assert second.truncated is True
        assert first.truncated is False
        assert len(first) == 3

    def test_no_per_call_state_on_detector(self, tiny_catalog):
        d = Detector(tiny_catalog)
        before = dict(vars(d))
        d.detect("foo bar")
        assert vars(d) == before

    def test_default_catalog(self):
        assert Detector().catalog.count() > 0


class TestSharedDetector:

    def test_repeated_calls_same_instance(self, catalog):
        d = Detector(catalog)
        text = "const { a } = obj;\nconst xs = ys.map(y => y).filter(y => y);\nconst s = `${a}`;"
        first = d.detect(text)
        for _ in range(5):
            assert d.detect(text) == first

    def test_concurrent_calls(self, catalog):
        d = Detector(catalog)
        texts = ["xs.map(n => n)", "SELECT 1", "try { x(); } catch (e) {}"] * 10
        expected = [_ids(d.detect(t)) for t in texts]
        with ThreadPoolExecutor(max_workers=4) as pool:
            got = list(pool.map(lambda t: _ids(d.detect(t)), texts))
        assert got == expected


# inputs that make a backtracking rule rescan the rest of the text from
# every start position
SLOW_INPUTS = [
    "async x; " * 20000,
    "function(a=b " * 15000,
    "function" + " " * 150000,
    "for (" * 30000,
    "switch (" * 20000,
    "const {" * 25000,
    "let [" * 30000,
    "=> " + " " * 150000,
    "(" + " " * 150000,
    ".map(" + " " * 150000,
    "type a =" + " " * 150000,
    "import a " * 20000,
    "`${a" * 30000,
    "x ? " * 30000,
    "!== null && " * 15000,
    "a" * 150000,
]


class TestLargeInput:

    @pytest.mark.parametrize("text", SLOW_INPUTS, ids=lambda t: repr(t[:10]))
    def test_linear_time(self, catalog, text):
        d = Detector(catalog, time_budget=0.25)
        t0 = time.monotonic()
        d.detect(text)
        assert time.monotonic() - t0 < 2.0


class TestMatch:

    def test_to_dict(self):
        m = next(m for m in detect("const doubled = numbers.map(n => n * 2);")
                 if m.pattern_id == "array-map")
        d = m.to_dict()
        assert d["patternId"] == "array-map"
        assert d["startLine"] == 1
        assert d["endLine"] == 1
        assert d["confidence"] == 0.95
        assert d["suggestedTransformation"] == m.pattern.after_example

    def test_to_dict_without_suggestion(self, make_pattern):
        m = Match(pattern=make_pattern("x", after=""), matched_text="foo",
                  start_offset=0, end_offset=3, start_line=1, end_line=1,
                  confidence=0.5)
        assert "suggestedTransformation" not in m.to_dict()

    def test_suggestion_empty_after_is_none(self, make_pattern):
        cat = PatternCatalog([make_pattern("x", rule="foo", after="")])
        m = Detector(cat).detect("foo")[0]
        assert m.suggested_transformation is None
