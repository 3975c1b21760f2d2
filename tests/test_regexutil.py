"""Tests for regexutil.py - rule compilation, line mapping, explain."""

from evangeliser.tools.regexutil import (
    compile_rule, explain_rule, line_of, line_starts, validate_rule,
)


class TestCompileRule:

    def test_valid(self):
        rx = compile_rule(r"\.map\(")
        assert rx.search("xs.map(f)")

    def test_invalid(self):
        assert compile_rule("(unclosed") is None

    def test_not_a_string(self):
        assert compile_rule(None) is None

    def test_case_sensitive(self):
        assert compile_rule("Promise").search("promise") is None

    def test_dot_stops_at_newline(self):
        assert compile_rule("a.b").search("a\nb") is None


class TestValidateRule:

    def test_valid(self):
        assert validate_rule(r"\d+") == (True, "")

    def test_invalid(self):
        ok, msg = validate_rule("[abc")
        assert not ok
        assert msg

    def test_wrong_type(self):
        ok, msg = validate_rule(42)
        assert not ok
        assert "TypeError" in msg


class TestLines:

    def test_single_line(self):
        starts = line_starts("abc")
        assert starts == [0]
        assert line_of(starts, 0) == 1
        assert line_of(starts, 2) == 1

    def test_multi_line(self):
        text = "one\ntwo\nthree"
        starts = line_starts(text)
        assert starts == [0, 4, 8]
        assert line_of(starts, text.index("two")) == 2
        assert line_of(starts, text.index("three")) == 3

    def test_newline_belongs_to_its_line(self):
        starts = line_starts("ab\ncd")
        assert line_of(starts, 2) == 1
        assert line_of(starts, 3) == 2


class TestExplain:

    def test_literals_grouped(self):
        lines = explain_rule("map")
        assert lines == ["map -> literal 'map'"]

    def test_escapes_and_quantifiers(self):
        lines = explain_rule(r"\.map\s*\(")
        assert lines[0] == "\\. -> literal '.'"
        assert "map -> literal 'map'" in lines
        assert "\\s -> whitespace" in lines
        assert "* -> zero or more" in lines

    def test_character_class(self):
        lines = explain_rule(r"[^&|]*")
        assert lines[0] == "[^&|] -> any character NOT in &|"

    def test_alternation_and_groups(self):
        lines = explain_rule(r"(?:a|b)")
        assert "(?: -> non-capturing group" in lines
        assert "| -> OR" in lines
        assert ") -> end group" in lines

    def test_every_builtin_rule_explains(self, catalog):
        for p in catalog:
            assert explain_rule(p.detection_rule), p.id
