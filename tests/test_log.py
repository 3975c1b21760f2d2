"""Tests for log.py - subsystem logger + OpenTelemetry tracing."""

from unittest.mock import MagicMock, patch

from evangeliser.log import (
    log, info, warn, debug, error, set_level, get_level, span, get_tracer,
)


class TestConsoleLogger:
    def test_info_prints_to_stdout(self, capsys):
        info("test", "hello world")
        captured = capsys.readouterr()
        assert "evangeliser:test" in captured.out
        assert "hello world" in captured.out

    def test_warn_prints_to_stderr(self, capsys):
        warn("test", "careful")
        captured = capsys.readouterr()
        assert "evangeliser:test" in captured.err
        assert "careful" in captured.err

    def test_error_prints_to_stderr(self, capsys):
        error("test", "broke")
        assert "broke" in capsys.readouterr().err

    def test_debug_hidden_by_default(self, capsys):
        debug("test", "verbose")
        assert capsys.readouterr().out == ""

    def test_set_level_debug(self, capsys):
        set_level("debug")
        debug("test", "now visible")
        assert "now visible" in capsys.readouterr().out
        set_level("info")  # reset

    def test_set_level_warn(self, capsys):
        set_level("warn")
        info("test", "hidden")
        assert capsys.readouterr().out == ""
        set_level("info")  # reset

    def test_unknown_level_ignored(self):
        set_level("loud")
        assert get_level() == "info"

    def test_get_level(self):
        set_level("error")
        assert get_level() == "error"
        set_level("info")  # reset


class TestSpans:
    def test_span_context_manager(self):
        with span("test_op", subsystem="test") as s:
            assert s is not None
            s.set_attribute("evangeliser.custom", "value")

    def test_log_inside_span_adds_event(self):
        fake = MagicMock()
        fake.is_recording.return_value = True
        with patch("evangeliser.log.trace.get_current_span", return_value=fake):
            log("detect", "debug", "quiet", patterns=3)
        name = fake.add_event.call_args[0][0]
        attrs = fake.add_event.call_args[1]["attributes"]
        assert name == "evangeliser.detect.debug"
        assert attrs["message"] == "quiet"
        assert attrs["patterns"] == "3"

    def test_no_event_when_not_recording(self):
        fake = MagicMock()
        fake.is_recording.return_value = False
        with patch("evangeliser.log.trace.get_current_span", return_value=fake):
            info("test", "x")
        fake.add_event.assert_not_called()

    def test_get_tracer(self):
        assert get_tracer() is not None
