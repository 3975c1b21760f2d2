"""log.py - subsystem logger and tracer.

one call shape everywhere: log(subsystem, level, message, **attrs).
console for humans, span events for the trace. the engine itself stays
quiet; the cli and the loaders are the ones that talk.

in the world: the margin notes. the lesson happens on the page,
the notes say what the instructor noticed while giving it.
"""

import sys
from datetime import datetime
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    SimpleSpanProcessor,
    ConsoleSpanExporter,
)

# ============================================================
# TRACER SETUP
# ============================================================

_provider = TracerProvider()
_tracer = _provider.get_tracer("evangeliser", "0.1.0")
_console_export = False


def enable_console_export():
    """turn on span export to stderr."""
    global _console_export
    if not _console_export:
        _provider.add_span_processor(
            SimpleSpanProcessor(ConsoleSpanExporter())
        )
        _console_export = True


def add_exporter(exporter):
    """add a custom span exporter (OTLP, Jaeger, etc)."""
    _provider.add_span_processor(SimpleSpanProcessor(exporter))


def get_tracer():
    """get the evangeliser tracer for custom instrumentation."""
    return _tracer


# ============================================================
# CONSOLE LOGGER
# ============================================================

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_level = LEVELS["info"]


def set_level(level: str):
    """only print messages at or above this level. unknown names are ignored."""
    global _level
    if level in LEVELS:
        _level = LEVELS[level]


def get_level() -> str:
    for name, value in LEVELS.items():
        if value == _level:
            return name
    return "info"


def log(subsystem: str, level: str, message: str, **attrs):
    """log to console (if above threshold) and record as span event."""
    if LEVELS.get(level, LEVELS["info"]) >= _level:
        ts = datetime.now().strftime("%H:%M:%S")
        prefix = f"[{ts} evangeliser:{subsystem}]"
        dest = sys.stderr if level in ("warn", "error") else sys.stdout
        print(f"{prefix} {message}", file=dest)

    # span events are recorded regardless of console level
    span_ = trace.get_current_span()
    if span_ and span_.is_recording():
        span_.add_event(
            f"evangeliser.{subsystem}.{level}",
            attributes={"message": message, "subsystem": subsystem,
                        **{k: str(v) for k, v in attrs.items()}},
        )


def debug(subsystem: str, message: str, **attrs):
    log(subsystem, "debug", message, **attrs)


def info(subsystem: str, message: str, **attrs):
    log(subsystem, "info", message, **attrs)


def warn(subsystem: str, message: str, **attrs):
    log(subsystem, "warn", message, **attrs)


def error(subsystem: str, message: str, **attrs):
    log(subsystem, "error", message, **attrs)


# ============================================================
# SPANS
# ============================================================

@contextmanager
def span(name: str, subsystem: str = "evangeliser", **attrs):
    """Create a traced span. Everything inside is connected.

    Usage:
        with span("detect", subsystem="detect", patterns=43) as s:
            matches = detector.detect(text)
            s.set_attribute("evangeliser.matches", len(matches))

    Logs emitted inside the block become events on the span.
    """
    with _tracer.start_as_current_span(
        f"evangeliser.{subsystem}.{name}",
        attributes={f"evangeliser.{k}": str(v) for k, v in attrs.items()},
    ) as s:
        s.set_attribute("evangeliser.subsystem", subsystem)
        yield s
