"""evangeliser CLI: unified entry point.

Usage:
    evangeliser detect app.js                   # patterns in a file
    evangeliser detect --text "x?.y ?? 0"       # patterns in a snippet
    cat app.js | evangeliser detect --json      # stdin, machine-readable
    evangeliser detect app.js --variety         # templated narratives
    evangeliser patterns --category Async       # browse the catalog
    evangeliser show array-map                  # one pattern in full
    evangeliser explain array-map               # what its rule looks for
    evangeliser narrate NullSafety "Optional"   # one variety-mode narrative
    evangeliser stats                           # catalog counts
    evangeliser legend                          # glyph legend
    evangeliser config                          # merged config + sources
"""

import argparse
import json
import random
import sys

from dotenv import load_dotenv
load_dotenv()

from evangeliser.log import info, warn, error, set_level
from evangeliser.errors import EvangeliserError


# ============================================================
# HELPERS
# ============================================================

def _config():
    from evangeliser.config import load_config
    return load_config()


def _catalog(cfg):
    """built-in catalog unless catalog_path points at a data file."""
    path = cfg.get("catalog_path")
    if path:
        from evangeliser.catalog import load_catalog
        info("cli", f"loading catalog from {path}")
        return load_catalog(path)
    from evangeliser.catalog import default_catalog
    return default_catalog()


def _generator(cfg, seed=None):
    from evangeliser.narrative import NarrativeGenerator
    if seed is None:
        seed = cfg.get("seed")
    rng = random.Random(seed) if seed is not None else None
    return NarrativeGenerator(rng=rng, target_language=cfg.get("target_language"))


def _read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.file and args.file != "-":
        with open(args.file, encoding="utf-8", errors="replace") as f:
            return f.read()
    return sys.stdin.read()


def _lookup(catalog, pattern_id):
    pattern = catalog.get_by_id(pattern_id)
    if pattern is None:
        warn("cli", f"no pattern with id '{pattern_id}'. try: evangeliser patterns")
        sys.exit(1)
    return pattern


# ============================================================
# COMMANDS
# ============================================================

def cmd_detect(args):
    from evangeliser.detect import Detector

    cfg = _config()
    catalog = _catalog(cfg)
    min_conf = args.min_confidence if args.min_confidence is not None else cfg.get("min_confidence")
    detector = Detector(catalog, time_budget=cfg.time_budget, min_confidence=min_conf)
    for pid in detector.skipped:
        warn("detect", f"skipping {pid}: rule does not compile")

    source = _read_source(args)
    result = detector.run(source)
    matches = list(result.matches)
    if result.truncated:
        warn("detect", "time budget exhausted, results are partial")

    if args.json:
        print(json.dumps([m.to_dict() for m in matches], indent=2, ensure_ascii=False))
        return

    if not matches:
        print("\n  nothing recognised. plain code is fine too.\n")
        return

    gen = _generator(cfg, args.seed)
    kind = args.format or cfg.get("format")
    variety = args.variety or cfg.get("variety")
    glyphs = cfg.get("glyphs") and not args.no_glyphs
    print()
    for m in matches:
        print(gen.render_match(m, kind=kind, glyphs=glyphs, variety=variety))
        print()
    print(f"  {gen.success_message(matches[0].pattern.name)}")
    print(f"  {gen.hint(matches[0].pattern)}\n")


def cmd_patterns(args):
    cfg = _config()
    catalog = _catalog(cfg)
    patterns = list(catalog)
    if args.category:
        patterns = [p for p in patterns if p in catalog.get_by_category(args.category)]
    if args.difficulty:
        patterns = [p for p in patterns if p in catalog.get_by_difficulty(args.difficulty)]

    if args.json:
        print(json.dumps([p.to_dict() for p in patterns], indent=2, ensure_ascii=False))
        return

    print()
    for p in patterns:
        print(f"  {' '.join(p.glyphs):<6} {p.id:<24} {p.category.value:<16} "
              f"{p.difficulty.value:<13} {p.confidence:.2f}  {p.name}")
    print(f"\n  {len(patterns)} of {catalog.count()} patterns\n")


def cmd_show(args):
    cfg = _config()
    pattern = _lookup(_catalog(cfg), args.id)
    if args.json:
        print(json.dumps(pattern.to_dict(), indent=2, ensure_ascii=False))
        return

    gen = _generator(cfg)
    print()
    print(f"  {pattern.name} [{pattern.id}]  {' '.join(pattern.glyphs)}")
    print(f"  {pattern.category.value} / {pattern.difficulty.value} / confidence {pattern.confidence:.2f}")
    print("\n  before:")
    for line in pattern.before_example.splitlines():
        print(f"    {line}")
    print("\n  after:")
    for line in pattern.after_example.splitlines():
        print(f"    {line}")
    print()
    print(gen.format(gen.narrative_of(pattern), args.format or cfg.get("format")))
    for label, items in [
        ("Learning objectives", pattern.learning_objectives),
        ("Common mistakes", pattern.common_mistakes),
        ("Best practices", pattern.best_practices),
    ]:
        if items:
            print(f"\n  {label}:")
            for item in items:
                print(f"    - {item}")
    if pattern.related_patterns:
        print(f"\n  related: {', '.join(pattern.related_patterns)}")
    print()


def cmd_explain(args):
    from evangeliser.tools.regexutil import explain_rule, validate_rule

    pattern = _lookup(_catalog(_config()), args.id)
    ok, msg = validate_rule(pattern.detection_rule)
    print(f"\n  {pattern.id}: {pattern.detection_rule}")
    if not ok:
        print(f"  (this rule does not compile: {msg})")
    print()
    for line in explain_rule(pattern.detection_rule):
        print(f"    {line}")
    print()


def cmd_narrate(args):
    cfg = _config()
    gen = _generator(cfg, args.seed)
    narrative = gen.generate_for_category(args.category, args.name)
    print(gen.format(narrative, args.format or cfg.get("format")))


def cmd_stats(args):
    stats = _catalog(_config()).statistics()
    if args.json:
        print(json.dumps(stats.to_dict(), indent=2))
        return
    print(f"\n  {stats.total} patterns\n")
    print("  by difficulty:")
    for name, n in stats.by_difficulty.items():
        print(f"    {name:<14} {n}")
    print("\n  by category:")
    for name, n in sorted(stats.by_category.items()):
        print(f"    {name:<16} {n}")
    print()


def cmd_legend(args):
    from evangeliser.glyphs import legend
    text = legend()
    if args.raw:
        print(text)
        return
    from rich.console import Console
    from rich.markdown import Markdown
    Console().print(Markdown(text))


def cmd_config(args):
    from evangeliser.config import (
        DEFAULTS, coerce_value, list_config, set_global_value, set_project_value,
    )
    if args.set:
        key, sep, raw = args.set.partition("=")
        if not sep:
            error("cli", "use --set key=value")
            sys.exit(2)
        if key not in DEFAULTS:
            error("cli", f"unknown config key '{key}'. known: {', '.join(DEFAULTS)}")
            sys.exit(2)
        value = coerce_value(key, raw)
        if value is None:
            error("cli", f"invalid value for {key}: {raw!r}")
            sys.exit(2)
        if args.globally:
            set_global_value(key, value)
        else:
            set_project_value(key, value)
        info("cli", f"{key} = {value!r} ({'global' if args.globally else 'project'})")
        return
    for key, entry in list_config().items():
        print(f"  {key:<16} {entry['value']!r:<24} ({entry['source']})")


# ============================================================
# PARSER
# ============================================================

def _build_parsers(subparsers):
    """register all subcommands."""
    formats = ["markdown", "plain", "html"]

    p = subparsers.add_parser("detect", help="Find known JS/TS patterns in code")
    p.add_argument("file", nargs="?", default="", help="Source file (default: stdin)")
    p.add_argument("--text", "-t", default=None, help="Inline source text")
    p.add_argument("--json", action="store_true", help="Output matches as JSON")
    p.add_argument("--format", "-f", default="", choices=[""] + formats,
                   help="markdown | plain | html")
    p.add_argument("--variety", action="store_true", help="Templated, randomised narratives")
    p.add_argument("--seed", type=int, default=None, help="Seed for variety mode")
    p.add_argument("--no-glyphs", action="store_true", help="Don't annotate examples with glyphs")
    p.add_argument("--min-confidence", type=float, default=None, help="Drop weaker matches")
    p.set_defaults(func=cmd_detect)

    p = subparsers.add_parser("patterns", aliases=["ls"], help="List catalog patterns")
    p.add_argument("--category", "-c", default="", help="Filter by pattern category")
    p.add_argument("--difficulty", "-d", default="", help="Beginner | Intermediate | Advanced")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_patterns)

    p = subparsers.add_parser("show", help="Show one pattern in full")
    p.add_argument("id")
    p.add_argument("--format", "-f", default="", choices=[""] + formats)
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_show)

    p = subparsers.add_parser("explain", help="Explain a pattern's detection rule")
    p.add_argument("id")
    p.set_defaults(func=cmd_explain)

    p = subparsers.add_parser("narrate", help="Generate a templated narrative")
    p.add_argument("category")
    p.add_argument("name")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--format", "-f", default="", choices=[""] + formats)
    p.set_defaults(func=cmd_narrate)

    p = subparsers.add_parser("stats", help="Catalog statistics")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_stats)

    p = subparsers.add_parser("legend", help="Glyph legend")
    p.add_argument("--raw", action="store_true", help="Print raw markdown")
    p.set_defaults(func=cmd_legend)

    p = subparsers.add_parser("config", help="Show or set configuration")
    p.add_argument("--set", default="", help="key=value")
    p.add_argument("--global", dest="globally", action="store_true",
                   help="Write to ~/.evangeliser/config.json instead of the project")
    p.set_defaults(func=cmd_config)


def main():
    parser = argparse.ArgumentParser(
        prog="evangeliser",
        description="Spots idiomatic JavaScript/TypeScript and explains the ReScript way, gently.",
    )
    subparsers = parser.add_subparsers(dest="command")
    _build_parsers(subparsers)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    set_level(_config().get("log_level"))

    try:
        args.func(args)
    except EvangeliserError as e:
        error("cli", str(e))
        sys.exit(1)
    except OSError as e:
        error("cli", f"{e.__class__.__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
