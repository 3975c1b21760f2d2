"""regexutil.py - detection rule helpers.

compile rules the one way the detector wants them, validate them at load
time, map offsets back to line numbers, and explain a rule in plain english
for the `explain` command. pure python.

in the world: the magnifying glass. you want to know why a rule fired.
"""

import re
from bisect import bisect_right
from typing import Optional

# case-sensitive, no MULTILINE, no DOTALL, no implicit anchoring
RULE_FLAGS = 0


def compile_rule(rule: str) -> Optional[re.Pattern]:
    """compile a detection rule. None if it does not compile."""
    try:
        return re.compile(rule, RULE_FLAGS)
    except (re.error, TypeError, OverflowError, RecursionError):
        return None


def validate_rule(rule: str) -> tuple[bool, str]:
    """check if a rule compiles. returns (valid, error_message)."""
    try:
        re.compile(rule, RULE_FLAGS)
        return (True, "")
    except re.error as e:
        return (False, str(e))
    except (TypeError, OverflowError, RecursionError) as e:
        return (False, f"{type(e).__name__}: {e}")


# ============================================================
# LINE NUMBERS
# ============================================================

def line_starts(text: str) -> list[int]:
    """offsets where each line begins. line 1 starts at 0."""
    starts = [0]
    for i, ch in enumerate(text):
        if ch == "\n":
            starts.append(i + 1)
    return starts


def line_of(starts: list[int], offset: int) -> int:
    """1-indexed line holding offset, given line_starts() output."""
    return max(bisect_right(starts, offset), 1)


# ============================================================
# EXPLAIN
# ============================================================

# token explanations for explain_rule
_TOKEN_MAP = [
    # lookahead / lookbehind (must come before generic group patterns)
    (r"\(\?=", "positive lookahead (match if followed by ...)"),
    (r"\(\?!", "negative lookahead (match if NOT followed by ...)"),
    (r"\(\?<=", "positive lookbehind (match if preceded by ...)"),
    (r"\(\?<!", "negative lookbehind (match if NOT preceded by ...)"),
    (r"\(\?P<([^>]+)>", "named capture group '{0}'"),
    (r"\(\?:", "non-capturing group"),
    (r"\(", "start capturing group"),
    (r"\)", "end group"),
    # quantifiers
    (r"\{(\d+),(\d+)\}", "between {0} and {1} times"),
    (r"\{(\d+),\}", "{0} or more times"),
    (r"\{(\d+)\}", "exactly {0} times"),
    (r"\*\?", "zero or more (lazy)"),
    (r"\+\?", "one or more (lazy)"),
    (r"\?\?", "zero or one (lazy)"),
    (r"\*", "zero or more"),
    (r"\+", "one or more"),
    (r"\?", "zero or one (optional)"),
    # anchors
    (r"\^", "start of text"),
    (r"\$", "end of text"),
    # character classes
    (r"\\d", "digit [0-9]"),
    (r"\\w", "word character [a-zA-Z0-9_]"),
    (r"\\W", "non-word character"),
    (r"\\s", "whitespace"),
    (r"\\S", "non-whitespace"),
    (r"\\b", "word boundary"),
    (r"\\n", "newline"),
    (r"\\(.)", "literal '{0}'"),
    (r"\.", "any character (except newline)"),
    (r"\|", "OR"),
]


def explain_rule(rule: str) -> list[str]:
    """break a rule into human-readable token explanations.

    runs of plain literal characters are grouped into one line so
    `\\.map\\s*\\(` reads as three steps, not seven.
    """
    explanations = []
    literal = ""
    i = 0
    while i < len(rule):
        matched = False
        for token_re, template in _TOKEN_MAP:
            m = re.match(token_re, rule[i:])
            if m:
                if literal:
                    explanations.append(f"{literal} -> literal '{literal}'")
                    literal = ""
                desc = template.format(*m.groups()) if m.groups() else template
                explanations.append(f"{m.group(0)} -> {desc}")
                i += len(m.group(0))
                matched = True
                break
        if matched:
            continue

        if rule[i] == "[":
            if literal:
                explanations.append(f"{literal} -> literal '{literal}'")
                literal = ""
            end = _class_end(rule, i)
            cls = rule[i:end + 1]
            if len(cls) > 2 and cls[1] == "^":
                explanations.append(f"{cls} -> any character NOT in {cls[2:-1]}")
            else:
                explanations.append(f"{cls} -> any character in {cls[1:-1]}")
            i = end + 1
        else:
            literal += rule[i]
            i += 1

    if literal:
        explanations.append(f"{literal} -> literal '{literal}'")
    return explanations


def _class_end(rule: str, start: int) -> int:
    """index of the ] closing the character class opened at start."""
    i = start + 1
    if i < len(rule) and rule[i] == "^":
        i += 1
    if i < len(rule) and rule[i] == "]":
        i += 1
    while i < len(rule):
        if rule[i] == "\\":
            i += 2
            continue
        if rule[i] == "]":
            return i
        i += 1
    return len(rule) - 1
