from __future__ import annotations

import re

# Plain text fixes applied once before the grammar runs
LITERAL_FIXES: list[tuple[re.Pattern[str], str]] = [
    (re.compile("\u2061"), ""),  # FUNCTION APPLICATION
    (re.compile("\u3016"), "{"),  # WHITE LENTICULAR BRACKET, grouping
    (re.compile("\u3017"), "}"),
    (re.compile(r"(?<!\\)sinx"), "sin x"),  # common typo, spaced for the grammar
    (re.compile(r"(?<!\\)cosx"), "cos x"),
    (re.compile("\u2013"), "-"),  # EN DASH used as a minus sign
]


def cleanup_ascii_math(s: str) -> str:
    for pattern, repl in LITERAL_FIXES:
        s = pattern.sub(repl, s)
    return s
