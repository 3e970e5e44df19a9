"""Recursive-descent conversion of ASCIIMath / UnicodeMath subsets to LaTeX.

Supported input, roughly:

    1/2sin x            -> \\frac{1}{2}\\sin x
    alpha + (pi)/(4)    -> \\alpha  +\\frac{\\pi }{4}
    sqrt2, sqrt(1+a)    -> \\sqrt{2}, \\sqrt{1+a}
    f(x)                -> f\\left(x\\right)
    {a+b}, [a+b]        -> \\left\\{a+b\\right\\}, \\left[a+b\\right]
    _a^b x              -> _{a}^{b}x

Rules are tried in a fixed order against the head of the string and the
first one that matches wins; nothing is ever re-parsed with another rule.
Output is produced directly, there is no intermediate tree. Malformed input
never raises: it degrades to literal text or a placeholder.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from ..shortcuts import ShortcutTable, strip_placeholders

logger = logging.getLogger(__name__)

PLACEHOLDER = "\\placeholder{}"

FENCES = {"(": ")", "{": "}", "[": "]"}

SQRT = re.compile(r"sqrt|\u221a")
CBRT = re.compile(r"\\?cbrt|\u221b")
QUOTED = re.compile(r"[\"\u201c\u201d](.*?)[\"\u201c\u201d]", re.S)
# Anything that is not a letter, digit, fence opener, ^ _ \, space or quote
SYMBOLS = re.compile(r"[^a-zA-Z0-9({\[_^\\\s\"\u201c\u201d]+")
FUNCTION_LETTER = re.compile(r"[fgh](?=[^a-zA-Z])")
LETTERS = re.compile(r"[a-zA-Z]+")
NUMBER = re.compile(r"-?[0-9]+(?:\.[0-9]*)?")
COMMAND = re.compile(r"\\[a-zA-Z]+")
LEFT_RIGHT = re.compile(r"\\(?:left|right)")
WHITESPACE = re.compile(r"\s+")
TRAILING_COMMAND = re.compile(r"\\[a-zA-Z]+$")


class ParseResult(NamedTuple):
    match: str  # converted LaTeX
    rest: str  # raw, not yet converted


def padded_shortcut(run: str, shortcuts: ShortcutTable) -> str:
    template = shortcuts.get(run)
    if template is None:
        return run
    # Trailing blank keeps "\alpha" from gluing onto a following letter
    return strip_placeholders(template) + " "


def _emit(out: list[str], piece: str) -> None:
    # "\pi" directly followed by "r" would read as the command "\pir"
    if out and LETTERS.match(piece) and TRAILING_COMMAND.search(out[-1]):
        out.append(" ")
    out.append(piece)


def parse_math_argument(
    s: str, shortcuts: ShortcutTable, *, no_wrap: bool = False
) -> ParseResult:
    """Parse one argument off the head of ``s``.

    An argument is a fenced group ``()``, ``{}`` or ``[]``, a shortcut
    (``pi``), a single letter, a number, or a LaTeX command (``\\pi``).
    With ``no_wrap`` a parenthesized group yields its bare content, as
    needed for ``sqrt(x)`` or the halves of ``(a)/(b)``.

    An empty match means there is no argument here; ``rest`` is then the
    input minus leading whitespace.
    """
    s = s.lstrip()
    opening = s[:1]
    closing = FENCES.get(opening)
    if closing:
        # Only this exact fence pair counts towards nesting
        level, i = 1, 1
        while i < len(s) and level > 0:
            if s[i] == opening:
                level += 1
            elif s[i] == closing:
                level -= 1
            i += 1

        if level > 0:
            logger.debug("Unbalanced %r fence, taking the remainder literally", opening)
            return ParseResult(s[1:], "")

        inner = parse_math_expression(s[1 : i - 1], shortcuts)
        if no_wrap and opening == "(":
            return ParseResult(inner, s[i:])
        if opening == "{":
            opening, closing = "\\{", "\\}"
        return ParseResult(f"\\left{opening}{inner}\\right{closing}", s[i:])

    if LETTERS.match(s):
        found = shortcuts.match(s)
        if found:
            trigger, template = found
            return ParseResult(strip_placeholders(template), s[len(trigger) :])
        return ParseResult(s[0], s[1:])

    m = NUMBER.match(s)
    if m:
        return ParseResult(m.group(), s[m.end() :])

    if not LEFT_RIGHT.match(s):
        m = COMMAND.match(s)
        if m:
            return ParseResult(m.group(), s[m.end() :])

    return ParseResult("", s)


def parse_math_expression(s: str, shortcuts: ShortcutTable) -> str:
    out: list[str] = []
    while s:
        # Superscript, subscript
        if s[0] in "^_":
            arg = parse_math_argument(s[1:], shortcuts, no_wrap=True)
            _emit(out, f"{s[0]}{{{arg.match}}}")
            s = arg.rest
            continue

        m = SQRT.match(s)
        if m:
            arg = parse_math_argument(s[m.end() :], shortcuts, no_wrap=True)
            _emit(out, f"\\sqrt{{{arg.match or PLACEHOLDER}}}")
            s = arg.rest
            continue

        m = CBRT.match(s)
        if m:
            arg = parse_math_argument(s[m.end() :], shortcuts, no_wrap=True)
            _emit(out, f"\\sqrt[3]{{{arg.match or PLACEHOLDER}}}")
            s = arg.rest
            continue

        if s.startswith("abs"):
            arg = parse_math_argument(s[3:], shortcuts, no_wrap=True)
            _emit(out, f"\\left|{arg.match or PLACEHOLDER}\\right|")
            s = arg.rest
            continue

        m = QUOTED.match(s)
        if m:
            _emit(out, f"\\text{{{m.group(1)}}}")
            s = s[m.end() :]
            continue

        # Operators, relations, punctuation...
        m = SYMBOLS.match(s)
        if m:
            _emit(out, padded_shortcut(m.group(), shortcuts))
            s = s[m.end() :]
            continue

        if FUNCTION_LETTER.match(s):
            arg = parse_math_argument(s[1:], shortcuts, no_wrap=True)
            if s[1] == "(":
                _emit(out, f"{s[0]}\\left({arg.match}\\right)")
            else:
                _emit(out, s[0] + arg.match)
            s = arg.rest
            continue

        # Function names (sin) and symbol names (alpha) alike
        m = LETTERS.match(s)
        if m:
            _emit(out, padded_shortcut(m.group(), shortcuts))
            s = s[m.end() :]
            continue

        arg = parse_math_argument(s, shortcuts, no_wrap=True)
        if arg.match and arg.rest.startswith("/"):
            denominator = parse_math_argument(arg.rest[1:], shortcuts, no_wrap=True)
            if not denominator.match:
                # TODO: decide whether "a/" should keep the converted numerator
                logger.debug("Fraction without denominator, leaving %r as is", s)
                _emit(out, s)
                break
            _emit(out, f"\\frac{{{arg.match}}}{{{denominator.match}}}")
            s = denominator.rest
            continue
        if arg.match:
            if s.startswith("("):
                _emit(out, f"\\left({arg.match}\\right)")
            else:
                _emit(out, arg.match)
            s = arg.rest
            continue

        m = WHITESPACE.match(s)
        if m:
            out.append(" ")
            s = s[m.end() :]
            continue

        _emit(out, s)
        break

    return "".join(out)
