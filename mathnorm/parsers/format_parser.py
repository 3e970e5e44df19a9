from __future__ import annotations

import logging
import re
from typing import Literal, Optional

logger = logging.getLogger(__name__)

OutputFormat = Literal["latex", "ascii-math"]

# Order matters: "$$" must be tried before "$"
MODE_SHIFT_COMMANDS: tuple[tuple[str, str], ...] = (
    ("\\[", "\\]"),
    ("\\(", "\\)"),
    ("$$", "$$"),
    ("$", "$"),
    ("\\begin{math}", "\\end{math}"),
    ("\\begin{displaymath}", "\\end{displaymath}"),
    ("\\begin{equation}", "\\end{equation}"),
    ("\\begin{equation*}", "\\end{equation*}"),
)

INLINE_MATH = re.compile(r"\$.+\$", re.S)
SINGLE_BACKSLASH_COMMAND = re.compile(r"(?<!\\)\\[a-zA-Z]")
ESCAPED_COMMAND = re.compile(r"\\\\([a-zA-Z])")


def trim_mode_shift_command(s: str) -> tuple[bool, str]:
    """Strip one enclosing pair of math-mode delimiters, if there is one."""
    trimmed = s.strip()
    for opening, closing in MODE_SHIFT_COMMANDS:
        if (
            len(trimmed) > len(opening) + len(closing)
            and trimmed.startswith(opening)
            and trimmed.endswith(closing)
        ):
            return True, trimmed[len(opening) : len(trimmed) - len(closing)]
    return False, s


def unescape_backslashes(s: str) -> str:
    r"""Turn "JavaScript LaTeX" (``\\frac{1}{2}``) back into LaTeX.

    Left alone as soon as one real single-backslash command is present: the
    doubled backslashes are then line breaks, not escapes.
    """
    if SINGLE_BACKSLASH_COMMAND.search(s):
        return s
    return ESCAPED_COMMAND.sub(r"\\\1", s)


def infer_format(s: str) -> tuple[Optional[OutputFormat], str]:
    s = s.strip()

    # A single char is taken to be LaTeX already
    if len(s) <= 1:
        return "latex", s

    shifted, inner = trim_mode_shift_command(s)
    if shifted:
        logger.debug("Mode-shift delimiters stripped, treating as LaTeX")
        return "latex", inner

    # Backticks are MathJax's default ASCIIMath delimiters
    if s.startswith("`") and s.endswith("`"):
        return "ascii-math", s[1:-1]

    if "\\" in s:
        # UnicodeMath also has backslash commands, but {} are fences there
        # and groups in LaTeX, so one reading has to win.
        return "latex", unescape_backslashes(s)

    if INLINE_MATH.search(s):
        # Prose with inline math, e.g. "if $x<0$ then"
        return "latex", f"\\text{{{s}}}"

    return None, s
