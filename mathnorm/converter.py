"""Convert a math string of unknown notation to canonical LaTeX.

Recognized input:

- LaTeX, with or without math-mode delimiters (``$...$``, ``\\(...\\)``,
  ``\\begin{equation}...``), including "JavaScript LaTeX" whose backslashes
  were escaped (``\\\\frac{1}{2}``).
- A subset of ASCIIMath (``1/2sin x``, ``sqrt(1+a)``), optionally between
  backticks as MathJax delimits it.
- A subset of UnicodeMath as produced by word processors (``√(x+1)``,
  ``〖a+b〗``, ``_a^b x``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal, Optional, Union

from .parsers.ascii_math import cleanup_ascii_math
from .parsers.expression_parser import parse_math_expression
from .parsers.format_parser import (
    OutputFormat,
    infer_format,
    trim_mode_shift_command,
    unescape_backslashes,
)
from .shortcuts import DEFAULT_SHORTCUTS, ShortcutDefinition, ShortcutTable

logger = logging.getLogger(__name__)

InputFormat = Literal["auto", "latex", "ascii-math"]
INPUT_FORMATS: tuple[str, ...] = ("auto", "latex", "ascii-math")


def _as_table(
    shortcuts: Optional[Union[ShortcutTable, Mapping[str, ShortcutDefinition]]]
) -> ShortcutTable:
    if shortcuts is None:
        return DEFAULT_SHORTCUTS
    if isinstance(shortcuts, ShortcutTable):
        return shortcuts
    return ShortcutTable(shortcuts)


def parse_math_string(
    s: str,
    *,
    format: InputFormat = "auto",
    shortcuts: Optional[Union[ShortcutTable, Mapping[str, ShortcutDefinition]]] = None,
) -> tuple[OutputFormat, str]:
    """Return ``(format, latex)`` for ``s``.

    With ``format="auto"`` the notation is inferred; a string that is not
    recognizably LaTeX is converted as ASCIIMath. An explicit format skips
    the inference. ``shortcuts`` defaults to ``DEFAULT_SHORTCUTS``.
    """
    if format not in INPUT_FORMATS:
        raise ValueError(f"Unsupported input format: {format!r}")

    detected: Optional[OutputFormat]
    if format == "auto":
        detected, s = infer_format(s)
    elif format == "latex":
        _, s = trim_mode_shift_command(s)
        return "latex", unescape_backslashes(s.strip())
    else:
        s = s.strip()
        if len(s) >= 2 and s.startswith("`") and s.endswith("`"):
            s = s[1:-1]
        detected = "ascii-math"

    if detected == "latex":
        return "latex", s

    logger.debug("Converting %r as ASCIIMath", s)
    s = cleanup_ascii_math(s)
    return "ascii-math", parse_math_expression(s, _as_table(shortcuts))
