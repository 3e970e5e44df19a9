"""Inline shortcut table.

Maps trigger strings typed in plain text (``alpha``, ``sin``, ``<=``) to the
LaTeX that replaces them. A template may carry the placeholder tokens
``^{#?}`` / ``_{#?}`` marking where an interactive editor would put the
caret for a superscript or subscript; the converter strips them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

logger = logging.getLogger(__name__)

SUPERSCRIPT_PLACEHOLDER = "^{#?}"
SUBSCRIPT_PLACEHOLDER = "_{#?}"

# A definition is either the template itself or {"value": template, ...}
ShortcutDefinition = Union[str, Mapping[str, Any]]


class ShortcutFileError(ValueError):
    """Raised when a shortcut file cannot be turned into a table."""


def strip_placeholders(template: str) -> str:
    return template.replace(SUBSCRIPT_PLACEHOLDER, "").replace(
        SUPERSCRIPT_PLACEHOLDER, ""
    )


def _template_of(trigger: str, definition: ShortcutDefinition) -> str:
    if isinstance(definition, str):
        return definition
    if isinstance(definition, Mapping):
        value = definition.get("value")
        if isinstance(value, str):
            return value
    raise ShortcutFileError(f"Shortcut {trigger!r} has no string template")


class ShortcutTable(Mapping):
    """Read-only trigger -> template mapping.

    The table is built once and never mutated; to change shortcuts, build a
    new table (``merged``) and pass that one to the converter instead.
    """

    def __init__(self, definitions: Mapping[str, ShortcutDefinition] | None = None):
        templates: dict[str, str] = {}
        for trigger, definition in (definitions or {}).items():
            if not trigger:
                raise ShortcutFileError("Shortcut trigger must not be empty")
            templates[trigger] = _template_of(trigger, definition)
        self._templates = MappingProxyType(templates)
        # Distinct trigger lengths, longest first, for prefix probes in match()
        self._lengths = sorted({len(t) for t in templates}, reverse=True)

    def __getitem__(self, trigger: str) -> str:
        return self._templates[trigger]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"ShortcutTable({len(self)} shortcuts)"

    def match(self, s: str) -> tuple[str, str] | None:
        """Return ``(trigger, template)`` for the longest trigger prefixing ``s``."""
        for length in self._lengths:
            if length > len(s):
                continue
            template = self._templates.get(s[:length])
            if template is not None:
                return s[:length], template
        return None

    def lookup(self, s: str) -> str | None:
        found = self.match(s)
        return found[1] if found else None

    def merged(self, definitions: Mapping[str, ShortcutDefinition]) -> "ShortcutTable":
        """New table with ``definitions`` layered over this one."""
        combined: dict[str, ShortcutDefinition] = dict(self._templates)
        combined.update(definitions)
        return ShortcutTable(combined)


_GREEK = [
    "alpha", "beta", "gamma", "delta", "epsilon", "varepsilon", "zeta", "eta",
    "theta", "vartheta", "iota", "kappa", "lambda", "mu", "nu", "xi", "pi",
    "varpi", "rho", "varrho", "sigma", "varsigma", "tau", "upsilon", "phi",
    "varphi", "chi", "psi", "omega",
    "Gamma", "Delta", "Theta", "Lambda", "Xi", "Pi", "Sigma", "Upsilon",
    "Phi", "Psi", "Omega",
]

_FUNCTIONS = [
    "sin", "cos", "tan", "cot", "sec", "csc", "sinh", "cosh", "tanh", "coth",
    "arcsin", "arccos", "arctan", "exp", "ln", "log", "det", "dim", "gcd",
    "deg", "ker", "arg", "min", "max", "sup", "inf",
]

_DEFAULTS: dict[str, str] = {
    **{name: "\\" + name for name in _GREEK},
    **{name: "\\" + name for name in _FUNCTIONS},
    "lim": "\\lim_{#?}",
    "liminf": "\\liminf_{#?}",
    "limsup": "\\limsup_{#?}",
    "sum": "\\sum_{#?}^{#?}",
    "prod": "\\prod_{#?}^{#?}",
    "int": "\\int_{#?}^{#?}",
    "iint": "\\iint_{#?}^{#?}",
    "oint": "\\oint_{#?}^{#?}",
    "bigcup": "\\bigcup_{#?}^{#?}",
    "bigcap": "\\bigcap_{#?}^{#?}",
    "grad": "\\nabla",
    "del": "\\partial",
    "oo": "\\infty",
    "infty": "\\infty",
    "AA": "\\forall",
    "EE": "\\exists",
    "in": "\\in",
    "notin": "\\notin",
    "sub": "\\subset",
    "sube": "\\subseteq",
    "supe": "\\supseteq",
    "uu": "\\cup",
    "nn": "\\cap",
    "xx": "\\times",
    "and": "\\land",
    "or": "\\lor",
    "not": "\\neg",
    "NN": "\\N",
    "ZZ": "\\Z",
    "QQ": "\\Q",
    "RR": "\\R",
    "CC": "\\C",
    "PP": "\\P",
    "+-": "\\pm",
    "-+": "\\mp",
    "**": "\\cdot",
    "!=": "\\ne",
    "<=": "\\le",
    ">=": "\\ge",
    "<<": "\\ll",
    ">>": "\\gg",
    "~~": "\\approx",
    "-=": "\\equiv",
    "->": "\\to",
    "|->": "\\mapsto",
    "=>": "\\implies",
    "<=>": "\\iff",
    "...": "\\ldots",
    "≠": "\\ne",
    "≤": "\\le",
    "≥": "\\ge",
    "±": "\\pm",
    "×": "\\times",
    "·": "\\cdot",
    "→": "\\to",
    "∞": "\\infty",
    "∈": "\\in",
    "∀": "\\forall",
    "∃": "\\exists",
}

DEFAULT_SHORTCUTS = ShortcutTable(_DEFAULTS)


def load_shortcuts(path: str | Path, *, extend_default: bool = True) -> ShortcutTable:
    """Build a table from a JSON object file ``{"trigger": template, ...}``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ShortcutFileError(f"Cannot read shortcut file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ShortcutFileError(f"Shortcut file {path} must contain a JSON object")

    table = DEFAULT_SHORTCUTS.merged(data) if extend_default else ShortcutTable(data)
    logger.debug("Loaded %d shortcuts from %s", len(table), path)
    return table
