from .converter import parse_math_string
from .parsers.expression_parser import parse_math_argument, parse_math_expression
from .parsers.format_parser import infer_format, trim_mode_shift_command
from .shortcuts import (
    DEFAULT_SHORTCUTS,
    ShortcutFileError,
    ShortcutTable,
    load_shortcuts,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SHORTCUTS",
    "ShortcutFileError",
    "ShortcutTable",
    "infer_format",
    "load_shortcuts",
    "parse_math_argument",
    "parse_math_expression",
    "parse_math_string",
    "trim_mode_shift_command",
]
