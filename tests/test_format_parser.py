import pytest

from mathnorm.parsers.format_parser import (
    MODE_SHIFT_COMMANDS,
    infer_format,
    trim_mode_shift_command,
    unescape_backslashes,
)


@pytest.mark.parametrize("s", ["", "x", "+", "  y  ", "\\", "`"])
def test_single_char_is_latex(s):
    assert infer_format(s) == ("latex", s.strip())


@pytest.mark.parametrize("opening, closing", MODE_SHIFT_COMMANDS)
def test_trim_then_rewrap_reproduces_input(opening, closing):
    wrapped = f"{opening}x^2+1{closing}"
    trimmed, inner = trim_mode_shift_command(wrapped)
    assert trimmed is True
    assert inner == "x^2+1"
    assert f"{opening}{inner}{closing}" == wrapped


def test_double_dollar_is_tried_before_single_dollar():
    assert trim_mode_shift_command("$$x$$") == (True, "x")
    assert trim_mode_shift_command("$x$") == (True, "x")


def test_trim_is_not_recursive():
    assert trim_mode_shift_command("$$\\(x\\)$$") == (True, "\\(x\\)")


def test_trim_leaves_unwrapped_strings_untouched():
    assert trim_mode_shift_command("  x+1 ") == (False, "  x+1 ")
    assert trim_mode_shift_command("$") == (False, "$")
    assert trim_mode_shift_command("$$") == (False, "$$")


def test_mode_shift_classified_as_latex():
    assert infer_format("\\[ \\frac{a}{b} \\]") == ("latex", " \\frac{a}{b} ")
    assert infer_format("  $$x^2$$ ") == ("latex", "x^2")
    assert infer_format("\\begin{equation*}E=mc^2\\end{equation*}") == (
        "latex",
        "E=mc^2",
    )


def test_backticks_mark_ascii_math():
    assert infer_format("`1/2`") == ("ascii-math", "1/2")


@pytest.mark.parametrize(
    "s",
    ["\\alpha+1", "x \\le 2", "√(x) + \\pi", "`a\\b", "a\\\\b"],
)
def test_backslash_always_latex(s):
    fmt, _ = infer_format(s)
    assert fmt == "latex"


def test_escaped_backslashes_are_unescaped():
    assert infer_format("\\\\frac{1}{2} \\\\sin x") == ("latex", "\\frac{1}{2} \\sin x")


def test_line_breaks_kept_when_real_commands_present():
    s = "\\frac{a}{b} \\\\ \\\\x"
    assert unescape_backslashes(s) == s


def test_inline_math_in_prose_wrapped_as_text():
    assert infer_format("if $x<0$ then") == ("latex", "\\text{if $x<0$ then}")


def test_undetermined():
    assert infer_format(" 1/2sin x ") == (None, "1/2sin x")


@pytest.mark.parametrize(
    "s",
    ["\\\\frac{1}{2} \\\\sin x", "\\sqrt{2}", "if $x<0$ then", "x \\\\ y"],
)
def test_latex_classification_is_idempotent(s):
    fmt, once = infer_format(s)
    assert fmt == "latex"
    assert infer_format(once) == ("latex", once)
