import pytest

from mathnorm import parse_math_string
from mathnorm.parsers.ascii_math import cleanup_ascii_math
from mathnorm.shortcuts import ShortcutTable


@pytest.mark.parametrize(
    "s, expected",
    [
        ("1/2sin x", ("ascii-math", "\\frac{1}{2}\\sin x")),
        ("1/2sinx", ("ascii-math", "\\frac{1}{2}\\sin x")),
        ("sqrt(1+a)", ("ascii-math", "\\sqrt{1+a}")),
        ("f(x)", ("ascii-math", "f\\left(x\\right)")),
        ("`1/2`", ("ascii-math", "\\frac{1}{2}")),
        ("\u221a(x+1)", ("ascii-math", "\\sqrt{x+1}")),
        ("\u3016a+b\u3017", ("ascii-math", "\\left\\{a+b\\right\\}")),
        ("f\u2061(x)", ("ascii-math", "f\\left(x\\right)")),
        ("a \u2013 b", ("ascii-math", "a -b")),
        ("cosx", ("ascii-math", "\\cos x")),
    ],
)
def test_auto_format_converts_plain_text_math(s, expected):
    assert parse_math_string(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("x", "x"),
        ("  ", ""),
        ("$$x^2$$", "x^2"),
        ("\\(a+b\\)", "a+b"),
        ("\\\\frac{1}{2} \\\\sin x", "\\frac{1}{2} \\sin x"),
        ("\\frac{1}{2}", "\\frac{1}{2}"),
        ("if $x<0$ then", "\\text{if $x<0$ then}"),
    ],
)
def test_auto_format_passes_latex_through(s, expected):
    assert parse_math_string(s) == ("latex", expected)


def test_explicit_latex_skips_inference():
    assert parse_math_string("1/2", format="latex") == ("latex", "1/2")
    assert parse_math_string("$x$", format="latex") == ("latex", "x")


def test_explicit_ascii_math_skips_inference():
    assert parse_math_string("x", format="ascii-math") == ("ascii-math", "x")
    assert parse_math_string("`(a)/(b)`", format="ascii-math") == (
        "ascii-math",
        "\\frac{a}{b}",
    )


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError):
        parse_math_string("x", format="mathml")


def test_plain_mapping_is_accepted_as_shortcuts():
    assert parse_math_string("foo", shortcuts={"foo": "\\mathrm{foo}"}) == (
        "ascii-math",
        "\\mathrm{foo} ",
    )


def test_shortcut_table_is_not_consulted_for_latex():
    table = ShortcutTable({"x": "\\xi"})
    assert parse_math_string("x", shortcuts=table) == ("latex", "x")


@pytest.mark.parametrize(
    "s",
    ["(1/2sin x (x^(2+1)", "((((", ")))", "sqrt(", "\"open", "1/", "x^", "abs("],
)
def test_malformed_input_never_raises(s):
    fmt, latex = parse_math_string(s)
    assert fmt == "ascii-math"
    assert isinstance(latex, str)


def test_cleanup_does_not_touch_escaped_functions():
    assert cleanup_ascii_math("\\sinx") == "\\sinx"
    assert cleanup_ascii_math("sinx+cosx") == "sin x+cos x"


@pytest.mark.parametrize(
    "s, expected",
    [
        ("sinx", "\\sin x"),
        ("sinx+cosx", "\\sin x+\\cos x"),
        ("\\pi r", "\\pi r"),
    ],
)
def test_explicit_ascii_math_keeps_commands_apart_from_letters(s, expected):
    assert parse_math_string(s, format="ascii-math") == ("ascii-math", expected)
