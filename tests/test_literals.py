from stencil.literals import format_constant, format_literal


def test_booleans_are_bare_keywords() -> None:
    assert format_literal(True) == "true"
    assert format_literal(False) == "false"


def test_strings_are_double_quoted_and_escaped() -> None:
    assert format_literal('he said "hi"') == '"he said \\"hi\\""'
    assert format_literal("C:\\tmp") == '"C:\\\\tmp"'
    assert format_literal("") == '""'


def test_arrays_are_compact_json() -> None:
    assert format_literal([1, "a", None]) == '[1,"a",null]'
    assert format_literal(("x", 2)) == '["x",2]'
    assert format_literal({"a": 1, "b": [True]}) == '{"a":1,"b":[true]}'


def test_numbers_use_natural_text() -> None:
    assert format_literal(0) == "0"
    assert format_literal(-12) == "-12"
    assert format_literal(2.5) == "2.5"


def test_absent_value() -> None:
    assert format_literal(None) is None
    assert format_constant(None) == "null"
    assert format_constant("paid") == '"paid"'


def test_non_finite_floats_use_php_constants() -> None:
    assert format_literal(float("inf")) == "INF"
    assert format_literal(float("-inf")) == "-INF"
    assert format_literal(float("nan")) == "NAN"
