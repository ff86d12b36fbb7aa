from hypothesis import given, strategies as st

from stencil.comment import CommentKind, DocComment

names = st.from_regex(r"[a-z][a-zA-Z0-9]{0,10}", fullmatch=True)


def test_field_comment() -> None:
    doc: DocComment = DocComment.for_field("string", "  The user name.  ")
    assert doc.kind is CommentKind.FIELD
    assert doc.render() == [
        "/**",
        " * The user name.",
        " *",
        " * @var string",
        " */",
    ]


def test_typed_field_factories() -> None:
    assert DocComment.for_bool_field("Flag.").field_type == "bool"
    assert DocComment.for_array_field("Items.").field_type == "array"
    assert DocComment.for_mixed_field("Anything.").render()[3] == " * @var mixed"


def test_method_comment_lists_params_in_order() -> None:
    doc = (
        DocComment.for_method("Add two numbers.")
        .add_integer_parameter("firstValue", "left operand")
        .add_integer_parameter("b")
        .return_int()
    )
    assert doc.render() == [
        "/**",
        " * Add two numbers.",
        " *",
        " * @param int $first_value left operand",
        " * @param int $b",
        " * @return int",
        " */",
    ]


def test_method_comment_without_params_has_one_return() -> None:
    lines = DocComment.for_method("Does a thing.").render()
    assert [ln for ln in lines if "@return" in ln] == [" * @return void"]
    assert not any("@param" in ln for ln in lines)
    assert not any("@var" in ln for ln in lines)


def test_duplicate_parameter_keeps_slot_takes_latest() -> None:
    doc = (
        DocComment.for_method("x")
        .add_string_parameter("a", "first")
        .add_float_parameter("b")
        .add_bool_parameter("a", "second")
    )
    assert doc.render()[3:5] == [" * @param bool $a second", " * @param float $b"]


def test_missing_description_is_empty() -> None:
    doc = DocComment(CommentKind.METHOD).return_string()
    assert doc.render()[:3] == ["/**", " *", " *"]
    assert doc.is_method and not doc.is_field


@given(st.lists(names, max_size=5), st.sampled_from(["int", "string", "array"]))
def test_field_comment_never_renders_params_or_return(params: list[str], field_type: str) -> None:
    doc = DocComment.for_field(field_type, "A field.")
    for p in params:
        doc.add_mixed_parameter(p, "ignored")
    doc.return_array()
    lines = doc.render()
    assert not any("@param" in ln or "@return" in ln for ln in lines)
    assert lines.count(f" * @var {field_type}") == 1


@given(st.lists(names, max_size=5))
def test_method_comment_has_exactly_one_return(params: list[str]) -> None:
    doc = DocComment.for_method("A method.").set_field_type("int")
    for p in params:
        doc.add_mixed_parameter(p)
    lines = doc.render()
    assert sum(1 for ln in lines if "@return" in ln) == 1
    assert not any("@var" in ln for ln in lines)
