from hypothesis import given, strategies as st

from stencil.method import MethodBuilder, Visibility

names = st.from_regex(r"[a-z][a-z0-9]{0,8}", fullmatch=True)


def test_empty_public_method() -> None:
    assert MethodBuilder.make_public("get_total").render() == [
        "public function getTotal()",
        "{",
        "}",
    ]


def test_named_constructors() -> None:
    assert MethodBuilder.make_private_static("build_instance").signature() == "private static function buildInstance()"
    assert MethodBuilder.make_protected_static("boot").signature() == "protected static function boot()"
    assert MethodBuilder.make_public_static("of").signature() == "public static function of()"
    assert MethodBuilder.make_constructor().signature() == "public function __construct()"
    assert MethodBuilder.make_private_constructor().signature() == "private function __construct()"


def test_abstract_method_has_no_body() -> None:
    method = (
        MethodBuilder.make_protected("handle")
        .set_abstract()
        .add_string_param("name")
        .add_raw_line("return 1;")
    )
    assert method.render() == ["protected abstract function handle(string $name);"]


def test_abstract_static_keyword_order() -> None:
    method = MethodBuilder("make", is_static=True).set_abstract()
    assert method.render() == ["public abstract static function make();"]


def test_parameter_rendering() -> None:
    method = (
        MethodBuilder("run")
        .add_param("a", True)
        .add_string_param("msg", 'he said "hi"')
        .add_param("c", None, "int")
        .add_array_param("opts", [1, 2])
        .add_float_param("ratio", 1.5)
        .add_mixed_param("userId")
    )
    assert method.signature() == (
        'public function run($a = true, string $msg = "he said \\"hi\\"", '
        "int $c, array $opts = [1,2], float $ratio = 1.5, mixed $user_id)"
    )


def test_readding_a_parameter_keeps_first_position() -> None:
    method = MethodBuilder("f").add_param("a", 1).add_param("b", 2).add_integer_param("a", 3)
    assert method.signature() == "public function f(int $a = 3, $b = 2)"


def test_unknown_visibility_is_ignored() -> None:
    method = MethodBuilder.make_private("x").set_visibility("internal")
    assert method.visibility is Visibility.PRIVATE
    method.set_visibility("PROTECTED")
    assert method.visibility is Visibility.PROTECTED


def test_flags_are_idempotent() -> None:
    method = MethodBuilder("x").set_static().set_static().set_abstract().set_abstract()
    assert method.is_static and method.is_abstract


def test_body_indentation() -> None:
    method = (
        MethodBuilder("run")
        .set_indentation(1)
        .add_raw_line("$x = 1;")
        .add_raw_line("return $x;", 2)
        .add_raw_line("")
    )
    assert method.render() == [
        "public function run()",
        "{",
        "    $x = 1;",
        "        return $x;",
        "",
        "}",
    ]


@given(st.lists(names, max_size=4), st.lists(st.text(max_size=20), max_size=4), st.booleans())
def test_abstract_signature_ends_with_terminator(params: list[str], body: list[str], static: bool) -> None:
    method = MethodBuilder("compute", is_static=static).set_abstract()
    for p in params:
        method.add_param(p)
    for ln in body:
        method.add_raw_line(ln)
    lines = method.render()
    assert len(lines) == 1
    assert lines[0].endswith(");")
    assert "{" not in lines[0] and "}" not in lines[0]


def test_non_ascii_parameter_names() -> None:
    method = MethodBuilder("f").add_param("ñame").add_param("名前")
    assert method.signature() == "public function f($ñame, $名前)"
