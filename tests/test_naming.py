from stencil.naming import to_camel_case, to_pascal_case, to_snake_case, upper_first


def test_snake_case() -> None:
    assert to_snake_case("totalAmount") == "total_amount"
    assert to_snake_case("HTTPServer") == "http_server"
    assert to_snake_case("some-thing") == "some_thing"
    assert to_snake_case("STATUS_PAID") == "status_paid"
    assert to_snake_case("already_snake") == "already_snake"


def test_pascal_case() -> None:
    assert to_pascal_case("user") == "User"
    assert to_pascal_case("user_profile") == "UserProfile"
    assert to_pascal_case("invoiceLine") == "InvoiceLine"
    assert to_pascal_case("Invoice") == "Invoice"


def test_camel_case() -> None:
    assert to_camel_case("get_total") == "getTotal"
    assert to_camel_case("getTotal") == "getTotal"
    assert to_camel_case("GetTotal") == "getTotal"


def test_leading_underscores_survive() -> None:
    assert to_camel_case("__construct") == "__construct"
    assert to_snake_case("_privateThing") == "_private_thing"
    assert to_pascal_case("__invoke") == "__Invoke"


def test_empty_and_upper_first() -> None:
    assert to_camel_case("") == ""
    assert to_snake_case("") == ""
    assert upper_first("model") == "Model"
    assert upper_first("") == ""


def test_non_ascii_letters_are_kept() -> None:
    assert to_snake_case("ñame") == "ñame"
    assert to_snake_case("名前") == "名前"
    assert to_snake_case("prénom-usuel") == "prénom_usuel"
    assert to_camel_case("über_größe") == "überGröße"
