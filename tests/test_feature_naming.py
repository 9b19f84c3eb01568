"""Tests for feature naming utilities."""
from app.generators.feature_gen.naming import (
    capitalize_first,
    create_default_options,
    is_valid_variable_name,
    js_quote,
    pluralize,
    sanitize_variable_name,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


def test_case_conversions():
    assert to_camel_case("first name") == "firstName"
    assert to_camel_case("Hello   big world") == "helloBigWorld"
    assert to_pascal_case("hello world") == "HelloWorld"
    assert to_pascal_case("hELLO wORLD") == "HelloWorld"
    assert to_snake_case("HelloWorld") == "hello_world"
    assert to_snake_case("createdAt") == "created_at"
    assert to_snake_case("Hello World") == "hello_world"
    assert to_snake_case("__foo") == "_foo"
    assert to_snake_case("_Foo") == "_foo"
    assert to_kebab_case("-Foo") == "-foo"
    assert to_kebab_case("HelloWorld") == "hello-world"
    assert to_kebab_case("order item") == "order-item"


def test_pluralize_regular_and_irregular():
    assert pluralize("Person") == "People"
    assert pluralize("person") == "people"
    assert pluralize("box") == "boxes"
    assert pluralize("church") == "churches"
    assert pluralize("category") == "categories"
    assert pluralize("day") == "days"
    assert pluralize("Order") == "Orders"
    assert pluralize("Datum") == "Data"
    assert pluralize("") == ""


def test_pluralize_is_not_idempotent():
    """Already plural input is pluralized again."""
    assert pluralize(pluralize("box")) == "boxeses"


def test_sanitize_variable_name_produces_valid_identifiers():
    samples = ["", "name", "my-field", "123abc", "hello world", "$ok", "a.b.c", "ñame", "__", "-"]
    for sample in samples:
        once = sanitize_variable_name(sample)
        assert is_valid_variable_name(once), f"{sample!r} -> {once!r}"
        assert sanitize_variable_name(once) == once

    assert sanitize_variable_name("my-field") == "my_field"
    assert sanitize_variable_name("123abc") == "_123abc"
    assert sanitize_variable_name("") == "_"


def test_is_valid_variable_name():
    assert is_valid_variable_name("product")
    assert is_valid_variable_name("_private")
    assert is_valid_variable_name("$store")
    assert not is_valid_variable_name("1st")
    assert not is_valid_variable_name("with space")
    assert not is_valid_variable_name("")
    assert not is_valid_variable_name("abc\n")
    assert not is_valid_variable_name("abc\n\n")


def test_create_default_options():
    options = create_default_options("status color")
    assert options == [
        {"label": "status color Option 1", "value": "statusColor_option_1"},
        {"label": "status color Option 2", "value": "statusColor_option_2"},
        {"label": "status color Option 3", "value": "statusColor_option_3"},
    ]
    assert len(create_default_options("x", count=5)) == 5


def test_small_helpers():
    assert capitalize_first("orderItems") == "OrderItems"
    assert capitalize_first("") == ""
    assert js_quote("it's") == "'it\\'s'"
    assert js_quote("a\nb") == "'a\\nb'"
