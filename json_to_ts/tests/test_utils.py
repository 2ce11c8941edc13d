import pytest

from json_to_ts.utils import (
    capitalize_first,
    enum_member_key,
    is_bare_property_name,
    sanitize_type_name,
    snake_to_pascal_case,
    to_camel_case,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("user_name", "userName"),
        ("user_name_id", "userNameId"),
        ("userName", "userName"),
        ("_private", "Private"),
        ("trailing_", "trailing_"),
        ("HTTP_Code", "HTTP_Code"),
        ("version_2", "version_2"),
        ("a__b", "a_B"),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("RootObject", "RootObject"),
        ("my-type", "mytype"),
        ("Root User!", "RootUser"),
        ("snake_name", "snake_name"),
        ("9lives", "_9lives"),
        ("---", ""),
    ],
)
def test_sanitize_type_name(text, expected):
    assert sanitize_type_name(text) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("admin", "admin"),
        ("in-progress", "in_progress"),
        ("2fa", "_2fa"),
        ("", "_"),
        ("a.b c", "a_b_c"),
    ],
)
def test_enum_member_key(value, expected):
    assert enum_member_key(value) == expected


@pytest.mark.parametrize(
    "key,expected",
    [
        ("id", True),
        ("$ref", True),
        ("_x1", True),
        ("1x", False),
        ("a-b", False),
        ("", False),
        ("a b", False),
    ],
)
def test_is_bare_property_name(key, expected):
    assert is_bare_property_name(key) is expected


def test_capitalize_first():
    assert capitalize_first("roles") == "Roles"
    assert capitalize_first("userName") == "UserName"
    assert capitalize_first("") == ""


@pytest.mark.parametrize(
    "text,expected",
    [
        ("user_profile", "UserProfile"),
        ("api-response", "ApiResponse"),
        ("data", "Data"),
        ("", ""),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected
