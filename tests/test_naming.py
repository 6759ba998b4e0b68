"""Tests for name conversions."""
import pytest

from tablegen.codegen.core.naming import lower_first, to_camel, to_snake


@pytest.mark.parametrize(
    "name, expected",
    [
        ("user_profile", "UserProfile"),
        ("nick_name", "NickName"),
        ("UserProfile", "UserProfile"),
        ("user-profile", "UserProfile"),
        ("user profile", "UserProfile"),
        ("_foo_bar", "_FooBar"),
        ("id", "Id"),
        ("a", "A"),
        ("user_ID", "User_ID"),
        ("order_2", "Order_2"),
    ],
)
def test_to_camel(name, expected):
    assert to_camel(name) == expected


@pytest.mark.parametrize(
    "name",
    ["user_profile", "_foo_bar", "user_ID", "a__b", "HTTPServer", "x-y z", "order_2"],
)
def test_to_camel_is_idempotent(name):
    """Applying to_camel twice changes nothing."""
    assert to_camel(to_camel(name)) == to_camel(name)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("UserProfile", "user_profile"),
        ("NickName", "nick_name"),
        ("_Foo", "_foo"),
        ("ID", "id"),
        ("User2Name", "user2name"),
        ("already_snake", "already_snake"),
    ],
)
def test_to_snake(name, expected):
    assert to_snake(name) == expected


def test_round_trip_is_lossy():
    """The original delimiter and acronym casing do not survive."""
    assert to_snake(to_camel("user-profile")) == "user_profile"
    assert to_snake(to_camel("HTTPServer")) == "httpserver"


def test_lower_first():
    assert lower_first("UserProfile") == "userProfile"
    assert lower_first("x") == "x"
