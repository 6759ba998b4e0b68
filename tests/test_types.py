"""Tests for native type to Go type mapping."""
import pytest

from tablegen.codegen.core.config import ConfigError
from tablegen.codegen.languages.go.types import (
    GO_TYPE_MAP,
    GoTypeMapper,
    UnsupportedTypeError,
    map_type,
)


@pytest.mark.parametrize(
    "native, expected",
    [
        ("int(11)", "int32"),
        ("integer", "int32"),
        ("INTEGER", "int32"),
        ("tinyint(4)", "int8"),
        ("smallint(6)", "int16"),
        ("bigint(20) unsigned", "int64"),
        ("varchar(64)", "string"),
        ("VARCHAR(64)", "string"),
        ("char(2)", "string"),
        ("tinytext", "string"),
        ("longtext", "string"),
        ("json", "string"),
        ("datetime", "time.Time"),
        ("date", "time.Time"),
        ("timestamp", "time.Time"),
        ("time", "string"),
        ("decimal(10,2)", "float64"),
        ("double", "float64"),
        ("float", "float64"),
        ("bool", "bool"),
        ("boolean", "bool"),
    ],
)
def test_map_type(native, expected):
    assert map_type(native) == expected


@pytest.mark.parametrize("native", ["blob", "geometry", "uuid", ""])
def test_unsupported_type_fails(native):
    with pytest.raises(UnsupportedTypeError) as excinfo:
        map_type(native)

    assert "unsupported type" in str(excinfo.value)
    assert isinstance(excinfo.value, ConfigError)
    assert excinfo.value.native_type == native


def test_map_type_is_deterministic():
    assert {map_type("varchar(10)") for _ in range(5)} == {"string"}


def test_no_prefix_is_shadowed_by_an_earlier_entry():
    """An earlier prefix must never swallow a later, longer one."""
    prefixes = [prefix for prefix, _ in GO_TYPE_MAP]
    for i, earlier in enumerate(prefixes):
        for later in prefixes[i + 1:]:
            assert not later.startswith(earlier), (earlier, later)


def test_overrides_win_over_builtin_table():
    mapper = GoTypeMapper({"tinyint(1)": "bool", "BLOB": "[]byte"})

    assert mapper.map_type("tinyint(1)") == "bool"
    assert mapper.map_type("tinyint(4)") == "int8"
    assert mapper.map_type("blob") == "[]byte"
    assert mapper("varchar(3)") == "string"
