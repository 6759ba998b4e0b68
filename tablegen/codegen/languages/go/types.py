"""
Go-specific type system for code generation.

Maps native database column types to Go types by prefix.
"""

from typing import Dict, List, Optional, Tuple

from ...core.config import ConfigError

# Ordered (prefix, Go type) pairs. An entry whose prefix is itself a
# prefix of another entry must come after that entry.
GO_TYPE_MAP: List[Tuple[str, str]] = [
    ("tinyint", "int8"),
    ("smallint", "int16"),
    ("mediumint", "int32"),
    ("bigint", "int64"),
    ("int", "int32"),
    ("varchar", "string"),
    ("char", "string"),
    ("tinytext", "string"),
    ("mediumtext", "string"),
    ("longtext", "string"),
    ("text", "string"),
    ("json", "string"),
    ("enum", "string"),
    ("set", "string"),
    ("datetime", "time.Time"),
    ("date", "time.Time"),
    ("timestamp", "time.Time"),
    ("time", "string"),
    ("year", "string"),
    ("decimal", "float64"),
    ("numeric", "float64"),
    ("float", "float64"),
    ("double", "float64"),
    ("real", "float64"),
    ("bool", "bool"),
]


class UnsupportedTypeError(ConfigError):
    """Raised for a native column type with no Go mapping."""

    def __init__(self, native_type: str):
        self.native_type = native_type
        super().__init__(f"unsupported type {native_type}")


class GoTypeMapper:
    """
    Maps native column types to Go types.

    Overrides are matched before the built-in table, by the same
    prefix rule.
    """

    def __init__(self, type_overrides: Optional[Dict[str, str]] = None):
        """Initialize with optional {prefix: go type} overrides."""
        self._overrides = [
            (prefix.strip().lower(), go_type)
            for prefix, go_type in (type_overrides or {}).items()
        ]

    def map_type(self, native_type: str) -> str:
        """
        Map a native column type to a Go type.

        Args:
            native_type: Type as reported by the database, e.g. ``varchar(64)``

        Returns:
            Go type name

        Raises:
            UnsupportedTypeError: If no prefix matches
        """
        normalized = native_type.strip().lower()

        for prefix, go_type in self._overrides:
            if normalized.startswith(prefix):
                return go_type

        for prefix, go_type in GO_TYPE_MAP:
            if normalized.startswith(prefix):
                return go_type

        raise UnsupportedTypeError(native_type)

    def __call__(self, native_type: str) -> str:
        return self.map_type(native_type)


_default_mapper = GoTypeMapper()


def map_type(native_type: str) -> str:
    """Map a native column type with the built-in table only."""
    return _default_mapper.map_type(native_type)
