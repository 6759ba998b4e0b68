"""
Core entity representation for code generation.

Holds the normalized, immutable structures that flow between the
pipeline stages: table metadata from the schema loader, entities and
fields from the normalizer, and rendered files from the generators.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ColumnInfo:
    """A single column as reported by database introspection."""

    name: str
    native_type: str
    nullable: bool = True
    primary_key: bool = False
    comment: Optional[str] = None


@dataclass(frozen=True)
class TableMetadata:
    """Columns of one introspected table, consumed once to build an Entity."""

    name: str
    alias: str
    columns: Tuple[ColumnInfo, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Field:
    """Represents a single field of a generated model."""

    name: str  # Canonical CamelCase name
    original_name: str  # Name as written in config or database
    snake_name: str
    type: str
    tag: str = ""  # Resolved tag content, without backticks
    comment: Optional[str] = None

    @property
    def suppressed(self) -> bool:
        """Fields starting with an underscore stay out of column lists."""
        return self.name.startswith("_")


@dataclass(frozen=True)
class Entity:
    """Represents one generated data-access unit, mapped to one table."""

    name: str  # Canonical CamelCase name
    original_name: str
    lower_name: str
    snake_name: str
    lower_first_letter: str
    lower_first_name: str
    table_name: str
    fields: Tuple[Field, ...] = field(default_factory=tuple)
    comment: Optional[str] = None

    @property
    def columns(self) -> Tuple[Field, ...]:
        """Fields that take part in generated queries and updates."""
        return tuple(f for f in self.fields if not f.suppressed)

    @property
    def column_list(self) -> str:
        """Backtick-quoted original names of the query columns, in order."""
        return ", ".join(f"`{f.original_name}`" for f in self.columns)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by canonical name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class RenderedFile:
    """Generated source for one entity, relative to the output root."""

    path: str
    content: bytes
