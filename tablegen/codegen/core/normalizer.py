"""
Entity normalization.

Converts declared models and introspected tables into canonical
Entity objects: derives every name form, resolves field tags and
rejects duplicate entities, tables and fields.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from ...logging_config import get_logger
from .config import ConfigError, FieldConfig, ModelConfig
from .naming import lower_first, to_camel, to_snake
from .schema import Entity, Field, TableMetadata

logger = get_logger(__name__)

# Columns the generated code manages itself
IMPLICIT_COLUMNS = frozenset({"id", "created", "updated", "deleted"})

# Struct fields the generated code declares for those columns
IMPLICIT_FIELDS = frozenset(to_camel(column) for column in IMPLICIT_COLUMNS)

JSON_CLAUSE = 'json:"'


class DuplicateError(ConfigError):
    """Raised when two entities, tables or fields share a canonical name."""

    def __init__(self, scope: str, name: str, owner: Optional[str] = None):
        self.scope = scope
        self.name = name
        self.owner = owner
        if owner:
            message = f"duplicate defined: model: {owner}, {scope}: {name}"
        else:
            message = f"duplicate defined: {scope}: {name}"
        super().__init__(message)


def one_line(text: Optional[str]) -> Optional[str]:
    """Collapse a comment onto one line; generated comments are line comments."""
    if not text:
        return None
    return " ".join(str(text).split()) or None


def clean_tag(tag: Optional[str]) -> str:
    """Strip surrounding backticks and spaces from a user supplied tag."""
    return (tag or "").strip("`").strip(" ")


def resolve_tag(name: str, original_name: str, tag: Optional[str], persistent: bool = True) -> str:
    """
    Resolve the struct tag content of a field.

    Args:
        name: Canonical field name
        original_name: Field name before normalization, used as JSON key
        tag: Tag supplied by the user, if any
        persistent: Whether the owning entity is backed by a table

    Returns:
        Tag content without backticks; empty string for no tag
    """
    tag = clean_tag(tag)

    if name.startswith("_"):
        return tag

    if not tag:
        if persistent:
            return f'json:"{original_name}" orm:"column({original_name})"'
        return f'json:"{original_name}"'

    if JSON_CLAUSE not in tag.replace(" ", ""):
        return f'json:"{original_name}" {tag}'

    return tag


def normalize_fields(
    raw_fields: Iterable[FieldConfig], owner: str, persistent: bool = True
) -> List[Field]:
    """
    Normalize the fields of one entity.

    Args:
        raw_fields: Fields as declared or synthesized from columns
        owner: Canonical name of the owning entity, for error messages
        persistent: Whether the owning entity is backed by a table

    Returns:
        Normalized fields in input order

    Raises:
        ConfigError: For empty field names or types
        DuplicateError: When two fields share a canonical name, or a
            field collides with an implicit one
    """
    seen = set(IMPLICIT_FIELDS)
    result = []

    for raw in raw_fields:
        if not raw.name:
            raise ConfigError(f"field name can not be empty in model: {owner}")
        if not raw.type:
            raise ConfigError(f"field type can not be empty: model: {owner}, field: {raw.name}")

        name = to_camel(raw.name)
        if name in seen:
            raise DuplicateError("field", raw.name, owner=owner)
        seen.add(name)

        result.append(
            Field(
                name=name,
                original_name=raw.name,
                snake_name=to_snake(name),
                type=raw.type,
                tag=resolve_tag(name, raw.name, raw.tag, persistent),
                comment=one_line(raw.comment),
            )
        )

    return result


def _build_entity(
    original_name: str,
    table_name: str,
    raw_fields: Sequence[FieldConfig],
    comment: Optional[str],
) -> Entity:
    if not original_name:
        raise ConfigError("model name can not be empty")

    name = to_camel(original_name)
    snake_name = to_snake(name)

    return Entity(
        name=name,
        original_name=original_name,
        lower_name=name.lower(),
        snake_name=snake_name,
        lower_first_letter=name[:1].lower(),
        lower_first_name=lower_first(name),
        table_name=table_name or snake_name,
        fields=tuple(normalize_fields(raw_fields, name)),
        comment=one_line(comment),
    )


def entity_from_model(model: ModelConfig) -> Entity:
    """Build an entity from a model declared in the project file."""
    return _build_entity(model.name, model.table_name, model.fields, model.comment)


def entity_from_table(table: TableMetadata, map_type: Callable[[str], str]) -> Entity:
    """
    Build an entity from introspected table metadata.

    The implicit id/created/updated/deleted columns are dropped; the
    generated template declares them itself.

    Args:
        table: Table metadata from the schema loader
        map_type: Native column type to target type mapping

    Returns:
        Entity named after the table alias
    """
    raw_fields = []
    for column in table.columns:
        if column.name in IMPLICIT_COLUMNS:
            continue
        raw_fields.append(
            FieldConfig(
                name=column.name,
                type=map_type(column.native_type),
                comment=column.comment,
            )
        )

    alias = table.alias or table.name
    return _build_entity(alias, alias, raw_fields, None)


def check_duplicates(entities: Sequence[Entity]) -> None:
    """
    Reject entities sharing a canonical name, an output path or a table.

    Raises:
        DuplicateError: On the first duplicate found
    """
    names = set()
    snake_names = set()
    tables = set()

    for entity in entities:
        if entity.name in names:
            raise DuplicateError("model", entity.original_name)
        names.add(entity.name)

        # The snake name is the output directory and file name
        if entity.snake_name in snake_names:
            raise DuplicateError("snake_name", entity.snake_name)
        snake_names.add(entity.snake_name)

        if entity.table_name in tables:
            raise DuplicateError("table", entity.table_name)
        tables.add(entity.table_name)


def normalize_models(models: Sequence[ModelConfig]) -> List[Entity]:
    """Build and validate the entities declared in the project file."""
    entities = [entity_from_model(model) for model in models]
    check_duplicates(entities)
    return entities


def add_tables(
    entities: Sequence[Entity],
    tables: Sequence[TableMetadata],
    map_type: Callable[[str], str],
) -> List[Entity]:
    """
    Append introspected tables to already normalized entities.

    The combined list is checked for duplicates again, so a table
    clashing with a declared model is rejected.
    """
    entities = list(entities)
    entities.extend(entity_from_table(table, map_type) for table in tables)
    check_duplicates(entities)

    logger.info("Normalized %d entities", len(entities))
    for entity in entities:
        logger.debug(
            "Entity %s (table %s): %d field(s)",
            entity.name,
            entity.table_name,
            len(entity.fields),
        )
    return entities


def normalize_project(
    models: Sequence[ModelConfig],
    tables: Sequence[TableMetadata],
    map_type: Callable[[str], str],
) -> List[Entity]:
    """
    Build and validate every entity of a generation run.

    Declared models come first, followed by introspected tables in
    loading order.
    """
    return add_tables(normalize_models(models), tables, map_type)
