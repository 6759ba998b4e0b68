"""
Core code generation components.

Provides the entity model, naming, normalization, configuration and
template utilities shared by all language generators.
"""

from .config import (
    ConfigError,
    ConfigManager,
    DbConfig,
    FieldConfig,
    ModelConfig,
    ProjectConfig,
    load_config,
)
from .generator import CodeGenerator, GenerationResult, GeneratorError
from .naming import lower_first, to_camel, to_snake
from .normalizer import (
    DuplicateError,
    add_tables,
    check_duplicates,
    entity_from_model,
    entity_from_table,
    normalize_fields,
    normalize_models,
    normalize_project,
    resolve_tag,
)
from .schema import ColumnInfo, Entity, Field, RenderedFile, TableMetadata
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Entity model
    "ColumnInfo",
    "Entity",
    "Field",
    "RenderedFile",
    "TableMetadata",
    # Naming utilities - language-agnostic
    "lower_first",
    "to_camel",
    "to_snake",
    # Normalization
    "DuplicateError",
    "add_tables",
    "check_duplicates",
    "entity_from_model",
    "entity_from_table",
    "normalize_fields",
    "normalize_models",
    "normalize_project",
    "resolve_tag",
    # Configuration system
    "ConfigError",
    "ConfigManager",
    "DbConfig",
    "FieldConfig",
    "ModelConfig",
    "ProjectConfig",
    "load_config",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
