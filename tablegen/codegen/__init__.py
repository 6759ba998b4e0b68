"""
tablegen code generation module.

Turns declared models and introspected tables into data-access source files.
"""

from .core.config import ConfigError, ProjectConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, GeneratorError
from .core.normalizer import DuplicateError, normalize_project
from .core.schema import ColumnInfo, Entity, Field, RenderedFile, TableMetadata
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    list_supported_languages,
)

__all__ = [
    "CodeGenerator",
    "ColumnInfo",
    "ConfigError",
    "DuplicateError",
    "Entity",
    "Field",
    "GenerationResult",
    "GeneratorError",
    "GeneratorRegistry",
    "ProjectConfig",
    "RegistryError",
    "RenderedFile",
    "TableMetadata",
    "get_generator",
    "list_supported_languages",
    "load_config",
    "normalize_project",
]
