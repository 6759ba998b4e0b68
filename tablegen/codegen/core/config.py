"""
Configuration management for code generation.

Loads YAML project files describing explicit models and database
connections, and maps them onto typed configuration objects.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import yaml

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FORMATTER = ["gofmt", "-w"]
DEFAULT_LANGUAGE = "go"
YAML_SUFFIXES = {".yaml", ".yml"}

T = TypeVar("T")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class FieldConfig:
    """A field as declared in the project file."""

    name: str
    type: str = ""
    tag: str = ""
    comment: Optional[str] = None


@dataclass
class ModelConfig:
    """A model as declared in the project file."""

    name: str
    fields: List[FieldConfig] = field(default_factory=list)
    table_name: str = ""
    comment: Optional[str] = None


@dataclass
class DbConfig:
    """Connection and table selection for schema introspection."""

    name: str = ""
    database: str = ""
    username: str = ""
    password: str = ""
    host: str = "127.0.0.1"
    port: int = 3306
    table: str = "*"
    alias_name: str = ""
    driver: str = "mysql+pymysql"
    charset: str = "utf8mb4"
    url: Optional[str] = None


@dataclass
class ProjectConfig:
    """Everything a generation run needs."""

    name: str = ""
    language: str = DEFAULT_LANGUAGE
    output_dir: str = "."
    formatter: List[str] = field(default_factory=lambda: list(DEFAULT_FORMATTER))
    models: List[ModelConfig] = field(default_factory=list)
    db_configs: List[DbConfig] = field(default_factory=list)

    # Language specific section, e.g. the ``go:`` mapping
    generator_options: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Loads project files and converts them to ProjectConfig."""

    TOP_LEVEL_KEYS = {"language", "output_dir", "formatter", "models", "db_config"}

    def load(self, config_file: Union[str, Path]) -> ProjectConfig:
        """
        Load a project file.

        Args:
            config_file: Path to the YAML project file

        Returns:
            Parsed project configuration
        """
        path = Path(config_file)
        data = self._load_config_file(path)
        config = self.from_dict(data, name=path.stem)
        logger.info(
            "Loaded %s: %d model(s), %d db config(s)",
            path,
            len(config.models),
            len(config.db_configs),
        )
        return config

    def _load_config_file(self, path: Path) -> Dict[str, Any]:
        """Load the raw mapping from a YAML file."""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() not in YAML_SUFFIXES:
            raise ConfigError(f"Configuration file must be YAML: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {path}")

        return data

    def from_dict(self, data: Dict[str, Any], name: str = "") -> ProjectConfig:
        """Convert a parsed mapping into ProjectConfig."""
        language = str(data.get("language") or DEFAULT_LANGUAGE).lower()

        for key in data:
            if key not in self.TOP_LEVEL_KEYS and key != language:
                logger.warning("Ignoring unknown configuration key: %s", key)

        formatter = data.get("formatter", DEFAULT_FORMATTER)
        if formatter is None:
            formatter = []
        elif isinstance(formatter, str):
            formatter = formatter.split()
        elif not isinstance(formatter, list):
            raise ConfigError("formatter must be a command string or list")

        options = data.get(language) or {}
        if not isinstance(options, dict):
            raise ConfigError(f"'{language}' section must be a mapping")

        return ProjectConfig(
            name=name,
            language=language,
            output_dir=str(data.get("output_dir") or "."),
            formatter=[str(part) for part in formatter],
            models=[
                self._model_from_dict(item)
                for item in self._as_list(data, "models")
            ],
            db_configs=[
                self._db_from_dict(item) for item in self._as_list(data, "db_config")
            ],
            generator_options=options,
        )

    def _as_list(self, data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        items = data.get(key) or []
        if not isinstance(items, list):
            raise ConfigError(f"'{key}' must be a list")
        for item in items:
            if not isinstance(item, dict):
                raise ConfigError(f"Every entry of '{key}' must be a mapping")
        return items

    def _model_from_dict(self, item: Dict[str, Any]) -> ModelConfig:
        raw_fields = item.get("fields") or []
        if not isinstance(raw_fields, list):
            raise ConfigError(f"fields of model {item.get('name')!r} must be a list")

        model_fields = []
        for raw in raw_fields:
            if not isinstance(raw, dict):
                raise ConfigError(
                    f"Every field of model {item.get('name')!r} must be a mapping"
                )
            raw = dict(raw, name=_name_of(raw))
            model_fields.append(_dict_to_dataclass(FieldConfig, raw, "field"))

        values = {k: v for k, v in item.items() if k != "fields"}
        values["name"] = _name_of(item)
        model = _dict_to_dataclass(ModelConfig, values, "model")
        model.fields = model_fields
        return model

    def _db_from_dict(self, item: Dict[str, Any]) -> DbConfig:
        db = _dict_to_dataclass(DbConfig, item, "db_config")
        try:
            db.port = int(db.port) if db.port else 3306
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid port for db_config {db.name!r}: {db.port}") from e
        return db

    def validate(self, config: ProjectConfig) -> List[str]:
        """
        Validate a project configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.models and not config.db_configs:
            warnings.append("Project defines no models and no db_config entries")

        for db in config.db_configs:
            label = db.name or db.database or "<url>"
            if not db.table.strip():
                warnings.append(f"db_config {label}: empty table filter selects nothing")
            if not db.url:
                if not 0 < db.port < 65536:
                    warnings.append(f"db_config {label}: invalid port {db.port}")
                if not db.database:
                    warnings.append(f"db_config {label}: no database name")

        if not config.formatter:
            warnings.append("No formatter configured; generated files stay unformatted")

        return warnings


def _name_of(item: Dict[str, Any]) -> str:
    name = item.get("name")
    return "" if name is None else str(name)


def _dict_to_dataclass(cls: Type[T], data: Dict[str, Any], where: str) -> T:
    """Build a config dataclass, ignoring unknown keys."""
    known = {f.name for f in dataclass_fields(cls)}
    args = {}

    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown %s key: %s", where, key)
            continue
        if value is None:
            continue
        # YAML turns names like 123 or yes into non-strings
        if isinstance(value, (int, float, bool)) and key != "port":
            value = str(value)
        args[key] = value

    try:
        return cls(**args)
    except TypeError as e:
        raise ConfigError(f"Invalid {where} entry {data!r}: {e}") from e


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(config_file: Union[str, Path]) -> ProjectConfig:
    """Convenience function to load a project file."""
    return get_config_manager().load(config_file)
