"""
Go-specific configuration and validation.

Reads the ``go:`` section of a project file.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict

from ....logging_config import get_logger
from ...core.config import ConfigError

logger = get_logger(__name__)


@dataclass
class GoConfig:
    """Settings for the generated Go model packages."""

    models_import: str = "app/models"
    utils_import: str = "app/utils"
    orm_import: str = "github.com/astaxie/beego/orm"

    # Seconds a Get<Model> result stays cached
    cache_ttl: int = 60

    # {native type prefix: Go type}, checked before the built-in table
    type_overrides: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self._validate_go_settings()

    def _validate_go_settings(self):
        """Validate Go-specific configuration."""
        try:
            self.cache_ttl = int(self.cache_ttl)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid cache_ttl: {self.cache_ttl}") from e

        if self.cache_ttl < 0:
            raise ConfigError(f"Invalid cache_ttl: {self.cache_ttl}")

        if not isinstance(self.type_overrides, dict):
            raise ConfigError("type_overrides must be a mapping")
        self.type_overrides = {
            str(prefix): str(go_type) for prefix, go_type in self.type_overrides.items()
        }

        for name in ("models_import", "utils_import", "orm_import"):
            if not str(getattr(self, name)).strip():
                raise ConfigError(f"{name} can not be empty")

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "GoConfig":
        """Create a GoConfig from the raw ``go:`` mapping."""
        known = {f.name for f in fields(cls)}
        args = {}
        for key, value in (options or {}).items():
            if key in known:
                args[key] = value
            else:
                logger.warning("Ignoring unknown go option: %s", key)
        return cls(**args)
