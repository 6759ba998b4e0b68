"""
Go code generator implementation.

Generates beego ORM model packages with JSON and ORM struct tags.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import Entity
from .config import GoConfig
from .naming import receiver_name, validate_go_package_name
from .types import GoTypeMapper

MODEL_TEMPLATE = "model.go.j2"


class GoGenerator(CodeGenerator):
    """Code generator for Go data-access models."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """Initialize Go generator from the ``go:`` options."""
        super().__init__(options)
        self.go_config = GoConfig.from_dict(self.options)
        self.type_mapper = GoTypeMapper(self.go_config.type_overrides)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def map_type(self, native_type: str) -> str:
        return self.type_mapper.map_type(native_type)

    def render(self, entity: Entity) -> bytes:
        """Render the model package source for one entity."""
        if not self.template_exists(MODEL_TEMPLATE):
            raise GeneratorError(f"{MODEL_TEMPLATE} template not found")

        context = {
            "entity": entity,
            "receiver": receiver_name(entity.name),
            "models_import": self.go_config.models_import,
            "utils_import": self.go_config.utils_import,
            "orm_import": self.go_config.orm_import,
            "cache_ttl": self.go_config.cache_ttl,
        }
        return self.render_template(MODEL_TEMPLATE, context).encode("utf-8")

    def validate_entities(self, entities: Sequence[Entity]) -> List[str]:
        """Validate entities for Go generation."""
        warnings = super().validate_entities(entities)

        for entity in entities:
            for problem in validate_go_package_name(entity.lower_name):
                warnings.append(f"Model {entity.name}: {problem}")

            for field in entity.fields:
                if not field.name.isidentifier():
                    warnings.append(
                        f"Field {entity.name}.{field.original_name} becomes "
                        f"'{field.name}', which is not a valid Go identifier"
                    )

        return warnings
