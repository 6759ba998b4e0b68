"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .schema import Entity, RenderedFile
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """Initialize generator with the language section of the project file."""
        self.options = options or {}
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def map_type(self, native_type: str) -> str:
        """
        Map a native column type to a target language type.

        Raises:
            ConfigError: If the type is not supported
        """
        pass

    @abstractmethod
    def render(self, entity: Entity) -> bytes:
        """
        Render the source file body for one entity.

        Must be deterministic: the same entity always yields the same bytes.
        """
        pass

    def output_path(self, entity: Entity) -> str:
        """Relative output path of the file generated for an entity."""
        return f"models/{entity.snake_name}/gen_{entity.snake_name}{self.file_extension}"

    def validate_entities(self, entities: Sequence[Entity]) -> List[str]:
        """
        Check entities for issues that do not stop generation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for entity in entities:
            if not entity.fields:
                warnings.append(
                    f"Model {entity.name} has no fields besides the implicit ones"
                )
        return warnings

    def generate(self, entities: Sequence[Entity]) -> List[RenderedFile]:
        """
        Render every entity.

        Args:
            entities: Normalized, validated entities

        Returns:
            One RenderedFile per entity, in entity order
        """
        files = []
        for entity in entities:
            path = self.output_path(entity)
            try:
                content = self.render(entity)
            except TemplateError as e:
                raise GeneratorError(f"Failed to render model {entity.name}: {e}") from e
            logger.debug("Rendered %s (%d bytes)", path, len(content))
            files.append(RenderedFile(path=path, content=content))
        return files

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: List[RenderedFile],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Rendered files
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.written: List[Path] = []
