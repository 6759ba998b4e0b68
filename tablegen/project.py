"""Generation run orchestration.

A :class:`Project` ties the pipeline together: load tables, normalize
entities, render them and hand the rendered files to the emitter.
"""

from pathlib import Path
from typing import List, Optional, Union

from .codegen.core.config import ConfigManager, ProjectConfig, load_config
from .codegen.core.generator import CodeGenerator, GenerationResult
from .codegen.core.normalizer import add_tables, normalize_models
from .codegen.core.schema import Entity, TableMetadata
from .codegen.registry import get_generator
from .emitter import Emitter
from .introspect import SchemaLoader
from .logging_config import get_logger

logger = get_logger(__name__)


class Project:
    """One generation run over a project configuration."""

    def __init__(
        self,
        config: ProjectConfig,
        generator: Optional[CodeGenerator] = None,
        loader: Optional[SchemaLoader] = None,
        emitter: Optional[Emitter] = None,
    ):
        self.config = config
        self.generator = generator or get_generator(
            config.language, config.generator_options
        )
        self.loader = loader or SchemaLoader()
        self.emitter = emitter or Emitter(config.output_dir, config.formatter)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "Project":
        """Create a project from a YAML project file."""
        return cls(load_config(path), **kwargs)

    def load_tables(self) -> List[TableMetadata]:
        """Introspect every configured database, in config order."""
        tables = []
        for db in self.config.db_configs:
            tables.extend(self.loader.load(db))
        return tables

    def build_entities(self) -> List[Entity]:
        """Normalize declared models, then introspect and add tables.

        Declared models are validated before any database is contacted.
        """
        entities = normalize_models(self.config.models)
        return add_tables(entities, self.load_tables(), self.generator.map_type)

    def generate(self) -> GenerationResult:
        """Run the pipeline up to rendering; nothing is written.

        Raises:
            ConfigError: For invalid models, unsupported types or duplicates.
            SchemaLoaderError: When introspection fails.
            GeneratorError: When rendering fails.
        """
        warnings = ConfigManager().validate(self.config)

        entities = self.build_entities()
        warnings.extend(self.generator.validate_entities(entities))
        for warning in warnings:
            logger.warning(warning)

        files = self.generator.generate(entities)
        metadata = {
            "language": self.generator.language_name,
            "entities": [entity.name for entity in entities],
            "output_dir": str(self.emitter.output_dir),
        }
        return GenerationResult(files, warnings, metadata)

    def gen(self) -> GenerationResult:
        """Run the whole pipeline: render everything, then write and format.

        No file is written unless every entity rendered successfully.

        Raises:
            EmitError: When writing fails.
            FormatterError: When the formatter fails; files stay on disk.
        """
        result = self.generate()
        result.written = self.emitter.write(result.files)
        logger.info("Generated %d file(s)", len(result.written))
        return result
