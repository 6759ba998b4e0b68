"""
Generator registry system for managing available code generators.

Provides registration and instantiation of language generators.
"""

from typing import Any, Dict, List, Optional, Type

from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue
            if alias_key in self._generators:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            self._aliases[alias_key] = language_key

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        language_key = self._aliases.get(language_key, language_key)

        if language_key in self._generators:
            return self._generators[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self, language: str, options: Optional[Dict[str, Any]] = None
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Args:
            language: Language name or alias
            options: Language section of the project file

        Returns:
            Configured generator instance
        """
        return self.get_generator_class(language)(options)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def is_supported(self, language: str) -> bool:
        """Check if language (or alias) is supported."""
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.go import GoGenerator

    registry.register("go", GoGenerator, aliases=["golang"])


def get_generator(
    language: str, options: Optional[Dict[str, Any]] = None
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(language, options)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()
