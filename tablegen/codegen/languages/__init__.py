"""
Language-specific code generators.

This module contains generators for different programming languages.
"""
