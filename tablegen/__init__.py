"""
tablegen - data-access model code generator.

Generates model packages from YAML model declarations and live
database schemas.
"""

__version__ = "0.1.0"
