"""
Go code generator module.

Generates beego ORM model packages from normalized entities.
"""

from .config import GoConfig
from .generator import GoGenerator
from .naming import receiver_name, validate_go_package_name
from .types import GO_TYPE_MAP, GoTypeMapper, UnsupportedTypeError, map_type

__all__ = [
    "GoGenerator",
    "GoConfig",
    "GoTypeMapper",
    "GO_TYPE_MAP",
    "UnsupportedTypeError",
    "map_type",
    "receiver_name",
    "validate_go_package_name",
]
