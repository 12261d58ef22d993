"""
enumtype - closed sets of named, typed constants.

Declare a fixed vocabulary once, attach typed attributes to each member, and
use the resulting registry for lookup, iteration and constant access:

    from enumtype import create_enum_type

    Color = create_enum_type(["hex"], lambda e: (
        e.RED("red", "#f00"),
        e.GREEN("green", "#0f0"),
    ))
    Color.RED.hex       # '#f00'
    Color["green"]      # <Enum:GREEN 'green'>
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    AttributeTypeError,
    AttributeValidator,
    CallableValidator,
    DuplicateDefinitionError,
    EnumError,
    EnumType,
    EnumTypeBuilder,
    InvalidDefinitionError,
    Member,
    PydanticValidator,
    UndefinedEnumError,
    ValidationResult,
    create_enum_type,
    debug_string,
    define,
    display_name,
    predicate,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "create_enum_type",
    "define",
    "EnumType",
    "EnumTypeBuilder",
    "Member",
    "AttributeValidator",
    "PydanticValidator",
    "CallableValidator",
    "ValidationResult",
    "predicate",
    "display_name",
    "debug_string",
    "EnumError",
    "InvalidDefinitionError",
    "DuplicateDefinitionError",
    "AttributeTypeError",
    "UndefinedEnumError",
]
