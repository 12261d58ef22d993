"""Core enumtype functionality: attribute schemas, validators, members, registries, and the builder."""

from .builder import EnumTypeBuilder, MemberTable, create_enum_type, define
from .display import debug_string, display_name
from .errors import (
    AttributeTypeError,
    DuplicateDefinitionError,
    EnumError,
    ErrorContext,
    InvalidDefinitionError,
    UndefinedEnumError,
)
from .member import Member, make_member_class
from .registry import EnumType, ValueIndex
from .schema import AttributeField, AttributeSchema, SchemaKind, resolve_schema
from .validators import (
    AttributeValidator,
    CallableValidator,
    PredicateValidator,
    PydanticValidator,
    ValidationResult,
    predicate,
    resolve_validator,
)

__all__ = [
    "create_enum_type",
    "define",
    "EnumTypeBuilder",
    "MemberTable",
    "EnumType",
    "ValueIndex",
    "Member",
    "make_member_class",
    "AttributeSchema",
    "AttributeField",
    "SchemaKind",
    "resolve_schema",
    "AttributeValidator",
    "PydanticValidator",
    "CallableValidator",
    "PredicateValidator",
    "ValidationResult",
    "predicate",
    "resolve_validator",
    "display_name",
    "debug_string",
    "EnumError",
    "InvalidDefinitionError",
    "DuplicateDefinitionError",
    "AttributeTypeError",
    "UndefinedEnumError",
    "ErrorContext",
]
