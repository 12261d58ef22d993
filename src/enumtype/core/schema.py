"""
Attribute schema resolution for enum types.

The attribute spec passed to create_enum_type() comes in three forms:

    None                              -> members carry only a value
    ["hex", "rgb"]                    -> untyped attributes, in order
    {"value": str, "hex": str | None} -> typed attributes (and typed value)

It is resolved once per registry build into an AttributeSchema.
"""

from __future__ import annotations

import keyword
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .errors import InvalidDefinitionError
from .validators import AttributeValidator, resolve_validator

logger = logging.getLogger(__name__)

VALUE = "value"
NAME = "name"

# Public Member API that generated attribute accessors must not shadow
MEMBER_API_NAMES = frozenset({"enum_type", "attributes", "debug_string"})


class SchemaKind(str, Enum):
    """How the attribute schema was declared."""

    NONE = "none"
    UNTYPED = "untyped"
    TYPED = "typed"


class AttributeField(BaseModel):
    """A declared attribute and its validator (None when untyped)."""

    name: str
    validator: AttributeValidator | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class AttributeSchema(BaseModel):
    """
    Resolved attribute shape of an enum type.

    Attributes:
        kind: Which declaration form produced the schema
        value_validator: Validator for the member value, if typed
        attributes: Declared attributes in positional order (value excluded)
    """

    kind: SchemaKind = SchemaKind.NONE
    value_validator: AttributeValidator | None = None
    attributes: tuple[AttributeField, ...] = ()

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def names(self) -> tuple[str, ...]:
        """Declared attribute names, without value/name."""
        return tuple(f.name for f in self.attributes)

    @property
    def arity(self) -> int:
        """Maximum number of positional arguments a member accepts."""
        return 1 + len(self.attributes)

    def validators(self) -> list[tuple[str, AttributeValidator | None]]:
        """(attribute, validator) pairs in positional order, starting with value."""
        return [(VALUE, self.value_validator)] + [(f.name, f.validator) for f in self.attributes]


def resolve_schema(attribute_spec: Any = None, strict: bool = False) -> AttributeSchema:
    """
    Resolve the attribute spec argument into an AttributeSchema.

    Args:
        attribute_spec: None, a sequence of attribute names (a bare string
            counts as one name), or a mapping of attribute name to type
        strict: Use pydantic strict mode for typed attributes

    Returns:
        The resolved schema

    Raises:
        InvalidDefinitionError: On reserved, invalid or duplicated names
    """
    if attribute_spec is None:
        return AttributeSchema()

    if isinstance(attribute_spec, Mapping):
        schema = _resolve_typed(attribute_spec, strict)
    else:
        if isinstance(attribute_spec, str):
            attribute_spec = [attribute_spec]
        try:
            names = list(attribute_spec)
        except TypeError:
            raise InvalidDefinitionError(
                f"Attribute spec must be a sequence of names or a mapping, "
                f"got {type(attribute_spec).__name__}"
            ) from None
        schema = _resolve_untyped(names)

    logger.debug("Resolved %s attribute schema: %s", schema.kind.value, list(schema.names))
    return schema


def _resolve_untyped(names: list[Any]) -> AttributeSchema:
    seen: set[str] = set()
    for attr in names:
        _check_name(attr, seen)
        if attr == VALUE:
            raise InvalidDefinitionError(
                "'value' is implicit and cannot be declared as an attribute name"
            )
        seen.add(attr)
    return AttributeSchema(
        kind=SchemaKind.UNTYPED,
        attributes=tuple(AttributeField(name=attr) for attr in names),
    )


def _resolve_typed(spec: Mapping[Any, Any], strict: bool) -> AttributeSchema:
    seen: set[str] = set()
    value_validator = None
    fields = []
    for attr, type_spec in spec.items():
        if attr == VALUE:
            value_validator = resolve_validator(type_spec, VALUE, strict=strict)
            continue
        _check_name(attr, seen)
        seen.add(attr)
        fields.append(
            AttributeField(name=attr, validator=resolve_validator(type_spec, attr, strict=strict))
        )
    return AttributeSchema(
        kind=SchemaKind.TYPED,
        value_validator=value_validator,
        attributes=tuple(fields),
    )


def _check_name(attr: Any, seen: set[str]) -> None:
    """Reject names that are reserved, not identifiers, or already declared."""
    if not isinstance(attr, str):
        raise InvalidDefinitionError(
            f"Attribute names must be strings, got {type(attr).__name__} {attr!r}"
        )
    if attr.lower() == NAME:
        raise InvalidDefinitionError(f"'{attr}' is reserved and cannot be used as an attribute")
    if not attr.isidentifier() or keyword.iskeyword(attr):
        raise InvalidDefinitionError(f"Attribute name '{attr}' is not a valid identifier")
    if attr.startswith("_") or attr in MEMBER_API_NAMES:
        raise InvalidDefinitionError(f"Attribute name '{attr}' is reserved")
    if attr in seen:
        raise InvalidDefinitionError(f"Duplicate attribute '{attr}'")
