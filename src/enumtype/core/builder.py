"""
Enum type construction.

create_enum_type() resolves the attribute schema, runs the declaration block
against an EnumTypeBuilder, and returns the sealed EnumType. Every declaration
is validated as soon as it is made; the first error aborts the build and the
partially built registry is discarded.

    def colors(e):
        e.RED("red", "#f00")
        e.GREEN("green", "#0f0")
        e.declare("BLUE", "blue", "#00f")

    Color = create_enum_type(["hex"], colors)
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import (
    InvalidDefinitionError,
    make_definition_error,
    make_duplicate_error,
    make_type_error,
)
from .member import Member, make_member_class
from .registry import EnumType, ValueIndex
from .schema import AttributeSchema, resolve_schema

logger = logging.getLogger(__name__)

DeclarationBlock = Callable[["EnumTypeBuilder"], Any]


@dataclass
class MemberTable:
    """
    Members declared so far, indexed by name and by value.

    Detects duplicate names and duplicate values as members are added.
    """

    members: list[Member] = field(default_factory=list)
    by_name: dict[str, Member] = field(default_factory=dict)
    by_value: ValueIndex = field(default_factory=ValueIndex)

    def check_name(self, name: str, **location: Any) -> None:
        """Raise if a member with this name was already declared."""
        if name in self.by_name:
            raise make_duplicate_error("name", name, existing=name, **location)

    def check_value(self, name: str, value: Any, **location: Any) -> None:
        """Raise if another member already uses an equal value."""
        existing = self.by_value.get(value)
        if existing is not None:
            raise make_duplicate_error(
                "value", name, existing=existing.name, value=value, **location
            )

    def add(self, member: Member) -> None:
        self.members.append(member)
        self.by_name[member.name] = member
        self.by_value.add(member.value, member)


class EnumTypeBuilder:
    """
    Receives member declarations while a declaration block runs.

    `builder.declare("RED", "red")` and `builder.RED("red")` are equivalent.
    Positional arguments fill value first, then the declared attributes in
    order; missing trailing attributes are None.
    """

    def __init__(self, schema: AttributeSchema):
        self._schema = schema
        self._registry = EnumType(schema.names)
        self._member_class = make_member_class(schema.names)
        self._table = MemberTable()
        self._closed = False

    def declare(self, name: str, *args: Any, block: Callable[..., Any] | None = None) -> Member:
        """
        Declare one member.

        Args:
            name: Member name; must start with an upper-case letter
            *args: The value, then declared attributes in schema order
            block: Not supported; passing one is a definition error

        Returns:
            The new member

        Raises:
            InvalidDefinitionError: Malformed declaration
            DuplicateDefinitionError: Name or value already declared
            AttributeTypeError: Value or attribute rejected by its validator
        """
        file, line = _caller_location()
        location: dict[str, Any] = {
            "index": len(self._table.members) + 1,
            "file": file,
            "line": line,
        }
        label = name if isinstance(name, str) else None

        if self._closed:
            raise make_definition_error(
                "Enum type is already built; members cannot be added", member=label, **location
            )
        if label is None or not name.isidentifier():
            raise make_definition_error(f"Invalid enum name {name!r}", member=label, **location)
        if not name[0].isupper():
            raise make_definition_error(
                f"Enum name '{name}' must start with an upper-case letter",
                member=name,
                **location,
            )
        if block is not None:
            raise make_definition_error(
                f"Enum '{name}' cannot be declared with a block", member=name, **location
            )
        if not args:
            raise make_definition_error(
                f"Enum '{name}' must be given a value", member=name, **location
            )

        arity = self._schema.arity
        if len(args) > arity:
            expected = ", ".join(["value", *self._schema.names])
            raise make_definition_error(
                f"Enum '{name}' takes at most {arity} argument(s) ({expected}), got {len(args)}",
                member=name,
                **location,
            )

        self._table.check_name(name, **location)

        padded = list(args) + [None] * (arity - len(args))
        checked = []
        for (attr, validator), raw in zip(self._schema.validators(), padded):
            if validator is not None:
                result = validator.validate(raw)
                if not result.ok:
                    raise make_type_error(name, attr, raw, result.reason or "", **location)
                raw = result.value
            checked.append(raw)

        value = checked[0]
        self._table.check_value(name, value, **location)

        member = self._member_class(
            name, value, dict(zip(self._schema.names, checked[1:])), self._registry
        )
        self._table.add(member)
        return member

    def __getattr__(self, name: str) -> Callable[..., Member]:
        # Only reached for names that are not builder attributes: e.RED(...)
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return functools.partial(self.declare, name)

    def build(self) -> EnumType:
        """
        Close the builder and seal the registry.

        Raises:
            InvalidDefinitionError: If already built, or no member was declared
        """
        if self._closed:
            raise make_definition_error("Enum type is already built")
        self._closed = True
        if not self._table.members:
            raise InvalidDefinitionError("An enum type must declare at least one member")
        self._registry._seal(self._table.members, self._table.by_name, self._table.by_value)
        logger.debug(
            "Built enum type with %d members: %s",
            len(self._table.members),
            ", ".join(self._table.by_name),
        )
        return self._registry


def create_enum_type(
    attribute_spec: Any = None,
    block: DeclarationBlock | None = None,
    *,
    strict: bool = False,
) -> EnumType:
    """
    Build an immutable EnumType from a declaration block.

    Args:
        attribute_spec: None, a sequence of attribute names, or a mapping of
            attribute name to type (a "value" key types the value itself).
            A callable here with no block is taken as the block.
        block: Callable receiving an EnumTypeBuilder; declares the members
        strict: Use pydantic strict mode for typed attributes

    Returns:
        The sealed EnumType

    Raises:
        InvalidDefinitionError: Bad schema, malformed declaration, or no members
        DuplicateDefinitionError: Repeated member name or value
        AttributeTypeError: A value or attribute failed its type
    """
    if block is None and callable(attribute_spec) and not isinstance(attribute_spec, Mapping):
        attribute_spec, block = None, attribute_spec

    schema = resolve_schema(attribute_spec, strict=strict)
    builder = EnumTypeBuilder(schema)
    if block is not None:
        if not callable(block):
            raise InvalidDefinitionError(
                f"Declaration block must be callable, got {type(block).__name__}"
            )
        block(builder)
    return builder.build()


def define(
    attribute_spec: Any = None, *, strict: bool = False
) -> Callable[[DeclarationBlock], EnumType] | EnumType:
    """
    Decorator form of create_enum_type().

        @define({"value": str, "hex": str})
        def Color(e):
            e.RED("red", "#f00")

    Used bare (`@define`), the decorated function is the block of an enum
    type without attributes.
    """
    if callable(attribute_spec) and not isinstance(attribute_spec, Mapping):
        return create_enum_type(None, attribute_spec, strict=strict)

    def decorator(block: DeclarationBlock) -> EnumType:
        return create_enum_type(attribute_spec, block, strict=strict)

    return decorator


def _caller_location() -> tuple[str | None, int | None]:
    """File and line of the first frame outside this module."""
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return None, None
    return frame.f_code.co_filename, frame.f_lineno
