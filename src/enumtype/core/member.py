"""
Enum members.

A Member is an immutable (name, value, attributes) record owned by one
registry. Each registry gets its own Member subclass with a read-only property
per declared attribute, so `Color.RED.hex` works like a regular field.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .registry import EnumType


class Member:
    """
    A single named, valued entry of an enum type.

    Members compare equal when they share an owner and a name. They are
    constants: attribute assignment is rejected, and copying returns the
    same object.
    """

    __slots__ = ("_name", "_value", "_attributes", "_enum_type")

    def __init__(
        self,
        name: str,
        value: Any,
        attributes: Mapping[str, Any],
        enum_type: EnumType,
    ):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_attributes", MappingProxyType(dict(attributes)))
        object.__setattr__(self, "_enum_type", enum_type)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Declared attributes in schema order (read-only)."""
        return self._attributes

    @property
    def enum_type(self) -> EnumType:
        """The registry this member belongs to."""
        return self._enum_type

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Enum member {self._name} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Enum member {self._name} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return other._enum_type is self._enum_type and other._name == self._name

    def __hash__(self) -> int:
        return hash((id(self._enum_type), self._name))

    def __copy__(self) -> Member:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Member:
        return self

    def debug_string(self) -> str:
        return f"Enum:{self._name} {self._value!r}"

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{self.debug_string()}>"


def _attribute_property(attr: str) -> property:
    def getter(self: Member) -> Any:
        return self._attributes[attr]

    getter.__name__ = attr
    return property(getter, doc=f"The '{attr}' attribute of this member.")


def make_member_class(attribute_names: tuple[str, ...]) -> type[Member]:
    """
    Build a Member subclass with one read-only property per attribute.

    Args:
        attribute_names: Declared attribute names, in schema order

    Returns:
        A new Member subclass (plain Member when there are no attributes)
    """
    if not attribute_names:
        return Member
    namespace: dict[str, Any] = {"__slots__": ()}
    for attr in attribute_names:
        namespace[attr] = _attribute_property(attr)
    return type("Member", (Member,), namespace)
