"""
The EnumType registry: an immutable, ordered set of members.

Registries are produced by create_enum_type() and never constructed directly
by callers. Once built they are read-only and safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .errors import UndefinedEnumError
from .member import Member


class ValueIndex:
    """
    Member lookup by value, using equality.

    Hashable values go through a dict; unhashable ones (lists, dicts) are
    compared linearly.
    """

    def __init__(self) -> None:
        self._hashed: dict[Any, Member] = {}
        self._unhashable: list[tuple[Any, Member]] = []

    def get(self, value: Any) -> Member | None:
        try:
            member = self._hashed.get(value)
        except TypeError:
            member = None
        if member is not None:
            return member
        for candidate, owner in self._unhashable:
            if candidate == value:
                return owner
        return None

    def add(self, value: Any, member: Member) -> None:
        try:
            self._hashed[value] = member
        except TypeError:
            self._unhashable.append((value, member))

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)


class EnumType:
    """
    A closed set of named, valued members.

    Members are reachable as upper-case attributes (`Color.RED`), by lookup
    (`Color["RED"]`, `Color["red"]`), or by iteration in declaration order.

    Example:
        Color = EnumType.create(["hex"], lambda e: (
            e.RED("red", "#f00"),
            e.GREEN("green", "#0f0"),
        ))
        Color.RED.hex        # '#f00'
        Color.values()       # ['red', 'green']
    """

    def __init__(self, attribute_names: tuple[str, ...] = ()):
        object.__setattr__(self, "_attribute_names", tuple(attribute_names))
        object.__setattr__(self, "_members", ())
        object.__setattr__(self, "_by_name", {})
        object.__setattr__(self, "_by_value", ValueIndex())
        object.__setattr__(self, "_sealed", False)

    @classmethod
    def create(
        cls,
        attribute_spec: Any = None,
        block: Callable[[Any], Any] | None = None,
        *,
        strict: bool = False,
    ) -> EnumType:
        """Build a registry; see create_enum_type()."""
        from .builder import create_enum_type

        return create_enum_type(attribute_spec, block, strict=strict)

    def _seal(
        self,
        members: list[Member],
        by_name: dict[str, Member],
        by_value: ValueIndex,
    ) -> None:
        """Install the built members. Only the builder calls this, exactly once."""
        if self._sealed:
            raise RuntimeError("EnumType is already sealed")
        object.__setattr__(self, "_members", tuple(members))
        object.__setattr__(self, "_by_name", dict(by_name))
        object.__setattr__(self, "_by_value", by_value)
        object.__setattr__(self, "_sealed", True)

    @property
    def attribute_names(self) -> tuple[str, ...]:
        """Declared attribute names, without value/name."""
        return self._attribute_names

    # =========================================================================
    # Lookup
    # =========================================================================

    def member_by_name(self, name: str) -> Member:
        """
        Return the member with this exact name.

        Raises:
            UndefinedEnumError: If no member has that name
        """
        member = self._by_name.get(name) if isinstance(name, str) else None
        if member is None:
            raise UndefinedEnumError(
                f"Undefined enum '{name}'. Available: {', '.join(self._by_name)}", name
            )
        return member

    def lookup(self, key: Any) -> Member | None:
        """
        Find a member by name, then by value.

        Returns None for a None key or when nothing matches.
        """
        if key is None:
            return None
        if isinstance(key, Member) and key.enum_type is self:
            return key
        if isinstance(key, str):
            member = self._by_name.get(key)
            if member is not None:
                return member
        return self._by_value.get(key)

    def get(self, key: Any, default: Any = None) -> Any:
        member = self.lookup(key)
        return default if member is None else member

    def __getitem__(self, key: Any) -> Member | None:
        member = self.lookup(key)
        if member is None and key is not None:
            raise UndefinedEnumError(f"No enum member with name or value {key!r}", key)
        return member

    def __getattr__(self, name: str) -> Member:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self.member_by_name(name)

    def __contains__(self, key: Any) -> bool:
        return self.lookup(key) is not None

    # =========================================================================
    # Iteration
    # =========================================================================

    def entries(self) -> list[Member]:
        """Members in declaration order."""
        return list(self._members)

    def values(self) -> list[Any]:
        """Member values in declaration order."""
        return [m.value for m in self._members]

    def names(self) -> list[str]:
        """Member names in declaration order."""
        return [m.name for m in self._members]

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    # =========================================================================
    # Immutability and display
    # =========================================================================

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("EnumType is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("EnumType is immutable")

    def __copy__(self) -> EnumType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> EnumType:
        return self

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._by_name))

    def debug_string(self) -> str:
        return f"EnumType enums=[{', '.join(self.names())}]"

    def __repr__(self) -> str:
        return f"<{self.debug_string()}>"
