"""
Display helpers for enum members and registries.

    display_name(Color.RED)   -> 'RED'
    debug_string(Color.RED)   -> "Enum:RED 'red'"
    debug_string(Color)       -> 'EnumType enums=[RED, GREEN, BLUE]'

repr() of members and registries is the debug string wrapped in <...>.
"""

from __future__ import annotations

from .member import Member
from .registry import EnumType


def display_name(member: Member) -> str:
    """The member's name."""
    return member.name


def debug_string(obj: Member | EnumType) -> str:
    """Fixed-format debug description of a member or a registry."""
    if not isinstance(obj, (Member, EnumType)):
        raise TypeError(f"Expected an enum member or enum type, got {type(obj).__name__}")
    return obj.debug_string()
