"""
Error types for enum type declaration, validation, and lookup.
"""

from dataclasses import dataclass
from typing import Any, Optional


class EnumError(Exception):
    """Base exception for all enumtype errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class InvalidDefinitionError(EnumError):
    """
    Raised when the shape of an enum declaration is wrong.

    Examples:
    - Reserved attribute name (name, value)
    - No members declared
    - Member name not starting with an upper-case letter
    - Member declared without a value
    - Member declared with a nested block
    - Too many positional arguments for the attribute schema
    """

    pass


class DuplicateDefinitionError(EnumError):
    """
    Raised when a member reuses a name or a value already declared.

    Attributes:
        kind: "name" or "value", depending on which uniqueness rule failed
    """

    def __init__(
        self, message: str, kind: str, context: Optional["ErrorContext"] = None
    ):
        self.kind = kind
        super().__init__(message, context)


class AttributeTypeError(EnumError, TypeError):
    """
    Raised when a member's value or attribute fails its declared type.

    Also a builtin TypeError, so callers can catch it either way.
    """

    def __init__(
        self,
        message: str,
        member: str,
        attribute: str,
        value: Any,
        reason: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.member = member
        self.attribute = attribute
        self.value = value
        self.reason = reason
        super().__init__(message, context)


class UndefinedEnumError(EnumError, AttributeError):
    """
    Raised on use-time access to a member that does not exist.

    Subclasses AttributeError so hasattr() and getattr() defaults still work
    for constant-style access on a registry.
    """

    def __init__(self, message: str, name: Any):
        super().__init__(message)
        self.name = name


@dataclass
class ErrorContext:
    """
    Where in a declaration block an error occurred.

    Attributes:
        member: Name of the member being declared
        attribute: Attribute being validated, if any
        index: 1-based position of the declaration in the block
        file: Source file of the declaring call, when known
        line: Line number of the declaring call, when known
    """

    member: str | None = None
    attribute: str | None = None
    index: int | None = None
    file: str | None = None
    line: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "colors.py:12 in RED (declaration #1), attribute 'rgb'"
        """
        parts = []
        if self.file and self.line:
            parts.append(f"{self.file}:{self.line}")
        if self.member:
            where = f"in {self.member}"
            if self.index:
                where += f" (declaration #{self.index})"
            parts.append(where)
        location = " ".join(parts)
        if self.attribute:
            location = f"{location}, attribute '{self.attribute}'".lstrip(", ")
        return location


def make_definition_error(
    message: str,
    member: str | None = None,
    index: int | None = None,
    file: str | None = None,
    line: int | None = None,
) -> InvalidDefinitionError:
    """
    Helper to create an InvalidDefinitionError with optional context.

    Args:
        message: Error description
        member: Optional member name
        index: Optional declaration position
        file: Optional source file of the declaration
        line: Optional line number of the declaration

    Returns:
        InvalidDefinitionError with context if a member or location is provided
    """
    if member or (file and line):
        context = ErrorContext(member=member, index=index, file=file, line=line)
        return InvalidDefinitionError(message, context)
    return InvalidDefinitionError(message)


def make_duplicate_error(
    kind: str,
    member: str,
    existing: str,
    value: Any = None,
    index: int | None = None,
    file: str | None = None,
    line: int | None = None,
) -> DuplicateDefinitionError:
    """
    Helper to create a DuplicateDefinitionError for a name or value clash.

    Args:
        kind: "name" or "value"
        member: Name of the member being declared
        existing: Name of the member that already owns the name/value
        value: The clashing value (for value clashes)
        index: Optional declaration position
        file: Optional source file of the declaration
        line: Optional line number of the declaration
    """
    if kind == "name":
        message = f"Duplicate enum member '{member}'"
    else:
        message = f"Duplicate value {value!r} for '{member}', already used by '{existing}'"
    context = ErrorContext(member=member, index=index, file=file, line=line)
    return DuplicateDefinitionError(message, kind, context)


def make_type_error(
    member: str,
    attribute: str,
    value: Any,
    reason: str,
    index: int | None = None,
    file: str | None = None,
    line: int | None = None,
) -> AttributeTypeError:
    """
    Helper to create an AttributeTypeError naming the member and attribute.

    Args:
        member: Name of the member being declared
        attribute: Attribute that failed validation ("value" for the value)
        value: The rejected input
        reason: Validator's description of the failure
        index: Optional declaration position
        file: Optional source file of the declaration
        line: Optional line number of the declaration
    """
    message = f"Invalid {attribute} {value!r} for '{member}': {reason}"
    context = ErrorContext(
        member=member, attribute=attribute, index=index, file=file, line=line
    )
    return AttributeTypeError(message, member, attribute, value, reason, context)
