"""
Attribute validators for enum members.

A validator checks one attribute value and may coerce it. Type expressions are
checked through pydantic's TypeAdapter, so anything pydantic understands can be
used as an attribute type:

    create_enum_type(
        {
            "value": str,
            "hex": str | None,
            "rgb": conlist(Annotated[int, Field(ge=0, le=255)], min_length=3, max_length=3),
        },
        declare_colors,
    )

Plain functions act as coercers (return the value, raise ValueError/TypeError),
and predicate() wraps a boolean check.
"""

from __future__ import annotations

import functools
import logging
import types
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict, PydanticUserError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidDefinitionError

logger = logging.getLogger(__name__)

_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodDescriptorType,
    functools.partial,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value: the (possibly coerced) value or a reason."""

    ok: bool
    value: Any = None
    reason: str | None = None

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> ValidationResult:
        return cls(ok=False, reason=reason)


class AttributeValidator(ABC):
    """Checks a single attribute value, returning a ValidationResult."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable name of the expected type."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Validate (and possibly coerce) a value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"


class PydanticValidator(AttributeValidator):
    """
    Validator backed by a pydantic TypeAdapter.

    Accepts a type expression or a ready-made TypeAdapter. Classes pydantic has
    no schema for are checked with isinstance().

    Attributes:
        type_spec: The original type expression
        strict: Disable pydantic's lax-mode coercion; when False, strictness
            declared inside the type expression still applies
    """

    def __init__(self, type_spec: Any, strict: bool = False):
        self.type_spec = type_spec
        self.strict = strict
        if isinstance(type_spec, TypeAdapter):
            self._adapter = type_spec
        else:
            self._adapter = _build_adapter(type_spec)

    @property
    def description(self) -> str:
        spec = self.type_spec
        if isinstance(spec, TypeAdapter):
            spec = getattr(spec, "_type", spec)
        if isinstance(spec, type):
            return spec.__name__
        return repr(spec)

    def validate(self, value: Any) -> ValidationResult:
        try:
            coerced = self._adapter.validate_python(value, strict=True if self.strict else None)
        except PydanticValidationError as e:
            return ValidationResult.failure(_format_pydantic_errors(e))
        return ValidationResult.success(coerced)


class CallableValidator(AttributeValidator):
    """
    Validator wrapping a coercion function.

    The function returns the value to store, or raises ValueError/TypeError.
    """

    def __init__(self, func: Callable[[Any], Any], description: str | None = None):
        self.func = func
        self._description = description or getattr(func, "__name__", repr(func))

    @property
    def description(self) -> str:
        return self._description

    def validate(self, value: Any) -> ValidationResult:
        try:
            return ValidationResult.success(self.func(value))
        except (ValueError, TypeError) as e:
            return ValidationResult.failure(str(e) or f"rejected by {self.description}")


class PredicateValidator(AttributeValidator):
    """Validator wrapping a boolean predicate; the value is stored unchanged."""

    def __init__(self, func: Callable[[Any], bool], description: str | None = None):
        self.func = func
        self._description = description or getattr(func, "__name__", repr(func))

    @property
    def description(self) -> str:
        return self._description

    def validate(self, value: Any) -> ValidationResult:
        if self.func(value):
            return ValidationResult.success(value)
        return ValidationResult.failure(f"expected {self.description}")


def predicate(func: Callable[[Any], bool], description: str | None = None) -> PredicateValidator:
    """Use a boolean predicate as an attribute type."""
    return PredicateValidator(func, description)


def resolve_validator(
    type_spec: Any, attribute: str = "value", strict: bool = False
) -> AttributeValidator | None:
    """
    Turn a declared attribute type into a validator.

    Args:
        type_spec: None (untyped), an AttributeValidator, a TypeAdapter,
            a plain function, or any type expression pydantic accepts
        attribute: Attribute name, for error messages
        strict: Use pydantic strict mode for type expressions

    Returns:
        The validator, or None for an untyped attribute

    Raises:
        InvalidDefinitionError: If pydantic cannot build a schema for the type
    """
    if type_spec is None:
        return None
    if isinstance(type_spec, AttributeValidator):
        return type_spec
    if isinstance(type_spec, _CALLABLE_TYPES):
        return CallableValidator(type_spec)
    try:
        return PydanticValidator(type_spec, strict=strict)
    except (PydanticUserError, TypeError, ValueError) as e:
        raise InvalidDefinitionError(
            f"Unsupported type {type_spec!r} for attribute '{attribute}': {e}"
        ) from e


def _build_adapter(type_spec: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(type_spec)
    except PydanticUserError:
        if not isinstance(type_spec, type):
            raise
        # Plain classes without a pydantic schema are checked with isinstance()
        logger.debug("Falling back to isinstance check for %s", type_spec.__name__)
        return TypeAdapter(type_spec, config=ConfigDict(arbitrary_types_allowed=True))


def _format_pydantic_errors(error: PydanticValidationError) -> str:
    """Flatten a pydantic ValidationError into a single line."""
    messages = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(messages)
