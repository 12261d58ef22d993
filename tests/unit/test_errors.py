"""Tests for error types and error context formatting."""

from __future__ import annotations

from enumtype import (
    AttributeTypeError,
    DuplicateDefinitionError,
    EnumError,
    InvalidDefinitionError,
    UndefinedEnumError,
)
from enumtype.core.errors import (
    ErrorContext,
    make_definition_error,
    make_duplicate_error,
    make_type_error,
)


class TestErrorHierarchy:
    """All errors share a base class; two double as builtins."""

    def test_base_class(self) -> None:
        for cls in (
            InvalidDefinitionError,
            DuplicateDefinitionError,
            AttributeTypeError,
            UndefinedEnumError,
        ):
            assert issubclass(cls, EnumError)

    def test_attribute_type_error_is_type_error(self) -> None:
        assert issubclass(AttributeTypeError, TypeError)

    def test_undefined_enum_error_is_attribute_error(self) -> None:
        err = UndefinedEnumError("Undefined enum 'VIOLET'", "VIOLET")
        assert isinstance(err, AttributeError)
        assert err.name == "VIOLET"
        assert str(err) == "Undefined enum 'VIOLET'"


class TestErrorContext:
    """Context formatting."""

    def test_full_context(self) -> None:
        context = ErrorContext(
            member="RED", attribute="rgb", index=1, file="colors.py", line=12
        )
        assert context.format() == "colors.py:12 in RED (declaration #1), attribute 'rgb'"

    def test_member_only(self) -> None:
        assert ErrorContext(member="RED").format() == "in RED"

    def test_attribute_only(self) -> None:
        assert ErrorContext(attribute="rgb").format() == "attribute 'rgb'"

    def test_message_with_context(self) -> None:
        err = EnumError("Something failed", ErrorContext(member="RED", index=2))
        assert str(err) == "in RED (declaration #2)\nSomething failed"
        assert err.message == "Something failed"

    def test_message_without_context(self) -> None:
        err = EnumError("Something failed")
        assert str(err) == "Something failed"
        assert err.context is None


class TestErrorHelpers:
    """make_*_error helpers."""

    def test_definition_error_without_location(self) -> None:
        err = make_definition_error("No members")
        assert isinstance(err, InvalidDefinitionError)
        assert err.context is None

    def test_definition_error_with_member(self) -> None:
        err = make_definition_error("Bad", member="RED", index=3)
        assert err.context == ErrorContext(member="RED", index=3)

    def test_duplicate_name(self) -> None:
        err = make_duplicate_error("name", "RED", existing="RED", index=3)
        assert err.kind == "name"
        assert err.message == "Duplicate enum member 'RED'"

    def test_duplicate_value(self) -> None:
        err = make_duplicate_error("value", "CRIMSON", existing="RED", value="red")
        assert err.kind == "value"
        assert err.message == "Duplicate value 'red' for 'CRIMSON', already used by 'RED'"

    def test_type_error(self) -> None:
        err = make_type_error("RED", "hex", 27, "Input should be a valid string", index=1)
        assert err.member == "RED"
        assert err.attribute == "hex"
        assert err.value == 27
        assert err.message == "Invalid hex 27 for 'RED': Input should be a valid string"
        assert err.context.attribute == "hex"
