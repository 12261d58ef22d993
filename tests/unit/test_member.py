"""Tests for enum members and generated attribute accessors."""

from __future__ import annotations

import copy

import pytest

from enumtype import EnumType, Member, create_enum_type
from enumtype.core.member import make_member_class


class TestMemberEquality:
    """Members compare by owner and name."""

    def test_equal_to_itself(self, plain_colors: EnumType) -> None:
        assert plain_colors.RED == plain_colors.RED
        assert plain_colors.RED != plain_colors.GREEN

    def test_not_equal_to_value(self, plain_colors: EnumType) -> None:
        assert plain_colors.RED != "red"
        assert plain_colors.RED != "RED"

    def test_same_name_in_other_enum_not_equal(self, plain_colors: EnumType) -> None:
        other = create_enum_type(lambda e: e.RED("red"))
        assert other.RED != plain_colors.RED

    def test_hashable(self, plain_colors: EnumType) -> None:
        members = set(plain_colors.entries()) | set(plain_colors.entries())
        assert len(members) == 3
        assert {plain_colors.RED: "stop"}[plain_colors["red"]] == "stop"


class TestMemberAttributes:
    """Declared attributes are exposed as read-only properties."""

    def test_attribute_properties(self, array_colors: EnumType) -> None:
        assert array_colors.BLUE.hex == "#00f"
        assert array_colors.BLUE.rgb == [0, 0, 255]

    def test_attributes_mapping(self, array_colors: EnumType) -> None:
        assert dict(array_colors.RED.attributes) == {"hex": "#f00", "rgb": [255, 0, 0]}
        assert list(array_colors.RED.attributes) == ["hex", "rgb"]

    def test_attributes_mapping_read_only(self, array_colors: EnumType) -> None:
        with pytest.raises(TypeError):
            array_colors.RED.attributes["hex"] = "#000"

    def test_no_attributes(self, plain_colors: EnumType) -> None:
        assert dict(plain_colors.RED.attributes) == {}
        assert not hasattr(plain_colors.RED, "hex")

    def test_attribute_properties_per_enum_type(
        self, plain_colors: EnumType, array_colors: EnumType
    ) -> None:
        assert type(array_colors.RED) is type(array_colors.GREEN)
        assert type(array_colors.RED) is not type(plain_colors.RED)
        assert isinstance(array_colors.RED, Member)

    def test_cannot_set_attributes(self, array_colors: EnumType) -> None:
        with pytest.raises(AttributeError):
            array_colors.RED.hex = "#000"
        with pytest.raises(AttributeError):
            array_colors.RED.value = "crimson"
        with pytest.raises(AttributeError):
            array_colors.RED.extra = 1

    def test_copy_returns_same_member(self, plain_colors: EnumType) -> None:
        assert copy.copy(plain_colors.RED) is plain_colors.RED
        assert copy.deepcopy(plain_colors.RED) is plain_colors.RED


class TestMakeMemberClass:
    """Member subclasses generated from attribute names."""

    def test_no_attributes_uses_base_class(self) -> None:
        assert make_member_class(()) is Member

    def test_generated_properties(self) -> None:
        cls = make_member_class(("hex", "rgb"))
        assert issubclass(cls, Member)
        assert isinstance(cls.hex, property)
        assert isinstance(cls.rgb, property)


class TestMemberDisplay:
    """str() is the name, repr() the debug string."""

    def test_str(self, plain_colors: EnumType) -> None:
        assert [str(m) for m in plain_colors] == ["RED", "GREEN", "BLUE"]

    def test_repr(self, plain_colors: EnumType) -> None:
        assert repr(plain_colors.RED) == "<Enum:RED 'red'>"

    def test_repr_with_non_string_value(self) -> None:
        enum = create_enum_type(lambda e: e.ONE(1))
        assert repr(enum.ONE) == "<Enum:ONE 1>"
