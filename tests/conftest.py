"""Shared pytest fixtures for enumtype tests."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import Field, conlist

from enumtype import EnumType, EnumTypeBuilder, create_enum_type

RGB = conlist(Annotated[int, Field(strict=True, ge=0, le=255)], min_length=3, max_length=3)

COLOR_TYPES = {"value": str, "hex": str | None, "rgb": RGB}


def declare_colors(e: EnumTypeBuilder) -> None:
    e.RED("red", "#f00", [255, 0, 0])
    e.GREEN("green", "#0f0", [0, 255, 0])
    e.BLUE("blue", "#00f", [0, 0, 255])


@pytest.fixture
def plain_colors() -> EnumType:
    """Enum type with values only."""

    def declare(e: EnumTypeBuilder) -> None:
        e.RED("red")
        e.GREEN("green")
        e.BLUE("blue")

    return create_enum_type(declare)


@pytest.fixture
def array_colors() -> EnumType:
    """Enum type with untyped hex and rgb attributes."""
    return create_enum_type(["hex", "rgb"], declare_colors)


@pytest.fixture
def typed_colors() -> EnumType:
    """Enum type with a typed value, optional hex and constrained rgb."""
    return create_enum_type(COLOR_TYPES, declare_colors)


@pytest.fixture
def rgb_type():
    """Three integers in 0..255."""
    return RGB


@pytest.fixture
def color_types() -> dict:
    """Typed schema for the color enum."""
    return dict(COLOR_TYPES)


@pytest.fixture
def color_block():
    """Declaration block for RED, GREEN and BLUE with hex and rgb."""
    return declare_colors
