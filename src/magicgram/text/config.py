"""Validated configuration for a single text layout job."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import NamedTuple, TypeVar

from magicgram.errors import ConfigurationError
from magicgram.text.font import FontSpec

DEFAULT_LAYOUT_FONT = "18px Arial, sans-serif"


_EnumT = TypeVar("_EnumT", bound=StrEnum)


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(StrEnum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class LineBreak(StrEnum):
    AUTO = "auto"
    WORD = "word"


class ContainerSize(NamedTuple):
    width: int
    height: int


def _coerce_enum(
    enum_type: type[_EnumT], value: object, property_name: str
) -> _EnumT:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(f"'{member.value}'" for member in enum_type)
        raise ConfigurationError(
            f"Unsupported {property_name} value {value!r}; "
            f"'{property_name}' can only be set to {allowed}"
        ) from None


def _check_padding(value: object, property_name: str) -> None:
    if value is None:
        return
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or math.isnan(value)
        or math.isinf(value)
    ):
        raise ConfigurationError(f"'{property_name}' must be set to a number")
    if value < 0:
        raise ConfigurationError(f"'{property_name}' must not be negative")


def _check_flag(value: object, property_name: str) -> None:
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{property_name}' must be set to a boolean")


@dataclass(frozen=True)
class LayoutConfig:
    text: str
    font: str = DEFAULT_LAYOUT_FONT
    padding_x: float | None = None
    padding_y: float | None = None
    text_align: TextAlign = TextAlign.CENTER
    vertical_align: VerticalAlign = VerticalAlign.MIDDLE
    line_break: LineBreak = LineBreak.AUTO
    fit_parent: bool = False
    size_to_fill: bool = False

    def __post_init__(self) -> None:
        # Checks run in a fixed order and stop at the first problem.
        if not isinstance(self.text, str):
            raise ConfigurationError("'text' must be a string")
        if not self.text.strip():
            raise ConfigurationError("'text' must contain at least one word")
        if not isinstance(self.font, str):
            raise ConfigurationError("'font' must be a string")
        FontSpec.parse(self.font)
        object.__setattr__(
            self, "text_align", _coerce_enum(TextAlign, self.text_align, "textAlign")
        )
        object.__setattr__(
            self,
            "vertical_align",
            _coerce_enum(VerticalAlign, self.vertical_align, "verticalAlign"),
        )
        _check_padding(self.padding_x, "paddingX")
        _check_padding(self.padding_y, "paddingY")
        _check_flag(self.fit_parent, "fitParent")
        object.__setattr__(
            self, "line_break", _coerce_enum(LineBreak, self.line_break, "lineBreak")
        )
        _check_flag(self.size_to_fill, "sizeToFill")

    @property
    def font_spec(self) -> FontSpec:
        return FontSpec.parse(self.font)

    @property
    def tokens(self) -> list[str]:
        return self.text.split()

    def resolved_padding(self) -> tuple[float, float]:
        """Return ``(padding_x, padding_y)`` with unset values read as zero."""

        return (self.padding_x or 0, self.padding_y or 0)

    def with_default_padding(self, padding_x: float, padding_y: float) -> "LayoutConfig":
        """Fill in paddings that were left unset."""

        return replace(
            self,
            padding_x=padding_x if self.padding_x is None else self.padding_x,
            padding_y=padding_y if self.padding_y is None else self.padding_y,
        )
