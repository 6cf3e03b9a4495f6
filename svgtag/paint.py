"""Paint servers: gradients, gradient stops and patterns."""

from typing import ClassVar, Self

from . import validator
from .attributes import (
    AspectRatioMixin,
    CenterMixin,
    EndpointsMixin,
    GradientMixin,
    HrefMixin,
    Number,
    OpacityMixin,
    PositionMixin,
    RadiusMixin,
    SizeMixin,
    ViewBoxMixin,
    setter,
)
from .base import BlockTag, VoidTag
from .values import CoordinateUnits, SvgAttribute


class LinearGradient(EndpointsMixin, GradientMixin, BlockTag):
    """Gradient along the vector (x1, y1) to (x2, y2)."""

    tag_name: ClassVar[str] = "linearGradient"


class RadialGradient(CenterMixin, RadiusMixin, GradientMixin, HrefMixin, OpacityMixin, BlockTag):
    """Gradient between a focal circle (fx, fy, fr) and an end circle (cx, cy, r)."""

    tag_name: ClassVar[str] = "radialGradient"

    @setter(SvgAttribute.FR)
    def fr(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.FR, value)

    @setter(SvgAttribute.FX)
    def fx(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.FX, value)

    @setter(SvgAttribute.FY)
    def fy(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.FY, value)


class Stop(VoidTag):
    """Color stop inside a gradient."""

    tag_name: ClassVar[str] = "stop"

    @setter(SvgAttribute.OFFSET)
    def offset(self, value: Number) -> Self:
        """Set the stop position.

        Args:
            value: Number in [0, 1], percentage string in ["0%", "100%"], or None to unset

        Raises:
            InvalidValueError: If the value is out of range or not numeric
        """
        return self.add_attribute(SvgAttribute.OFFSET, validator.offset(value, SvgAttribute.OFFSET))

    @setter(SvgAttribute.STOP_COLOR)
    def stop_color(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.STOP_COLOR, value)

    @setter(SvgAttribute.STOP_OPACITY)
    def stop_opacity(self, value: Number) -> Self:
        return self.add_attribute(
            SvgAttribute.STOP_OPACITY, validator.unit_interval(value, SvgAttribute.STOP_OPACITY)
        )


class Pattern(PositionMixin, SizeMixin, HrefMixin, ViewBoxMixin, AspectRatioMixin, BlockTag):
    """Tile repeated to fill or stroke a shape."""

    tag_name: ClassVar[str] = "pattern"

    @setter(SvgAttribute.PATTERN_CONTENT_UNITS)
    def pattern_content_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.PATTERN_CONTENT_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.PATTERN_CONTENT_UNITS),
        )

    @setter(SvgAttribute.PATTERN_TRANSFORM)
    def pattern_transform(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.PATTERN_TRANSFORM, value)

    @setter(SvgAttribute.PATTERN_UNITS)
    def pattern_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.PATTERN_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.PATTERN_UNITS),
        )
