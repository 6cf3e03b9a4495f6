"""Mixins adding fluent setters for groups of SVG attributes.

Each mixin is combined with a builder class from ``base``; setters validate
their input, then delegate to ``add_attribute`` with the wire name. Setters
are registered under their wire name so values coming from text (CLI
arguments, YAML) can be routed through the same validation.
"""

from collections.abc import Callable
from typing import Any, Self

from . import validator
from .values import (
    CoordinateUnits,
    FillRule,
    PreserveAspectRatio,
    SpreadMethod,
    StrokeLineCap,
    StrokeLineJoin,
    SvgAttribute,
)

Number = float | int | str | None

# Wire attribute name -> setter method name
SETTERS: dict[str, str] = {"class": "class_"}


def setter(attribute: str | SvgAttribute) -> Callable[[Callable], Callable]:
    """Register the decorated method as the setter for a wire attribute."""

    def register(method: Callable) -> Callable:
        SETTERS[validator.attribute_name(attribute)] = method.__name__
        return method

    return register


def apply_attribute(builder: Any, name: str, value: Any) -> Any:
    """Set an attribute by wire name, through its setter when the builder has one."""
    method = SETTERS.get(name)
    if method is not None and hasattr(builder, method):
        return getattr(builder, method)(value)
    return builder.add_attribute(name, value)


class FillMixin:
    """Paint attributes for the interior of a shape."""

    @setter(SvgAttribute.FILL)
    def fill(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.FILL, value)

    @setter(SvgAttribute.FILL_OPACITY)
    def fill_opacity(self, value: Number) -> Self:
        """Set fill-opacity; must be a number between 0 and 1 or None."""
        return self.add_attribute(
            SvgAttribute.FILL_OPACITY, validator.unit_interval(value, SvgAttribute.FILL_OPACITY)
        )

    @setter(SvgAttribute.FILL_RULE)
    def fill_rule(self, value: FillRule | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.FILL_RULE, validator.one_of(value, FillRule, SvgAttribute.FILL_RULE)
        )


class StrokeMixin:
    """Paint attributes for the outline of a shape."""

    @setter(SvgAttribute.STROKE)
    def stroke(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.STROKE, value)

    @setter(SvgAttribute.STROKE_DASHARRAY)
    def stroke_dasharray(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.STROKE_DASHARRAY, value)

    @setter(SvgAttribute.STROKE_LINECAP)
    def stroke_linecap(self, value: StrokeLineCap | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.STROKE_LINECAP,
            validator.one_of(value, StrokeLineCap, SvgAttribute.STROKE_LINECAP),
        )

    @setter(SvgAttribute.STROKE_LINEJOIN)
    def stroke_linejoin(self, value: StrokeLineJoin | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.STROKE_LINEJOIN,
            validator.one_of(value, StrokeLineJoin, SvgAttribute.STROKE_LINEJOIN),
        )

    @setter(SvgAttribute.STROKE_MITERLIMIT)
    def stroke_miterlimit(self, value: Number) -> Self:
        """Set stroke-miterlimit; must be at least 1 or None."""
        return self.add_attribute(
            SvgAttribute.STROKE_MITERLIMIT,
            validator.at_least_one(value, SvgAttribute.STROKE_MITERLIMIT),
        )

    @setter(SvgAttribute.STROKE_OPACITY)
    def stroke_opacity(self, value: Number) -> Self:
        return self.add_attribute(
            SvgAttribute.STROKE_OPACITY,
            validator.unit_interval(value, SvgAttribute.STROKE_OPACITY),
        )

    @setter(SvgAttribute.STROKE_WIDTH)
    def stroke_width(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.STROKE_WIDTH, value)


class OpacityMixin:
    @setter(SvgAttribute.OPACITY)
    def opacity(self, value: Number) -> Self:
        return self.add_attribute(
            SvgAttribute.OPACITY, validator.unit_interval(value, SvgAttribute.OPACITY)
        )


class TransformMixin:
    @setter(SvgAttribute.TRANSFORM)
    def transform(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.TRANSFORM, value)


class PositionMixin:
    @setter(SvgAttribute.X)
    def x(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.X, value)

    @setter(SvgAttribute.Y)
    def y(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.Y, value)


class SizeMixin:
    @setter(SvgAttribute.WIDTH)
    def width(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.WIDTH, value)

    @setter(SvgAttribute.HEIGHT)
    def height(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.HEIGHT, value)


class CenterMixin:
    @setter(SvgAttribute.CX)
    def cx(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.CX, value)

    @setter(SvgAttribute.CY)
    def cy(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.CY, value)


class RadiusMixin:
    @setter(SvgAttribute.R)
    def r(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.R, value)


class CornerRadiusMixin:
    """rx/ry: corner radii on rect, semi-axes on ellipse."""

    @setter(SvgAttribute.RX)
    def rx(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.RX, value)

    @setter(SvgAttribute.RY)
    def ry(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.RY, value)


class EndpointsMixin:
    """Start and end coordinates of a line or linear gradient vector."""

    @setter(SvgAttribute.X1)
    def x1(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.X1, value)

    @setter(SvgAttribute.Y1)
    def y1(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.Y1, value)

    @setter(SvgAttribute.X2)
    def x2(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.X2, value)

    @setter(SvgAttribute.Y2)
    def y2(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.Y2, value)


class PathLengthMixin:
    @setter(SvgAttribute.PATH_LENGTH)
    def path_length(self, value: Number) -> Self:
        """Set pathLength; must be a non-negative number or None."""
        return self.add_attribute(
            SvgAttribute.PATH_LENGTH, validator.non_negative(value, SvgAttribute.PATH_LENGTH)
        )


class PointsMixin:
    @setter(SvgAttribute.POINTS)
    def points(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.POINTS, value)


class HrefMixin:
    @setter(SvgAttribute.HREF)
    def href(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.HREF, value)


class ViewBoxMixin:
    @setter(SvgAttribute.VIEW_BOX)
    def view_box(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.VIEW_BOX, value)


class AspectRatioMixin:
    @setter(SvgAttribute.PRESERVE_ASPECT_RATIO)
    def preserve_aspect_ratio(self, value: PreserveAspectRatio | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.PRESERVE_ASPECT_RATIO,
            validator.one_of(value, PreserveAspectRatio, SvgAttribute.PRESERVE_ASPECT_RATIO),
        )


class ReferencePointMixin:
    @setter(SvgAttribute.REF_X)
    def ref_x(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.REF_X, value)

    @setter(SvgAttribute.REF_Y)
    def ref_y(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.REF_Y, value)


class GradientMixin:
    """Attributes shared by linear and radial gradients."""

    @setter(SvgAttribute.GRADIENT_TRANSFORM)
    def gradient_transform(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.GRADIENT_TRANSFORM, value)

    @setter(SvgAttribute.GRADIENT_UNITS)
    def gradient_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.GRADIENT_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.GRADIENT_UNITS),
        )

    @setter(SvgAttribute.SPREAD_METHOD)
    def spread_method(self, value: SpreadMethod | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.SPREAD_METHOD,
            validator.one_of(value, SpreadMethod, SvgAttribute.SPREAD_METHOD),
        )
