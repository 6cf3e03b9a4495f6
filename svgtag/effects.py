"""Clipping, masking, markers and filters."""

from typing import ClassVar, Self

from . import validator
from .attributes import (
    AspectRatioMixin,
    Number,
    OpacityMixin,
    PositionMixin,
    ReferencePointMixin,
    SizeMixin,
    TransformMixin,
    ViewBoxMixin,
    setter,
)
from .base import BlockTag
from .values import CoordinateUnits, MarkerUnits, MaskType, Orient, SvgAttribute


class ClipPath(OpacityMixin, TransformMixin, BlockTag):
    tag_name: ClassVar[str] = "clipPath"

    @setter(SvgAttribute.CLIP_PATH_UNITS)
    def clip_path_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.CLIP_PATH_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.CLIP_PATH_UNITS),
        )


class Mask(PositionMixin, SizeMixin, BlockTag):
    tag_name: ClassVar[str] = "mask"

    @setter(SvgAttribute.MASK_CONTENT_UNITS)
    def mask_content_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.MASK_CONTENT_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.MASK_CONTENT_UNITS),
        )

    @setter(SvgAttribute.MASK_TYPE)
    def mask_type(self, value: MaskType | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.MASK_TYPE, validator.one_of(value, MaskType, SvgAttribute.MASK_TYPE)
        )

    @setter(SvgAttribute.MASK_UNITS)
    def mask_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.MASK_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.MASK_UNITS),
        )


class Marker(
    ReferencePointMixin,
    ViewBoxMixin,
    AspectRatioMixin,
    OpacityMixin,
    TransformMixin,
    BlockTag,
):
    """Arrowhead or polymarker drawn at the vertices of a path or line."""

    tag_name: ClassVar[str] = "marker"

    @setter(SvgAttribute.MARKER_HEIGHT)
    def marker_height(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.MARKER_HEIGHT, value)

    @setter(SvgAttribute.MARKER_UNITS)
    def marker_units(self, value: MarkerUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.MARKER_UNITS,
            validator.one_of(value, MarkerUnits, SvgAttribute.MARKER_UNITS),
        )

    @setter(SvgAttribute.MARKER_WIDTH)
    def marker_width(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.MARKER_WIDTH, value)

    @setter(SvgAttribute.ORIENT)
    def orient(self, value: Orient | float | int | str | None) -> Self:
        """Set orient: an angle, or one of the Orient keywords. Not validated."""
        return self.add_attribute(SvgAttribute.ORIENT, value)


class Filter(PositionMixin, SizeMixin, BlockTag):
    tag_name: ClassVar[str] = "filter"

    @setter(SvgAttribute.FILTER_UNITS)
    def filter_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.FILTER_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.FILTER_UNITS),
        )

    @setter(SvgAttribute.PRIMITIVE_UNITS)
    def primitive_units(self, value: CoordinateUnits | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.PRIMITIVE_UNITS,
            validator.one_of(value, CoordinateUnits, SvgAttribute.PRIMITIVE_UNITS),
        )
