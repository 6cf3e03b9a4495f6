"""Basic shape elements: circle, ellipse, line, path, polygon, polyline and rect."""

from typing import ClassVar, Self

from .attributes import (
    CenterMixin,
    CornerRadiusMixin,
    EndpointsMixin,
    FillMixin,
    OpacityMixin,
    PathLengthMixin,
    PointsMixin,
    PositionMixin,
    RadiusMixin,
    SizeMixin,
    StrokeMixin,
    TransformMixin,
    setter,
)
from .base import VoidTag
from .values import SvgAttribute


class Circle(CenterMixin, RadiusMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, VoidTag):
    """``<circle>`` centered on (cx, cy) with radius r."""

    tag_name: ClassVar[str] = "circle"


class Ellipse(
    CenterMixin,
    CornerRadiusMixin,
    PathLengthMixin,
    FillMixin,
    StrokeMixin,
    OpacityMixin,
    TransformMixin,
    VoidTag,
):
    """``<ellipse>`` centered on (cx, cy) with semi-axes rx and ry."""

    tag_name: ClassVar[str] = "ellipse"


class Line(EndpointsMixin, PathLengthMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, VoidTag):
    tag_name: ClassVar[str] = "line"


class Path(PathLengthMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, VoidTag):
    tag_name: ClassVar[str] = "path"

    @setter(SvgAttribute.D)
    def d(self, value: str | None) -> Self:
        """Set the path data (e.g. "M10 10 L90 90")."""
        return self.add_attribute(SvgAttribute.D, value)


class Polygon(PointsMixin, PathLengthMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, VoidTag):
    """Closed shape through a list of points."""

    tag_name: ClassVar[str] = "polygon"


class Polyline(PointsMixin, PathLengthMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, VoidTag):
    """Open shape through a list of points."""

    tag_name: ClassVar[str] = "polyline"


class Rect(
    PositionMixin,
    SizeMixin,
    CornerRadiusMixin,
    PathLengthMixin,
    FillMixin,
    StrokeMixin,
    OpacityMixin,
    TransformMixin,
    VoidTag,
):
    tag_name: ClassVar[str] = "rect"
