"""Structural and embedding elements: defs, g, symbol, use, image and foreignObject."""

from typing import ClassVar, Self

from . import validator
from .attributes import (
    AspectRatioMixin,
    FillMixin,
    HrefMixin,
    OpacityMixin,
    PositionMixin,
    ReferencePointMixin,
    SizeMixin,
    StrokeMixin,
    TransformMixin,
    ViewBoxMixin,
    setter,
)
from .base import BlockTag, VoidTag
from .values import Decoding, FetchPriority, SvgAttribute


class Defs(BlockTag):
    """Container for elements that are only rendered when referenced."""

    tag_name: ClassVar[str] = "defs"


class G(FillMixin, StrokeMixin, OpacityMixin, TransformMixin, BlockTag):
    """Group whose paint and transform are inherited by its children."""

    tag_name: ClassVar[str] = "g"


class Symbol(
    PositionMixin,
    SizeMixin,
    ReferencePointMixin,
    ViewBoxMixin,
    AspectRatioMixin,
    OpacityMixin,
    TransformMixin,
    BlockTag,
):
    tag_name: ClassVar[str] = "symbol"


class Use(PositionMixin, SizeMixin, HrefMixin, OpacityMixin, TransformMixin, VoidTag):
    """``<use>`` referencing another element, usually ``href="#id"``."""

    tag_name: ClassVar[str] = "use"


class Image(
    PositionMixin,
    SizeMixin,
    HrefMixin,
    AspectRatioMixin,
    OpacityMixin,
    TransformMixin,
    VoidTag,
):
    tag_name: ClassVar[str] = "image"

    @setter(SvgAttribute.DECODING)
    def decoding(self, value: Decoding | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.DECODING, validator.one_of(value, Decoding, SvgAttribute.DECODING)
        )

    @setter(SvgAttribute.FETCHPRIORITY)
    def fetchpriority(self, value: FetchPriority | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.FETCHPRIORITY,
            validator.one_of(value, FetchPriority, SvgAttribute.FETCHPRIORITY),
        )


class ForeignObject(PositionMixin, SizeMixin, OpacityMixin, TransformMixin, BlockTag):
    """Region holding markup from another namespace, typically XHTML."""

    tag_name: ClassVar[str] = "foreignObject"
