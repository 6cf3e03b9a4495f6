"""The ``<text>`` element and its typography attributes."""

from typing import ClassVar, Self

from . import validator
from .attributes import (
    FillMixin,
    Number,
    OpacityMixin,
    PositionMixin,
    StrokeMixin,
    TransformMixin,
    setter,
)
from .base import BlockTag
from .values import (
    DominantBaseline,
    FontStyle,
    LengthAdjust,
    SvgAttribute,
    TextAnchor,
    TextDecorationLine,
    TextDecorationStyle,
    WritingMode,
)


class Text(PositionMixin, FillMixin, StrokeMixin, OpacityMixin, TransformMixin, BlockTag):
    """Text run positioned at (x, y); the content is the text itself.

    Content is written as-is, so callers escape user text with
    ``html.escape_xml`` before passing it to ``content()``.
    """

    tag_name: ClassVar[str] = "text"

    @setter(SvgAttribute.DX)
    def dx(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.DX, value)

    @setter(SvgAttribute.DY)
    def dy(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.DY, value)

    @setter(SvgAttribute.ROTATE)
    def rotate(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.ROTATE, value)

    @setter(SvgAttribute.TEXT_LENGTH)
    def text_length(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.TEXT_LENGTH, value)

    @setter(SvgAttribute.LENGTH_ADJUST)
    def length_adjust(self, value: LengthAdjust | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.LENGTH_ADJUST,
            validator.one_of(value, LengthAdjust, SvgAttribute.LENGTH_ADJUST),
        )

    @setter(SvgAttribute.FONT_FAMILY)
    def font_family(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.FONT_FAMILY, value)

    @setter(SvgAttribute.FONT_SIZE)
    def font_size(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.FONT_SIZE, value)

    @setter(SvgAttribute.FONT_STYLE)
    def font_style(self, value: FontStyle | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.FONT_STYLE, validator.one_of(value, FontStyle, SvgAttribute.FONT_STYLE)
        )

    @setter(SvgAttribute.FONT_WEIGHT)
    def font_weight(self, value: int | str | None) -> Self:
        return self.add_attribute(SvgAttribute.FONT_WEIGHT, value)

    @setter(SvgAttribute.LETTER_SPACING)
    def letter_spacing(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.LETTER_SPACING, value)

    @setter(SvgAttribute.WORD_SPACING)
    def word_spacing(self, value: Number) -> Self:
        return self.add_attribute(SvgAttribute.WORD_SPACING, value)

    @setter(SvgAttribute.TEXT_ANCHOR)
    def text_anchor(self, value: TextAnchor | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.TEXT_ANCHOR, validator.one_of(value, TextAnchor, SvgAttribute.TEXT_ANCHOR)
        )

    @setter(SvgAttribute.DOMINANT_BASELINE)
    def dominant_baseline(self, value: DominantBaseline | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.DOMINANT_BASELINE,
            validator.one_of(value, DominantBaseline, SvgAttribute.DOMINANT_BASELINE),
        )

    @setter(SvgAttribute.TEXT_DECORATION)
    def text_decoration(self, value: TextDecorationLine | TextDecorationStyle | str | None) -> Self:
        """Set text-decoration; shorthand values like "underline dotted" are passed through."""
        return self.add_attribute(SvgAttribute.TEXT_DECORATION, value)

    @setter(SvgAttribute.WRITING_MODE)
    def writing_mode(self, value: WritingMode | str | None) -> Self:
        return self.add_attribute(
            SvgAttribute.WRITING_MODE,
            validator.one_of(value, WritingMode, SvgAttribute.WRITING_MODE),
        )
