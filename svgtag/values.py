"""Attribute value vocabularies defined by the SVG and CSS specifications.

Every member's value is the exact keyword written to markup. Members are
declared in the order used when listing valid values in error messages.
"""

from enum import Enum


class Vocabulary(str, Enum):
    """Base for closed sets of attribute keywords."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        """Return every wire value in declaration order."""
        return [member.value for member in cls]


class ClipPathUnits(Vocabulary):
    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class CoordinateUnits(Vocabulary):
    """Coordinate system for *Units attributes (clipPath, filter, gradient, mask, pattern)."""

    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class Decoding(Vocabulary):
    ASYNC = "async"
    AUTO = "auto"
    SYNC = "sync"


class DominantBaseline(Vocabulary):
    ALPHABETIC = "alphabetic"
    AUTO = "auto"
    CENTRAL = "central"
    HANGING = "hanging"
    IDEOGRAPHIC = "ideographic"
    MATHEMATICAL = "mathematical"
    MIDDLE = "middle"
    TEXT_BOTTOM = "text-bottom"
    TEXT_TOP = "text-top"


class FetchPriority(Vocabulary):
    AUTO = "auto"
    HIGH = "high"
    LOW = "low"


class FillRule(Vocabulary):
    """Winding rule that decides which points are inside a shape."""

    EVENODD = "evenodd"
    NONZERO = "nonzero"


class FontStyle(Vocabulary):
    ITALIC = "italic"
    NORMAL = "normal"
    OBLIQUE = "oblique"


class LengthAdjust(Vocabulary):
    SPACING = "spacing"
    SPACING_AND_GLYPHS = "spacingAndGlyphs"


class MarkerUnits(Vocabulary):
    STROKE_WIDTH = "strokeWidth"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class MaskType(Vocabulary):
    ALPHA = "alpha"
    LUMINANCE = "luminance"


class Orient(Vocabulary):
    """Keyword forms of the marker orient attribute; angles are passed as numbers."""

    AUTO = "auto"
    AUTO_START_REVERSE = "auto-start-reverse"


class PreserveAspectRatio(Vocabulary):
    """Viewport alignment, optionally followed by meet or slice."""

    NONE = "none"
    X_MAX_Y_MAX = "xMaxYMax"
    X_MAX_Y_MAX_MEET = "xMaxYMax meet"
    X_MAX_Y_MAX_SLICE = "xMaxYMax slice"
    X_MAX_Y_MID = "xMaxYMid"
    X_MAX_Y_MID_MEET = "xMaxYMid meet"
    X_MAX_Y_MID_SLICE = "xMaxYMid slice"
    X_MAX_Y_MIN = "xMaxYMin"
    X_MAX_Y_MIN_MEET = "xMaxYMin meet"
    X_MAX_Y_MIN_SLICE = "xMaxYMin slice"
    X_MID_Y_MAX = "xMidYMax"
    X_MID_Y_MAX_MEET = "xMidYMax meet"
    X_MID_Y_MAX_SLICE = "xMidYMax slice"
    X_MID_Y_MID = "xMidYMid"
    X_MID_Y_MID_MEET = "xMidYMid meet"
    X_MID_Y_MID_SLICE = "xMidYMid slice"
    X_MID_Y_MIN = "xMidYMin"
    X_MID_Y_MIN_MEET = "xMidYMin meet"
    X_MID_Y_MIN_SLICE = "xMidYMin slice"
    X_MIN_Y_MAX = "xMinYMax"
    X_MIN_Y_MAX_MEET = "xMinYMax meet"
    X_MIN_Y_MAX_SLICE = "xMinYMax slice"
    X_MIN_Y_MID = "xMinYMid"
    X_MIN_Y_MID_MEET = "xMinYMid meet"
    X_MIN_Y_MID_SLICE = "xMinYMid slice"
    X_MIN_Y_MIN = "xMinYMin"
    X_MIN_Y_MIN_MEET = "xMinYMin meet"
    X_MIN_Y_MIN_SLICE = "xMinYMin slice"


class SpreadMethod(Vocabulary):
    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class StrokeLineCap(Vocabulary):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLineJoin(Vocabulary):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"


class TextAnchor(Vocabulary):
    END = "end"
    MIDDLE = "middle"
    START = "start"


class TextDecorationLine(Vocabulary):
    BLINK = "blink"
    GRAMMAR_ERROR = "grammar-error"
    LINE_THROUGH = "line-through"
    NONE = "none"
    OVERLINE = "overline"
    SPELLING_ERROR = "spelling-error"
    UNDERLINE = "underline"


class TextDecorationStyle(Vocabulary):
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    SOLID = "solid"
    WAVY = "wavy"


class WritingMode(Vocabulary):
    HORIZONTAL_TB = "horizontal-tb"
    SIDEWAYS_LR = "sideways-lr"
    SIDEWAYS_RL = "sideways-rl"
    VERTICAL_LR = "vertical-lr"
    VERTICAL_RL = "vertical-rl"


class SvgAttribute(Vocabulary):
    """Wire names of the attributes set by element builders."""

    CLIP_PATH_UNITS = "clipPathUnits"
    CX = "cx"
    CY = "cy"
    D = "d"
    DECODING = "decoding"
    DOMINANT_BASELINE = "dominant-baseline"
    DX = "dx"
    DY = "dy"
    FETCHPRIORITY = "fetchpriority"
    FILL = "fill"
    FILL_OPACITY = "fill-opacity"
    FILL_RULE = "fill-rule"
    FILTER_UNITS = "filterUnits"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    FR = "fr"
    FX = "fx"
    FY = "fy"
    GRADIENT_TRANSFORM = "gradientTransform"
    GRADIENT_UNITS = "gradientUnits"
    HEIGHT = "height"
    HREF = "href"
    LENGTH_ADJUST = "lengthAdjust"
    LETTER_SPACING = "letter-spacing"
    MARKER_HEIGHT = "markerHeight"
    MARKER_UNITS = "markerUnits"
    MARKER_WIDTH = "markerWidth"
    MASK_CONTENT_UNITS = "maskContentUnits"
    MASK_TYPE = "mask-type"
    MASK_UNITS = "maskUnits"
    OFFSET = "offset"
    OPACITY = "opacity"
    ORIENT = "orient"
    PATH_LENGTH = "pathLength"
    PATTERN_CONTENT_UNITS = "patternContentUnits"
    PATTERN_TRANSFORM = "patternTransform"
    PATTERN_UNITS = "patternUnits"
    POINTS = "points"
    PRESERVE_ASPECT_RATIO = "preserveAspectRatio"
    PRIMITIVE_UNITS = "primitiveUnits"
    R = "r"
    REF_X = "refX"
    REF_Y = "refY"
    ROTATE = "rotate"
    RX = "rx"
    RY = "ry"
    SPREAD_METHOD = "spreadMethod"
    STOP_COLOR = "stop-color"
    STOP_OPACITY = "stop-opacity"
    STROKE = "stroke"
    STROKE_DASHARRAY = "stroke-dasharray"
    STROKE_LINECAP = "stroke-linecap"
    STROKE_LINEJOIN = "stroke-linejoin"
    STROKE_MITERLIMIT = "stroke-miterlimit"
    STROKE_OPACITY = "stroke-opacity"
    STROKE_WIDTH = "stroke-width"
    TEXT_ANCHOR = "text-anchor"
    TEXT_DECORATION = "text-decoration"
    TEXT_LENGTH = "textLength"
    TITLE = "title"
    TRANSFORM = "transform"
    VIEW_BOX = "viewBox"
    WIDTH = "width"
    WORD_SPACING = "word-spacing"
    WRITING_MODE = "writing-mode"
    X = "x"
    X1 = "x1"
    X2 = "x2"
    XMLNS = "xmlns"
    Y = "y"
    Y1 = "y1"
    Y2 = "y2"


VOCABULARIES: dict[str, type[Vocabulary]] = {
    vocabulary.__name__: vocabulary
    for vocabulary in (
        ClipPathUnits,
        CoordinateUnits,
        Decoding,
        DominantBaseline,
        FetchPriority,
        FillRule,
        FontStyle,
        LengthAdjust,
        MarkerUnits,
        MaskType,
        Orient,
        PreserveAspectRatio,
        SpreadMethod,
        StrokeLineCap,
        StrokeLineJoin,
        TextAnchor,
        TextDecorationLine,
        TextDecorationStyle,
        WritingMode,
    )
}
