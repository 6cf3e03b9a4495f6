"""
Immutable, validating builders for SVG markup.

Usage:
    from svgtag import Circle, FillRule

    Circle.tag().cx(50).cy(50).r(40).fill_rule(FillRule.EVENODD).render()

    python -m svgtag render circle --attr cx=50 --attr r=40
    python -m svgtag values StrokeLineCap
"""

from .base import BaseTag, BlockTag, DefaultsProvider, ThemeProvider, VoidTag
from .config import ConfigThemeProvider, DefaultsConfig, load_defaults_config, load_yaml
from .defaults import TagDefaults, current_defaults, get_defaults, set_defaults, use_defaults
from .document import Svg
from .effects import ClipPath, Filter, Marker, Mask
from .errors import ContentError, InvalidValueError, MarkupError, SvgFileError, SvgTagError
from .paint import LinearGradient, Pattern, RadialGradient, Stop
from .sanitizer import sanitize_svg
from .shapes import Circle, Ellipse, Line, Path, Polygon, Polyline, Rect
from .structure import Defs, ForeignObject, G, Image, Symbol, Use
from .text import Text
from .values import (
    VOCABULARIES,
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
    SvgAttribute,
    TextAnchor,
    TextDecorationLine,
    TextDecorationStyle,
    WritingMode,
)

# Tag name -> builder class
ELEMENTS: dict[str, type[BaseTag]] = {
    cls.tag_name: cls
    for cls in (
        Circle,
        ClipPath,
        Defs,
        Ellipse,
        Filter,
        ForeignObject,
        G,
        Image,
        Line,
        LinearGradient,
        Marker,
        Mask,
        Path,
        Pattern,
        Polygon,
        Polyline,
        RadialGradient,
        Rect,
        Stop,
        Svg,
        Symbol,
        Text,
        Use,
    )
}

__all__ = [
    # Builders
    "BaseTag",
    "BlockTag",
    "VoidTag",
    "Circle",
    "ClipPath",
    "Defs",
    "Ellipse",
    "Filter",
    "ForeignObject",
    "G",
    "Image",
    "Line",
    "LinearGradient",
    "Marker",
    "Mask",
    "Path",
    "Pattern",
    "Polygon",
    "Polyline",
    "RadialGradient",
    "Rect",
    "Stop",
    "Svg",
    "Symbol",
    "Text",
    "Use",
    "ELEMENTS",
    # Providers
    "DefaultsProvider",
    "ThemeProvider",
    "ConfigThemeProvider",
    # Config
    "DefaultsConfig",
    "TagDefaults",
    "current_defaults",
    "get_defaults",
    "set_defaults",
    "use_defaults",
    "load_defaults_config",
    "load_yaml",
    # Values
    "VOCABULARIES",
    "ClipPathUnits",
    "CoordinateUnits",
    "Decoding",
    "DominantBaseline",
    "FetchPriority",
    "FillRule",
    "FontStyle",
    "LengthAdjust",
    "MarkerUnits",
    "MaskType",
    "Orient",
    "PreserveAspectRatio",
    "SpreadMethod",
    "StrokeLineCap",
    "StrokeLineJoin",
    "SvgAttribute",
    "TextAnchor",
    "TextDecorationLine",
    "TextDecorationStyle",
    "WritingMode",
    # Errors
    "SvgTagError",
    "InvalidValueError",
    "ContentError",
    "MarkupError",
    "SvgFileError",
    # Sanitizer
    "sanitize_svg",
]
