"""Public API for svgtree."""
from .elements import SVG, SVG_NS, Circle, Element, Group, Line, Path, Rect, Text
from .errors import AttributeValueError, SvgTreeError, SvgWriteError
from .geometry import point_along, segment_height, segment_length, segment_slope, segment_width
from .output import write_svg

__all__ = [
    "SVG",
    "SVG_NS",
    "AttributeValueError",
    "Circle",
    "Element",
    "Group",
    "Line",
    "Path",
    "Rect",
    "SvgTreeError",
    "SvgWriteError",
    "Text",
    "point_along",
    "segment_height",
    "segment_length",
    "segment_slope",
    "segment_width",
    "write_svg",
]
