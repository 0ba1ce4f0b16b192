"""SVG element tree: tagged nodes with attributes, children and serialization.

Every element stores its attributes as text. Numbers handed to
:meth:`Element.set_attribute` (or to the shape constructors) are coerced to
their decimal form on write, so serialization never has to format values.

A node owns its children. Adding the same node to two parents, or adding an
ancestor to one of its descendants, is not detected; callers must keep the
structure a tree.
"""
from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union
from xml.sax.saxutils import escape

from . import geometry
from .errors import AttributeValueError
from .output import write_svg
from . import text_metrics

SVG_NS = "http://www.w3.org/2000/svg"
INDENT = "\t"
FLOAT_PRECISION = 6

logger = logging.getLogger(__name__)

AttributeValue = Union[str, int, float]
Point = Tuple[float, float]

_ATTR_ENTITIES = {'"': "&quot;"}
_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_MOVE_TO = re.compile(rf"M\s*({_NUMBER})[\s,]*({_NUMBER})")


def _fmt(value: Union[int, float]) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and math.isclose(value, round(value), rel_tol=0.0, abs_tol=1e-12):
        text = str(int(round(value)))
    else:
        text = f"{value:.{FLOAT_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _coerce(value: AttributeValue) -> str:
    if isinstance(value, bool):
        raise TypeError("attribute values must be str, int or float, not bool")
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return _fmt(value)
    raise TypeError(
        f"attribute values must be str, int or float, not {type(value).__name__}"
    )


class Element:
    """Base class for all SVG nodes.

    Subclasses set ``TAG``; it is the element name used when serializing and
    cannot change after construction.
    """

    TAG = ""

    def __init__(self, attributes: Optional[Mapping[str, AttributeValue]] = None) -> None:
        if not self.TAG:
            raise TypeError(f"{type(self).__name__} does not define an element tag")
        self.attributes: Dict[str, str] = {}
        self.children: List[Element] = []
        self.content = ""
        self.set_attributes(attributes)

    @property
    def tag(self) -> str:
        return self.TAG

    def set_attribute(self, name: str, value: AttributeValue) -> "Element":
        self.attributes[name] = _coerce(value)
        return self

    def set_attributes(self, attributes: Optional[Mapping[str, AttributeValue]]) -> "Element":
        if attributes:
            for name, value in attributes.items():
                self.set_attribute(name, value)
        return self

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    def add_child(self, *nodes: "Element") -> "Element":
        """Append ``nodes`` in order and return the last one added.

        The returned node is the child itself, so it can be configured further
        after it has been attached.
        """
        if not nodes:
            raise TypeError("add_child() requires at least one element")
        for node in nodes:
            self.children.append(node)
        return nodes[-1]

    def _number(self, name: str) -> Optional[float]:
        value = self.attributes.get(name)
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            raise AttributeValueError(name, value) from None

    def get_width(self) -> Optional[float]:
        return self._number("width")

    def get_height(self) -> Optional[float]:
        return self._number("height")

    def _open_tag(self, prefix: str) -> str:
        attrs = "".join(
            f' {name}="{escape(self.attributes[name], _ATTR_ENTITIES)}"'
            for name in sorted(self.attributes)
        )
        return f"{prefix}<{self.tag}{attrs}"

    def serialize(self, indent_level: int = 0, indent: str = INDENT) -> str:
        prefix = indent * indent_level
        ret = self._open_tag(prefix)
        if not self.children:
            return ret + " />"
        lines = [ret + ">"]
        for child in self.children:
            lines.append(child.serialize(indent_level + 1, indent))
        lines.append(f"{prefix}</{self.tag}>")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag!r} attrs={len(self.attributes)} children={len(self.children)}>"


class SVG(Element):
    """Document root; declares the SVG namespace unless given other attributes."""

    TAG = "svg"

    def __init__(self, attributes: Optional[Mapping[str, AttributeValue]] = None) -> None:
        if attributes is None:
            attributes = {"xmlns": SVG_NS}
        super().__init__(attributes)

    def save(self, path: Union[str, Path], *, encoding: str = "utf-8") -> Path:
        return write_svg(self, path, encoding=encoding)


class Group(Element):
    TAG = "g"


def _positional(**values: Optional[float]) -> Dict[str, float]:
    return {name: value for name, value in values.items() if value is not None}


class Rect(Element):
    TAG = "rect"

    def __init__(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        *,
        attributes: Optional[Mapping[str, AttributeValue]] = None,
    ) -> None:
        super().__init__(_positional(x=x, y=y, width=width, height=height))
        self.set_attributes(attributes)


class Circle(Element):
    TAG = "circle"

    def __init__(
        self,
        cx: Optional[float] = None,
        cy: Optional[float] = None,
        r: Optional[float] = None,
        *,
        attributes: Optional[Mapping[str, AttributeValue]] = None,
    ) -> None:
        super().__init__(_positional(cx=cx, cy=cy, r=r))
        self.set_attributes(attributes)

    @classmethod
    def at(cls, center: Point, r: float, **kwargs) -> "Circle":
        return cls(center[0], center[1], r, **kwargs)


class Line(Element):
    """A straight segment between (x1, y1) and (x2, y2).

    Besides being drawable, a line is the reference for :meth:`along`, which
    places other elements at a proportional distance from its start. The
    geometry accessors return ``None`` while any endpoint is unset.
    """

    TAG = "line"

    def __init__(
        self,
        x1: Optional[float] = None,
        y1: Optional[float] = None,
        x2: Optional[float] = None,
        y2: Optional[float] = None,
        *,
        attributes: Optional[Mapping[str, AttributeValue]] = None,
    ) -> None:
        super().__init__(_positional(x1=x1, y1=y1, x2=x2, y2=y2))
        self.set_attributes(attributes)

    @property
    def x1(self) -> Optional[float]:
        return self._number("x1")

    @property
    def y1(self) -> Optional[float]:
        return self._number("y1")

    @property
    def x2(self) -> Optional[float]:
        return self._number("x2")

    @property
    def y2(self) -> Optional[float]:
        return self._number("y2")

    def endpoints(self) -> Optional[Tuple[float, float, float, float]]:
        coords = (self.x1, self.y1, self.x2, self.y2)
        if any(value is None for value in coords):
            return None
        return coords

    def get_width(self) -> Optional[float]:
        coords = self.endpoints()
        return None if coords is None else geometry.segment_width(*coords)

    def get_height(self) -> Optional[float]:
        coords = self.endpoints()
        return None if coords is None else geometry.segment_height(*coords)

    def get_length(self) -> Optional[float]:
        coords = self.endpoints()
        return None if coords is None else geometry.segment_length(*coords)

    def get_slope(self) -> Optional[float]:
        coords = self.endpoints()
        return None if coords is None else geometry.segment_slope(*coords)

    def along(self, fraction: float) -> Optional[Point]:
        """Return the coordinates ``fraction`` of the way along this line."""
        coords = self.endpoints()
        return None if coords is None else geometry.point_along(*coords, fraction)


class Path(Element):
    """A ``<path>`` built up command by command in its ``d`` attribute.

    The path remembers where its latest subpath started so :meth:`close_path`
    can draw back to it. When ``d`` is assigned directly, that start is taken
    from the last absolute ``M`` command in the new value.
    """

    TAG = "path"

    def __init__(self, attributes: Optional[Mapping[str, AttributeValue]] = None) -> None:
        self._x_start: Optional[float] = None
        self._y_start: Optional[float] = None
        super().__init__(attributes)

    def set_attribute(self, name: str, value: AttributeValue) -> "Path":
        super().set_attribute(name, value)
        if name == "d":
            moves = _MOVE_TO.findall(self.attributes["d"])
            if moves:
                self._x_start, self._y_start = (float(v) for v in moves[-1])
            else:
                self._x_start = self._y_start = None
        return self

    def _append(self, command: str, x: float, y: float) -> None:
        token = f"{command} {_coerce(x)} {_coerce(y)}"
        current = self.attributes.get("d")
        self.attributes["d"] = token if not current else f"{current} {token}"

    def move_to(self, x: float, y: float) -> "Path":
        """Start a new subpath at (x, y); later :meth:`close_path` returns here."""
        self._append("M", x, y)
        self._x_start = x
        self._y_start = y
        return self

    def line_to(self, x: Union[float, Point], y: Optional[float] = None) -> "Path":
        """Draw a line to (x, y), or to the point ``x`` when ``y`` is omitted.

        On an empty path this starts the path at the point instead.
        """
        if y is None:
            x, y = x
        if not self.attributes.get("d"):
            return self.move_to(x, y)
        self._append("L", x, y)
        return self

    def close_path(self) -> "Path":
        """Draw a line back to the most recent start point.

        Does nothing on a path with no start point, such as an empty one.
        """
        if self._x_start is None or self._y_start is None:
            logger.debug("close_path() on a path with no start point")
            return self
        self._append("L", self._x_start, self._y_start)
        return self


class Text(Element):
    """A text label; renders its content inline and never has children."""

    TAG = "text"

    def __init__(
        self,
        x: float,
        y: float,
        content: str = "",
        *,
        attributes: Optional[Mapping[str, AttributeValue]] = None,
    ) -> None:
        super().__init__({"x": x, "y": y})
        self.set_attributes(attributes)
        self.content = content

    @classmethod
    def at(cls, position: Point, content: str = "", **kwargs) -> "Text":
        return cls(position[0], position[1], content, **kwargs)

    @classmethod
    def along(cls, line: Line, fraction: float, content: str = "", **kwargs) -> Optional["Text"]:
        """Center a label on the point ``fraction`` of the way along ``line``.

        Returns ``None`` while the line is missing an endpoint.
        """
        point = line.along(fraction)
        if point is None:
            return None
        label = cls.at(point, content, **kwargs)
        if "text-anchor" not in label.attributes:
            label.set_attribute("text-anchor", "middle")
        return label

    def serialize(self, indent_level: int = 0, indent: str = INDENT) -> str:
        return f"{self._open_tag(indent * indent_level)}>{escape(self.content)}</{self.tag}>"

    def font_size(self) -> float:
        """Return the ``font-size`` attribute in user units, ignoring a ``px`` suffix."""
        value = self.attributes.get("font-size")
        if value is None:
            return text_metrics.DEFAULT_FONT_SIZE
        try:
            return float(value[:-2] if value.endswith("px") else value)
        except ValueError:
            raise AttributeValueError("font-size", value) from None

    def measure(self) -> float:
        """Return the advance width of the label with its own font attributes."""
        width, _ = text_metrics.text_extent(
            self.content, self.font_size(), self.attributes.get("font-family")
        )
        return width

    def bbox(self) -> Tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` of the label.

        ``y`` is the baseline, so the box extends one font size above it, and
        ``text-anchor`` decides how much of the width lies left of ``x``.
        """
        x, y = self._number("x"), self._number("y")
        width, height = text_metrics.text_extent(
            self.content, self.font_size(), self.attributes.get("font-family")
        )
        left = text_metrics.anchored_left(x or 0.0, width, self.attributes.get("text-anchor"))
        return left, (y or 0.0) - height, width, height


__all__ = [
    "FLOAT_PRECISION",
    "INDENT",
    "SVG_NS",
    "Circle",
    "Element",
    "Group",
    "Line",
    "Path",
    "Rect",
    "SVG",
    "Text",
]
