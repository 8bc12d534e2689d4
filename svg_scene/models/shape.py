"""
Shape models for SVG generation.
Provides the closed set of drawable primitives. Every shape renders itself
to a single SVG element, shifts its own geometry in place, and reports a
freshly computed axis-aligned bounding box.
"""

import copy
from enum import Enum, auto
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import xml.etree.ElementTree as ET

from typing_extensions import Self

from svg_scene.models.color import Color, ColorError
from svg_scene.models.geometry import Point, Rect, format_number
from svg_scene.models.style import Fill, Stroke, Font, NO_STROKE_WIDTH
from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

# Type definitions
PointLike = Union[Point, Tuple[float, float], Sequence[float]]
FillLike = Union[Fill, Color, str, Tuple[int, int, int], None]

# Element fragments are indented one level inside the document root
FRAGMENT_INDENT = "\t"


class ShapeType(Enum):
    """Enum for the supported SVG shape types."""
    CIRCLE = auto()
    ELLIPSE = auto()
    RECTANGLE = auto()
    LINE = auto()
    POLYGON = auto()
    POLYLINE = auto()
    PATH = auto()
    TEXT = auto()


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


def to_point(value: PointLike) -> Point:
    """
    Copy a point, or build one from an (x, y) pair.

    Raises:
        ShapeError: If the value is not a point or a pair of numbers
    """
    if isinstance(value, Point):
        return value.copy()
    try:
        x, y = value
        return Point(x, y)
    except (TypeError, ValueError):
        raise ShapeError(f"Invalid point: {value!r}") from None


def _format_points(points: Iterable[Point]) -> str:
    return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in points)


class Shape:
    """
    Base class for SVG shapes.

    A shape owns its fill and stroke and its own geometry; it has no
    reference to any document it is appended to.
    """

    __slots__ = ('_type', '_fill', '_stroke')

    def __init__(
        self,
        shape_type: ShapeType,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        """
        Initialize a new shape.

        Args:
            shape_type: Type of shape
            fill: Fill, or a color value for one (transparent if None)
            stroke: Stroke (no stroke if None)
        """
        self._type = shape_type
        self._fill = self._process_fill(fill)
        self._stroke = stroke if stroke is not None else Stroke()

    @staticmethod
    def _process_fill(fill: FillLike) -> Fill:
        if isinstance(fill, Fill):
            return fill
        try:
            return Fill(fill)
        except ColorError as e:
            raise ShapeError(f"Invalid fill: {fill!r} - {str(e)}") from e

    @property
    def type(self) -> ShapeType:
        """Get shape type."""
        return self._type

    @property
    def fill(self) -> Fill:
        return self._fill

    @property
    def stroke(self) -> Stroke:
        return self._stroke

    def translate(self, offset: PointLike) -> Self:
        """
        Shift all owned geometry in place.

        Args:
            offset: Amount to shift by

        Returns:
            This shape
        """
        raise NotImplementedError("Subclasses must implement translate")

    def get_bounding_box(self) -> Rect:
        """
        Get the bounding box of the shape.

        Returns:
            Newly computed bounding box
        """
        raise NotImplementedError("Subclasses must implement get_bounding_box")

    def to_svg_element(self) -> ET.Element:
        """
        Convert shape to SVG element.

        Returns:
            XML element representing the shape
        """
        raise NotImplementedError("Subclasses must implement to_svg_element")

    def _add_common_attributes(self, element: ET.Element) -> None:
        """
        Add fill and stroke attributes to an SVG element.

        Args:
            element: XML element to add attributes to
        """
        for name, value in self._fill.attributes().items():
            element.set(name, value)
        for name, value in self._stroke.attributes().items():
            element.set(name, value)

    def to_svg_string(self) -> str:
        """
        Convert shape to an SVG element fragment.

        Returns:
            One indented element followed by a newline
        """
        element = self.to_svg_element()
        return FRAGMENT_INDENT + ET.tostring(element, encoding='unicode') + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert shape to dictionary representation.

        Returns:
            Dictionary with shape data, accepted by create_shape_from_dict
        """
        return {
            'type': self._type.name.lower(),
            'fill': _color_to_data(self._fill.color),
            'stroke': {
                'width': self._stroke.width,
                'color': _color_to_data(self._stroke.color),
                'non_scaling': self._stroke.non_scaling
            }
        }

    def copy(self) -> Self:
        """
        Create a deep copy of the shape.

        Returns:
            Copied shape
        """
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self._type.name})"


class Circle(Shape):
    """Circle given by its center and diameter."""

    __slots__ = ('_center', '_radius')

    def __init__(
        self,
        center: PointLike,
        diameter: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.CIRCLE, fill, stroke)
        self._center = to_point(center)
        self._radius = diameter / 2

    @property
    def center(self) -> Point:
        return self._center.copy()

    @property
    def radius(self) -> float:
        return self._radius

    def translate(self, offset: PointLike) -> Self:
        self._center.translate(to_point(offset))
        return self

    def get_bounding_box(self) -> Rect:
        corner = Point(self._center.x - self._radius, self._center.y - self._radius)
        return Rect(corner, self._radius * 2, self._radius * 2)

    def to_svg_element(self) -> ET.Element:
        circle = ET.Element('circle')
        circle.set('cx', format_number(self._center.x))
        circle.set('cy', format_number(self._center.y))
        circle.set('r', format_number(self._radius))
        self._add_common_attributes(circle)
        return circle

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'center': [self._center.x, self._center.y],
            'diameter': self._radius * 2
        })
        return data


class Ellipse(Shape):
    """Ellipse given by its center and full width and height."""

    __slots__ = ('_center', '_rx', '_ry')

    def __init__(
        self,
        center: PointLike,
        width: float,
        height: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.ELLIPSE, fill, stroke)
        self._center = to_point(center)
        self._rx = width / 2
        self._ry = height / 2

    @property
    def center(self) -> Point:
        return self._center.copy()

    @property
    def rx(self) -> float:
        return self._rx

    @property
    def ry(self) -> float:
        return self._ry

    def translate(self, offset: PointLike) -> Self:
        self._center.translate(to_point(offset))
        return self

    def get_bounding_box(self) -> Rect:
        corner = Point(self._center.x - self._rx, self._center.y - self._ry)
        return Rect(corner, self._rx * 2, self._ry * 2)

    def to_svg_element(self) -> ET.Element:
        ellipse = ET.Element('ellipse')
        ellipse.set('cx', format_number(self._center.x))
        ellipse.set('cy', format_number(self._center.y))
        ellipse.set('rx', format_number(self._rx))
        ellipse.set('ry', format_number(self._ry))
        self._add_common_attributes(ellipse)
        return ellipse

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'center': [self._center.x, self._center.y],
            'width': self._rx * 2,
            'height': self._ry * 2
        })
        return data


class Rectangle(Shape):
    """Axis-aligned rectangle given by its corner and extent."""

    __slots__ = ('_edge', '_width', '_height')

    def __init__(
        self,
        edge: PointLike,
        width: float,
        height: float,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.RECTANGLE, fill, stroke)
        self._edge = to_point(edge)
        self._width = width
        self._height = height

    @property
    def edge(self) -> Point:
        return self._edge.copy()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def translate(self, offset: PointLike) -> Self:
        self._edge.translate(to_point(offset))
        return self

    def get_bounding_box(self) -> Rect:
        return Rect(self._edge, self._width, self._height)

    def to_svg_element(self) -> ET.Element:
        rect = ET.Element('rect')
        rect.set('x', format_number(self._edge.x))
        rect.set('y', format_number(self._edge.y))
        rect.set('width', format_number(self._width))
        rect.set('height', format_number(self._height))
        self._add_common_attributes(rect)
        return rect

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'edge': [self._edge.x, self._edge.y],
            'width': self._width,
            'height': self._height
        })
        return data


class Line(Shape):
    """Straight segment between two points. Lines are never filled."""

    __slots__ = ('_start', '_end')

    def __init__(
        self,
        start: PointLike,
        end: PointLike,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.LINE, None, stroke)
        self._start = to_point(start)
        self._end = to_point(end)

    @property
    def start_point(self) -> Point:
        return self._start.copy()

    @property
    def end_point(self) -> Point:
        return self._end.copy()

    def translate(self, offset: PointLike) -> Self:
        offset = to_point(offset)
        self._start.translate(offset)
        self._end.translate(offset)
        return self

    def get_bounding_box(self) -> Rect:
        return Rect(self._start).include(self._end)

    def to_svg_element(self) -> ET.Element:
        line = ET.Element('line')
        line.set('x1', format_number(self._start.x))
        line.set('y1', format_number(self._start.y))
        line.set('x2', format_number(self._end.x))
        line.set('y2', format_number(self._end.y))
        for name, value in self._stroke.attributes().items():
            line.set(name, value)
        return line

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        del data['fill']
        data.update({
            'start': [self._start.x, self._start.y],
            'end': [self._end.x, self._end.y]
        })
        return data


class _PointList(Shape):
    """Shared behavior of shapes drawn through an ordered list of points."""

    __slots__ = ('_points',)

    _tag = ''

    def __init__(
        self,
        shape_type: ShapeType,
        points: Optional[Iterable[PointLike]] = None,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(shape_type, fill, stroke)
        self._points: List[Point] = [to_point(p) for p in points or ()]

    @property
    def points(self) -> List[Point]:
        return [p.copy() for p in self._points]

    def add_point(self, point: PointLike) -> Self:
        """
        Append a point.

        Returns:
            This shape, for chaining
        """
        self._points.append(to_point(point))
        return self

    def __lshift__(self, point: PointLike) -> Self:
        return self.add_point(point)

    def translate(self, offset: PointLike) -> Self:
        offset = to_point(offset)
        for point in self._points:
            point.translate(offset)
        return self

    def get_bounding_box(self) -> Rect:
        if not self._points:
            return Rect()

        bbox = Rect(self._points[0])
        for point in self._points:
            bbox.include(point)
        return bbox

    def to_svg_element(self) -> ET.Element:
        element = ET.Element(self._tag)
        element.set('points', _format_points(self._points))
        self._add_common_attributes(element)
        return element

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['points'] = [[p.x, p.y] for p in self._points]
        return data


class Polygon(_PointList):
    """Closed outline through a list of points."""

    __slots__ = ()

    _tag = 'polygon'

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.POLYGON, points, fill, stroke)


class Polyline(_PointList):
    """Open outline through a list of points."""

    __slots__ = ()

    _tag = 'polyline'

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.POLYLINE, points, fill, stroke)


class Path(Shape):
    """
    Outline made of one or more straight-segment subpaths.

    Points are always appended to the last subpath. Each non-empty subpath
    is rendered as a move, lines through the remaining points, and a close;
    the even-odd fill rule is always used.
    """

    __slots__ = ('_subpaths',)

    def __init__(
        self,
        fill: FillLike = None,
        stroke: Optional[Stroke] = None,
        subpaths: Optional[Iterable[Iterable[PointLike]]] = None
    ):
        super().__init__(ShapeType.PATH, fill, stroke)
        self._subpaths: List[List[Point]] = [[]]
        for subpath in subpaths or ():
            self.start_new_subpath()
            for point in subpath:
                self.add_point(point)

    @property
    def subpaths(self) -> List[List[Point]]:
        return [[p.copy() for p in subpath] for subpath in self._subpaths]

    @property
    def is_empty(self) -> bool:
        return not any(self._subpaths)

    def start_new_subpath(self) -> Self:
        """
        Begin a new subpath unless the current one has no points yet.

        Returns:
            This path
        """
        if self._subpaths[-1]:
            self._subpaths.append([])
        return self

    def add_point(self, point: PointLike) -> Self:
        """
        Append a point to the last subpath.

        Returns:
            This path, for chaining
        """
        self._subpaths[-1].append(to_point(point))
        return self

    def __lshift__(self, point: PointLike) -> Self:
        return self.add_point(point)

    def translate(self, offset: PointLike) -> Self:
        offset = to_point(offset)
        for subpath in self._subpaths:
            for point in subpath:
                point.translate(offset)
        return self

    def get_bounding_box(self) -> Rect:
        # A path with no points has no first point to start from
        if self.is_empty:
            return Rect()

        first = next(subpath[0] for subpath in self._subpaths if subpath)
        bbox = Rect(first)
        for subpath in self._subpaths:
            for point in subpath:
                bbox.include(point)
        return bbox

    def to_path_data(self) -> str:
        """
        Convert the subpaths to SVG path data.

        Returns:
            Path data such as "M0,0 10,0 10,10 z"
        """
        return " ".join(
            f"M{_format_points(subpath)} z" for subpath in self._subpaths if subpath
        )

    def to_svg_element(self) -> ET.Element:
        path = ET.Element('path')
        path.set('d', self.to_path_data())
        path.set('fill-rule', 'evenodd')
        self._add_common_attributes(path)
        return path

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['subpaths'] = [
            [[p.x, p.y] for p in subpath] for subpath in self._subpaths if subpath
        ]
        return data


class Text(Shape):
    """
    Text anchored at an origin point.

    Text metrics are not computed: the bounding box is a zero-size rect at
    the origin.
    """

    __slots__ = ('_origin', '_content', '_font')

    def __init__(
        self,
        origin: PointLike,
        content: str,
        fill: FillLike = None,
        font: Optional[Font] = None,
        stroke: Optional[Stroke] = None
    ):
        super().__init__(ShapeType.TEXT, fill, stroke)
        self._origin = to_point(origin)
        self._content = content
        self._font = font if font is not None else Font()

    @property
    def origin(self) -> Point:
        return self._origin.copy()

    @property
    def content(self) -> str:
        return self._content

    @property
    def font(self) -> Font:
        return self._font

    def translate(self, offset: PointLike) -> Self:
        self._origin.translate(to_point(offset))
        return self

    def get_bounding_box(self) -> Rect:
        return Rect(self._origin)

    def to_svg_element(self) -> ET.Element:
        text = ET.Element('text')
        text.set('x', format_number(self._origin.x))
        text.set('y', format_number(self._origin.y))
        self._add_common_attributes(text)
        for name, value in self._font.attributes().items():
            text.set(name, value)
        text.text = self._content
        return text

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'origin': [self._origin.x, self._origin.y],
            'content': self._content,
            'font': {'size': self._font.size, 'family': self._font.family}
        })
        return data


def _color_to_data(color: Color) -> Optional[List[int]]:
    rgb = color.rgb
    return list(rgb) if rgb is not None else None


def _stroke_from_data(data: Optional[Dict[str, Any]]) -> Stroke:
    if data is None:
        return Stroke()
    if not isinstance(data, dict):
        raise ShapeError(f"Stroke must be an object, got {data!r}")
    return Stroke(
        width=data.get('width', NO_STROKE_WIDTH),
        color=data.get('color'),
        non_scaling=data.get('non_scaling', False)
    )


def _font_from_data(data: Optional[Dict[str, Any]]) -> Font:
    if data is None:
        return Font()
    return Font(size=data.get('size'), family=data.get('family'))


_TYPE_ALIASES = {
    'rect': ShapeType.RECTANGLE,
}


def create_shape_from_dict(shape_dict: Dict[str, Any]) -> Shape:
    """
    Create a shape from a dictionary representation.

    Args:
        shape_dict: Dictionary with shape data, as produced by Shape.to_dict

    Returns:
        Created shape

    Raises:
        ShapeError: If shape type is unknown or data is invalid
    """
    type_name = shape_dict.get('type')
    if not type_name:
        raise ShapeError("Missing shape type in dictionary")

    type_key = str(type_name).lower()
    shape_type = _TYPE_ALIASES.get(type_key)
    if shape_type is None:
        try:
            shape_type = ShapeType[type_key.upper()]
        except KeyError:
            raise ShapeError(f"Unknown shape type: {type_name}") from None

    logger.debug(f"Creating {type_key} shape from dictionary")

    try:
        fill = shape_dict.get('fill')
        stroke = _stroke_from_data(shape_dict.get('stroke'))

        if shape_type is ShapeType.CIRCLE:
            return Circle(shape_dict['center'], shape_dict['diameter'], fill, stroke)

        if shape_type is ShapeType.ELLIPSE:
            return Ellipse(
                shape_dict['center'], shape_dict['width'], shape_dict['height'], fill, stroke
            )

        if shape_type is ShapeType.RECTANGLE:
            return Rectangle(
                shape_dict['edge'], shape_dict['width'], shape_dict['height'], fill, stroke
            )

        if shape_type is ShapeType.LINE:
            return Line(shape_dict['start'], shape_dict['end'], stroke)

        if shape_type is ShapeType.POLYGON:
            return Polygon(shape_dict.get('points', []), fill, stroke)

        if shape_type is ShapeType.POLYLINE:
            return Polyline(shape_dict.get('points', []), fill, stroke)

        if shape_type is ShapeType.PATH:
            return Path(fill, stroke, subpaths=shape_dict.get('subpaths', []))

        return Text(
            shape_dict['origin'],
            str(shape_dict['content']),
            fill,
            _font_from_data(shape_dict.get('font')),
            stroke
        )

    except KeyError as e:
        raise ShapeError(f"Missing required field for {type_key}: {e}") from e
    except ColorError as e:
        raise ShapeError(f"Invalid color for {type_key}: {e}") from e
    except (TypeError, ValueError) as e:
        raise ShapeError(f"Error creating {type_key}: {e}") from e
