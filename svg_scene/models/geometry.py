"""
Geometry value types for SVG scenes.
Provides points, sizes and axis-aligned bounding boxes, together with the
single inclusion primitive every bounding-box computation is built from.
"""

from typing import Iterable, Optional, TypeVar

T = TypeVar('T')


class AbsentValueError(LookupError):
    """Raised when an absent optional result is used as if it were present."""
    pass


class Point:
    """
    Floating-point coordinate pair.

    Points are mutable so that shapes can shift their owned geometry in
    place; shapes copy the points they are given.
    """

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0, y: float = 0):
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> 'Point':
        """Create an independent copy of the point."""
        return Point(self.x, self.y)

    def translate(self, offset: 'Point') -> 'Point':
        """
        Shift the point in place.

        Args:
            offset: Amount to add on each axis

        Returns:
            This point
        """
        self.x += offset.x
        self.y += offset.y
        return self

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class Dimensions:
    """Width and height pair; a single value applies to both axes."""

    __slots__ = ('width', 'height')

    def __init__(self, width: float = 0, height: Optional[float] = None):
        self.width = float(width)
        self.height = float(width if height is None else height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimensions):
            return False
        return self.width == other.width and self.height == other.height

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self) -> str:
        return f"Dimensions({self.width!r}, {self.height!r})"


class Rect:
    """
    Axis-aligned bounding box.

    A default Rect is the degenerate zero rect at the origin. ``include``
    widens the box minimally; the order of inclusion never matters.
    """

    __slots__ = ('min_pt', 'max_pt')

    def __init__(self, point: Optional[Point] = None, width: float = 0, height: float = 0):
        """
        Initialize a bounding box.

        Args:
            point: Minimum corner (origin if None)
            width: Extent along x
            height: Extent along y
        """
        corner = point if point is not None else Point()
        self.min_pt = Point(corner.x, corner.y)
        self.max_pt = Point(corner.x + width, corner.y + height)

    def include(self, other) -> 'Rect':
        """
        Widen the box to cover a point or another box.

        Args:
            other: Point or Rect to cover

        Returns:
            This box
        """
        if isinstance(other, Rect):
            self.include(other.min_pt)
            self.include(other.max_pt)
            return self

        if other.x < self.min_pt.x:
            self.min_pt.x = other.x
        if other.y < self.min_pt.y:
            self.min_pt.y = other.y
        if other.x > self.max_pt.x:
            self.max_pt.x = other.x
        if other.y > self.max_pt.y:
            self.max_pt.y = other.y
        return self

    def width(self) -> float:
        return self.max_pt.x - self.min_pt.x

    def height(self) -> float:
        return self.max_pt.y - self.min_pt.y

    @classmethod
    def _from_corners(cls, min_pt: Point, max_pt: Point) -> 'Rect':
        # Corners are copied exactly; min + (max - min) need not equal max
        rect = cls()
        rect.min_pt = min_pt.copy()
        rect.max_pt = max_pt.copy()
        return rect

    def translate(self, offset: Point) -> 'Rect':
        """Return a copy with both corners shifted by ``offset``."""
        return Rect._from_corners(self.min_pt + offset, self.max_pt + offset)

    def copy(self) -> 'Rect':
        return Rect._from_corners(self.min_pt, self.max_pt)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return False
        return self.min_pt == other.min_pt and self.max_pt == other.max_pt

    def __hash__(self) -> int:
        return hash((self.min_pt, self.max_pt))

    def __repr__(self) -> str:
        return f"Rect(min_pt={self.min_pt!r}, max_pt={self.max_pt!r})"


def min_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Per-axis minimum corner of a sequence of points.

    Args:
        points: Points to scan

    Returns:
        Synthesized corner, or None when there are no points
    """
    result = None
    for point in points:
        if result is None:
            result = point.copy()
            continue
        if point.x < result.x:
            result.x = point.x
        if point.y < result.y:
            result.y = point.y
    return result


def max_point(points: Iterable[Point]) -> Optional[Point]:
    """
    Per-axis maximum corner of a sequence of points.

    Args:
        points: Points to scan

    Returns:
        Synthesized corner, or None when there are no points
    """
    result = None
    for point in points:
        if result is None:
            result = point.copy()
            continue
        if point.x > result.x:
            result.x = point.x
        if point.y > result.y:
            result.y = point.y
    return result


def require_present(value: Optional[T], what: str = "value") -> T:
    """
    Unwrap an optional result.

    Raises:
        AbsentValueError: If ``value`` is None
    """
    if value is None:
        raise AbsentValueError(f"{what} is absent")
    return value


def format_number(value: float) -> str:
    """
    Format a coordinate or length for SVG output.

    Integral values are written without a fractional part ("10"); all other
    values use Python's shortest round-trippable representation ("0.1").
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
