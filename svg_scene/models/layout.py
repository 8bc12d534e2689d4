"""
Document layout and coordinate transforms.
Maps user-space coordinates and lengths into SVG device space given an
origin corner, a scale factor and an origin offset. Shapes do not apply
these transforms themselves; callers convert coordinates before building
shapes when device-space output is wanted.
"""

from enum import Enum
from typing import Union

from svg_scene.models.geometry import Point, Dimensions


class Origin(Enum):
    """Corner of the canvas that user-space (0, 0) is anchored to."""
    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def is_right(self) -> bool:
        return self in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)

    @property
    def is_bottom(self) -> bool:
        return self in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)


class Layout:
    """
    Canvas dimensions, origin convention, scale and origin offset.

    Immutable once constructed.
    """

    __slots__ = ('_dimensions', '_origin', '_scale', '_origin_offset')

    def __init__(
        self,
        dimensions: Dimensions = None,
        origin: Union[Origin, str] = Origin.BOTTOM_LEFT,
        scale: float = 1,
        origin_offset: Point = None
    ):
        """
        Initialize a layout.

        Args:
            dimensions: Canvas size (400 x 300 if None)
            origin: Origin corner, as an Origin or its string value
            scale: User-to-device scale factor
            origin_offset: Offset added to user coordinates before scaling
        """
        dims = dimensions if dimensions is not None else Dimensions(400, 300)
        offset = origin_offset if origin_offset is not None else Point(0, 0)

        object.__setattr__(self, '_dimensions', Dimensions(dims.width, dims.height))
        object.__setattr__(self, '_origin', Origin(origin))
        object.__setattr__(self, '_scale', float(scale))
        object.__setattr__(self, '_origin_offset', Point(offset.x, offset.y))

    def __setattr__(self, name, value):
        raise AttributeError("Layout is immutable")

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self._dimensions.width, self._dimensions.height)

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def origin_offset(self) -> Point:
        return self._origin_offset.copy()

    def transform_point(self, point: Point) -> Point:
        """Map a user-space point into device space."""
        return Point(transform_x(point.x, self), transform_y(point.y, self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return False
        return (
            self._dimensions == other._dimensions and
            self._origin == other._origin and
            self._scale == other._scale and
            self._origin_offset == other._origin_offset
        )

    def __hash__(self) -> int:
        return hash((self._dimensions, self._origin, self._scale, self._origin_offset))

    def __repr__(self) -> str:
        return (
            f"Layout(dimensions={self._dimensions!r}, origin={self._origin.name}, "
            f"scale={self._scale!r}, origin_offset={self._origin_offset!r})"
        )


def transform_x(x: float, layout: Layout) -> float:
    """Convert a user-space x coordinate to device space."""
    if layout.origin.is_right:
        return layout.dimensions.width - (x + layout.origin_offset.x) * layout.scale
    return (layout.origin_offset.x + x) * layout.scale


def transform_y(y: float, layout: Layout) -> float:
    """Convert a user-space y coordinate to device space."""
    if layout.origin.is_bottom:
        return layout.dimensions.height - (y + layout.origin_offset.y) * layout.scale
    return (layout.origin_offset.y + y) * layout.scale


def transform_scale(length: float, layout: Layout) -> float:
    """Convert a user-space length to device space; origin plays no part."""
    return length * layout.scale
