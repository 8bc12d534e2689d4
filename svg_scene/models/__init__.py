"""
SVG Scene - Data Models
=======================
This package contains the geometry, style, shape and document models
used to assemble SVG output.
"""

from svg_scene.models.geometry import (
    AbsentValueError, Point, Dimensions, Rect,
    min_point, max_point, require_present, format_number
)
from svg_scene.models.layout import (
    Origin, Layout, transform_x, transform_y, transform_scale
)
from svg_scene.models.color import (
    ColorName, ColorError, Color, parse_color
)
from svg_scene.models.style import Fill, Stroke, Font
from svg_scene.models.shape import (
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text,
    create_shape_from_dict
)
from svg_scene.models.document import DocumentError, Document

__all__ = [
    'AbsentValueError', 'Point', 'Dimensions', 'Rect',
    'min_point', 'max_point', 'require_present', 'format_number',
    'Origin', 'Layout', 'transform_x', 'transform_y', 'transform_scale',
    'ColorName', 'ColorError', 'Color', 'parse_color',
    'Fill', 'Stroke', 'Font',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Path', 'Text',
    'create_shape_from_dict',
    'DocumentError', 'Document'
]
