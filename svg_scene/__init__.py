"""
SVG Scene Package
=================
This package assembles SVG documents from geometric primitives: circles,
ellipses, rectangles, lines, polygons, polylines, paths and text. A
document tracks the bounding box of everything appended to it and declares
a matching viewport.
"""

__version__ = "0.1.0"

from svg_scene.core import CONFIG, configure
from svg_scene.models import (
    AbsentValueError, Point, Dimensions, Rect,
    min_point, max_point, require_present,
    Origin, Layout, transform_x, transform_y, transform_scale,
    ColorName, ColorError, Color,
    Fill, Stroke, Font,
    ShapeType, ShapeError, Shape,
    Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text,
    create_shape_from_dict,
    DocumentError, Document
)

__all__ = [
    'CONFIG', 'configure',
    'AbsentValueError', 'Point', 'Dimensions', 'Rect',
    'min_point', 'max_point', 'require_present',
    'Origin', 'Layout', 'transform_x', 'transform_y', 'transform_scale',
    'ColorName', 'ColorError', 'Color',
    'Fill', 'Stroke', 'Font',
    'ShapeType', 'ShapeError', 'Shape',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Polyline', 'Path', 'Text',
    'create_shape_from_dict',
    'DocumentError', 'Document'
]
