"""
Tests for the shape models.
"""

import unittest

from svg_scene.models.color import ColorName
from svg_scene.models.geometry import Point, Rect
from svg_scene.models.shape import (
    ShapeType, ShapeError, Circle, Ellipse, Rectangle, Line,
    Polygon, Polyline, Path, Text, create_shape_from_dict
)
from svg_scene.models.style import Fill, Stroke, Font


def _sample_shapes():
    path = Path(ColorName.SILVER)
    path << (0, 0) << (10, 0) << (10, 10)
    path.start_new_subpath()
    path << (-4, 2) << (-1, 7)

    return [
        Circle((10, 10), 8, fill=ColorName.RED),
        Ellipse((10, 10), 6, 4, stroke=Stroke(1, ColorName.BLACK)),
        Rectangle((-5, 20), 10, 5, fill=ColorName.GREEN),
        Line((30, -7), (25, 3), Stroke(2, ColorName.BLUE)),
        Polygon([(0, 0), (4, 0), (2, 3)], fill=ColorName.YELLOW),
        Polyline([(1, 1), (-3, 6), (8, 2)], stroke=Stroke(0.5, ColorName.PURPLE)),
        path,
        Text((-12, 4), "label"),
    ]


class TestShapeRendering(unittest.TestCase):
    """Tests for element fragments."""

    def test_circle(self):
        circle = Circle((10, 10), 8, fill=ColorName.RED)
        self.assertEqual(circle.to_svg_string(), '\t<circle cx="10" cy="10" r="4" fill="rgb(255,0,0)" />\n')

    def test_ellipse(self):
        ellipse = Ellipse((1.5, 2), 6, 4)
        self.assertEqual(ellipse.to_svg_string(), '\t<ellipse cx="1.5" cy="2" rx="3" ry="2" />\n')

    def test_rectangle(self):
        rect = Rectangle((0, 0), 3, 4, fill=ColorName.WHITE, stroke=Stroke(1, ColorName.BLACK))
        self.assertEqual(
            rect.to_svg_string(),
            '\t<rect x="0" y="0" width="3" height="4" fill="rgb(255,255,255)" '
            'stroke-width="1" stroke="rgb(0,0,0)" />\n'
        )

    def test_line_has_no_fill(self):
        line = Line((0, 0), (10, 5), Stroke(1, ColorName.BLACK))
        self.assertEqual(
            line.to_svg_string(),
            '\t<line x1="0" y1="0" x2="10" y2="5" stroke-width="1" stroke="rgb(0,0,0)" />\n'
        )
        self.assertNotIn('fill', line.to_dict())

    def test_polygon(self):
        polygon = Polygon([(0, 0), (4, 0), (2, 3)], fill=ColorName.BLUE)
        self.assertEqual(polygon.to_svg_string(), '\t<polygon points="0,0 4,0 2,3" fill="rgb(0,0,255)" />\n')

    def test_empty_polygon(self):
        polygon = Polygon()
        self.assertEqual(polygon.to_svg_string(), '\t<polygon points="" />\n')
        self.assertEqual(polygon.get_bounding_box(), Rect())

    def test_polyline(self):
        polyline = Polyline()
        polyline << (0, 0) << (1, 2.5)
        self.assertEqual(polyline.to_svg_string(), '\t<polyline points="0,0 1,2.5" />\n')
        self.assertEqual(polyline.type, ShapeType.POLYLINE)

    def test_text_content_is_escaped(self):
        text = Text((1, 2), "a < b & c")
        self.assertEqual(
            text.to_svg_string(),
            '\t<text x="1" y="2" font-size="12" font-family="Verdana">a &lt; b &amp; c</text>\n'
        )

    def test_text_with_fill_and_font(self):
        text = Text((0, 0), "hi", fill=ColorName.BLACK, font=Font(20, "Arial"))
        self.assertEqual(
            text.to_svg_string(),
            '\t<text x="0" y="0" fill="rgb(0,0,0)" font-size="20" font-family="Arial">hi</text>\n'
        )

    def test_transparent_fill_is_omitted(self):
        circle = Circle((0, 0), 2, fill=Fill(ColorName.TRANSPARENT))
        self.assertNotIn('fill', circle.to_svg_string())

    def test_invalid_fill(self):
        with self.assertRaises(ShapeError):
            Circle((0, 0), 2, fill="chartreuse")

    def test_invalid_point(self):
        with self.assertRaises(ShapeError):
            Circle(5, 2)


class TestPath(unittest.TestCase):
    """Tests for paths and subpaths."""

    def test_single_subpath(self):
        path = Path()
        path << (0, 0) << (10, 0) << (10, 10)
        self.assertEqual(path.to_path_data(), "M0,0 10,0 10,10 z")
        self.assertEqual(path.get_bounding_box(), Rect(Point(0, 0), 10, 10))
        self.assertEqual(path.to_svg_string(), '\t<path d="M0,0 10,0 10,10 z" fill-rule="evenodd" />\n')

    def test_multiple_subpaths(self):
        path = Path(subpaths=[[(0, 0), (1, 0), (1, 1)], [(5, 5), (6, 5), (6, 6)]])
        self.assertEqual(path.to_path_data(), "M0,0 1,0 1,1 z M5,5 6,5 6,6 z")
        self.assertEqual(path.get_bounding_box(), Rect(Point(0, 0), 6, 6))

    def test_new_subpath_is_not_duplicated_while_empty(self):
        path = Path()
        path.start_new_subpath().start_new_subpath()
        self.assertEqual(len(path.subpaths), 1)

        path.add_point((1, 1))
        path.start_new_subpath().start_new_subpath()
        self.assertEqual(len(path.subpaths), 2)

    def test_empty_path(self):
        path = Path()
        self.assertTrue(path.is_empty)
        self.assertEqual(path.get_bounding_box(), Rect())
        self.assertEqual(path.to_path_data(), "")

    def test_bounding_box_skips_leading_empty_subpath(self):
        path = Path()
        path.start_new_subpath()
        path << (3, 4) << (5, 9)
        self.assertEqual(path.get_bounding_box(), Rect(Point(3, 4), 2, 5))


class TestGeometry(unittest.TestCase):
    """Tests for bounding boxes and translation."""

    def test_bounding_boxes(self):
        shapes = _sample_shapes()
        expected = [
            Rect(Point(6, 6), 8, 8),
            Rect(Point(7, 8), 6, 4),
            Rect(Point(-5, 20), 10, 5),
            Rect(Point(25, -7), 5, 10),
            Rect(Point(0, 0), 4, 3),
            Rect(Point(-3, 1), 11, 5),
            Rect(Point(-4, 0), 14, 10),
            Rect(Point(-12, 4)),
        ]
        for shape, bbox in zip(shapes, expected):
            self.assertEqual(shape.get_bounding_box(), bbox, repr(shape))

    def test_translate_commutes_with_bounding_box(self):
        offset = Point(3, -4)
        for shape in _sample_shapes():
            before = shape.get_bounding_box()
            shape.translate(offset)
            self.assertEqual(shape.get_bounding_box(), before.translate(offset), repr(shape))

    def test_translate_commutes_with_fractional_bounding_box(self):
        a, b = -47.842221048227664, 25.73004860596238
        offset = Point(0.1, -3.3)
        shapes = [
            Line((a, a), (b, b)),
            Polygon([(a, 0.7), (b, -1.9), (3.3, b)]),
            Polyline([(b, a), (0.1, 0.2)]),
            Path(subpaths=[[(a, b), (1.1, 2.2)], [(b, 9.9)]]),
            Text((a, b), "x"),
        ]
        for shape in shapes:
            before = shape.get_bounding_box()
            shape.translate(offset)
            self.assertEqual(shape.get_bounding_box(), before.translate(offset), repr(shape))

    def test_translate_commutes_for_extent_shapes(self):
        # Extents are added to a corner, so values here are binary-exact
        offset = Point(0.75, -2.5)
        shapes = [
            Circle((1.125, -0.5), 2.5),
            Ellipse((1.25, -7.5), 0.5, 6.75),
            Rectangle((-3.125, 8.5), 4.25, 0.375),
        ]
        for shape in shapes:
            before = shape.get_bounding_box()
            shape.translate(offset)
            self.assertEqual(shape.get_bounding_box(), before.translate(offset), repr(shape))

    def test_translations_compose(self):
        for first, second in zip(_sample_shapes(), _sample_shapes()):
            first.translate((1, 2)).translate((5, -7))
            second.translate((6, -5))
            self.assertEqual(first.to_svg_string(), second.to_svg_string())

    def test_bounding_box_is_fresh(self):
        rect = Rectangle((0, 0), 2, 2)
        bbox = rect.get_bounding_box()
        bbox.include(Point(100, 100))
        self.assertEqual(rect.get_bounding_box(), Rect(Point(0, 0), 2, 2))

    def test_shapes_own_their_points(self):
        corner = Point(1, 1)
        rect = Rectangle(corner, 2, 2)
        corner.translate(Point(50, 50))
        self.assertEqual(rect.edge, Point(1, 1))

        polygon = Polygon([Point(0, 0)])
        polygon.points[0].x = 9
        self.assertEqual(polygon.points[0], Point(0, 0))

    def test_copy_is_independent(self):
        circle = Circle((0, 0), 2)
        clone = circle.copy()
        clone.translate((5, 5))
        self.assertEqual(circle.center, Point(0, 0))
        self.assertEqual(clone.center, Point(5, 5))


class TestShapeFromDict(unittest.TestCase):
    """Tests for building shapes from dictionaries."""

    def test_create_circle(self):
        shape = create_shape_from_dict({
            "type": "Circle",
            "center": [10, 10],
            "diameter": 8,
            "fill": "red"
        })
        self.assertIsInstance(shape, Circle)
        self.assertEqual(shape.to_svg_string(), Circle((10, 10), 8, fill=ColorName.RED).to_svg_string())

    def test_rect_alias(self):
        shape = create_shape_from_dict({"type": "rect", "edge": [0, 0], "width": 1, "height": 2})
        self.assertIsInstance(shape, Rectangle)

    def test_stroke_and_font(self):
        shape = create_shape_from_dict({
            "type": "text",
            "origin": [0, 0],
            "content": "hi",
            "font": {"size": 20, "family": "Arial"},
            "stroke": {"width": 0, "color": [10, 20, 30], "non_scaling": True}
        })
        self.assertEqual(shape.font, Font(20, "Arial"))
        self.assertEqual(shape.stroke, Stroke(0, (10, 20, 30), non_scaling=True))

    def test_dict_round_trip_preserves_output(self):
        for shape in _sample_shapes():
            rebuilt = create_shape_from_dict(shape.to_dict())
            self.assertEqual(rebuilt.type, shape.type)
            self.assertEqual(rebuilt.to_svg_string(), shape.to_svg_string())

    def test_missing_type(self):
        with self.assertRaises(ShapeError):
            create_shape_from_dict({"center": [0, 0]})

    def test_unknown_type(self):
        with self.assertRaises(ShapeError):
            create_shape_from_dict({"type": "star"})

    def test_missing_field(self):
        with self.assertRaises(ShapeError):
            create_shape_from_dict({"type": "circle", "center": [0, 0]})

    def test_invalid_color(self):
        with self.assertRaises(ShapeError):
            create_shape_from_dict({
                "type": "line",
                "start": [0, 0],
                "end": [1, 1],
                "stroke": {"width": 1, "color": "chartreuse"}
            })


if __name__ == "__main__":
    unittest.main()
