"""
Tests for the layout and coordinate transforms.
"""

import unittest

from svg_scene.models.geometry import Dimensions, Point
from svg_scene.models.layout import (
    Origin, Layout, transform_x, transform_y, transform_scale
)


class TestLayout(unittest.TestCase):
    """Tests for the Layout value."""

    def test_defaults(self):
        layout = Layout()
        self.assertEqual(layout.dimensions, Dimensions(400, 300))
        self.assertEqual(layout.origin, Origin.BOTTOM_LEFT)
        self.assertEqual(layout.scale, 1)
        self.assertEqual(layout.origin_offset, Point(0, 0))

    def test_origin_from_string(self):
        self.assertEqual(Layout(origin="top_right").origin, Origin.TOP_RIGHT)

    def test_invalid_origin(self):
        with self.assertRaises(ValueError):
            Layout(origin="middle")

    def test_layout_is_immutable(self):
        layout = Layout()
        with self.assertRaises(AttributeError):
            layout.scale = 2

        offset = layout.origin_offset
        offset.x = 99
        self.assertEqual(layout.origin_offset, Point(0, 0))


class TestTransforms(unittest.TestCase):
    """Tests for the user-to-device coordinate functions."""

    def test_top_left_identity(self):
        layout = Layout(origin=Origin.TOP_LEFT)
        for value in (-7.5, 0, 3, 250.25):
            self.assertEqual(transform_x(value, layout), value)
            self.assertEqual(transform_y(value, layout), value)

    def test_bottom_left_flips_y_only(self):
        layout = Layout(Dimensions(400, 300), Origin.BOTTOM_LEFT)
        self.assertEqual(transform_x(10, layout), 10)
        self.assertEqual(transform_y(10, layout), 290)

    def test_top_right_flips_x_only(self):
        layout = Layout(Dimensions(400, 300), Origin.TOP_RIGHT, scale=2, origin_offset=Point(1, 1))
        self.assertEqual(transform_x(4, layout), 390)
        self.assertEqual(transform_y(4, layout), 10)

    def test_bottom_right_flips_both(self):
        layout = Layout(Dimensions(100, 50), Origin.BOTTOM_RIGHT, scale=0.5, origin_offset=Point(2, 4))
        self.assertEqual(transform_x(8, layout), 95)
        self.assertEqual(transform_y(6, layout), 45)

    def test_scale_ignores_origin(self):
        for origin in Origin:
            layout = Layout(origin=origin, scale=2.5, origin_offset=Point(10, 10))
            self.assertEqual(transform_scale(4, layout), 10)

    def test_transform_point(self):
        layout = Layout(Dimensions(400, 300), Origin.BOTTOM_LEFT)
        self.assertEqual(layout.transform_point(Point(5, 20)), Point(5, 280))


if __name__ == "__main__":
    unittest.main()
