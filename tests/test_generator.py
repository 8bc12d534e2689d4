"""
Tests for the SVG generator.
"""

import os
import shutil
import tempfile
import unittest

from svg_scene.generation.svg_generator import SVGGenerator, layout_from_dict
from svg_scene.models.document import DocumentError
from svg_scene.models.geometry import Dimensions, Point
from svg_scene.models.layout import Layout, Origin


class TestLayoutFromDict(unittest.TestCase):
    """Tests for the layout_from_dict function."""

    def test_defaults(self):
        self.assertEqual(layout_from_dict(None), Layout())
        self.assertEqual(layout_from_dict({}), Layout())

    def test_values(self):
        layout = layout_from_dict({
            "width": 100,
            "height": 50,
            "origin": "top_right",
            "scale": 2,
            "offset": [1, 3]
        })
        self.assertEqual(layout.dimensions, Dimensions(100, 50))
        self.assertEqual(layout.origin, Origin.TOP_RIGHT)
        self.assertEqual(layout.scale, 2)
        self.assertEqual(layout.origin_offset, Point(1, 3))

    def test_invalid_origin(self):
        with self.assertRaises(DocumentError):
            layout_from_dict({"origin": "center"})

    def test_invalid_offset(self):
        with self.assertRaises(DocumentError):
            layout_from_dict({"offset": [1]})


class TestSVGGenerator(unittest.TestCase):
    """Tests for the SVGGenerator class."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.generator = SVGGenerator(output_dir=self.temp_dir)
        self.scene = {
            "layout": {"width": 100, "height": 100, "origin": "top_left"},
            "unit": "mm",
            "shapes": [
                {"type": "circle", "center": [5, 5], "diameter": 10, "fill": "red"},
                {"type": "line", "start": [0, 0], "end": [10, 10], "stroke": {"width": 1, "color": "black"}}
            ]
        }

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_build_document(self):
        document = self.generator.build_document(self.scene, "scene.svg")
        self.assertEqual(document.shape_count, 2)
        self.assertEqual(document.unit, "mm")
        self.assertEqual(document.layout.origin, Origin.TOP_LEFT)
        self.assertEqual(str(document.file_name), os.path.join(self.temp_dir, "scene.svg"))

    def test_generate_svg(self):
        svg_code = self.generator.generate_svg(self.scene)
        self.assertIn('width="10mm" height="10mm"', svg_code)
        self.assertIn('\t<circle cx="5" cy="5" r="5" fill="rgb(255,0,0)" />\n', svg_code)
        self.assertIn('<line x1="0" y1="0" x2="10" y2="10"', svg_code)

    def test_save_svg(self):
        path = self.generator.save_svg(self.scene, "saved.svg")
        self.assertTrue(os.path.exists(path))
        with open(path, "r", encoding="utf-8") as f:
            self.assertEqual(f.read(), self.generator.generate_svg(self.scene))

    def test_invalid_shape(self):
        scene = {"shapes": [{"type": "hexagon"}]}
        with self.assertRaises(DocumentError):
            self.generator.generate_svg(scene)

    def test_non_object_shape(self):
        with self.assertRaises(DocumentError):
            self.generator.generate_svg({"shapes": ["circle"]})

    def test_unwritable_output(self):
        with self.assertRaises(DocumentError):
            self.generator.save_svg(self.scene, os.path.join("missing", "saved.svg"))


if __name__ == "__main__":
    unittest.main()
