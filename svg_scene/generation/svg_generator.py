"""
SVG Generator Module
====================
This module builds SVG documents from scene descriptions: plain
dictionaries (usually loaded from JSON) listing a layout and shapes.
"""

import os
from typing import Any, Dict, Optional

from svg_scene.models.document import Document, DocumentError
from svg_scene.models.geometry import Dimensions, Point
from svg_scene.models.layout import Layout
from svg_scene.models.shape import ShapeError, create_shape_from_dict
from svg_scene.utils.logger import get_logger, log_function_call

logger = get_logger(__name__)


def layout_from_dict(layout_dict: Optional[Dict[str, Any]]) -> Layout:
    """
    Build a Layout from its dictionary form.

    Args:
        layout_dict: Mapping with optional "width", "height", "origin",
            "scale" and "offset" keys

    Returns:
        Layout instance

    Raises:
        DocumentError: If a value is invalid
    """
    if not layout_dict:
        return Layout()

    try:
        default = Layout()
        offset = layout_dict.get("offset", [0, 0])
        return Layout(
            dimensions=Dimensions(
                layout_dict.get("width", default.dimensions.width),
                layout_dict.get("height", default.dimensions.height)
            ),
            origin=layout_dict.get("origin", default.origin),
            scale=layout_dict.get("scale", default.scale),
            origin_offset=Point(offset[0], offset[1])
        )
    except (TypeError, ValueError, IndexError) as e:
        raise DocumentError(f"Invalid layout {layout_dict!r}: {e}") from e


class SVGGenerator:
    """Class for generating SVG documents from scene descriptions."""

    def __init__(self, output_dir: str = "output"):
        """
        Initialize the generator.

        Args:
            output_dir: Directory where SVG files will be saved
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    @log_function_call()
    def build_document(self, scene: Dict[str, Any], file_name: str) -> Document:
        """
        Build a document holding every shape of a scene.

        Args:
            scene: Scene description with a "shapes" list
            file_name: File name for the document, relative to output_dir

        Returns:
            Populated document

        Raises:
            DocumentError: If the scene description is invalid
        """
        document = Document(
            os.path.join(self.output_dir, file_name),
            layout=layout_from_dict(scene.get("layout")),
            unit=scene.get("unit")
        )

        for index, shape_dict in enumerate(scene.get("shapes", [])):
            if not isinstance(shape_dict, dict):
                raise DocumentError(f"Shape {index} must be an object, got {shape_dict!r}")
            try:
                shape = create_shape_from_dict(shape_dict)
            except ShapeError as e:
                raise DocumentError(f"Shape {index} is invalid: {e}") from e
            document.append(shape)

        logger.debug(f"Built document {file_name} with {document.shape_count} shapes")
        return document

    def generate_svg(self, scene: Dict[str, Any], file_name: str = "scene.svg") -> str:
        """
        Generate SVG code from a scene description.

        Args:
            scene: Scene description
            file_name: Name used for the intermediate document

        Returns:
            String containing the SVG code
        """
        return self.build_document(scene, file_name).to_svg_string()

    def save_svg(self, scene: Dict[str, Any], file_name: str = "scene.svg") -> str:
        """
        Generate SVG and save it to a file.

        Args:
            scene: Scene description
            file_name: Output file name inside output_dir

        Returns:
            Path to the saved SVG file

        Raises:
            DocumentError: If the scene is invalid or the file cannot be written
        """
        document = self.build_document(scene, file_name)

        if not document.save():
            raise DocumentError(f"Could not write {document.file_name}")

        logger.info(f"SVG saved to {document.file_name}")
        return str(document.file_name)
