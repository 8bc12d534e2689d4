"""
Document model for SVG output.
A document is an append-only log of rendered shapes plus the running
union of their bounding boxes. The final SVG text declares a viewport
equal to that union.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from svg_scene.core import CONFIG, Profiler
from svg_scene.models.geometry import Rect, format_number
from svg_scene.models.layout import Layout
from svg_scene.models.shape import Shape
from svg_scene.models.style import attributes_to_string
from svg_scene.utils.io import save_svg
from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

# Constants
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
XML_DECLARATION = '<?xml version="1.0" standalone="no"?>\n'
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)


class DocumentError(Exception):
    """Custom exception for document-related errors."""
    pass


class Document:
    """
    SVG document assembled from shapes.

    Shapes are rendered the moment they are appended; only their text and
    their bounding-box contribution are kept. The region starts as the
    zero rect at the origin and only grows.
    """

    def __init__(
        self,
        file_name: Union[str, Path],
        layout: Optional[Layout] = None,
        unit: Optional[str] = None
    ):
        """
        Initialize a document.

        Args:
            file_name: Target file for save()
            layout: Canvas layout (default Layout() if None)
            unit: Suffix for width and height (CONFIG["unit_suffix"] if None)
        """
        self._file_name = Path(file_name)
        self._layout = layout if layout is not None else Layout()
        self._unit = CONFIG["unit_suffix"] if unit is None else unit
        self._body_parts = []
        self._region = Rect()

    @property
    def file_name(self) -> Path:
        return self._file_name

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def region(self) -> Rect:
        """Union bounding box of everything appended so far."""
        return self._region.copy()

    @property
    def shape_count(self) -> int:
        return len(self._body_parts)

    def append(self, shape: Shape) -> 'Document':
        """
        Render a shape into the document and grow the region to cover it.

        Later changes to the shape do not affect the document.

        Args:
            shape: Shape to add

        Returns:
            This document, for chaining
        """
        self._body_parts.append(shape.to_svg_string())
        self._region.include(shape.get_bounding_box())
        logger.debug(f"Appended {shape.type.name.lower()} to {self._file_name}, region now {self._region!r}")
        return self

    def __lshift__(self, shape: Shape) -> 'Document':
        return self.append(shape)

    def extend(self, shapes: Iterable[Shape]) -> 'Document':
        """Append several shapes in order."""
        for shape in shapes:
            self.append(shape)
        return self

    def _root_attributes(self) -> dict:
        region = self._region
        view_box = " ".join(
            format_number(v) for v in
            (region.min_pt.x, region.min_pt.y, region.width(), region.height())
        )
        return {
            'width': f"{format_number(region.width())}{self._unit}",
            'height': f"{format_number(region.height())}{self._unit}",
            'xmlns': SVG_NAMESPACE,
            'viewBox': view_box,
            'version': SVG_VERSION,
        }

    def to_svg_string(self) -> str:
        """
        Produce the complete SVG document.

        Calling this repeatedly without appending yields identical text.

        Returns:
            SVG document text
        """
        return (
            XML_DECLARATION +
            SVG_DOCTYPE +
            f"<svg {attributes_to_string(self._root_attributes())}>\n" +
            "".join(self._body_parts) +
            "</svg>\n"
        )

    serialize = to_svg_string

    def save(self) -> bool:
        """
        Write the document to its file name.

        Returns:
            True on success, False if the file could not be written
        """
        with Profiler(f"save {self._file_name}"):
            try:
                save_svg(self.to_svg_string(), self._file_name, create_dirs=False)
            except OSError as e:
                logger.error(f"Could not save document to {self._file_name}: {e}")
                return False

        return True

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Document(file_name={str(self._file_name)!r}, shapes={self.shape_count})"
