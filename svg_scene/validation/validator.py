"""
Validation of emitted SVG documents.
Parses with defusedxml and checks the tree against the elements and
presentation attributes this package writes.
"""
from typing import Dict, FrozenSet, Optional, Tuple
import xml.etree.ElementTree as ET

from defusedxml import DefusedXmlException, ElementTree

from svg_scene.core import CONFIG
from svg_scene.models.document import SVG_NAMESPACE
from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

# Presentation attributes written by Fill and Stroke
STYLE_ATTRIBUTES: FrozenSet[str] = frozenset({
    'fill', 'fill-rule', 'stroke', 'stroke-width', 'vector-effect',
})

# Geometry attributes per element, as written by Document and the shapes
ELEMENT_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
    'svg': frozenset({'width', 'height', 'viewBox', 'version'}),
    'circle': frozenset({'cx', 'cy', 'r'}),
    'ellipse': frozenset({'cx', 'cy', 'rx', 'ry'}),
    'rect': frozenset({'x', 'y', 'width', 'height'}),
    'line': frozenset({'x1', 'y1', 'x2', 'y2'}),
    'polygon': frozenset({'points'}),
    'polyline': frozenset({'points'}),
    'path': frozenset({'d'}),
    'text': frozenset({'x', 'y', 'font-size', 'font-family'}),
}

# Elements whose body may hold character data
TEXT_ELEMENTS = frozenset({'text'})


def _local_name(name: str) -> str:
    return name.rsplit('}', 1)[-1]


class SVGValidator:
    """
    Validates SVG documents produced by this package.

    ``validate`` reports problems as a ``(is_valid, error_message)`` tuple
    rather than raising.
    """

    def __init__(self, max_svg_size: Optional[int] = None):
        """
        Initialize the validator.

        Args:
            max_svg_size: Largest accepted document in bytes (CONFIG["max_svg_size"] if None)
        """
        self.max_svg_size = CONFIG["max_svg_size"] if max_svg_size is None else max_svg_size

    def validate(self, svg_code: str) -> Tuple[bool, Optional[str]]:
        """
        Validate an SVG document.

        Args:
            svg_code: Complete SVG document text

        Returns:
            (True, None) if valid, else (False, description of the first problem)
        """
        encoded = svg_code.encode('utf-8')
        if len(encoded) > self.max_svg_size:
            return False, f"SVG exceeds allowed size: {len(encoded)} bytes (max: {self.max_svg_size})"

        try:
            # The SVG 1.1 DOCTYPE is expected; entity declarations are not
            root = ElementTree.fromstring(
                encoded,
                forbid_dtd=False,
                forbid_entities=True,
                forbid_external=True,
            )
        except (ET.ParseError, DefusedXmlException) as e:
            logger.debug(f"SVG failed to parse: {e}")
            return False, f"Invalid XML: {e}"

        error = self._check_root(root) or self._check_elements(root)
        if error:
            logger.debug(f"SVG rejected: {error}")
            return False, error
        return True, None

    def _check_root(self, root: ET.Element) -> Optional[str]:
        if root.tag != f"{{{SVG_NAMESPACE}}}svg":
            return f"Root element must be svg in the {SVG_NAMESPACE} namespace, got {root.tag}"

        view_box = root.get('viewBox')
        if view_box is not None:
            try:
                values = [float(v) for v in view_box.split()]
            except ValueError:
                values = []
            if len(values) != 4 or values[2] < 0 or values[3] < 0:
                return f"Malformed viewBox: {view_box!r}"
        return None

    def _check_elements(self, root: ET.Element) -> Optional[str]:
        for element in root.iter():
            tag_name = _local_name(element.tag)
            allowed = ELEMENT_ATTRIBUTES.get(tag_name)
            if allowed is None:
                return f"Disallowed element: {tag_name}"

            for attr in element.attrib:
                attr_name = _local_name(attr)
                if attr_name not in allowed and attr_name not in STYLE_ATTRIBUTES:
                    return f"Disallowed attribute: {attr_name} on element {tag_name}"

            if tag_name not in TEXT_ELEMENTS and len(element) == 0 and (element.text or '').strip():
                return f"Unexpected text content in <{tag_name}>"
        return None
