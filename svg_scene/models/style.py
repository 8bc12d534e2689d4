"""
Style value types: fill, stroke and font.
Each style renders itself to SVG presentation attributes. A style holding
its "no-op" sentinel (a transparent fill, a negative stroke width) renders
no attributes at all.
"""

from typing import Dict, Optional
from xml.sax.saxutils import quoteattr

from svg_scene.core import CONFIG
from svg_scene.models.color import Color, ColorValue
from svg_scene.models.geometry import format_number

NO_STROKE_WIDTH = -1


def attributes_to_string(attributes: Dict[str, str]) -> str:
    """Render an attribute mapping as ``name="value"`` pairs."""
    return " ".join(f"{name}={quoteattr(value)}" for name, value in attributes.items())


class Fill:
    """Fill paint of a shape."""

    __slots__ = ('_color',)

    def __init__(self, color: Optional[ColorValue] = None):
        self._color = Color() if color is None else Color(color)

    @property
    def color(self) -> Color:
        return self._color

    def attributes(self) -> Dict[str, str]:
        if self._color.is_transparent:
            return {}
        return {'fill': self._color.to_svg_string()}

    def to_svg_string(self) -> str:
        return attributes_to_string(self.attributes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fill):
            return False
        return self._color == other._color

    def __hash__(self) -> int:
        return hash(self._color)

    def __repr__(self) -> str:
        return f"Fill({self._color!r})"


class Stroke:
    """
    Stroke of a shape.

    A negative width means "no stroke"; width 0 is a real, zero-width
    stroke and is still rendered.
    """

    __slots__ = ('_width', '_color', '_non_scaling')

    def __init__(
        self,
        width: float = NO_STROKE_WIDTH,
        color: Optional[ColorValue] = None,
        non_scaling: bool = False
    ):
        """
        Initialize a stroke.

        Args:
            width: Stroke width, negative for no stroke
            color: Stroke color (transparent if None)
            non_scaling: Emit vector-effect="non-scaling-stroke"
        """
        self._width = float(width)
        self._color = Color() if color is None else Color(color)
        self._non_scaling = bool(non_scaling)

    @property
    def width(self) -> float:
        return self._width

    @property
    def color(self) -> Color:
        return self._color

    @property
    def non_scaling(self) -> bool:
        return self._non_scaling

    @property
    def is_visible(self) -> bool:
        return self._width >= 0

    def attributes(self) -> Dict[str, str]:
        if not self.is_visible:
            return {}

        attrs = {
            'stroke-width': format_number(self._width),
            'stroke': self._color.to_svg_string(),
        }
        if self._non_scaling:
            attrs['vector-effect'] = 'non-scaling-stroke'
        return attrs

    def to_svg_string(self) -> str:
        return attributes_to_string(self.attributes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stroke):
            return False
        return (
            self._width == other._width and
            self._color == other._color and
            self._non_scaling == other._non_scaling
        )

    def __hash__(self) -> int:
        return hash((self._width, self._color, self._non_scaling))

    def __repr__(self) -> str:
        return f"Stroke(width={self._width!r}, color={self._color!r}, non_scaling={self._non_scaling})"


class Font:
    """Font size and family for text shapes."""

    __slots__ = ('_size', '_family')

    def __init__(self, size: Optional[float] = None, family: Optional[str] = None):
        """
        Initialize a font.

        Args:
            size: Font size (CONFIG["default_font_size"] if None)
            family: Font family (CONFIG["default_font_family"] if None)
        """
        self._size = float(CONFIG["default_font_size"] if size is None else size)
        self._family = CONFIG["default_font_family"] if family is None else family

    @property
    def size(self) -> float:
        return self._size

    @property
    def family(self) -> str:
        return self._family

    def attributes(self) -> Dict[str, str]:
        return {
            'font-size': format_number(self._size),
            'font-family': self._family,
        }

    def to_svg_string(self) -> str:
        return attributes_to_string(self.attributes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return False
        return self._size == other._size and self._family == other._family

    def __hash__(self) -> int:
        return hash((self._size, self._family))

    def __repr__(self) -> str:
        return f"Font(size={self._size!r}, family={self._family!r})"
