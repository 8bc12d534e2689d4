"""
Color model for SVG generation.
A color is either transparent or an opaque RGB triple. Colors can be built
from raw channels, from the fixed palette of named colors, or from a
palette name string.
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

# Type definitions
RGB = Tuple[int, int, int]
ColorValue = Union['ColorName', str, RGB, 'Color']


class ColorName(Enum):
    """Fixed palette of named colors."""
    TRANSPARENT = -1
    AQUA = 0
    BLACK = 1
    BLUE = 2
    BROWN = 3
    CYAN = 4
    FUCHSIA = 5
    GREEN = 6
    LIME = 7
    MAGENTA = 8
    ORANGE = 9
    PURPLE = 10
    RED = 11
    SILVER = 12
    WHITE = 13
    YELLOW = 14


_PALETTE: Dict[ColorName, RGB] = {
    ColorName.AQUA: (0, 255, 255),
    ColorName.BLACK: (0, 0, 0),
    ColorName.BLUE: (0, 0, 255),
    ColorName.BROWN: (165, 42, 42),
    ColorName.CYAN: (0, 255, 255),
    ColorName.FUCHSIA: (255, 0, 255),
    ColorName.GREEN: (0, 128, 0),
    ColorName.LIME: (0, 255, 0),
    ColorName.MAGENTA: (255, 0, 255),
    ColorName.ORANGE: (255, 165, 0),
    ColorName.PURPLE: (128, 0, 128),
    ColorName.RED: (255, 0, 0),
    ColorName.SILVER: (192, 192, 192),
    ColorName.WHITE: (255, 255, 255),
    ColorName.YELLOW: (255, 255, 0),
}


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


class Color:
    """
    Immutable color: transparent, or an opaque RGB triple.

    Channels are clamped to the 0-255 range.
    """

    __slots__ = ('_transparent', '_r', '_g', '_b')

    def __init__(self, value: ColorValue = ColorName.TRANSPARENT):
        """
        Initialize a color.

        Args:
            value: ColorName, palette name string, (r, g, b) tuple or Color

        Raises:
            ColorError: If the value cannot be interpreted as a color
        """
        if isinstance(value, Color):
            rgb = None if value.is_transparent else value.rgb
        elif isinstance(value, ColorName):
            rgb = _PALETTE.get(value)
        elif isinstance(value, str):
            rgb = _PALETTE.get(self._lookup_name(value))
        elif isinstance(value, (tuple, list)) and len(value) == 3:
            if not all(isinstance(c, (int, float)) for c in value):
                raise ColorError(f"RGB values must be numbers, got {value}")
            try:
                rgb = tuple(min(255, max(0, int(c))) for c in value)
            except (ValueError, OverflowError) as e:
                raise ColorError(f"RGB values must be finite, got {value}") from e
        else:
            raise ColorError(f"Unsupported color value: {value!r}")

        self._transparent = rgb is None
        self._r, self._g, self._b = rgb if rgb is not None else (0, 0, 0)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        """Create an opaque color from channel values."""
        return cls((r, g, b))

    @classmethod
    def from_name(cls, name: str) -> 'Color':
        """
        Create a color from a palette name such as "red" or "transparent".

        Raises:
            ColorError: If the name is not in the palette
        """
        return cls(name)

    @classmethod
    def transparent(cls) -> 'Color':
        return cls(ColorName.TRANSPARENT)

    @staticmethod
    def _lookup_name(name: str) -> ColorName:
        try:
            return ColorName[name.strip().upper()]
        except KeyError:
            raise ColorError(f"Unknown color name: {name}") from None

    @property
    def is_transparent(self) -> bool:
        return self._transparent

    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def rgb(self) -> Optional[RGB]:
        """RGB triple, or None for the transparent color."""
        if self._transparent:
            return None
        return (self._r, self._g, self._b)

    def to_svg_string(self) -> str:
        """
        Convert to an SVG paint value.

        Returns:
            "transparent" or "rgb(r,g,b)"
        """
        if self._transparent:
            return "transparent"
        return f"rgb({self._r},{self._g},{self._b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return self.rgb == other.rgb

    def __hash__(self) -> int:
        return hash(self.rgb)

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        if self._transparent:
            return "Color(transparent)"
        return f"Color(r={self._r}, g={self._g}, b={self._b})"


def parse_color(value: Optional[ColorValue]) -> Color:
    """
    Parse a color from loose input such as JSON scene data.

    Args:
        value: Anything Color accepts, or None for transparent

    Returns:
        Color instance

    Raises:
        ColorError: If the value cannot be interpreted as a color
    """
    if value is None:
        return Color.transparent()
    color = Color(value)
    logger.debug(f"Parsed color {value!r} as {color}")
    return color
