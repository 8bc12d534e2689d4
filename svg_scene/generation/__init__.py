"""
SVG Scene - Generation Package
==============================
This package contains modules for generating SVG documents from scene
descriptions.
"""

from svg_scene.generation.svg_generator import SVGGenerator, layout_from_dict

__all__ = [
    "SVGGenerator",
    "layout_from_dict"
]
