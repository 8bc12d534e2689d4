"""
SVG Scene - Validation Package
==============================
This package checks generated SVG documents.
"""

from svg_scene.validation.validator import SVGValidator

__all__ = ["SVGValidator"]
