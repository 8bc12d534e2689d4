"""
SVG Scene - Utilities Package
=============================
This package contains logging and file helpers for SVG Scene.
"""

from svg_scene.utils.logger import (
    setup_logger, get_logger, LogCapture, log_function_call, log_exception
)
from svg_scene.utils.io import (
    load_config, save_config, load_scene, save_svg
)

__all__ = [
    'setup_logger', 'get_logger', 'LogCapture', 'log_function_call',
    'log_exception',
    'load_config', 'save_config', 'load_scene', 'save_svg'
]
