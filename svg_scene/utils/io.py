"""
File helpers: writing SVG text and reading or writing JSON configuration
and scene descriptions.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _write_text(text: str, output_path: PathLike, create_dirs: bool) -> Path:
    output_path = Path(output_path)
    if create_dirs:
        output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        output_path.write_text(text, encoding='utf-8')
    except OSError as e:
        logger.error(f"Could not write {output_path}: {e}")
        raise
    return output_path


def _read_json(input_path: PathLike, what: str) -> Any:
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"{what.capitalize()} file not found: {input_path}")

    try:
        return json.loads(input_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        # JSONDecodeError is a ValueError; callers treat both alike
        logger.error(f"Malformed {what} file {input_path}: {e}")
        raise


def save_svg(svg_code: str, output_path: PathLike, create_dirs: bool = True) -> None:
    """
    Write SVG text to a file verbatim.

    Args:
        svg_code: Complete SVG document
        output_path: Target file
        create_dirs: Create missing parent directories first

    Raises:
        OSError: If the file cannot be written
    """
    path = _write_text(svg_code, output_path, create_dirs)
    logger.info(f"SVG saved to: {path}")


def load_config(config_path: PathLike) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    config = _read_json(config_path, "configuration")
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {config_path} must contain an object")
    return config


def save_config(config: Dict[str, Any], output_path: PathLike, create_dirs: bool = True) -> None:
    """
    Save configuration to a JSON file.

    Raises:
        OSError: If the file cannot be written
    """
    path = _write_text(json.dumps(config, indent=2), output_path, create_dirs)
    logger.info(f"Configuration saved to: {path}")


def load_scene(scene_path: PathLike) -> Dict[str, Any]:
    """
    Load a scene description from a JSON file.

    The file must hold an object with a "shapes" list; "layout" and
    "unit" are optional.

    Args:
        scene_path: Path to the scene file

    Returns:
        Scene description dictionary

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid scene description
    """
    scene = _read_json(scene_path, "scene")
    if not isinstance(scene, dict) or not isinstance(scene.get("shapes"), list):
        raise ValueError(f"Scene file {scene_path} must contain an object with a 'shapes' list")

    logger.info(f"Loaded scene with {len(scene['shapes'])} shapes from {scene_path}")
    return scene
