"""
Main Entry Point for SVG Scene
==============================
This module provides the command line entry point that renders a JSON
scene description into an SVG document.
"""

import os
import sys
import argparse
from typing import List, Optional

from svg_scene.core import CONFIG, configure
from svg_scene.generation.svg_generator import SVGGenerator
from svg_scene.models.document import DocumentError
from svg_scene.utils.io import load_config, load_scene
from svg_scene.utils.logger import setup_logger, get_logger, log_exception
from svg_scene.validation.validator import SVGValidator

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a JSON scene description to an SVG document.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "scene",
        help="Path to the scene JSON file",
    )

    parser.add_argument(
        "--output", "-o",
        help="Output SVG path (defaults to the scene name with .svg)",
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to a JSON file with configuration overrides",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the generated document before exiting",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to CONFIG['log_level'])",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        if args.config:
            configure(load_config(args.config))

        setup_logger(args.log_level or CONFIG["log_level"], log_file=CONFIG["log_file"])

        scene = load_scene(args.scene)

        output = args.output or os.path.splitext(os.path.basename(args.scene))[0] + ".svg"
        output_dir, file_name = os.path.split(os.path.abspath(output))

        generator = SVGGenerator(output_dir)
        svg_path = generator.save_svg(scene, file_name)

        if args.validate:
            with open(svg_path, "r", encoding="utf-8") as f:
                is_valid, error = SVGValidator().validate(f.read())
            if not is_valid:
                logger.error(f"Generated SVG is invalid: {error}")
                return 1
            logger.info("Generated SVG passed validation")

        return 0

    except (OSError, ValueError, DocumentError) as e:
        log_exception(logger, e, context={"scene": args.scene})
        return 1


if __name__ == "__main__":
    sys.exit(main())
