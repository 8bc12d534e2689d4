"""
Core module for package-wide configuration.
Holds the runtime settings read by documents, styles, the validator and
the command line entry point, plus a timing helper used around file output.
"""

import os
import time
from typing import Dict, Any, Optional

from svg_scene.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULTS: Dict[str, Any] = {
    # Document output
    "unit_suffix": "px",
    "max_svg_size": 10 * 1000 * 1000,  # bytes accepted by the validator

    # Text defaults
    "default_font_size": 12,
    "default_font_family": "Verdana",

    # Diagnostics
    "log_level": os.environ.get("LOG_LEVEL", "INFO"),
    "log_file": None,
    "enable_profiling": False,
}

# Global configuration settings, starting from the defaults
CONFIG: Dict[str, Any] = dict(DEFAULTS)


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the configuration with custom settings.

    Keys the package does not know are still stored, but reported with a
    warning since nothing will read them.

    Args:
        settings: Mapping of configuration keys to new values
    """
    unknown = sorted(set(settings) - set(DEFAULTS))
    if unknown:
        logger.warning(f"Configuration keys not used by svg_scene: {', '.join(unknown)}")

    CONFIG.update(settings)
    logger.info(f"Configuration updated: {', '.join(sorted(settings))}")


def reset_config() -> None:
    """Restore every setting to its default."""
    CONFIG.clear()
    CONFIG.update(DEFAULTS)


class Profiler:
    """
    Context manager measuring the wall time of a block.

    Only active when CONFIG["enable_profiling"] is set, unless ``enabled``
    is passed explicitly. The measured time is left in ``duration``.
    """

    def __init__(self, name: str, enabled: Optional[bool] = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self) -> 'Profiler':
        if self.enabled:
            self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._started is None:
            return
        self.duration = time.perf_counter() - self._started
        outcome = "failed" if exc_type is not None else "done"
        logger.debug(f"{self.name} {outcome} in {self.duration:.6f}s")


__all__ = [
    "CONFIG",
    "DEFAULTS",
    "configure",
    "reset_config",
    "Profiler",
]
