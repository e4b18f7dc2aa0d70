"""
svg2level - SVG outlines to level segment geometry

Walks the <g>/<path> hierarchy of an SVG file, bakes nested matrix() and
translate() transforms into the coordinates, and writes every path as line
segments in a `Level { ... }` block.
"""

__version__ = "0.1.0"

from .config import load_config
from .core import PathOutline, LevelExporter, build_paths

__all__ = [
    'load_config',
    'PathOutline',
    'LevelExporter',
    'build_paths',
]
