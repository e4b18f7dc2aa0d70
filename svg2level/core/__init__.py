from .errors import (SvgLevelError, UnsupportedTransformError, MalformedTransformError,
                     UnsupportedCommandError, MalformedPathDataError, ConfigError)
from .svg_loader import PathOutline, build_paths
from .exporter import LevelExporter
