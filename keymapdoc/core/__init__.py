from .errors import ConfigError, KeymapDocError, KeymapError
from .logging import get_logger, setup_logging, setup_logging_from_settings


__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "KeymapDocError",
    "KeymapError",
    "ConfigError",
]
