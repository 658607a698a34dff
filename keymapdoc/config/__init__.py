"""Configuration for keymapdoc."""

from .models import KeymapDocSettings
from .user_config import generate_config_paths, load_settings


__all__ = ["KeymapDocSettings", "generate_config_paths", "load_settings"]
