"""keymapdoc - ZMK keymap layer extraction and translation."""

from importlib.metadata import distribution

from .layout.models import KeymapParseResult, Layer, LayerGrid
from .layout.parsers.keymap_parser import parse_keymap_text


__version__ = distribution(__package__ or "keymapdoc").version

__all__ = [
    "KeymapParseResult",
    "Layer",
    "LayerGrid",
    "parse_keymap_text",
    "__version__",
]
