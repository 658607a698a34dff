"""Layout domain: keymap parsing, binding translation and grid assembly.

This package contains:
- Layer models and diagnostics
- Parsers that cut layers and bindings out of keymap source
- Translation tables for bindings, key codes and modifiers
- The grid assembler for the 3x10 + thumb layout
"""

from keymapdoc.layout.diagnostics import (
    CollectingSink,
    DiagnosticEvent,
    DiagnosticKind,
)
from keymapdoc.layout.grid import assemble_grid
from keymapdoc.layout.models import (
    PLACEHOLDER,
    KeymapParseResult,
    Layer,
    LayerGrid,
)
from keymapdoc.layout.naming import describe_layer, format_layer_name
from keymapdoc.layout.parsers import (
    KeymapParser,
    create_keymap_parser,
    parse_keymap_text,
)


__all__ = [
    "PLACEHOLDER",
    "CollectingSink",
    "DiagnosticEvent",
    "DiagnosticKind",
    "KeymapParseResult",
    "KeymapParser",
    "Layer",
    "LayerGrid",
    "assemble_grid",
    "create_keymap_parser",
    "describe_layer",
    "format_layer_name",
    "parse_keymap_text",
]
