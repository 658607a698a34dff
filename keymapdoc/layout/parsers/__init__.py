"""Keymap source parsing: block extraction, layer discovery, tokenizing."""

from .bindings_tokenizer import (
    extract_bindings_text,
    strip_comments,
    tokenize_bindings,
)
from .block_extractor import balanced_body, find_block, find_block_end
from .keymap_parser import KeymapParser, create_keymap_parser, parse_keymap_text
from .layer_discovery import discover_layer_names, locate_layer_span


__all__ = [
    "KeymapParser",
    "balanced_body",
    "create_keymap_parser",
    "discover_layer_names",
    "extract_bindings_text",
    "find_block",
    "find_block_end",
    "locate_layer_span",
    "parse_keymap_text",
    "strip_comments",
    "tokenize_bindings",
]
