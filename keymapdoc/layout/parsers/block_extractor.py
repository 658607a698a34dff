"""Brace-balanced block extraction.

The scanners are pure functions over ``(text, offset)``; nothing keeps a scan
position between calls. Unbalanced input is scanned leniently to the end of
the text instead of failing.
"""

import re


def find_block_end(text: str, start: int) -> int:
    """Return the offset just past the brace closing the block opened before ``start``.

    ``start`` is the first offset after an already consumed ``{``. When the
    braces never balance the scan stops at ``len(text)``.
    """
    depth = 1
    pos = start
    length = len(text)
    while depth > 0 and pos < length:
        char = text[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        pos += 1
    return pos


def balanced_body(text: str, start: int) -> str:
    """Return the block body starting at ``start``, without its closing brace.

    For unbalanced input the last scanned character is dropped as if it were
    the closing brace.
    """
    end = find_block_end(text, start)
    return text[start : max(start, end - 1)]


def find_block(text: str, name: str) -> str | None:
    """Find the first ``<name> {`` block and return its balanced body.

    Returns None when no such block exists.
    """
    match = re.search(rf"{re.escape(name)}\s*\{{", text)
    if match is None:
        return None
    return balanced_body(text, match.end())
