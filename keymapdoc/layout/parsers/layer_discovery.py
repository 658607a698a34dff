"""Layer name discovery and layer span location."""

import re

from .block_extractor import balanced_body


_NAMED_BLOCK = re.compile(r"(\w+)\s*\{")


def discover_layer_names(container: str) -> list[str]:
    """List the names of blocks in ``container`` whose body mentions ``bindings``.

    Every ``identifier {`` in the text is considered, nested ones included,
    and names are returned in scan order. Duplicates are kept.
    """
    names = []
    for match in _NAMED_BLOCK.finditer(container):
        body = balanced_body(container, match.end())
        if "bindings" in body:
            names.append(match[1])
    return names


def _layer_start_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"\s*{re.escape(name)}\s*\{{")


def locate_layer_span(text: str, name: str, names: list[str]) -> str | None:
    """Return the text from ``name {`` up to the next other layer's start.

    The span ends where the nearest following ``<other> {`` begins, searching
    only past the current match, or at the end of the text. Returns None when
    ``name`` does not occur.
    """
    start_match = _layer_start_pattern(name).search(text)
    if start_match is None:
        return None

    start = start_match.start()
    end = len(text)
    for other in names:
        if other == name:
            continue
        next_match = _layer_start_pattern(other).search(text, start_match.end())
        if next_match is not None and next_match.start() < end:
            end = next_match.start()

    return text[start:end]
