"""Extract and split the ``bindings = < ... >`` list of a layer."""

import re


# The interior may itself contain '>' ... '<' pairs, e.g. when a following
# sensor-bindings property is swallowed into the same capture.
_BINDINGS = re.compile(r"bindings\s*=\s*<([^>]*(?:>[^<]*<[^>]*)*)>", re.DOTALL)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_TOKEN = re.compile(r"&\w+(?:\s+[^&\s]+)*|[^&\s]+")


def extract_bindings_text(layer_span: str) -> str | None:
    """Return the raw interior of the first bindings list, or None."""
    match = _BINDINGS.search(layer_span)
    return match[1] if match else None


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` and ``// ...`` comments."""
    return _LINE_COMMENT.sub("", _BLOCK_COMMENT.sub("", text))


def tokenize_bindings(bindings_text: str) -> list[str]:
    """Split a bindings list into tokens in source order.

    A token starts at ``&`` and runs through its whitespace separated
    arguments up to the next ``&``. Stray fragments without ``&`` become
    tokens of their own.
    """
    cleaned = strip_comments(bindings_text)
    tokens = (token.strip() for token in _TOKEN.findall(cleaned))
    return [token for token in tokens if token]
