"""Human readable layer names and descriptions."""

import re
from collections.abc import Iterable


SPECIAL_LAYER_NAMES: dict[str, str] = {
    "default_layer": "Default",
    "FUNCTION": "Function",
    "NUM": "Number",
    "ARROW": "Arrow",
    "MOUSE": "Mouse",
    "SCROLL": "Scroll",
}

# (keywords, description) checked in order against the lowercased labels
_DESCRIPTION_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("f1", "f2", "f3", "f4"), "Function keys (F1-F12)"),
    (("bt_sel", "bt_clr", "bootloader"), "Bluetooth and system settings"),
    (
        ("up_arrow", "down_arrow", "left_arrow", "right_arrow"),
        "Arrow keys and navigation",
    ),
    (("mkp", "m_lclick", "m_rclick"), "Mouse controls"),
    (("kp_number", "k0", "k1", "k2"), "Numbers and symbols"),
)


def format_layer_name(name: str) -> str:
    """Turn a keymap layer identifier into a display name.

    >>> format_layer_name("layer_3")
    'Layer 3'
    >>> format_layer_name("nav_cluster")
    'Nav Cluster'
    """
    if name in SPECIAL_LAYER_NAMES:
        return SPECIAL_LAYER_NAMES[name]

    if name.startswith("layer_"):
        number = name.removeprefix("layer_")
        if number == "6":
            return "Settings"
        return f"Layer {number}"

    return re.sub(r"\b\w", lambda m: m[0].upper(), name.replace("_", " "))


def describe_layer(name: str, labels: Iterable[str]) -> str:
    """Guess a short description of a layer from its translated labels."""
    if name == "default_layer":
        return "Main input layer"

    text = " ".join(labels).lower()
    for keywords, description in _DESCRIPTION_RULES:
        if any(keyword in text for keyword in keywords):
            return description

    if "scroll" in name.lower():
        return "Scroll controls"

    return f"{format_layer_name(name)} layer"
