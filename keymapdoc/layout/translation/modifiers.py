"""Short labels for modifier names used in hold-tap bindings."""

MODIFIER_SHORT_NAMES: dict[str, str] = {
    "LEFT_SHIFT": "LSft",
    "RIGHT_SHIFT": "RSft",
    "LSHIFT": "LSft",
    "RSHIFT": "RSft",
    "LEFT_CTRL": "LCtl",
    "RIGHT_CTRL": "RCtl",
    "LCTRL": "LCtl",
    "RCTRL": "RCtl",
    "LEFT_ALT": "LAlt",
    "RIGHT_ALT": "RAlt",
    "LALT": "LAlt",
    "RALT": "RAlt",
    "LEFT_WIN": "LCmd",
    "RIGHT_WIN": "RCmd",
    "LGUI": "LCmd",
    "RGUI": "RCmd",
    "LEFT_GUI": "LCmd",
    "RIGHT_GUI": "RCmd",
}


def translate_modifier(name: str) -> str:
    """Return the 4-character label for a modifier, or the name unchanged."""
    return MODIFIER_SHORT_NAMES.get(name, name)
