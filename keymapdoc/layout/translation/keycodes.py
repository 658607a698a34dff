"""Key code labels.

Modifier wrappers such as ``LS(LG(S))`` collapse into glyphs placed before the
base key (``⇧⌘S``). Each wrapper token is replaced on its own, so nesting depth
does not matter.
"""

SHIFT = "⇧"
CTRL = "⌃"
ALT = "⌥"
CMD = "⌘"

MODIFIER_WRAPPERS: dict[str, str] = {
    "LS(": SHIFT,
    "RS(": SHIFT,
    "LC(": CTRL,
    "RC(": CTRL,
    "LA(": ALT,
    "RA(": ALT,
    "LG(": CMD,
    "RG(": CMD,
}

KEY_LABELS: dict[str, str] = {
    # Modifiers
    "LEFT_SHIFT": SHIFT,
    "RIGHT_SHIFT": SHIFT,
    "LSHIFT": SHIFT,
    "RSHIFT": SHIFT,
    "LEFT_CTRL": CTRL,
    "RIGHT_CTRL": CTRL,
    "LCTRL": CTRL,
    "RCTRL": CTRL,
    "LEFT_ALT": ALT,
    "RIGHT_ALT": ALT,
    "LALT": ALT,
    "RALT": ALT,
    "LEFT_WIN": CMD,
    "RIGHT_WIN": CMD,
    "LGUI": CMD,
    "RGUI": CMD,
    "LEFT_GUI": CMD,
    "RIGHT_GUI": CMD,
    # Whitespace and editing
    "SPACE": "Space",
    "ENTER": "Enter",
    "BACKSPACE": "Bksp",
    "DELETE": "Del",
    "TAB": "Tab",
    "ESCAPE": "Esc",
    "ESC": "Esc",
    # Navigation
    "UP_ARROW": "↑",
    "DOWN_ARROW": "↓",
    "LEFT_ARROW": "←",
    "RIGHT_ARROW": "→",
    "PAGE_UP": "PgUp",
    "PAGE_DOWN": "PgDn",
    "HOME": "Home",
    "END": "End",
    # Punctuation and symbols
    "MINUS": "-",
    "EQUAL": "=",
    "PLUS": "+",
    "ASTERISK": "*",
    "SLASH": "/",
    "SEMICOLON": ";",
    "COLON": ":",
    "SINGLE_QUOTE": "'",
    "DOUBLE_QUOTES": '"',
    "LEFT_BRACKET": "[",
    "RIGHT_BRACKET": "]",
    "LEFT_BRACE": "{",
    "RIGHT_BRACE": "}",
    "LEFT_PARENTHESIS": "(",
    "RIGHT_PARENTHESIS": ")",
    "BACKSLASH": "\\",
    "PIPE": "|",
    "COMMA": ",",
    "PERIOD": ".",
    "DOT": ".",
    "UNDERSCORE": "_",
    "EXCLAMATION": "!",
    "AT_SIGN": "@",
    "HASH": "#",
    "DOLLAR": "$",
    "PERCENT": "%",
    "CARET": "^",
    "AMPERSAND": "&",
    "TILDE": "~",
    # IME
    "LANG1": "Kana",
    "LANG2": "Eisu",
    "INT_MUHENKAN": "無変換",
}

# Digits, plain and keypad
KEY_LABELS.update({f"NUMBER_{n}": str(n) for n in range(10)})
KEY_LABELS.update({f"KP_NUMBER_{n}": f"K{n}" for n in range(10)})
# Function keys keep their own names
KEY_LABELS.update({f"F{n}": f"F{n}" for n in range(1, 14)})


def collapse_modifier_wrappers(expr: str) -> str:
    """Replace every wrapper opening with its glyph and drop closing parens."""
    result = expr
    for wrapper, glyph in MODIFIER_WRAPPERS.items():
        result = result.replace(wrapper, glyph)
    return result.replace(")", "")


def translate_keycode(expr: str) -> str:
    """Translate a key code expression into its display label.

    Unknown key names are returned as they are after wrapper collapsing.
    """
    if not expr:
        return ""
    base = collapse_modifier_wrappers(expr)
    return KEY_LABELS.get(base, base)
