"""Translate raw ZMK binding tokens into short symbolic labels.

Rules are tried in a fixed order and the first rule that produces a label
wins. A rule whose guard matches but whose argument pattern does not lets the
token fall through to the next rule, so ``&to_layer_0 X`` passes the ``to``
guard, fails ``to <n>`` and is finally handled by the ``to_layer_0`` rule.
Argument patterns are searched anywhere in the token, not anchored.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from keymapdoc.layout.models import PLACEHOLDER

from .keycodes import translate_keycode
from .modifiers import translate_modifier


TRANSPARENT = "▽"

_LAYER_TAP = re.compile(r"lt\s+(\d+)\s+(.+)")
_MOD_TAP = re.compile(r"mt\s+(\S+)\s+(.+)")
_KEY_PRESS = re.compile(r"kp\s+(.+)")
_TO_LAYER = re.compile(r"to\s+(\d+)")
_MOMENTARY = re.compile(r"mo\s+(\d+)")
_BT_SELECT = re.compile(r"BT_SEL\s+(\d+)")
_INC_DEC = re.compile(r"inc_dec_kp\s+(.+)\s+(.+)")
_TO_LAYER_0 = re.compile(r"to_layer_0\s+(.+)")
_LT_TO_LAYER_0 = re.compile(r"lt_to_layer_0\s+(\d+)\s+(.+)")

_MOUSE_BUTTONS = (("MB1", "M_LClick"), ("MB2", "M_RClick"), ("MB3", "M_MClick"))


@dataclass(frozen=True)
class BindingRule:
    """A guard plus a translation that may still decline the token."""

    name: str
    matches: Callable[[str], bool]
    translate: Callable[[str], str | None]


def _layer_tap(binding: str) -> str | None:
    match = _LAYER_TAP.search(binding)
    if not match:
        return None
    return f"LT{match[1]}({translate_keycode(match[2].strip())})"


def _mod_tap(binding: str) -> str | None:
    match = _MOD_TAP.search(binding)
    if not match:
        return None
    modifier = translate_modifier(match[1])
    return f"MT({modifier},{translate_keycode(match[2].strip())})"


def _key_press(binding: str) -> str | None:
    match = _KEY_PRESS.search(binding)
    return translate_keycode(match[1].strip()) if match else None


def _to_layer(binding: str) -> str | None:
    match = _TO_LAYER.search(binding)
    return f"TO({match[1]})" if match else None


def _momentary(binding: str) -> str | None:
    match = _MOMENTARY.search(binding)
    return f"MO({match[1]})" if match else None


def _bluetooth(binding: str) -> str | None:
    if "BT_SEL" in binding:
        match = _BT_SELECT.search(binding)
        if match:
            return f"BT_SEL({match[1]})"
    if "BT_CLR_ALL" in binding:
        return "BT_CLR_ALL"
    if "BT_CLR" in binding:
        return "BT_CLR"
    return None


def _mouse_button(binding: str) -> str | None:
    for button, label in _MOUSE_BUTTONS:
        if button in binding:
            return label
    return None


def _scroll(binding: str) -> str | None:
    match = _INC_DEC.search(binding)
    if not match:
        return None
    return f"SCROLL({translate_keycode(match[1])}/{translate_keycode(match[2])})"


def _to_layer_0(binding: str) -> str | None:
    match = _TO_LAYER_0.search(binding)
    return f"TO0({translate_keycode(match[1])})" if match else None


def _lt_to_layer_0(binding: str) -> str | None:
    match = _LT_TO_LAYER_0.search(binding)
    if not match:
        return None
    return f"LT_TO0({match[1]},{translate_keycode(match[2])})"


def _prefix(prefix: str) -> Callable[[str], bool]:
    return lambda binding: binding.startswith(prefix)


def _contains(fragment: str) -> Callable[[str], bool]:
    return lambda binding: fragment in binding


BINDING_RULES: tuple[BindingRule, ...] = (
    BindingRule("transparent", lambda b: b == "trans", lambda _: TRANSPARENT),
    BindingRule("layer_tap", _prefix("lt"), _layer_tap),
    BindingRule("mod_tap", _prefix("mt"), _mod_tap),
    BindingRule("key_press", _prefix("kp"), _key_press),
    BindingRule("to_layer", _prefix("to"), _to_layer),
    BindingRule("momentary_layer", _prefix("mo"), _momentary),
    BindingRule("bluetooth", _contains("bt"), _bluetooth),
    BindingRule("mouse_button", _contains("mkp"), _mouse_button),
    BindingRule("scroll", _contains("inc_dec_kp"), _scroll),
    BindingRule("bootloader", _contains("bootloader"), lambda _: "BOOTLOADER"),
    BindingRule("reset", _contains("reset"), lambda _: "RESET"),
    BindingRule("to_layer_0", _prefix("to_layer_0"), _to_layer_0),
    BindingRule("lt_to_layer_0", _prefix("lt_to_layer_0"), _lt_to_layer_0),
)


def translate_binding(token: str, placeholder: str = PLACEHOLDER) -> str:
    """Translate one binding token such as ``&mt LEFT_SHIFT Z`` to ``MT(LSft,Z)``.

    Tokens no rule recognises are returned verbatim, leading ``&`` included.
    A blank token becomes ``placeholder``. Never raises.
    """
    if not token or not token.strip():
        return placeholder

    binding = token[1:] if token.startswith("&") else token
    for rule in BINDING_RULES:
        if rule.matches(binding):
            symbol = rule.translate(binding)
            if symbol is not None:
                return symbol
    return token


def translate_bindings(
    tokens: list[str], placeholder: str = PLACEHOLDER
) -> list[str]:
    """Translate tokens in order."""
    return [translate_binding(token, placeholder) for token in tokens]
