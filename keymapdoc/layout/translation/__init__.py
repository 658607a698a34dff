"""Binding, key code and modifier translation tables."""

from .bindings import (
    BINDING_RULES,
    TRANSPARENT,
    BindingRule,
    translate_binding,
    translate_bindings,
)
from .keycodes import KEY_LABELS, MODIFIER_WRAPPERS, translate_keycode
from .modifiers import MODIFIER_SHORT_NAMES, translate_modifier


__all__ = [
    "BINDING_RULES",
    "BindingRule",
    "KEY_LABELS",
    "MODIFIER_SHORT_NAMES",
    "MODIFIER_WRAPPERS",
    "TRANSPARENT",
    "translate_binding",
    "translate_bindings",
    "translate_keycode",
    "translate_modifier",
]
