"""Core test fixtures for the keymapdoc project."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner


KEYMAP_TEMPLATE = """\
#include <behaviors.dtsi>
#include <dt-bindings/zmk/keys.h>
#include <dt-bindings/zmk/bt.h>

/ {
    keymap {
        compatible = "zmk,keymap";
__LAYERS__
    };
};
"""


def build_layer_block(name: str, tokens: list[str]) -> str:
    rows = ["  ".join(tokens[i : i + 10]) for i in range(0, len(tokens), 10)]
    body = "\n                ".join(rows)
    return (
        f"\n        {name} {{\n"
        f"            bindings = <\n"
        f"                {body}\n"
        f"            >;\n"
        f"        }};\n"
    )


def build_keymap(layers: dict[str, list[str]]) -> str:
    """Build a keymap source with one block per layer, in dict order."""
    blocks = "".join(
        build_layer_block(name, tokens) for name, tokens in layers.items()
    )
    return KEYMAP_TEMPLATE.replace("__LAYERS__", blocks)


def numbered_bindings(count: int) -> list[str]:
    """Tokens ``&kp X0 .. &kp X<count-1>``; each translates to ``X<i>``."""
    return [f"&kp X{i}" for i in range(count)]


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo handler and structlog configuration made by the code under test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def keymap_builder() -> Callable[[dict[str, list[str]]], str]:
    """Return the keymap source builder."""
    return build_keymap


@pytest.fixture
def bindings_factory() -> Callable[[int], list[str]]:
    """Return a factory for numbered bindings."""
    return numbered_bindings


@pytest.fixture
def microball_keymap() -> str:
    """A realistic split keymap with a thumb cluster and comments."""
    return """\
#include <behaviors.dtsi>
#include <dt-bindings/zmk/keys.h>
#include <dt-bindings/zmk/bt.h>

/ {
    keymap {
        compatible = "zmk,keymap";

        default_layer {
            display-name = "Base";
            bindings = <
// left                                                  right
&kp Q             &kp W  &kp E  &kp R  &kp T     &kp Y  &kp U  &kp I      &kp O    &kp P
&kp A             &kp S  &kp D  &kp F  &kp G     &kp H  &kp J  &kp K      &kp L    &kp MINUS
&mt LEFT_SHIFT Z  &kp X  &kp C  &kp V  &kp B     &kp N  &kp M  &kp COMMA  &kp DOT  &kp SLASH
/* thumbs */
&kp LEFT_CTRL  &kp LEFT_ALT  &lt 1 SPACE  &mo 2  &kp ENTER  &kp BACKSPACE
            >;
        };

        FUNCTION {
            bindings = <
&kp F1  &kp F2  &kp F3  &kp F4  &kp F5     &kp F6  &kp F7  &kp F8  &kp F9  &kp F10
&trans  &trans  &trans  &trans  &trans     &trans  &trans  &trans  &kp F11 &kp F12
&trans  &trans  &trans  &trans  &trans     &trans  &trans  &trans  &trans  &to 0
            >;
        };

        layer_6 {
            bindings = <
&bt BT_SEL 0  &bt BT_SEL 1  &bt BT_SEL 2  &bt BT_CLR  &bt BT_CLR_ALL
&bootloader   &sys_reset    &mkp MB1      &mkp MB2    &kp LS(LG(S))
            >;
        };
    };
};
"""


@pytest.fixture
def clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Isolate settings lookup from the real environment and home directory."""
    for key in list(os.environ):
        if key.startswith("KEYMAPDOC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield
