"""ZMK keymap parser producing display-ready layer records.

The pipeline for one source text:

1. find the container block (``keymap { ... }``)
2. discover the layer names inside it
3. cut each layer's span out of the source
4. tokenize its ``bindings = < ... >`` list
5. translate every token and pack the labels into the grid

Nothing in here raises for content problems. Missing blocks, overflowing
layers and unknown bindings become diagnostics or pass-through labels.
"""

from typing import TYPE_CHECKING

from keymapdoc.core.structlog_logger import StructlogMixin
from keymapdoc.layout.diagnostics import DiagnosticEvent, DiagnosticKind
from keymapdoc.layout.grid import assemble_grid
from keymapdoc.layout.models import PLACEHOLDER, KeymapParseResult, Layer
from keymapdoc.layout.naming import describe_layer, format_layer_name
from keymapdoc.layout.translation import translate_bindings

from .bindings_tokenizer import extract_bindings_text, tokenize_bindings
from .block_extractor import find_block
from .layer_discovery import discover_layer_names, locate_layer_span


if TYPE_CHECKING:
    from keymapdoc.config.models import KeymapDocSettings
    from keymapdoc.protocols import DiagnosticSinkProtocol


DEFAULT_CONTAINER_BLOCK = "keymap"


class KeymapParser(StructlogMixin):
    """Parses keymap source text into an ordered list of layers.

    A parser holds only configuration. Each ``parse`` call builds its own
    result, so one instance can be reused for any number of sources.
    """

    def __init__(
        self,
        settings: "KeymapDocSettings | None" = None,
        sink: "DiagnosticSinkProtocol | None" = None,
    ) -> None:
        """Initialize the parser.

        Args:
            settings: Settings supplying the container block name and placeholder
            sink: Optional callable receiving every diagnostic as it is emitted
        """
        super().__init__()
        self.container_block = (
            settings.container_block if settings else DEFAULT_CONTAINER_BLOCK
        )
        self.placeholder = settings.placeholder if settings else PLACEHOLDER
        self.sink = sink

    def parse(self, text: str) -> KeymapParseResult:
        """Parse one keymap source.

        Args:
            text: Full keymap file content

        Returns:
            KeymapParseResult with layers in discovery order and all diagnostics
        """
        diagnostics: list[DiagnosticEvent] = []

        container = find_block(text, self.container_block)
        if container is None:
            self._emit(
                diagnostics,
                DiagnosticEvent(
                    kind=DiagnosticKind.CONTAINER_MISSING,
                    message=f"No '{self.container_block}' block found",
                ),
            )
            return KeymapParseResult(diagnostics=tuple(diagnostics))

        names = discover_layer_names(container)
        self.logger.debug("layer_names_discovered", count=len(names), names=names)

        layers = []
        for name in names:
            layer = self._parse_layer(text, name, names, diagnostics)
            if layer is not None:
                layers.append(layer)

        self.logger.info(
            "keymap_parsed", layers=len(layers), diagnostics=len(diagnostics)
        )
        return KeymapParseResult(
            layers=tuple(layers), diagnostics=tuple(diagnostics)
        )

    def _parse_layer(
        self,
        text: str,
        name: str,
        names: list[str],
        diagnostics: list[DiagnosticEvent],
    ) -> Layer | None:
        span = locate_layer_span(text, name, names)
        if span is None:
            self._skip(diagnostics, name, "Layer block not found")
            return None

        bindings_text = extract_bindings_text(span)
        if bindings_text is None:
            self._skip(diagnostics, name, "No bindings list in layer block")
            return None

        tokens = tokenize_bindings(bindings_text)
        symbols = translate_bindings(tokens, self.placeholder)
        grid = assemble_grid(symbols, self.placeholder)

        self._emit(
            diagnostics,
            DiagnosticEvent(
                kind=DiagnosticKind.LAYER_DISCOVERED,
                layer=name,
                count=len(tokens),
                message=f"Layer '{name}' has {len(tokens)} bindings",
            ),
        )
        if grid.dropped_count:
            self._emit(
                diagnostics,
                DiagnosticEvent(
                    kind=DiagnosticKind.BINDING_OVERFLOW,
                    layer=name,
                    count=grid.dropped_count,
                    message=(
                        f"Layer '{name}' has {len(tokens)} bindings; "
                        f"{grid.dropped_count} beyond the thumb row were ignored"
                    ),
                ),
            )

        return Layer(
            name=name,
            display_name=format_layer_name(name),
            description=describe_layer(
                name, [cell for row in grid.all_rows for cell in row]
            ),
            grid=grid,
            raw_bindings=tuple(tokens),
        )

    def _skip(
        self, diagnostics: list[DiagnosticEvent], name: str, reason: str
    ) -> None:
        self._emit(
            diagnostics,
            DiagnosticEvent(
                kind=DiagnosticKind.LAYER_SKIPPED,
                layer=name,
                message=f"{reason}: {name}",
            ),
        )

    def _emit(
        self, diagnostics: list[DiagnosticEvent], event: DiagnosticEvent
    ) -> None:
        diagnostics.append(event)

        log = self.logger.bind(layer=event.layer, count=event.count)
        if event.kind == DiagnosticKind.LAYER_DISCOVERED:
            log.debug(event.kind, message=event.message)
        else:
            log.warning(event.kind, message=event.message)

        if self.sink is not None:
            self.sink(event)


def create_keymap_parser(
    settings: "KeymapDocSettings | None" = None,
    sink: "DiagnosticSinkProtocol | None" = None,
) -> KeymapParser:
    """Create a keymap parser.

    Args:
        settings: Optional settings (defaults are used if None)
        sink: Optional diagnostic sink

    Returns:
        Configured KeymapParser instance
    """
    return KeymapParser(settings=settings, sink=sink)


def parse_keymap_text(
    text: str, sink: "DiagnosticSinkProtocol | None" = None
) -> KeymapParseResult:
    """Parse keymap source text with default settings."""
    return create_keymap_parser(sink=sink).parse(text)
