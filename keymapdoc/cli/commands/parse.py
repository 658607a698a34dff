"""Parse command - show the layers of a ZMK keymap file."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from keymapdoc.cli.decorators import handle_errors
from keymapdoc.core.errors import KeymapError
from keymapdoc.core.structlog_logger import get_struct_logger
from keymapdoc.layout import DiagnosticKind, KeymapParseResult, Layer
from keymapdoc.layout.models import ROW_WIDTH
from keymapdoc.layout.parsers import create_keymap_parser


logger = get_struct_logger(__name__)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def read_keymap(keymap_file: Path) -> str:
    """Read a keymap file, raising KeymapError when it cannot be read."""
    try:
        return keymap_file.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise KeymapError("Keymap file not found", path=str(keymap_file)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise KeymapError(
            "Cannot read keymap file", path=str(keymap_file), reason=str(e)
        ) from e


def build_layer_table(layer: Layer, index: int) -> Table:
    """Render one layer as a 10 column table, thumb row last."""
    table = Table(
        title=f"Layer {index}: {layer.display_name} ({layer.name})",
        caption=layer.description,
        show_header=False,
        show_lines=True,
    )
    for _ in range(ROW_WIDTH):
        table.add_column(justify="center")

    for row in layer.rows:
        table.add_row(*row)

    if layer.thumb_row is not None:
        table.add_section()
        table.add_row(*layer.thumb_row)

    return table


def print_result(result: KeymapParseResult, console: Console) -> None:
    for index, layer in enumerate(result.layers):
        console.print(build_layer_table(layer, index))

    for event in result.diagnostics:
        if event.kind == DiagnosticKind.LAYER_DISCOVERED:
            continue
        console.print(f"[yellow]⚠ {event.message}[/yellow]")


@handle_errors
def parse_keymap(
    ctx: typer.Context,
    keymap_file: Annotated[
        Path,
        typer.Argument(help="ZMK keymap file", metavar="KEYMAP_FILE"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Parse a ZMK keymap and show every layer as a 3x10 grid plus thumb row.

    **Examples:**

    \\b
    keymapdoc parse config/microball.keymap
    keymapdoc parse config/microball.keymap --format json
    """
    settings = ctx.obj.settings if ctx.obj is not None else None
    content = read_keymap(keymap_file)

    result = create_keymap_parser(settings=settings).parse(content)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_result(result, Console())

    logger.info(
        "keymap_parse_completed",
        source=str(keymap_file),
        layers=len(result.layers),
        diagnostics=len(result.diagnostics),
    )
