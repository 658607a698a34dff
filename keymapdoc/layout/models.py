"""Layer models produced by the keymap parser.

Every record here is frozen: once a layer is assembled nothing mutates it.
Renderers (documentation pages, diagrams) consume ``KeymapParseResult``.
"""

from pydantic import Field, field_validator

from keymapdoc.models.base import KeymapDocFrozenModel

from .diagnostics import DiagnosticEvent


ROW_COUNT = 3
ROW_WIDTH = 10
THUMB_CAPACITY = 10
MAIN_CAPACITY = ROW_COUNT * ROW_WIDTH
LAYER_CAPACITY = MAIN_CAPACITY + THUMB_CAPACITY
PLACEHOLDER = "---"

Row = tuple[str, ...]


class LayerGrid(KeymapDocFrozenModel):
    """Translated bindings packed into the split keyboard's physical grid."""

    rows: tuple[Row, Row, Row]
    thumb_row: Row | None = None
    dropped_count: int = Field(default=0, ge=0)

    @field_validator("rows")
    @classmethod
    def validate_row_width(cls, v: tuple[Row, Row, Row]) -> tuple[Row, Row, Row]:
        for row in v:
            if len(row) != ROW_WIDTH:
                raise ValueError(f"Main rows must have exactly {ROW_WIDTH} cells")
        return v

    @field_validator("thumb_row")
    @classmethod
    def validate_thumb_row(cls, v: Row | None) -> Row | None:
        if v is not None and not 0 < len(v) <= THUMB_CAPACITY:
            raise ValueError(f"Thumb row must have 1 to {THUMB_CAPACITY} cells")
        return v

    @property
    def all_rows(self) -> list[Row]:
        """Main rows followed by the thumb row when there is one."""
        if self.thumb_row is None:
            return list(self.rows)
        return [*self.rows, self.thumb_row]


class Layer(KeymapDocFrozenModel):
    """One keymap layer ready for display."""

    name: str
    display_name: str
    description: str
    grid: LayerGrid
    raw_bindings: tuple[str, ...] = ()

    @property
    def rows(self) -> tuple[Row, Row, Row]:
        return self.grid.rows

    @property
    def thumb_row(self) -> Row | None:
        return self.grid.thumb_row

    @property
    def dropped_count(self) -> int:
        return self.grid.dropped_count


class KeymapParseResult(KeymapDocFrozenModel):
    """Result of one parse pass over a keymap source."""

    layers: tuple[Layer, ...] = ()
    diagnostics: tuple[DiagnosticEvent, ...] = ()

    @property
    def layer_names(self) -> list[str]:
        return [layer.name for layer in self.layers]

    def get_layer(self, name: str) -> Layer | None:
        """Return the first layer with the given name."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None
