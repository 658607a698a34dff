"""Pack translated bindings into the split keyboard's physical grid.

Binding k lands at row k // 10, column k % 10 for the three main rows and at
thumb position k - 30 for the thumb cluster. Nothing is ever reordered.
"""

from collections.abc import Sequence

from .models import (
    LAYER_CAPACITY,
    MAIN_CAPACITY,
    PLACEHOLDER,
    ROW_COUNT,
    ROW_WIDTH,
    LayerGrid,
)


def assemble_grid(
    symbols: Sequence[str], placeholder: str = PLACEHOLDER
) -> LayerGrid:
    """Build the 3x10 grid plus optional thumb row from ordered symbols.

    Args:
        symbols: Translated bindings in source order
        placeholder: Label for cells without a binding

    Returns:
        LayerGrid; ``thumb_row`` is None unless there are more than 30 symbols,
        and ``dropped_count`` counts symbols past the 40th.
    """
    rows = tuple(
        tuple(
            symbols[index] if index < len(symbols) else placeholder
            for index in range(row * ROW_WIDTH, (row + 1) * ROW_WIDTH)
        )
        for row in range(ROW_COUNT)
    )

    thumb_row = None
    if len(symbols) > MAIN_CAPACITY:
        thumb_row = tuple(symbols[MAIN_CAPACITY:LAYER_CAPACITY])

    return LayerGrid(
        rows=rows,
        thumb_row=thumb_row,
        dropped_count=max(0, len(symbols) - LAYER_CAPACITY),
    )
