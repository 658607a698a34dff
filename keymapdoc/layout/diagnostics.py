"""Structured diagnostic events emitted while parsing a keymap."""

from enum import Enum

from pydantic import Field

from keymapdoc.models.base import KeymapDocFrozenModel


class DiagnosticKind(str, Enum):
    """Kinds of diagnostic events."""

    CONTAINER_MISSING = "container_missing"
    LAYER_DISCOVERED = "layer_discovered"
    LAYER_SKIPPED = "layer_skipped"
    BINDING_OVERFLOW = "binding_overflow"


class DiagnosticEvent(KeymapDocFrozenModel):
    """A single non-fatal observation made by the parser."""

    kind: DiagnosticKind
    message: str
    layer: str | None = None
    count: int | None = Field(
        default=None, description="Number of items involved, e.g. dropped bindings"
    )


class CollectingSink:
    """Diagnostic sink that keeps every event in order."""

    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: DiagnosticKind) -> list[DiagnosticEvent]:
        return [event for event in self.events if event.kind == kind]
