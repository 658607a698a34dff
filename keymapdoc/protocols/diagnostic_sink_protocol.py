"""Protocol for consumers of parser diagnostics."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from keymapdoc.layout.diagnostics import DiagnosticEvent


@runtime_checkable
class DiagnosticSinkProtocol(Protocol):
    """Receives diagnostic events in the order the parser emits them."""

    def __call__(self, event: "DiagnosticEvent") -> None:
        """Handle one diagnostic event."""
        ...
