"""Protocol definitions for keymapdoc interfaces.

These protocols use typing.Protocol with @runtime_checkable so callers can
pass any compatible object and isinstance() checks still work.
"""

from .diagnostic_sink_protocol import DiagnosticSinkProtocol


__all__ = ["DiagnosticSinkProtocol"]
