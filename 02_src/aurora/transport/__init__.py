"""Chat transport boundary."""

from .local import ITransport, LocalTransport

__all__ = ["ITransport", "LocalTransport"]
