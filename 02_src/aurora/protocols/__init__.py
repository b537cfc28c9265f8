"""Protocol identifiers: sequence persistence, generation and status lookup."""

from .generator import IProtocolGenerator, ProtocolGenerator, format_protocol, type_code
from .sequence import FileSequenceStore, ISequenceStore
from .status import (
    DEFAULT_STATUS,
    IStatusLookup,
    ProtocolStatus,
    StaticStatusLookup,
    is_protocol,
)

__all__ = [
    "ISequenceStore",
    "FileSequenceStore",
    "IProtocolGenerator",
    "ProtocolGenerator",
    "format_protocol",
    "type_code",
    "IStatusLookup",
    "StaticStatusLookup",
    "ProtocolStatus",
    "DEFAULT_STATUS",
    "is_protocol",
]
