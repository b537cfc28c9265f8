"""Protocol identifier generator."""

import threading
from datetime import datetime
from typing import Callable, Protocol

from ..logging_config import get_logger
from .sequence import ISequenceStore

logger = get_logger(__name__)


REQUEST_TYPE_CODES: dict[str, int] = {
    "lote_sujo": 1,
    "empresa": 2,
    "ocupacao_irregular": 3,
}
FALLBACK_TYPE_CODE = 9


class IProtocolGenerator(Protocol):
    """Issues protocol identifiers of the form YYYY.MM.DD.T.NNNN."""

    def generate(self, type_key: str) -> str:
        """Issue the next identifier for a request type."""
        ...


def type_code(type_key: str) -> int:
    """Map a request type key to its single-digit code."""
    return REQUEST_TYPE_CODES.get(type_key, FALLBACK_TYPE_CODE)


def format_protocol(issued_at: datetime, code: int, sequence: int) -> str:
    """Format an identifier. Sequences above 9999 widen the last field."""
    return (
        f"{issued_at.year}.{issued_at.month:02d}.{issued_at.day:02d}"
        f".{code}.{sequence:04d}"
    )


class ProtocolGenerator:
    """Date + type code + monotonic sequence, persisted on every issue.

    The counter is read from the store once, at construction, and is
    authoritative for the lifetime of the process.
    """

    def __init__(
        self,
        sequence_store: ISequenceStore,
        clock: Callable[[], datetime] | None = None,
    ):
        self._store = sequence_store
        self._clock = clock or datetime.now
        self._lock = threading.Lock()
        self._last_sequence = sequence_store.load()

    @property
    def last_sequence(self) -> int:
        return self._last_sequence

    def generate(self, type_key: str) -> str:
        """Issue the next identifier; the save is attempted before returning."""
        code = type_code(type_key)
        issued_at = self._clock()

        with self._lock:
            self._last_sequence += 1
            sequence = self._last_sequence
            try:
                self._store.save(sequence)
            except OSError as e:
                # Keep the in-memory advance so this process never reissues it.
                logger.error("Failed to persist protocol sequence %s: %s", sequence, e)

        protocol = format_protocol(issued_at, code, sequence)
        logger.info("Protocol issued: %s (type=%s)", protocol, type_key)
        return protocol
