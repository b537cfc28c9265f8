"""Read-only protocol status lookup."""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)


PROTOCOL_PATTERN = re.compile(r"^[0-9]{4}\.[0-9]{2}\.[0-9]{2}\.[0-9]\.[0-9]{4}$")


@dataclass(frozen=True)
class ProtocolStatus:
    status: str
    details: str


DEFAULT_STATUS = ProtocolStatus(
    status="Em Análise pelo Setor de Fiscalização",
    details="Solicite um atendente para mais informações.",
)

SEED_STATUSES: dict[str, ProtocolStatus] = {
    "2025.12.01.1.0001": ProtocolStatus(
        "Finalizado com notificação",
        "Notificação de limpeza emitida em 05/12/2025.",
    ),
    "2025.12.05.2.0002": ProtocolStatus(
        "Em Fiscalização",
        "Fiscal designado para visita em 10/12/2025.",
    ),
    "2025.12.08.1.0001": ProtocolStatus(
        "Aguardando vistoria",
        "Protocolo registrado e em fila de análise.",
    ),
}


def is_protocol(text: str) -> bool:
    return bool(PROTOCOL_PATTERN.match(text))


class IStatusLookup(Protocol):
    """Key-value read service for protocol statuses."""

    def lookup(self, protocol: str) -> ProtocolStatus:
        """Return the status for a protocol; unknown protocols get the default."""
        ...


class StaticStatusLookup:
    """In-memory status table."""

    def __init__(self, records: dict[str, ProtocolStatus] | None = None):
        self._records = dict(SEED_STATUSES if records is None else records)

    def lookup(self, protocol: str) -> ProtocolStatus:
        return self._records.get(protocol, DEFAULT_STATUS)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StaticStatusLookup":
        """Load ``{protocol: {"status": ..., "details": ...}}`` from a JSON file.

        An unreadable file falls back to the seed table.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to load protocol statuses from %s: %s", path, e)
            return cls()

        records = {}
        for protocol, entry in raw.items():
            if not isinstance(entry, dict) or "status" not in entry:
                logger.warning("Skipping malformed status entry for %s", protocol)
                continue
            records[protocol] = ProtocolStatus(
                status=str(entry["status"]),
                details=str(entry.get("details", DEFAULT_STATUS.details)),
            )
        logger.info("Loaded %s protocol statuses from %s", len(records), path)
        return cls(records)
