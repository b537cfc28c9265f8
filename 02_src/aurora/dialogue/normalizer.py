"""Input normalisation for inbound message bodies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedInput:
    normalized: str  # trimmed, lower-cased; used for commands and keywords
    numeric: str  # trimmed, original case; used for digits, protocols, free text


def normalize(text: str | None) -> NormalizedInput:
    raw = (text or "").strip()
    return NormalizedInput(normalized=raw.lower(), numeric=raw)
