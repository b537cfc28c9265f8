"""Per-user dialogue session states.

Each variant carries only the fields collected up to its step. A session
value is either ``None`` (main menu) or exactly one of these frozen
records; transitions always build a new record.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class AwaitingHandoff:
    """User asked for a human operator and is describing the demand."""


@dataclass(frozen=True)
class UnknownAttempts:
    """Idle, with a count of consecutive unrecognised inputs."""

    count: int


@dataclass(frozen=True)
class ComplaintTypeSelect:
    """Choosing the complaint category."""


@dataclass(frozen=True)
class LotAddress:
    """Dirty lot: waiting for the lot address."""


@dataclass(frozen=True)
class LotPhotoAsk:
    """Dirty lot: asked whether the user will send photos."""

    address: str


@dataclass(frozen=True)
class LotReceivingPhotos:
    """Dirty lot: absorbing photos until the user types ok."""

    address: str
    photos: int = 0


@dataclass(frozen=True)
class CompanyAddress:
    """Company complaint: waiting for the company address."""


@dataclass(frozen=True)
class CompanyName:
    address: str


@dataclass(frozen=True)
class CompanyReason:
    """Company complaint: collecting the reason until the user types ok."""

    address: str
    company_name: str
    reason_lines: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TrackProtocolInput:
    """Waiting for a protocol identifier to look up."""


@dataclass(frozen=True)
class SatisfactionSurvey:
    """Waiting for a 1-5 rating of the finished flow."""

    flow: str
    protocol: str | None = None


SessionState = Union[
    AwaitingHandoff,
    UnknownAttempts,
    ComplaintTypeSelect,
    LotAddress,
    LotPhotoAsk,
    LotReceivingPhotos,
    CompanyAddress,
    CompanyName,
    CompanyReason,
    TrackProtocolInput,
    SatisfactionSurvey,
]

Session = Union[SessionState, None]


def state_name(session: Session) -> str:
    """Stable snake_case name of a session variant, for logs and traces."""
    if session is None:
        return "idle"
    name = type(session).__name__
    return "".join(
        f"_{ch.lower()}" if ch.isupper() and i else ch.lower()
        for i, ch in enumerate(name)
    )
