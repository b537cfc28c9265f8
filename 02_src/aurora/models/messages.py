"""Transport boundary data models."""

from dataclasses import dataclass
from typing import Literal

DEFAULT_CONTACT_NAME = "Cidadão(ã)"


@dataclass
class InboundMessage:
    """A message received from the chat transport."""

    sender_id: str
    body: str
    is_group: bool = False
    sender_name: str | None = None
    has_media: bool = False

    @property
    def contact_name(self) -> str:
        return self.sender_name or DEFAULT_CONTACT_NAME


@dataclass
class CallEvent:
    """An incoming voice call on the chat channel."""

    sender_id: str
    sender_name: str | None = None

    @property
    def contact_name(self) -> str:
        return self.sender_name or DEFAULT_CONTACT_NAME


@dataclass
class Contact:
    """Who the engine is talking to: channel address and display name."""

    address: str
    name: str = DEFAULT_CONTACT_NAME


@dataclass
class Outbound:
    """A message actually handed to the transport."""

    to: str
    kind: Literal["text", "media"]
    text: str
    path: str | None = None
