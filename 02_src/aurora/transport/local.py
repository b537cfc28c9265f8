"""Transport implementations."""

from pathlib import Path
from typing import Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)


class ITransport(Protocol):
    """Outbound half of the chat channel."""

    async def send_text(self, to: str, text: str) -> None:
        """Send a text message."""
        ...

    async def send_media(self, to: str, file_path: str, caption: str) -> None:
        """Send a local file. Raises OSError if the file cannot be read."""
        ...


class LocalTransport:
    """Transport for the HTTP boundary: replies travel back in the response.

    Sends are only logged; media sends still check that the file exists so
    a missing document surfaces the same way a real upload would fail.
    """

    async def send_text(self, to: str, text: str) -> None:
        logger.debug("Reply to %s: %s", to, text[:100])

    async def send_media(self, to: str, file_path: str, caption: str) -> None:
        if not Path(file_path).is_file():
            raise FileNotFoundError(f"Document not found: {file_path}")
        logger.info("Document %s sent to %s", file_path, to)
