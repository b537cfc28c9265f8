"""SIM implementation - scripted citizen conversations over the HTTP API."""

import asyncio
import random
from typing import Protocol

import httpx

from aurora.logging_config import get_logger
from aurora.tracker import ITracker

logger = get_logger(__name__)


# (sender_id, sender_name, messages) per virtual citizen
SCENARIOS = [
    (
        "5511900000001@c.us",
        "Maria",
        ["oi", "1", "1", "Rua das Flores, 120, Centro", "não", "5"],
    ),
    (
        "5511900000002@c.us",
        "João",
        ["menu", "1", "2", "Av. Brasil, 900", "Padaria Central", "Calçada obstruída", "ok", "2"],
    ),
    (
        "5511900000003@c.us",
        "Ana",
        ["bom dia", "2", "2025.12.08.1.0001", "4"],
    ),
    (
        "5511900000004@c.us",
        None,
        ["quero reclamar", "???", "não sei"],
    ),
]


class ISim(Protocol):
    """Generate test traffic."""

    async def start(self) -> None:
        """Start scripted scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """SIM with scripted citizen conversations."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: ITracker | None = None,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    def set_tracker(self, tracker: ITracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    async def start(self) -> None:
        """Start scripted scenario."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient()
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        message_count = sum(len(s[2]) for s in SCENARIOS)
        try:
            if self._tracker:
                await self._tracker.track(
                    "sim_started",
                    "sim",
                    {"user_count": len(SCENARIOS), "message_count": message_count},
                )

            # Citizens talk in parallel, each one in order
            await asyncio.gather(
                *[self._run_citizen(*scenario) for scenario in SCENARIOS]
            )

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            if self._tracker:
                await self._tracker.track(
                    "sim_completed",
                    "sim",
                    {"user_count": len(SCENARIOS), "message_count": message_count},
                )

    async def _run_citizen(
        self, sender_id: str, name: str | None, messages: list[str]
    ) -> None:
        for text in messages:
            if not self._running:
                break
            await self._send_message(sender_id, name, text)
            await asyncio.sleep(random.uniform(1, 3))

    async def _send_message(self, sender_id: str, name: str | None, text: str) -> None:
        """Send a message via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                f"{self._api_url}/api/messages",
                json={"sender_id": sender_id, "sender_name": name, "body": text},
                timeout=10.0,
            )

            if response.status_code == 200:
                replies = response.json().get("replies", [])
                logger.info("SIM: %s -> %s", sender_id, text)
                for reply in replies:
                    logger.info("SIM: Reply: %s", reply.get("text", "")[:80])
            else:
                logger.error("SIM: Error sending message: %s", response.status_code)

        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send message: %s", e)
